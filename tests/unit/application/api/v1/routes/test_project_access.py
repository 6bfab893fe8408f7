"""End-to-end tests for project access through the HTTP API.

Rows are seeded through a synchronous engine on a temporary SQLite file,
then the app is driven with TestClient against the same file.
"""

from dataclasses import dataclass
from datetime import UTC, datetime
from uuid import uuid4

import jwt
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, insert

from glossa.application.api.rest.app import create_app
from glossa.config import AuthConfig, Config, DatabaseConfig, JwtConfig
from glossa.infrastructure.persistence.tables import (
    locales_table,
    metadata,
    project_members_table,
    projects_table,
    terms_table,
    users_table,
)

SECRET = "route-test-secret-key-min-32-chars"


@dataclass
class Seeded:
    project_id: str
    term_id: str
    owner_id: str
    admin_id: str
    editor_id: str
    outsider_id: str


def _session_headers(user_id: str) -> dict[str, str]:
    token = jwt.encode({"sub": user_id}, SECRET, algorithm="HS256")
    return {"Cookie": f"auth_token={token}"}


def _bearer(key: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {key}"}


@pytest.fixture
def db_path(tmp_path) -> str:
    return str(tmp_path / "glossa.db")


@pytest.fixture
def seeded(db_path: str) -> Seeded:
    engine = create_engine(f"sqlite:///{db_path}")
    metadata.create_all(engine)
    now = datetime.now(UTC)
    ids = {name: str(uuid4()) for name in ("owner", "admin", "editor", "outsider")}
    project_id = str(uuid4())
    term_id = str(uuid4())

    with engine.begin() as conn:
        for name, user_id in ids.items():
            conn.execute(
                insert(users_table).values(
                    id=user_id, email=f"{name}@example.com", name=name.title(), created_at=now
                )
            )
        conn.execute(
            insert(projects_table).values(
                id=project_id,
                name="Storefront",
                owner_id=ids["owner"],
                created_at=now,
                updated_at=now,
            )
        )
        for name, role, assigned in (("admin", "admin", None), ("editor", "editor", '["es_ES"]')):
            conn.execute(
                insert(project_members_table).values(
                    id=str(uuid4()),
                    project_id=project_id,
                    user_id=ids[name],
                    role=role,
                    assigned_locales=assigned,
                    created_at=now,
                    updated_at=now,
                )
            )
        for code in ("es_ES", "de_DE"):
            conn.execute(
                insert(locales_table).values(
                    id=str(uuid4()), project_id=project_id, code=code, created_at=now
                )
            )
        conn.execute(
            insert(terms_table).values(
                id=term_id,
                project_id=project_id,
                value="checkout.title",
                is_locked=False,
                created_at=now,
                updated_at=now,
            )
        )
    engine.dispose()

    return Seeded(
        project_id=project_id,
        term_id=term_id,
        owner_id=ids["owner"],
        admin_id=ids["admin"],
        editor_id=ids["editor"],
        outsider_id=ids["outsider"],
    )


@pytest.fixture
def client(db_path: str, seeded: Seeded):
    config = Config(
        database=DatabaseConfig(url=f"sqlite+aiosqlite:///{db_path}"),
        auth=AuthConfig(jwt=JwtConfig(secret=SECRET)),
    )
    with TestClient(create_app(config)) as test_client:
        yield test_client


class TestAuthentication:
    def test_missing_credentials_is_401(self, client: TestClient, seeded: Seeded):
        response = client.get(f"/api/v1/projects/{seeded.project_id}/permissions")

        assert response.status_code == 401
        assert response.headers["WWW-Authenticate"] == "Bearer"
        assert response.json()["code"] == "not_authenticated"

    def test_forged_session_token_is_401(self, client: TestClient, seeded: Seeded):
        token = jwt.encode({"sub": seeded.owner_id}, "wrong-secret-wrong-secret-32chars", "HS256")

        response = client.get(
            f"/api/v1/projects/{seeded.project_id}/permissions",
            headers={"Cookie": f"auth_token={token}"},
        )

        assert response.status_code == 401


class TestPermissions:
    def test_owner_flags(self, client: TestClient, seeded: Seeded):
        response = client.get(
            f"/api/v1/projects/{seeded.project_id}/permissions",
            headers=_session_headers(seeded.owner_id),
        )

        assert response.status_code == 200
        body = response.json()
        assert body["is_owner"] is True
        assert body["can_delete_project"] is True

    def test_editor_flags(self, client: TestClient, seeded: Seeded):
        response = client.get(
            f"/api/v1/projects/{seeded.project_id}/permissions",
            headers=_session_headers(seeded.editor_id),
        )

        body = response.json()
        assert body["role"] == "editor"
        assert body["can_translate"] is True
        assert body["can_lock_terms"] is False
        assert body["assigned_locales"] == ["es_ES"]

    def test_outsider_sees_not_found(self, client: TestClient, seeded: Seeded):
        response = client.get(
            f"/api/v1/projects/{seeded.project_id}/permissions",
            headers=_session_headers(seeded.outsider_id),
        )

        assert response.status_code == 404


class TestTranslationAccess:
    def _translate(self, client: TestClient, seeded: Seeded, user_id: str, locale: str):
        return client.patch(
            f"/api/v1/projects/{seeded.project_id}/translations/{locale}/{seeded.term_id}",
            json={"value": "Hola"},
            headers=_session_headers(user_id),
        )

    def test_editor_translates_assigned_locale(self, client: TestClient, seeded: Seeded):
        response = self._translate(client, seeded, seeded.editor_id, "es_ES")

        assert response.status_code == 200
        assert response.json()["value"] == "Hola"

    def test_editor_denied_unassigned_locale(self, client: TestClient, seeded: Seeded):
        response = self._translate(client, seeded, seeded.editor_id, "de_DE")

        assert response.status_code == 403
        assert response.json()["code"] == "locale_not_assigned"

    def test_lock_blocks_editor_until_unlocked(self, client: TestClient, seeded: Seeded):
        lock_url = f"/api/v1/projects/{seeded.project_id}/terms/{seeded.term_id}/lock"

        locked = client.patch(
            lock_url, json={"isLocked": True}, headers=_session_headers(seeded.admin_id)
        )
        assert locked.status_code == 200
        assert locked.json()["is_locked"] is True

        denied = self._translate(client, seeded, seeded.editor_id, "es_ES")
        assert denied.status_code == 403
        assert denied.json()["code"] == "term_locked"

        assert self._translate(client, seeded, seeded.admin_id, "es_ES").status_code == 200

        unlocked = client.patch(
            lock_url, json={"isLocked": False}, headers=_session_headers(seeded.admin_id)
        )
        assert unlocked.status_code == 200
        assert self._translate(client, seeded, seeded.editor_id, "es_ES").status_code == 200

    def test_editor_cannot_lock(self, client: TestClient, seeded: Seeded):
        response = client.patch(
            f"/api/v1/projects/{seeded.project_id}/terms/{seeded.term_id}/lock",
            json={"isLocked": True},
            headers=_session_headers(seeded.editor_id),
        )

        assert response.status_code == 403


class TestApiKeys:
    def test_created_key_authenticates_until_revoked(self, client: TestClient, seeded: Seeded):
        keys_url = f"/api/v1/projects/{seeded.project_id}/api-keys"
        created = client.post(
            keys_url,
            json={"name": "CI", "role": "read-only"},
            headers=_session_headers(seeded.admin_id),
        )
        assert created.status_code == 201
        key = created.json()["key"]
        assert key.startswith("tk_")

        permissions_url = f"/api/v1/projects/{seeded.project_id}/permissions"
        assert client.get(permissions_url, headers=_bearer(key)).status_code == 200

        translate = client.patch(
            f"/api/v1/projects/{seeded.project_id}/translations/es_ES/{seeded.term_id}",
            json={"value": "Hola"},
            headers=_bearer(key),
        )
        assert translate.status_code == 403

        revoked = client.delete(
            f"{keys_url}/{created.json()['id']}", headers=_session_headers(seeded.admin_id)
        )
        assert revoked.status_code == 204
        assert client.get(permissions_url, headers=_bearer(key)).status_code == 401

    def test_editor_cannot_create_keys(self, client: TestClient, seeded: Seeded):
        response = client.post(
            f"/api/v1/projects/{seeded.project_id}/api-keys",
            json={"name": "CI"},
            headers=_session_headers(seeded.editor_id),
        )

        assert response.status_code == 403

    def test_read_only_key_with_empty_value_is_403(self, client: TestClient, seeded: Seeded):
        created = client.post(
            f"/api/v1/projects/{seeded.project_id}/api-keys",
            json={"name": "Reader", "role": "read-only"},
            headers=_session_headers(seeded.admin_id),
        )

        response = client.patch(
            f"/api/v1/projects/{seeded.project_id}/translations/es_ES/{seeded.term_id}",
            json={"value": ""},
            headers=_bearer(created.json()["key"]),
        )

        assert response.status_code == 403


class TestProjectDeletion:
    def test_admin_cannot_delete(self, client: TestClient, seeded: Seeded):
        response = client.delete(
            f"/api/v1/projects/{seeded.project_id}", headers=_session_headers(seeded.admin_id)
        )

        assert response.status_code == 403

    def test_owner_deletes_project(self, client: TestClient, seeded: Seeded):
        response = client.delete(
            f"/api/v1/projects/{seeded.project_id}", headers=_session_headers(seeded.owner_id)
        )
        assert response.status_code == 204

        after = client.get(
            f"/api/v1/projects/{seeded.project_id}/permissions",
            headers=_session_headers(seeded.owner_id),
        )
        assert after.status_code == 404


class TestTermContent:
    def test_admin_creates_and_duplicate_conflicts(self, client: TestClient, seeded: Seeded):
        terms_url = f"/api/v1/projects/{seeded.project_id}/terms"

        created = client.post(
            terms_url,
            json={"value": " cart.empty ", "context": "Empty basket"},
            headers=_session_headers(seeded.admin_id),
        )
        assert created.status_code == 201
        assert created.json()["value"] == "cart.empty"

        duplicate = client.post(
            terms_url, json={"value": "cart.empty"}, headers=_session_headers(seeded.owner_id)
        )
        assert duplicate.status_code == 409
        assert duplicate.json()["code"] == "term_exists"

    def test_editor_cannot_create_or_edit(self, client: TestClient, seeded: Seeded):
        terms_url = f"/api/v1/projects/{seeded.project_id}/terms"
        headers = _session_headers(seeded.editor_id)

        assert client.post(terms_url, json={"value": "x"}, headers=headers).status_code == 403
        edit = client.patch(f"{terms_url}/{seeded.term_id}", json={"value": "x"}, headers=headers)
        assert edit.status_code == 403

    def test_edit_and_delete(self, client: TestClient, seeded: Seeded):
        term_url = f"/api/v1/projects/{seeded.project_id}/terms/{seeded.term_id}"
        headers = _session_headers(seeded.admin_id)

        edited = client.patch(term_url, json={"context": "Checkout header"}, headers=headers)
        assert edited.status_code == 200
        assert edited.json()["context"] == "Checkout header"

        assert client.patch(term_url, json={}, headers=headers).status_code == 422
        assert client.delete(term_url, headers=headers).status_code == 204
        assert client.delete(term_url, headers=headers).status_code == 404

    def test_labels_follow_lock_state(self, client: TestClient, seeded: Seeded):
        base = f"/api/v1/projects/{seeded.project_id}"
        admin = _session_headers(seeded.admin_id)
        editor = _session_headers(seeded.editor_id)
        label = client.post(f"{base}/labels", json={"name": "Marketing"}, headers=admin)
        assert label.status_code == 201
        assert label.json()["color"] == "#808080"
        body = {"labelIds": [label.json()["id"]]}
        labels_url = f"{base}/terms/{seeded.term_id}/labels"

        assert client.put(labels_url, json=body, headers=editor).status_code == 200

        client.patch(f"{base}/terms/{seeded.term_id}/lock", json={"isLocked": True}, headers=admin)
        denied = client.put(labels_url, json=body, headers=editor)
        assert denied.status_code == 403
        assert denied.json()["code"] == "term_locked"
        assert client.put(labels_url, json=body, headers=admin).status_code == 200

    def test_label_from_unknown_id_rejected(self, client: TestClient, seeded: Seeded):
        response = client.put(
            f"/api/v1/projects/{seeded.project_id}/terms/{seeded.term_id}/labels",
            json={"labelIds": [str(uuid4())]},
            headers=_session_headers(seeded.admin_id),
        )

        assert response.status_code == 422
        assert response.json()["field"] == "labelIds"


class TestLabels:
    def test_crud(self, client: TestClient, seeded: Seeded):
        labels_url = f"/api/v1/projects/{seeded.project_id}/labels"
        headers = _session_headers(seeded.owner_id)
        first = client.post(labels_url, json={"name": "Marketing"}, headers=headers).json()
        client.post(labels_url, json={"name": "Legal"}, headers=headers)

        renamed = client.patch(
            f"{labels_url}/{first['id']}", json={"name": "Growth"}, headers=headers
        )
        assert renamed.status_code == 200
        assert renamed.json()["name"] == "Growth"

        clash = client.patch(
            f"{labels_url}/{first['id']}", json={"name": "Legal"}, headers=headers
        )
        assert clash.status_code == 409

        assert client.delete(f"{labels_url}/{first['id']}", headers=headers).status_code == 204
        assert client.delete(f"{labels_url}/{first['id']}", headers=headers).status_code == 404

    def test_editor_cannot_create(self, client: TestClient, seeded: Seeded):
        response = client.post(
            f"/api/v1/projects/{seeded.project_id}/labels",
            json={"name": "Marketing"},
            headers=_session_headers(seeded.editor_id),
        )

        assert response.status_code == 403


class TestLocales:
    def test_add_and_remove(self, client: TestClient, seeded: Seeded):
        url = f"/api/v1/projects/{seeded.project_id}/translations"
        headers = _session_headers(seeded.admin_id)

        added = client.post(url, json={"code": "fr_FR"}, headers=headers)
        assert added.status_code == 201
        assert added.json()["language"] == "French"

        assert client.post(url, json={"code": "fr_FR"}, headers=headers).status_code == 409
        assert client.post(url, json={"code": "xx_XX"}, headers=headers).status_code == 422

        assert client.delete(f"{url}/fr_FR", headers=headers).status_code == 204
        assert client.delete(f"{url}/fr_FR", headers=headers).status_code == 404

    def test_editor_cannot_remove(self, client: TestClient, seeded: Seeded):
        response = client.delete(
            f"/api/v1/projects/{seeded.project_id}/translations/es_ES",
            headers=_session_headers(seeded.editor_id),
        )

        assert response.status_code == 403


class TestProjectSettings:
    def test_admin_renames(self, client: TestClient, seeded: Seeded):
        response = client.patch(
            f"/api/v1/projects/{seeded.project_id}",
            json={"name": "Checkout", "description": "Web shop"},
            headers=_session_headers(seeded.admin_id),
        )

        assert response.status_code == 200
        assert response.json()["name"] == "Checkout"

    def test_editor_cannot_rename(self, client: TestClient, seeded: Seeded):
        response = client.patch(
            f"/api/v1/projects/{seeded.project_id}",
            json={"name": "Mine"},
            headers=_session_headers(seeded.editor_id),
        )

        assert response.status_code == 403

    def test_outsider_sees_not_found(self, client: TestClient, seeded: Seeded):
        response = client.patch(
            f"/api/v1/projects/{seeded.project_id}",
            json={"name": "Mine"},
            headers=_session_headers(seeded.outsider_id),
        )

        assert response.status_code == 404
