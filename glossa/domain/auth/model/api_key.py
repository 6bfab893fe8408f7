"""ApiKey entity: a revocable, project-scoped credential."""

import hashlib
import secrets
import string
from datetime import UTC, datetime

from glossa.domain.auth.model.role import ApiKeyRole
from glossa.domain.auth.model.value import ApiKeyId
from glossa.domain.project.model.value import ProjectId
from glossa.domain.shared.model.entity import Entity

_KEY_ALPHABET = string.ascii_letters + string.digits


def generate_api_key(prefix: str = "tk_", length: int = 48) -> str:
    """Generate a new plaintext API key. Only ever shown to the caller once."""
    return prefix + "".join(secrets.choice(_KEY_ALPHABET) for _ in range(length))


def hash_api_key(raw_key: str) -> str:
    """SHA256 hex digest used as the lookup key for stored API keys."""
    return hashlib.sha256(raw_key.encode()).hexdigest()


class ApiKey(Entity):
    """A bearer credential bound to exactly one project and role.

    Invariants:
    - `project_id` and `role` are immutable after creation
    - `key_hash` is a SHA256 hash (64 hex characters)
    - Once `revoked_at` is set, it cannot be unset
    """

    id: ApiKeyId
    project_id: ProjectId
    name: str
    key_hash: str
    role: ApiKeyRole
    created_at: datetime
    revoked_at: datetime | None = None

    @property
    def is_revoked(self) -> bool:
        return self.revoked_at is not None

    def revoke(self) -> datetime:
        """Mark this key as revoked and return when that happened."""
        if self.revoked_at is None:
            self.revoked_at = datetime.now(UTC)
        return self.revoked_at

    @classmethod
    def create(
        cls,
        project_id: ProjectId,
        name: str,
        role: ApiKeyRole,
        key_hash: str,
    ) -> "ApiKey":
        return cls(
            id=ApiKeyId.generate(),
            project_id=project_id,
            name=name,
            key_hash=key_hash,
            role=role,
            created_at=datetime.now(UTC),
        )
