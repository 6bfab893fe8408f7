"""Tests for the GetProjectPermissions query handler."""

from unittest.mock import AsyncMock

import pytest

from glossa.domain.auth.model.actor import Member, Outsider, Owner
from glossa.domain.auth.model.identity import Anonymous, UserIdentity
from glossa.domain.auth.model.role import MemberRole
from glossa.domain.auth.model.value import UserId
from glossa.domain.auth.query.get_permissions import (
    GetProjectPermissions,
    GetProjectPermissionsHandler,
)
from glossa.domain.project.model.value import ProjectId
from glossa.domain.shared.authorization import POLICY_SET
from glossa.domain.shared.error import AuthorizationError, NotFoundError


def _make_handler(actor, identity=None) -> GetProjectPermissionsHandler:
    builder = AsyncMock()
    builder.build.return_value = actor
    return GetProjectPermissionsHandler(
        identity=identity or UserIdentity(user_id=UserId.generate()),
        actor_builder=builder,
        policy=POLICY_SET,
    )


class TestGetProjectPermissions:
    @pytest.mark.asyncio
    async def test_owner_flags(self) -> None:
        project_id = ProjectId.generate()
        handler = _make_handler(Owner(project_id=project_id, user_id=UserId.generate()))

        result = await handler.run(GetProjectPermissions(project_id=project_id.root))

        assert result.role == "owner"
        assert result.is_owner
        assert result.can_delete_project
        assert result.can_manage_api_keys

    @pytest.mark.asyncio
    async def test_admin_cannot_delete(self) -> None:
        project_id = ProjectId.generate()
        admin = Member(project_id=project_id, user_id=UserId.generate(), role=MemberRole.ADMIN)

        result = await _make_handler(admin).run(GetProjectPermissions(project_id=project_id.root))

        assert result.role == "admin"
        assert result.can_manage_team
        assert result.can_lock_terms
        assert not result.can_delete_project

    @pytest.mark.asyncio
    async def test_restricted_editor_flags(self) -> None:
        project_id = ProjectId.generate()
        editor = Member(
            project_id=project_id,
            user_id=UserId.generate(),
            role=MemberRole.EDITOR,
            assigned_locales=frozenset({"fr_FR", "de_DE"}),
        )

        result = await _make_handler(editor).run(GetProjectPermissions(project_id=project_id.root))

        assert result.can_translate
        assert result.can_view_team
        assert not result.can_manage_terms
        assert not result.can_manage_team
        assert result.assigned_locales == ["de_DE", "fr_FR"]

    @pytest.mark.asyncio
    async def test_outsider_gets_not_found(self) -> None:
        project_id = ProjectId.generate()
        outsider = Outsider(project_id=project_id, user_id=UserId.generate())

        with pytest.raises(NotFoundError):
            await _make_handler(outsider).run(GetProjectPermissions(project_id=project_id.root))

    @pytest.mark.asyncio
    async def test_anonymous_rejected_before_lookup(self) -> None:
        handler = _make_handler(Anonymous(), identity=Anonymous())

        with pytest.raises(AuthorizationError) as exc_info:
            await handler.run(GetProjectPermissions(project_id=ProjectId.generate().root))

        assert exc_info.value.code == "not_authenticated"
        handler.actor_builder.build.assert_not_called()
