"""Tests for PolicySet: the project decision table."""

import pytest

from glossa.domain.auth.model.actor import ApiKeyActor, Member, Outsider, Owner
from glossa.domain.auth.model.identity import Anonymous
from glossa.domain.auth.model.role import AccessLevel, ApiKeyRole, MemberRole
from glossa.domain.auth.model.value import ApiKeyId, UserId
from glossa.domain.project.model.value import ProjectId, TermId
from glossa.domain.shared.authorization.action import Action
from glossa.domain.shared.authorization.decision import DenyReason
from glossa.domain.shared.authorization.policy_set import POLICY_SET, PolicySet, allow
from glossa.domain.shared.authorization.resource import (
    ProjectResource,
    TermResource,
    TranslationResource,
)
from glossa.domain.shared.error import (
    ConfigurationError,
    ForbiddenError,
    NotAuthenticatedError,
    NotFoundError,
)

STRUCTURAL_ACTIONS = [
    Action.CREATE_TERM,
    Action.UPDATE_TERM,
    Action.DELETE_TERM,
    Action.LOCK_TERM,
    Action.UNLOCK_TERM,
    Action.ADD_LOCALE,
    Action.DELETE_LOCALE,
    Action.CREATE_LABEL,
    Action.DELETE_LABEL,
]


def _make_owner(project_id: ProjectId) -> Owner:
    return Owner(project_id=project_id, user_id=UserId.generate())


def _make_member(
    project_id: ProjectId,
    role: MemberRole = MemberRole.EDITOR,
    assigned_locales: frozenset[str] | None = None,
) -> Member:
    return Member(
        project_id=project_id,
        user_id=UserId.generate(),
        role=role,
        assigned_locales=assigned_locales,
    )


def _make_key(
    project_id: ProjectId,
    role: ApiKeyRole = ApiKeyRole.EDITOR,
    revoked: bool = False,
) -> ApiKeyActor:
    return ApiKeyActor(
        project_id=project_id,
        key_id=ApiKeyId.generate(),
        role=role,
        revoked=revoked,
    )


class TestOwnerSupremacy:
    @pytest.mark.parametrize("action", list(Action))
    def test_owner_allowed_every_action(self, action: Action) -> None:
        project_id = ProjectId.generate()
        owner = _make_owner(project_id)

        decision = POLICY_SET.decide(owner, action, ProjectResource(id=project_id))

        assert decision.allowed

    def test_owner_may_edit_locked_term(self) -> None:
        project_id = ProjectId.generate()
        term = TermResource(id=TermId.generate(), project_id=project_id, locked=True)

        assert POLICY_SET.decide(_make_owner(project_id), Action.UPDATE_TERM, term).allowed


class TestDeletionExclusivity:
    def test_admin_member_cannot_delete_project(self) -> None:
        project_id = ProjectId.generate()
        admin = _make_member(project_id, MemberRole.ADMIN)

        decision = POLICY_SET.decide(admin, Action.DELETE_PROJECT, ProjectResource(id=project_id))

        assert not decision.allowed
        assert decision.reason == DenyReason.FORBIDDEN

    def test_admin_key_cannot_delete_project(self) -> None:
        project_id = ProjectId.generate()
        key = _make_key(project_id, ApiKeyRole.ADMIN)

        decision = POLICY_SET.decide(key, Action.DELETE_PROJECT, ProjectResource(id=project_id))

        assert not decision.allowed

    def test_admin_member_allowed_everything_else(self) -> None:
        project_id = ProjectId.generate()
        admin = _make_member(project_id, MemberRole.ADMIN)
        resource = ProjectResource(id=project_id)

        denied = [
            a for a in Action if not POLICY_SET.decide(admin, a, resource).allowed
        ]

        assert denied == [Action.DELETE_PROJECT]


class TestEditorTermImmutability:
    @pytest.mark.parametrize("action", STRUCTURAL_ACTIONS)
    def test_editor_member_denied(self, action: Action) -> None:
        project_id = ProjectId.generate()
        editor = _make_member(project_id)

        with pytest.raises(ForbiddenError) as exc_info:
            POLICY_SET.guard(editor, action, ProjectResource(id=project_id))

        assert exc_info.value.code == "access_denied"

    @pytest.mark.parametrize("action", STRUCTURAL_ACTIONS)
    def test_editor_key_denied(self, action: Action) -> None:
        project_id = ProjectId.generate()
        key = _make_key(project_id, ApiKeyRole.EDITOR)

        assert not POLICY_SET.decide(key, action, ProjectResource(id=project_id)).allowed

    def test_editor_may_translate_unlocked_term(self) -> None:
        project_id = ProjectId.generate()
        cell = TranslationResource(
            term_id=TermId.generate(), locale_code="fr_FR", project_id=project_id
        )

        assert POLICY_SET.decide(_make_member(project_id), Action.TRANSLATE_LOCALE, cell).allowed


class TestReadOnlyKey:
    def test_read_only_key_may_view(self) -> None:
        project_id = ProjectId.generate()
        key = _make_key(project_id, ApiKeyRole.READ_ONLY)

        assert POLICY_SET.decide(key, Action.VIEW_PROJECT, ProjectResource(id=project_id)).allowed

    def test_read_only_key_cannot_translate(self) -> None:
        project_id = ProjectId.generate()
        key = _make_key(project_id, ApiKeyRole.READ_ONLY)
        cell = TranslationResource(
            term_id=TermId.generate(), locale_code="en_US", project_id=project_id
        )

        assert not POLICY_SET.decide(key, Action.TRANSLATE_LOCALE, cell).allowed


class TestAuthentication:
    @pytest.mark.parametrize("action", list(Action))
    def test_anonymous_denied_every_action(self, action: Action) -> None:
        decision = POLICY_SET.decide(Anonymous(), action)

        assert decision.reason == DenyReason.NOT_AUTHENTICATED

    @pytest.mark.parametrize("action", list(Action))
    def test_revoked_key_equivalent_to_anonymous(self, action: Action) -> None:
        project_id = ProjectId.generate()
        key = _make_key(project_id, ApiKeyRole.ADMIN, revoked=True)

        decision = POLICY_SET.decide(key, action, ProjectResource(id=project_id))

        assert decision == POLICY_SET.decide(Anonymous(), action, ProjectResource(id=project_id))

    def test_guard_raises_not_authenticated_error(self) -> None:
        with pytest.raises(NotAuthenticatedError) as exc_info:
            POLICY_SET.guard(Anonymous(), Action.VIEW_PROJECT)

        assert exc_info.value.code == "not_authenticated"


class TestProjectScope:
    @pytest.mark.parametrize("action", list(Action))
    def test_key_never_allowed_on_other_project(self, action: Action) -> None:
        key = _make_key(ProjectId.generate(), ApiKeyRole.ADMIN)
        other = ProjectResource(id=ProjectId.generate())

        decision = POLICY_SET.decide(key, action, other)

        assert not decision.allowed
        assert decision.code == "api_key_project_mismatch"

    def test_outsider_gets_not_found(self) -> None:
        project_id = ProjectId.generate()
        outsider = Outsider(project_id=project_id, user_id=UserId.generate())

        with pytest.raises(NotFoundError) as exc_info:
            POLICY_SET.guard(outsider, Action.VIEW_PROJECT, ProjectResource(id=project_id))

        assert exc_info.value.code == "project_not_found"

    def test_member_of_other_project_gets_not_found(self) -> None:
        member = _make_member(ProjectId.generate(), MemberRole.ADMIN)
        other = ProjectResource(id=ProjectId.generate())

        assert POLICY_SET.decide(member, Action.VIEW_PROJECT, other).reason == DenyReason.NOT_FOUND


class TestListMembers:
    def test_editor_member_may_list(self) -> None:
        project_id = ProjectId.generate()

        assert POLICY_SET.decide(
            _make_member(project_id), Action.LIST_MEMBERS, ProjectResource(id=project_id)
        ).allowed

    def test_editor_key_may_not_list(self) -> None:
        project_id = ProjectId.generate()
        key = _make_key(project_id, ApiKeyRole.EDITOR)

        assert not POLICY_SET.decide(
            key, Action.LIST_MEMBERS, ProjectResource(id=project_id)
        ).allowed


class TestAudit:
    def test_denial_logged_as_warning(self, caplog: pytest.LogCaptureFixture) -> None:
        project_id = ProjectId.generate()

        with caplog.at_level("WARNING"):
            POLICY_SET.decide(_make_member(project_id), Action.DELETE_PROJECT)

        assert any("Authorization denied" in r.message for r in caplog.records)

    def test_is_allowed_does_not_log(self, caplog: pytest.LogCaptureFixture) -> None:
        project_id = ProjectId.generate()

        with caplog.at_level("INFO"):
            POLICY_SET.is_allowed(_make_owner(project_id), Action.VIEW_PROJECT)

        assert not caplog.records


class TestCoverage:
    def test_default_policy_covers_every_action(self) -> None:
        POLICY_SET.validate_coverage()

    def test_missing_action_detected(self) -> None:
        partial = PolicySet([allow(Action.VIEW_PROJECT, level=AccessLevel.READ_ONLY)])

        with pytest.raises(ConfigurationError):
            partial.validate_coverage()
