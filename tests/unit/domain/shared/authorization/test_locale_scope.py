"""Tests for locale scoping of translation writes."""

from glossa.domain.auth.model.actor import ApiKeyActor, Member, Outsider, Owner
from glossa.domain.auth.model.identity import Anonymous
from glossa.domain.auth.model.role import ApiKeyRole, MemberRole
from glossa.domain.auth.model.value import ApiKeyId, UserId
from glossa.domain.project.model.member import ProjectMember
from glossa.domain.project.model.value import ProjectId, TermId
from glossa.domain.shared.authorization.action import Action
from glossa.domain.shared.authorization.locale_scope import can_act_on_locale
from glossa.domain.shared.authorization.policy_set import POLICY_SET
from glossa.domain.shared.authorization.resource import TranslationResource


def _make_editor(assigned: frozenset[str] | None) -> Member:
    return Member(
        project_id=ProjectId.generate(),
        user_id=UserId.generate(),
        role=MemberRole.EDITOR,
        assigned_locales=assigned,
    )


def _actor_from_row(row: ProjectMember) -> Member:
    assigned = None
    if row.role is MemberRole.EDITOR and row.assigned_locales:
        assigned = frozenset(row.assigned_locales)
    return Member(
        project_id=row.project_id,
        user_id=row.user_id,
        role=row.role,
        assigned_locales=assigned,
    )


class TestCanActOnLocale:
    def test_restricted_editor(self) -> None:
        editor = _make_editor(frozenset({"en_US"}))

        assert can_act_on_locale(editor, "en_US") is True
        assert can_act_on_locale(editor, "de_DE") is False

    def test_unrestricted_editor(self) -> None:
        editor = _make_editor(None)

        assert can_act_on_locale(editor, "en_US") is True
        assert can_act_on_locale(editor, "de_DE") is True

    def test_empty_assignment_matches_nothing(self) -> None:
        editor = _make_editor(frozenset())

        assert can_act_on_locale(editor, "en_US") is False

    def test_admin_ignores_stored_assignment(self) -> None:
        admin = Member(
            project_id=ProjectId.generate(),
            user_id=UserId.generate(),
            role=MemberRole.ADMIN,
            assigned_locales=frozenset({"en_US"}),
        )

        assert can_act_on_locale(admin, "ja_JP") is True

    def test_owner_and_keys_unrestricted(self) -> None:
        project_id = ProjectId.generate()
        owner = Owner(project_id=project_id, user_id=UserId.generate())
        key = ApiKeyActor(
            project_id=project_id, key_id=ApiKeyId.generate(), role=ApiKeyRole.READ_ONLY
        )

        assert can_act_on_locale(owner, "de_DE") is True
        assert can_act_on_locale(key, "de_DE") is True

    def test_revoked_key_outsider_and_anonymous_denied(self) -> None:
        project_id = ProjectId.generate()
        revoked = ApiKeyActor(
            project_id=project_id,
            key_id=ApiKeyId.generate(),
            role=ApiKeyRole.ADMIN,
            revoked=True,
        )
        outsider = Outsider(project_id=project_id, user_id=UserId.generate())

        assert can_act_on_locale(revoked, "de_DE") is False
        assert can_act_on_locale(outsider, "de_DE") is False
        assert can_act_on_locale(Anonymous(), "de_DE") is False


class TestPromotionClearsAssignment:
    def test_assigned_editor_promoted_to_admin(self) -> None:
        project_id = ProjectId.generate()
        row = ProjectMember.create(
            project_id=project_id,
            user_id=UserId.generate(),
            role=MemberRole.EDITOR,
            assigned_locales=["es_ES"],
        )
        term_id = TermId.generate()

        def cell(locale: str) -> TranslationResource:
            return TranslationResource(term_id=term_id, locale_code=locale, project_id=project_id)

        editor = _actor_from_row(row)
        assert POLICY_SET.decide(editor, Action.TRANSLATE_LOCALE, cell("es_ES")).allowed
        denied = POLICY_SET.decide(editor, Action.TRANSLATE_LOCALE, cell("fr_FR"))
        assert not denied.allowed
        assert denied.code == "locale_not_assigned"

        row.change_role(MemberRole.ADMIN)
        promoted = _actor_from_row(row)

        assert row.assigned_locales is None
        assert can_act_on_locale(promoted, "fr_FR") is True
