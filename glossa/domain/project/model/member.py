"""ProjectMember entity: a user's team membership in a project."""

from datetime import UTC, datetime

from pydantic import PrivateAttr

from glossa.domain.auth.model.role import MemberRole
from glossa.domain.auth.model.value import UserId
from glossa.domain.project.model.value import LocaleCode, MemberId, ProjectId
from glossa.domain.shared.model.entity import Entity


class ProjectMember(Entity):
    """A team membership.

    Invariants:
    - `(project_id, user_id)` is unique
    - `assigned_locales` is None for admins; for editors None means unrestricted
    - `email` and `name` are read-only decorations joined from the user row
    - a loaded restriction is only rewritten once `assign_locales` or a
      promotion to admin replaces it
    """

    id: MemberId
    project_id: ProjectId
    user_id: UserId
    role: MemberRole
    assigned_locales: list[LocaleCode] | None = None
    email: str | None = None
    name: str | None = None
    created_at: datetime
    updated_at: datetime

    _locales_changed: bool = PrivateAttr(default=False)

    @property
    def locales_changed(self) -> bool:
        return self._locales_changed

    def change_role(self, role: MemberRole) -> None:
        """Change role. Promotion to admin clears any locale restriction."""
        self.role = role
        if role is MemberRole.ADMIN:
            self.assigned_locales = None
            self._locales_changed = True
        self.updated_at = datetime.now(UTC)

    def assign_locales(self, codes: list[LocaleCode]) -> None:
        """Restrict an editor to the given locales; an empty list lifts the restriction.

        Ignored for admins, who are always unrestricted.
        """
        if self.role is MemberRole.ADMIN:
            self.assigned_locales = None
        else:
            self.assigned_locales = list(codes) or None
        self._locales_changed = True
        self.updated_at = datetime.now(UTC)

    @classmethod
    def create(
        cls,
        project_id: ProjectId,
        user_id: UserId,
        role: MemberRole,
        assigned_locales: list[LocaleCode] | None = None,
        email: str | None = None,
        name: str | None = None,
    ) -> "ProjectMember":
        now = datetime.now(UTC)
        member = cls(
            id=MemberId.generate(),
            project_id=project_id,
            user_id=user_id,
            role=role,
            email=email,
            name=name,
            created_at=now,
            updated_at=now,
        )
        if assigned_locales:
            member.assign_locales(assigned_locales)
        return member
