"""Team management: listing, inviting, updating and removing members."""

import logging

from glossa.domain.auth.model.actor import Actor, ProjectActor
from glossa.domain.auth.model.role import AccessLevel, MemberRole
from glossa.domain.auth.model.value import UserId
from glossa.domain.project.model.member import ProjectMember
from glossa.domain.project.model.value import LocaleCode, ProjectId
from glossa.domain.project.port.locale_repository import LocaleRepository
from glossa.domain.project.port.member_repository import MemberRepository
from glossa.domain.project.port.project_repository import ProjectRepository
from glossa.domain.project.port.user_repository import UserDirectory
from glossa.domain.shared.authorization import (
    Action,
    MembershipResource,
    PolicySet,
    ProjectResource,
)
from glossa.domain.shared.authorization.policy_set import describe_actor
from glossa.domain.shared.error import ConflictError, NotFoundError, ValidationError
from glossa.domain.shared.service import Service

logger = logging.getLogger(__name__)


class MemberService(Service):
    _member_repo: MemberRepository
    _project_repo: ProjectRepository
    _locale_repo: LocaleRepository
    _users: UserDirectory
    _policy: PolicySet

    async def list_members(self, actor: Actor, project_id: ProjectId) -> list[ProjectMember]:
        """Admins see the whole team; editors only see their own membership."""
        self._policy.guard(actor, Action.LIST_MEMBERS, ProjectResource(id=project_id))

        members = await self._member_repo.list_for_project(project_id)
        if isinstance(actor, ProjectActor) and actor.has_level(AccessLevel.ADMIN):
            return members
        user_id = getattr(actor, "user_id", None)
        return [m for m in members if m.user_id == user_id]

    async def invite(
        self,
        actor: Actor,
        project_id: ProjectId,
        email: str,
        role: MemberRole,
        assigned_locales: list[LocaleCode] | None = None,
    ) -> ProjectMember:
        self._policy.guard(actor, Action.INVITE_MEMBER, ProjectResource(id=project_id))

        email = email.strip().lower()
        if not email:
            raise ValidationError("Email is required", field="email")
        if assigned_locales and role is not MemberRole.EDITOR:
            raise ValidationError(
                "Assigned locales can only be set for editors", field="assigned_locales"
            )

        user = await self._users.get_by_email(email)
        if user is None:
            raise NotFoundError("User with this email is not registered", code="user_not_found")

        owner_id = await self._project_repo.get_owner_id(project_id)
        if owner_id == user.id:
            raise ConflictError("User is already the owner of this project", code="already_owner")
        if await self._member_repo.get(project_id, user.id) is not None:
            raise ConflictError("User is already a member of this project", code="already_member")

        if assigned_locales:
            await self._check_locales_exist(project_id, assigned_locales)

        member = ProjectMember.create(
            project_id=project_id,
            user_id=user.id,
            role=role,
            assigned_locales=assigned_locales,
            email=user.email,
            name=user.name,
        )
        await self._member_repo.save(member)
        logger.info(
            "Member invited: project=%s user=%s role=%s by=%s",
            project_id,
            user.id,
            role,
            describe_actor(actor),
        )
        return member

    async def update(
        self,
        actor: Actor,
        project_id: ProjectId,
        user_id: UserId,
        role: MemberRole | None = None,
        assigned_locales: list[LocaleCode] | None = None,
    ) -> ProjectMember:
        """Change a member's role and/or locale assignment.

        Promotion to admin clears any assignment. An empty locale list lifts
        an editor's restriction.
        """
        self._policy.guard(
            actor,
            Action.UPDATE_MEMBER,
            MembershipResource(target_user_id=user_id, project_id=project_id),
        )
        if role is None and assigned_locales is None:
            raise ValidationError("Nothing to update")

        member = await self._member_repo.get(project_id, user_id)
        if member is None:
            raise NotFoundError("Team member not found", code="member_not_found")

        if role is not None:
            member.change_role(role)
        if assigned_locales is not None and member.role is MemberRole.EDITOR:
            if assigned_locales:
                await self._check_locales_exist(project_id, assigned_locales)
            member.assign_locales(assigned_locales)

        await self._member_repo.save(member)
        logger.info(
            "Member updated: project=%s user=%s role=%s locales=%s by=%s",
            project_id,
            user_id,
            member.role,
            member.assigned_locales,
            describe_actor(actor),
        )
        return member

    async def remove(self, actor: Actor, project_id: ProjectId, user_id: UserId) -> None:
        self._policy.guard(
            actor,
            Action.REMOVE_MEMBER,
            MembershipResource(target_user_id=user_id, project_id=project_id),
        )
        if not await self._member_repo.delete(project_id, user_id):
            raise NotFoundError("Team member not found", code="member_not_found")
        logger.info(
            "Member removed: project=%s user=%s by=%s",
            project_id,
            user_id,
            describe_actor(actor),
        )

    async def _check_locales_exist(
        self, project_id: ProjectId, codes: list[LocaleCode]
    ) -> None:
        existing = await self._locale_repo.existing_codes(project_id, codes)
        missing = sorted(set(codes) - existing)
        if missing:
            raise ValidationError(
                f"Unknown locales for this project: {', '.join(missing)}",
                field="assigned_locales",
            )
