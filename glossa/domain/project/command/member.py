"""Team membership commands and handlers."""

from datetime import datetime
from uuid import UUID

from glossa.domain.auth.model.identity import Identity
from glossa.domain.auth.model.role import MemberRole
from glossa.domain.auth.model.value import UserId
from glossa.domain.auth.service.actor import ActorContextBuilder
from glossa.domain.project.model.member import ProjectMember
from glossa.domain.project.model.value import ProjectId
from glossa.domain.project.service.member import MemberService
from glossa.domain.shared.command import Command, CommandHandler, Result


class MemberResult(Result):
    id: str
    user_id: str
    email: str | None
    name: str | None
    role: MemberRole
    assigned_locales: list[str] | None
    created_at: datetime

    @classmethod
    def from_member(cls, member: ProjectMember) -> "MemberResult":
        return cls(
            id=str(member.id),
            user_id=str(member.user_id),
            email=member.email,
            name=member.name,
            role=member.role,
            assigned_locales=member.assigned_locales,
            created_at=member.created_at,
        )


class InviteMember(Command):
    project_id: UUID
    email: str
    role: MemberRole = MemberRole.EDITOR
    assigned_locales: list[str] | None = None


class InviteMemberHandler(CommandHandler[InviteMember, MemberResult]):
    identity: Identity
    actor_builder: ActorContextBuilder
    member_service: MemberService

    async def run(self, cmd: InviteMember) -> MemberResult:
        project_id = ProjectId(cmd.project_id)
        actor = await self.actor_builder.build(self.identity, project_id)
        member = await self.member_service.invite(
            actor, project_id, cmd.email, cmd.role, cmd.assigned_locales
        )
        return MemberResult.from_member(member)


class UpdateMember(Command):
    project_id: UUID
    user_id: UUID
    role: MemberRole | None = None
    assigned_locales: list[str] | None = None


class UpdateMemberHandler(CommandHandler[UpdateMember, MemberResult]):
    identity: Identity
    actor_builder: ActorContextBuilder
    member_service: MemberService

    async def run(self, cmd: UpdateMember) -> MemberResult:
        project_id = ProjectId(cmd.project_id)
        actor = await self.actor_builder.build(self.identity, project_id)
        member = await self.member_service.update(
            actor,
            project_id,
            UserId(cmd.user_id),
            role=cmd.role,
            assigned_locales=cmd.assigned_locales,
        )
        return MemberResult.from_member(member)


class RemoveMember(Command):
    project_id: UUID
    user_id: UUID


class MemberRemoved(Result):
    user_id: str


class RemoveMemberHandler(CommandHandler[RemoveMember, MemberRemoved]):
    identity: Identity
    actor_builder: ActorContextBuilder
    member_service: MemberService

    async def run(self, cmd: RemoveMember) -> MemberRemoved:
        project_id = ProjectId(cmd.project_id)
        actor = await self.actor_builder.build(self.identity, project_id)
        await self.member_service.remove(actor, project_id, UserId(cmd.user_id))
        return MemberRemoved(user_id=str(cmd.user_id))
