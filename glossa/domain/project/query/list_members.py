"""ListMembers query and handler."""

from uuid import UUID

from glossa.domain.auth.model.identity import Identity
from glossa.domain.auth.service.actor import ActorContextBuilder
from glossa.domain.project.command.member import MemberResult
from glossa.domain.project.model.value import ProjectId
from glossa.domain.project.service.member import MemberService
from glossa.domain.shared.query import Query, QueryHandler, Result


class ListMembers(Query):
    project_id: UUID


class MemberList(Result):
    members: list[MemberResult]


class ListMembersHandler(QueryHandler[ListMembers, MemberList]):
    identity: Identity
    actor_builder: ActorContextBuilder
    member_service: MemberService

    async def run(self, query: ListMembers) -> MemberList:
        project_id = ProjectId(query.project_id)
        actor = await self.actor_builder.build(self.identity, project_id)
        members = await self.member_service.list_members(actor, project_id)
        return MemberList(members=[MemberResult.from_member(m) for m in members])
