"""ListApiKeys query and handler."""

from datetime import datetime
from uuid import UUID

from glossa.domain.auth.model.identity import Identity
from glossa.domain.auth.model.role import ApiKeyRole
from glossa.domain.auth.service.actor import ActorContextBuilder
from glossa.domain.auth.service.api_key import ApiKeyService
from glossa.domain.project.model.value import ProjectId
from glossa.domain.shared.query import Query, QueryHandler, Result


class ListApiKeys(Query):
    project_id: UUID


class ApiKeySummary(Result):
    id: str
    name: str
    role: ApiKeyRole
    created_at: datetime


class ApiKeyList(Result):
    keys: list[ApiKeySummary]


class ListApiKeysHandler(QueryHandler[ListApiKeys, ApiKeyList]):
    identity: Identity
    actor_builder: ActorContextBuilder
    api_key_service: ApiKeyService

    async def run(self, query: ListApiKeys) -> ApiKeyList:
        project_id = ProjectId(query.project_id)
        actor = await self.actor_builder.build(self.identity, project_id)
        keys = await self.api_key_service.list_keys(actor, project_id)
        return ApiKeyList(
            keys=[
                ApiKeySummary(id=str(k.id), name=k.name, role=k.role, created_at=k.created_at)
                for k in keys
            ]
        )
