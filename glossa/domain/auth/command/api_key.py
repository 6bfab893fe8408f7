"""CreateApiKey and RevokeApiKey commands and handlers."""

from datetime import datetime
from uuid import UUID

from glossa.domain.auth.model.identity import Identity
from glossa.domain.auth.model.role import ApiKeyRole
from glossa.domain.auth.model.value import ApiKeyId
from glossa.domain.auth.service.actor import ActorContextBuilder
from glossa.domain.auth.service.api_key import ApiKeyService
from glossa.domain.project.model.value import ProjectId
from glossa.domain.shared.command import Command, CommandHandler, Result


class CreateApiKey(Command):
    project_id: UUID
    name: str
    role: ApiKeyRole = ApiKeyRole.EDITOR


class ApiKeyCreated(Result):
    """The plaintext ``key`` appears here and nowhere else."""

    id: str
    name: str
    role: ApiKeyRole
    key: str
    created_at: datetime


class CreateApiKeyHandler(CommandHandler[CreateApiKey, ApiKeyCreated]):
    identity: Identity
    actor_builder: ActorContextBuilder
    api_key_service: ApiKeyService

    async def run(self, cmd: CreateApiKey) -> ApiKeyCreated:
        project_id = ProjectId(cmd.project_id)
        actor = await self.actor_builder.build(self.identity, project_id)
        api_key, raw_key = await self.api_key_service.create_key(
            actor, project_id, cmd.name, cmd.role
        )
        return ApiKeyCreated(
            id=str(api_key.id),
            name=api_key.name,
            role=api_key.role,
            key=raw_key,
            created_at=api_key.created_at,
        )


class RevokeApiKey(Command):
    project_id: UUID
    key_id: UUID


class ApiKeyRevoked(Result):
    id: str
    revoked_at: datetime


class RevokeApiKeyHandler(CommandHandler[RevokeApiKey, ApiKeyRevoked]):
    identity: Identity
    actor_builder: ActorContextBuilder
    api_key_service: ApiKeyService

    async def run(self, cmd: RevokeApiKey) -> ApiKeyRevoked:
        project_id = ProjectId(cmd.project_id)
        actor = await self.actor_builder.build(self.identity, project_id)
        key_id = ApiKeyId(cmd.key_id)
        revoked_at = await self.api_key_service.revoke_key(actor, project_id, key_id)
        return ApiKeyRevoked(id=str(key_id), revoked_at=revoked_at)
