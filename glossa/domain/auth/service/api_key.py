"""API key lifecycle: listing, creation and revocation."""

import logging
from datetime import datetime

from glossa.config import AuthConfig
from glossa.domain.auth.model.actor import Actor
from glossa.domain.auth.model.api_key import ApiKey, generate_api_key, hash_api_key
from glossa.domain.auth.model.role import ApiKeyRole
from glossa.domain.auth.model.value import ApiKeyId
from glossa.domain.auth.port.api_key_repository import ApiKeyRepository
from glossa.domain.project.model.value import ProjectId
from glossa.domain.shared.authorization import (
    Action,
    ApiKeyResource,
    PolicySet,
    ProjectResource,
)
from glossa.domain.shared.error import NotFoundError, ValidationError
from glossa.domain.shared.service import Service

logger = logging.getLogger(__name__)


class ApiKeyService(Service):
    _api_key_repo: ApiKeyRepository
    _policy: PolicySet
    _config: AuthConfig

    async def list_keys(self, actor: Actor, project_id: ProjectId) -> list[ApiKey]:
        self._policy.guard(actor, Action.LIST_API_KEYS, ProjectResource(id=project_id))
        return await self._api_key_repo.list_active(project_id)

    async def create_key(
        self,
        actor: Actor,
        project_id: ProjectId,
        name: str,
        role: ApiKeyRole,
    ) -> tuple[ApiKey, str]:
        """Create a key and return it with its plaintext, which is never stored."""
        self._policy.guard(actor, Action.CREATE_API_KEY, ProjectResource(id=project_id))

        name = name.strip()
        if not name:
            raise ValidationError("API key name is required", field="name")

        raw_key = generate_api_key(self._config.api_key_prefix, self._config.api_key_length)
        api_key = ApiKey.create(
            project_id=project_id,
            name=name,
            role=role,
            key_hash=hash_api_key(raw_key),
        )
        await self._api_key_repo.save(api_key)
        logger.info("API key created: key=%s project=%s role=%s", api_key.id, project_id, role)
        return api_key, raw_key

    async def revoke_key(self, actor: Actor, project_id: ProjectId, key_id: ApiKeyId) -> datetime:
        self._policy.guard(
            actor,
            Action.REVOKE_API_KEY,
            ApiKeyResource(id=key_id, project_id=project_id),
        )

        api_key = await self._api_key_repo.get(key_id)
        if api_key is None or api_key.project_id != project_id or api_key.is_revoked:
            raise NotFoundError("API key not found", code="api_key_not_found")

        revoked_at = api_key.revoke()
        await self._api_key_repo.save(api_key)
        logger.info("API key revoked: key=%s project=%s", key_id, project_id)
        return revoked_at
