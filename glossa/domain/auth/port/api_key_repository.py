"""Repository port for ApiKey persistence."""

from abc import abstractmethod
from typing import Protocol

from glossa.domain.auth.model.api_key import ApiKey
from glossa.domain.auth.model.value import ApiKeyId
from glossa.domain.project.model.value import ProjectId
from glossa.domain.shared.port import Port


class ApiKeyRepository(Port, Protocol):
    """Repository for ApiKey entity persistence."""

    @abstractmethod
    async def get(self, key_id: ApiKeyId) -> ApiKey | None:
        """Get a key by ID, revoked or not."""
        ...

    @abstractmethod
    async def get_by_hash(self, key_hash: str) -> ApiKey | None:
        """Look up a key by the SHA256 hash of its plaintext, revoked or not."""
        ...

    @abstractmethod
    async def list_active(self, project_id: ProjectId) -> list[ApiKey]:
        """List non-revoked keys for a project, newest first."""
        ...

    @abstractmethod
    async def save(self, api_key: ApiKey) -> None:
        """Insert or update a key."""
        ...
