"""Repository port for Project rows."""

from abc import abstractmethod
from typing import Protocol

from glossa.domain.auth.model.value import UserId
from glossa.domain.project.model.project import Project
from glossa.domain.project.model.value import ProjectId
from glossa.domain.shared.port import Port


class ProjectRepository(Port, Protocol):
    @abstractmethod
    async def get(self, project_id: ProjectId) -> Project | None:
        ...

    @abstractmethod
    async def get_owner_id(self, project_id: ProjectId) -> UserId | None:
        """Owner of the project, or None if the project does not exist."""
        ...

    @abstractmethod
    async def update_settings(self, project: Project) -> None:
        """Write name, description and updated_at."""
        ...

    @abstractmethod
    async def delete(self, project_id: ProjectId) -> bool:
        """Delete a project and everything it owns. Returns True if deleted."""
        ...
