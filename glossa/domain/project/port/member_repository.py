"""Repository port for ProjectMember persistence."""

from abc import abstractmethod
from typing import Protocol

from glossa.domain.auth.model.value import UserId
from glossa.domain.project.model.member import ProjectMember
from glossa.domain.project.model.value import ProjectId
from glossa.domain.shared.port import Port


class MemberRepository(Port, Protocol):
    """Repository for team memberships, joined with the member's user row."""

    @abstractmethod
    async def list_for_project(self, project_id: ProjectId) -> list[ProjectMember]:
        """List members of a project, oldest first."""
        ...

    @abstractmethod
    async def get(self, project_id: ProjectId, user_id: UserId) -> ProjectMember | None:
        ...

    @abstractmethod
    async def save(self, member: ProjectMember) -> None:
        """Insert or update a membership.

        Raises ConflictError if a new row collides with an existing membership.
        """
        ...

    @abstractmethod
    async def delete(self, project_id: ProjectId, user_id: UserId) -> bool:
        """Delete a membership. Returns True if deleted, False if not found."""
        ...
