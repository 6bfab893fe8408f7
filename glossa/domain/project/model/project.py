"""Project entity: the unit of ownership and access control."""

from datetime import UTC, datetime

from glossa.domain.auth.model.value import UserId
from glossa.domain.project.model.value import ProjectId
from glossa.domain.shared.authorization.resource import ProjectResource
from glossa.domain.shared.model.entity import Entity


class Project(Entity):
    id: ProjectId
    name: str
    description: str | None = None
    owner_id: UserId
    created_at: datetime
    updated_at: datetime

    def update_settings(self, name: str | None = None, description: str | None = None) -> None:
        if name is not None:
            self.name = name
        if description is not None:
            self.description = description
        self.updated_at = datetime.now(UTC)

    def snapshot(self) -> ProjectResource:
        return ProjectResource(id=self.id)
