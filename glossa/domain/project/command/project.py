"""DeleteProject and UpdateProjectSettings commands and handlers."""

from datetime import datetime
from uuid import UUID

from glossa.domain.auth.model.identity import Identity
from glossa.domain.auth.service.actor import ActorContextBuilder
from glossa.domain.project.model.value import ProjectId
from glossa.domain.project.service.project import ProjectService
from glossa.domain.shared.command import Command, CommandHandler, Result


class DeleteProject(Command):
    project_id: UUID


class ProjectDeleted(Result):
    id: str


class DeleteProjectHandler(CommandHandler[DeleteProject, ProjectDeleted]):
    identity: Identity
    actor_builder: ActorContextBuilder
    project_service: ProjectService

    async def run(self, cmd: DeleteProject) -> ProjectDeleted:
        project_id = ProjectId(cmd.project_id)
        actor = await self.actor_builder.build(self.identity, project_id)
        await self.project_service.delete(actor, project_id)
        return ProjectDeleted(id=str(project_id))


class UpdateProjectSettings(Command):
    project_id: UUID
    name: str | None = None
    description: str | None = None


class ProjectSettings(Result):
    id: str
    name: str
    description: str | None
    updated_at: datetime


class UpdateProjectSettingsHandler(CommandHandler[UpdateProjectSettings, ProjectSettings]):
    identity: Identity
    actor_builder: ActorContextBuilder
    project_service: ProjectService

    async def run(self, cmd: UpdateProjectSettings) -> ProjectSettings:
        project_id = ProjectId(cmd.project_id)
        actor = await self.actor_builder.build(self.identity, project_id)
        project = await self.project_service.update_settings(
            actor, project_id, name=cmd.name, description=cmd.description
        )
        return ProjectSettings(
            id=str(project.id),
            name=project.name,
            description=project.description,
            updated_at=project.updated_at,
        )
