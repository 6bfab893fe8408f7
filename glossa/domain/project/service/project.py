"""Project lifecycle operations."""

import logging

from glossa.domain.auth.model.actor import Actor
from glossa.domain.project.model.project import Project
from glossa.domain.project.model.value import ProjectId
from glossa.domain.project.port.project_repository import ProjectRepository
from glossa.domain.shared.authorization import Action, PolicySet, ProjectResource
from glossa.domain.shared.authorization.policy_set import describe_actor
from glossa.domain.shared.error import NotFoundError, ValidationError
from glossa.domain.shared.service import Service

logger = logging.getLogger(__name__)


class ProjectService(Service):
    _project_repo: ProjectRepository
    _policy: PolicySet

    async def update_settings(
        self,
        actor: Actor,
        project_id: ProjectId,
        name: str | None = None,
        description: str | None = None,
    ) -> Project:
        """Rename a project or change its description. Admins, owner and admin keys."""
        self._policy.guard(actor, Action.MANAGE_PROJECT_SETTINGS, ProjectResource(id=project_id))

        if name is None and description is None:
            raise ValidationError("Nothing to update")
        if name is not None:
            name = name.strip()
            if not name:
                raise ValidationError("Project name cannot be empty", field="name")

        project = await self._project_repo.get(project_id)
        if project is None:
            raise NotFoundError("Project not found", code="project_not_found")

        project.update_settings(name=name, description=description)
        await self._project_repo.update_settings(project)
        logger.info(
            "Project settings updated: project=%s by=%s", project_id, describe_actor(actor)
        )
        return project

    async def delete(self, actor: Actor, project_id: ProjectId) -> None:
        """Delete a project. Only its owner may, never a delegated admin or key."""
        self._policy.guard(actor, Action.DELETE_PROJECT, ProjectResource(id=project_id))

        if not await self._project_repo.delete(project_id):
            raise NotFoundError("Project not found", code="project_not_found")
        logger.info("Project deleted: project=%s by=%s", project_id, describe_actor(actor))
