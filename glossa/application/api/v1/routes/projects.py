"""Project-level routes: settings, deletion and the caller's capability flags."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Response
from pydantic import BaseModel

from glossa.domain.auth.query.get_permissions import (
    GetProjectPermissions,
    GetProjectPermissionsHandler,
    ProjectPermissions,
)
from glossa.domain.project.command.project import (
    DeleteProject,
    DeleteProjectHandler,
    ProjectSettings,
    UpdateProjectSettings,
    UpdateProjectSettingsHandler,
)

router = APIRouter(prefix="/projects", tags=["Projects"], route_class=DishkaRoute)


class UpdateProjectRequest(BaseModel):
    name: str | None = None
    description: str | None = None


@router.get("/{project_id}/permissions", response_model=ProjectPermissions)
async def get_project_permissions(
    project_id: UUID,
    handler: FromDishka[GetProjectPermissionsHandler],
) -> ProjectPermissions:
    """What the caller may do in this project, for UI gating."""
    return await handler.run(GetProjectPermissions(project_id=project_id))


@router.delete("/{project_id}", status_code=204)
async def delete_project(
    project_id: UUID,
    handler: FromDishka[DeleteProjectHandler],
) -> Response:
    """Delete a project. Owner only."""
    await handler.run(DeleteProject(project_id=project_id))
    return Response(status_code=204)


@router.patch("/{project_id}", response_model=ProjectSettings)
async def update_project(
    project_id: UUID,
    body: UpdateProjectRequest,
    handler: FromDishka[UpdateProjectSettingsHandler],
) -> ProjectSettings:
    """Rename a project or change its description. Requires admin or owner."""
    return await handler.run(
        UpdateProjectSettings(
            project_id=project_id, name=body.name, description=body.description
        )
    )
