"""Label routes. All of them require admin or owner."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Response
from pydantic import BaseModel

from glossa.domain.project.command.label import (
    CreateLabel,
    CreateLabelHandler,
    DeleteLabel,
    DeleteLabelHandler,
    LabelResult,
    UpdateLabel,
    UpdateLabelHandler,
)

router = APIRouter(
    prefix="/projects/{project_id}/labels",
    tags=["Labels"],
    route_class=DishkaRoute,
)


class CreateLabelRequest(BaseModel):
    name: str
    color: str | None = None
    value: str | None = None


class UpdateLabelRequest(BaseModel):
    name: str | None = None
    color: str | None = None
    value: str | None = None


@router.post("", response_model=LabelResult, status_code=201)
async def create_label(
    project_id: UUID,
    body: CreateLabelRequest,
    handler: FromDishka[CreateLabelHandler],
) -> LabelResult:
    return await handler.run(CreateLabel(project_id=project_id, **body.model_dump()))


@router.patch("/{label_id}", response_model=LabelResult)
async def update_label(
    project_id: UUID,
    label_id: UUID,
    body: UpdateLabelRequest,
    handler: FromDishka[UpdateLabelHandler],
) -> LabelResult:
    return await handler.run(
        UpdateLabel(project_id=project_id, label_id=label_id, **body.model_dump())
    )


@router.delete("/{label_id}", status_code=204)
async def delete_label(
    project_id: UUID,
    label_id: UUID,
    handler: FromDishka[DeleteLabelHandler],
) -> Response:
    await handler.run(DeleteLabel(project_id=project_id, label_id=label_id))
    return Response(status_code=204)
