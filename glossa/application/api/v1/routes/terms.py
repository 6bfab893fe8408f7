"""Term routes: content, labels and locking."""

from datetime import datetime
from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Response
from pydantic import BaseModel, ConfigDict, Field

from glossa.domain.project.command.term import (
    CreateTerm,
    CreateTermHandler,
    DeleteTerm,
    DeleteTermHandler,
    SetTermLabels,
    SetTermLabelsHandler,
    TermLabels,
    TermResult,
    UpdateTerm,
    UpdateTermHandler,
)
from glossa.domain.project.command.term_lock import (
    SetAllTermsLock,
    SetAllTermsLockHandler,
    SetTermLock,
    SetTermLockHandler,
)

router = APIRouter(prefix="/projects/{project_id}/terms", tags=["Terms"], route_class=DishkaRoute)


class CreateTermRequest(BaseModel):
    value: str
    context: str | None = None


class UpdateTermRequest(BaseModel):
    value: str | None = None
    context: str | None = None


class SetLabelsRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    label_ids: list[UUID] = Field(alias="labelIds")


class SetLockRequest(BaseModel):
    """Request body for locking or unlocking a term."""

    model_config = ConfigDict(populate_by_name=True)

    is_locked: bool = Field(alias="isLocked")


class TermLockResponse(BaseModel):
    id: str
    value: str
    context: str | None
    is_locked: bool
    updated_at: datetime


class BulkLockResponse(BaseModel):
    count: int
    is_locked: bool


@router.post("", response_model=TermResult, status_code=201)
async def create_term(
    project_id: UUID,
    body: CreateTermRequest,
    handler: FromDishka[CreateTermHandler],
) -> TermResult:
    """Create a term. Requires admin or owner; values are unique per project."""
    return await handler.run(
        CreateTerm(project_id=project_id, value=body.value, context=body.context)
    )


@router.patch("/{term_id}", response_model=TermResult)
async def update_term(
    project_id: UUID,
    term_id: UUID,
    body: UpdateTermRequest,
    handler: FromDishka[UpdateTermHandler],
) -> TermResult:
    return await handler.run(
        UpdateTerm(
            project_id=project_id,
            term_id=term_id,
            value=body.value,
            context=body.context,
        )
    )


@router.delete("/{term_id}", status_code=204)
async def delete_term(
    project_id: UUID,
    term_id: UUID,
    handler: FromDishka[DeleteTermHandler],
) -> Response:
    await handler.run(DeleteTerm(project_id=project_id, term_id=term_id))
    return Response(status_code=204)


@router.put("/{term_id}/labels", response_model=TermLabels)
async def set_term_labels(
    project_id: UUID,
    term_id: UUID,
    body: SetLabelsRequest,
    handler: FromDishka[SetTermLabelsHandler],
) -> TermLabels:
    """Replace the labels on a term. Editors may, unless the term is locked."""
    return await handler.run(
        SetTermLabels(project_id=project_id, term_id=term_id, label_ids=body.label_ids)
    )


@router.patch("/{term_id}/lock", response_model=TermLockResponse)
async def set_term_lock(
    project_id: UUID,
    term_id: UUID,
    body: SetLockRequest,
    handler: FromDishka[SetTermLockHandler],
) -> TermLockResponse:
    """Lock or unlock a single term. Requires admin or owner."""
    result = await handler.run(
        SetTermLock(project_id=project_id, term_id=term_id, locked=body.is_locked)
    )
    return TermLockResponse(**result.model_dump())


@router.post("/lock-all", response_model=BulkLockResponse)
async def lock_all_terms(
    project_id: UUID,
    handler: FromDishka[SetAllTermsLockHandler],
) -> BulkLockResponse:
    result = await handler.run(SetAllTermsLock(project_id=project_id, locked=True))
    return BulkLockResponse(count=result.count, is_locked=result.locked)


@router.post("/unlock-all", response_model=BulkLockResponse)
async def unlock_all_terms(
    project_id: UUID,
    handler: FromDishka[SetAllTermsLockHandler],
) -> BulkLockResponse:
    result = await handler.run(SetAllTermsLock(project_id=project_id, locked=False))
    return BulkLockResponse(count=result.count, is_locked=result.locked)
