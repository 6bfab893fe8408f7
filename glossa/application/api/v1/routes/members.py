"""Team membership routes."""

from datetime import datetime
from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Response
from pydantic import BaseModel, ConfigDict, Field

from glossa.domain.auth.model.role import MemberRole
from glossa.domain.project.command.member import (
    InviteMember,
    InviteMemberHandler,
    MemberResult,
    RemoveMember,
    RemoveMemberHandler,
    UpdateMember,
    UpdateMemberHandler,
)
from glossa.domain.project.query.list_members import ListMembers, ListMembersHandler

router = APIRouter(
    prefix="/projects/{project_id}/members",
    tags=["Members"],
    route_class=DishkaRoute,
)


class InviteMemberRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    email: str
    role: MemberRole = MemberRole.EDITOR
    assigned_locales: list[str] | None = Field(default=None, alias="assignedLocales")


class UpdateMemberRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    role: MemberRole | None = None
    assigned_locales: list[str] | None = Field(default=None, alias="assignedLocales")


class MemberResponse(BaseModel):
    id: str
    user_id: str
    email: str | None
    name: str | None
    role: MemberRole
    assigned_locales: list[str] | None
    created_at: datetime


class MemberListResponse(BaseModel):
    members: list[MemberResponse]


def _to_response(result: MemberResult) -> MemberResponse:
    return MemberResponse(**result.model_dump())


@router.get("", response_model=MemberListResponse)
async def list_members(
    project_id: UUID,
    handler: FromDishka[ListMembersHandler],
) -> MemberListResponse:
    """List team members. Editors only see their own membership."""
    result = await handler.run(ListMembers(project_id=project_id))
    return MemberListResponse(members=[_to_response(m) for m in result.members])


@router.post("", response_model=MemberResponse, status_code=201)
async def invite_member(
    project_id: UUID,
    body: InviteMemberRequest,
    handler: FromDishka[InviteMemberHandler],
) -> MemberResponse:
    """Add a registered user to the team. Requires admin or owner."""
    result = await handler.run(
        InviteMember(
            project_id=project_id,
            email=body.email,
            role=body.role,
            assigned_locales=body.assigned_locales,
        )
    )
    return _to_response(result)


@router.patch("/{user_id}", response_model=MemberResponse)
async def update_member(
    project_id: UUID,
    user_id: UUID,
    body: UpdateMemberRequest,
    handler: FromDishka[UpdateMemberHandler],
) -> MemberResponse:
    result = await handler.run(
        UpdateMember(
            project_id=project_id,
            user_id=user_id,
            role=body.role,
            assigned_locales=body.assigned_locales,
        )
    )
    return _to_response(result)


@router.delete("/{user_id}", status_code=204)
async def remove_member(
    project_id: UUID,
    user_id: UUID,
    handler: FromDishka[RemoveMemberHandler],
) -> Response:
    await handler.run(RemoveMember(project_id=project_id, user_id=user_id))
    return Response(status_code=204)
