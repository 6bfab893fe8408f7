"""Project API key routes."""

from datetime import datetime
from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Response
from pydantic import BaseModel

from glossa.domain.auth.command.api_key import (
    CreateApiKey,
    CreateApiKeyHandler,
    RevokeApiKey,
    RevokeApiKeyHandler,
)
from glossa.domain.auth.model.role import ApiKeyRole
from glossa.domain.auth.query.list_api_keys import ListApiKeys, ListApiKeysHandler

router = APIRouter(
    prefix="/projects/{project_id}/api-keys",
    tags=["API Keys"],
    route_class=DishkaRoute,
)


class CreateApiKeyRequest(BaseModel):
    name: str
    role: ApiKeyRole = ApiKeyRole.EDITOR


class ApiKeyResponse(BaseModel):
    id: str
    name: str
    role: ApiKeyRole
    created_at: datetime


class CreatedApiKeyResponse(ApiKeyResponse):
    """Includes the plaintext key. It cannot be retrieved again."""

    key: str


class ApiKeyListResponse(BaseModel):
    keys: list[ApiKeyResponse]


@router.get("", response_model=ApiKeyListResponse)
async def list_api_keys(
    project_id: UUID,
    handler: FromDishka[ListApiKeysHandler],
) -> ApiKeyListResponse:
    result = await handler.run(ListApiKeys(project_id=project_id))
    return ApiKeyListResponse(keys=[ApiKeyResponse(**k.model_dump()) for k in result.keys])


@router.post("", response_model=CreatedApiKeyResponse, status_code=201)
async def create_api_key(
    project_id: UUID,
    body: CreateApiKeyRequest,
    handler: FromDishka[CreateApiKeyHandler],
) -> CreatedApiKeyResponse:
    """Create a project API key. Requires admin or owner."""
    result = await handler.run(CreateApiKey(project_id=project_id, name=body.name, role=body.role))
    return CreatedApiKeyResponse(**result.model_dump())


@router.delete("/{key_id}", status_code=204)
async def revoke_api_key(
    project_id: UUID,
    key_id: UUID,
    handler: FromDishka[RevokeApiKeyHandler],
) -> Response:
    await handler.run(RevokeApiKey(project_id=project_id, key_id=key_id))
    return Response(status_code=204)
