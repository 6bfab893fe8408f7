"""Translation routes: enabling locales and writing translation cells."""

from datetime import datetime
from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Response
from pydantic import BaseModel

from glossa.domain.project.command.locale import (
    AddLocale,
    AddLocaleHandler,
    LocaleResult,
    RemoveLocale,
    RemoveLocaleHandler,
)
from glossa.domain.project.command.translation import (
    UpsertTranslation,
    UpsertTranslationHandler,
)

router = APIRouter(
    prefix="/projects/{project_id}/translations",
    tags=["Translations"],
    route_class=DishkaRoute,
)


class AddLocaleRequest(BaseModel):
    code: str


class UpsertTranslationRequest(BaseModel):
    value: str


class TranslationResponse(BaseModel):
    id: str
    term_id: str
    locale_id: str
    value: str
    updated_at: datetime


@router.patch("/{locale_code}/{term_id}", response_model=TranslationResponse)
async def upsert_translation(
    project_id: UUID,
    locale_code: str,
    term_id: UUID,
    body: UpsertTranslationRequest,
    handler: FromDishka[UpsertTranslationHandler],
) -> TranslationResponse:
    """Set the translation of a term in one locale, creating it if missing."""
    result = await handler.run(
        UpsertTranslation(
            project_id=project_id,
            locale_code=locale_code,
            term_id=term_id,
            value=body.value,
        )
    )
    return TranslationResponse(**result.model_dump())


@router.post("", response_model=LocaleResult, status_code=201)
async def add_locale(
    project_id: UUID,
    body: AddLocaleRequest,
    handler: FromDishka[AddLocaleHandler],
) -> LocaleResult:
    """Enable a supported locale on the project. Requires admin or owner."""
    return await handler.run(AddLocale(project_id=project_id, code=body.code))


@router.delete("/{locale_code}", status_code=204)
async def remove_locale(
    project_id: UUID,
    locale_code: str,
    handler: FromDishka[RemoveLocaleHandler],
) -> Response:
    """Disable a locale, deleting its translations."""
    await handler.run(RemoveLocale(project_id=project_id, code=locale_code))
    return Response(status_code=204)
