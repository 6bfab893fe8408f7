"""UpsertTranslation command and handler."""

from datetime import datetime
from uuid import UUID

from glossa.domain.auth.model.identity import Identity
from glossa.domain.auth.service.actor import ActorContextBuilder
from glossa.domain.project.model.value import ProjectId, TermId
from glossa.domain.project.service.translation import TranslationService
from glossa.domain.shared.command import Command, CommandHandler, Result


class UpsertTranslation(Command):
    project_id: UUID
    locale_code: str
    term_id: UUID
    value: str


class TranslationResult(Result):
    id: str
    term_id: str
    locale_id: str
    value: str
    updated_at: datetime


class UpsertTranslationHandler(CommandHandler[UpsertTranslation, TranslationResult]):
    identity: Identity
    actor_builder: ActorContextBuilder
    translation_service: TranslationService

    async def run(self, cmd: UpsertTranslation) -> TranslationResult:
        project_id = ProjectId(cmd.project_id)
        actor = await self.actor_builder.build(self.identity, project_id)
        translation = await self.translation_service.upsert(
            actor,
            project_id,
            cmd.locale_code,
            TermId(cmd.term_id),
            cmd.value,
        )
        return TranslationResult(
            id=str(translation.id),
            term_id=str(translation.term_id),
            locale_id=str(translation.locale_id),
            value=translation.value,
            updated_at=translation.updated_at,
        )
