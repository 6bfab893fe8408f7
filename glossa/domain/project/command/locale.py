"""AddLocale and RemoveLocale commands and handlers."""

from uuid import UUID

from glossa.domain.auth.model.identity import Identity
from glossa.domain.auth.service.actor import ActorContextBuilder
from glossa.domain.project.model.value import ProjectId
from glossa.domain.project.service.locale import LocaleService
from glossa.domain.shared.command import Command, CommandHandler, Result


class AddLocale(Command):
    project_id: UUID
    code: str


class LocaleResult(Result):
    id: str
    code: str
    language: str | None
    region: str | None


class AddLocaleHandler(CommandHandler[AddLocale, LocaleResult]):
    identity: Identity
    actor_builder: ActorContextBuilder
    locale_service: LocaleService

    async def run(self, cmd: AddLocale) -> LocaleResult:
        project_id = ProjectId(cmd.project_id)
        actor = await self.actor_builder.build(self.identity, project_id)
        locale = await self.locale_service.add(actor, project_id, cmd.code)
        return LocaleResult(
            id=str(locale.id),
            code=locale.code,
            language=locale.language,
            region=locale.region,
        )


class RemoveLocale(Command):
    project_id: UUID
    code: str


class LocaleRemoved(Result):
    code: str


class RemoveLocaleHandler(CommandHandler[RemoveLocale, LocaleRemoved]):
    identity: Identity
    actor_builder: ActorContextBuilder
    locale_service: LocaleService

    async def run(self, cmd: RemoveLocale) -> LocaleRemoved:
        project_id = ProjectId(cmd.project_id)
        actor = await self.actor_builder.build(self.identity, project_id)
        await self.locale_service.remove(actor, project_id, cmd.code)
        return LocaleRemoved(code=cmd.code)
