"""Term content commands and handlers."""

from datetime import datetime
from uuid import UUID

from glossa.domain.auth.model.identity import Identity
from glossa.domain.auth.service.actor import ActorContextBuilder
from glossa.domain.project.model.term import Term
from glossa.domain.project.model.value import LabelId, ProjectId, TermId
from glossa.domain.project.service.term import TermService
from glossa.domain.shared.command import Command, CommandHandler, Result


class TermResult(Result):
    id: str
    value: str
    context: str | None
    is_locked: bool
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_term(cls, term: Term) -> "TermResult":
        return cls(
            id=str(term.id),
            value=term.value,
            context=term.context,
            is_locked=term.locked,
            created_at=term.created_at,
            updated_at=term.updated_at,
        )


class CreateTerm(Command):
    project_id: UUID
    value: str
    context: str | None = None


class CreateTermHandler(CommandHandler[CreateTerm, TermResult]):
    identity: Identity
    actor_builder: ActorContextBuilder
    term_service: TermService

    async def run(self, cmd: CreateTerm) -> TermResult:
        project_id = ProjectId(cmd.project_id)
        actor = await self.actor_builder.build(self.identity, project_id)
        term = await self.term_service.create(actor, project_id, cmd.value, cmd.context)
        return TermResult.from_term(term)


class UpdateTerm(Command):
    project_id: UUID
    term_id: UUID
    value: str | None = None
    context: str | None = None


class UpdateTermHandler(CommandHandler[UpdateTerm, TermResult]):
    identity: Identity
    actor_builder: ActorContextBuilder
    term_service: TermService

    async def run(self, cmd: UpdateTerm) -> TermResult:
        project_id = ProjectId(cmd.project_id)
        actor = await self.actor_builder.build(self.identity, project_id)
        term = await self.term_service.update(
            actor, project_id, TermId(cmd.term_id), value=cmd.value, context=cmd.context
        )
        return TermResult.from_term(term)


class DeleteTerm(Command):
    project_id: UUID
    term_id: UUID


class TermDeleted(Result):
    id: str


class DeleteTermHandler(CommandHandler[DeleteTerm, TermDeleted]):
    identity: Identity
    actor_builder: ActorContextBuilder
    term_service: TermService

    async def run(self, cmd: DeleteTerm) -> TermDeleted:
        project_id = ProjectId(cmd.project_id)
        actor = await self.actor_builder.build(self.identity, project_id)
        await self.term_service.delete(actor, project_id, TermId(cmd.term_id))
        return TermDeleted(id=str(cmd.term_id))


class SetTermLabels(Command):
    project_id: UUID
    term_id: UUID
    label_ids: list[UUID]


class TermLabels(Result):
    term_id: str
    label_ids: list[str]


class SetTermLabelsHandler(CommandHandler[SetTermLabels, TermLabels]):
    identity: Identity
    actor_builder: ActorContextBuilder
    term_service: TermService

    async def run(self, cmd: SetTermLabels) -> TermLabels:
        project_id = ProjectId(cmd.project_id)
        actor = await self.actor_builder.build(self.identity, project_id)
        label_ids = await self.term_service.set_labels(
            actor,
            project_id,
            TermId(cmd.term_id),
            [LabelId(label_id) for label_id in cmd.label_ids],
        )
        return TermLabels(
            term_id=str(cmd.term_id),
            label_ids=[str(label_id) for label_id in label_ids],
        )
