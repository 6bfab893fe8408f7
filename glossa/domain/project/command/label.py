"""Label commands and handlers."""

from datetime import datetime
from uuid import UUID

from glossa.domain.auth.model.identity import Identity
from glossa.domain.auth.service.actor import ActorContextBuilder
from glossa.domain.project.model.label import Label
from glossa.domain.project.model.value import LabelId, ProjectId
from glossa.domain.project.service.label import LabelService
from glossa.domain.shared.command import Command, CommandHandler, Result


class LabelResult(Result):
    id: str
    name: str
    color: str
    value: str | None
    created_at: datetime

    @classmethod
    def from_label(cls, label: Label) -> "LabelResult":
        return cls(
            id=str(label.id),
            name=label.name,
            color=label.color,
            value=label.value,
            created_at=label.created_at,
        )


class CreateLabel(Command):
    project_id: UUID
    name: str
    color: str | None = None
    value: str | None = None


class CreateLabelHandler(CommandHandler[CreateLabel, LabelResult]):
    identity: Identity
    actor_builder: ActorContextBuilder
    label_service: LabelService

    async def run(self, cmd: CreateLabel) -> LabelResult:
        project_id = ProjectId(cmd.project_id)
        actor = await self.actor_builder.build(self.identity, project_id)
        label = await self.label_service.create(
            actor, project_id, cmd.name, color=cmd.color, value=cmd.value
        )
        return LabelResult.from_label(label)


class UpdateLabel(Command):
    project_id: UUID
    label_id: UUID
    name: str | None = None
    color: str | None = None
    value: str | None = None


class UpdateLabelHandler(CommandHandler[UpdateLabel, LabelResult]):
    identity: Identity
    actor_builder: ActorContextBuilder
    label_service: LabelService

    async def run(self, cmd: UpdateLabel) -> LabelResult:
        project_id = ProjectId(cmd.project_id)
        actor = await self.actor_builder.build(self.identity, project_id)
        label = await self.label_service.update(
            actor,
            project_id,
            LabelId(cmd.label_id),
            name=cmd.name,
            color=cmd.color,
            value=cmd.value,
        )
        return LabelResult.from_label(label)


class DeleteLabel(Command):
    project_id: UUID
    label_id: UUID


class LabelDeleted(Result):
    id: str


class DeleteLabelHandler(CommandHandler[DeleteLabel, LabelDeleted]):
    identity: Identity
    actor_builder: ActorContextBuilder
    label_service: LabelService

    async def run(self, cmd: DeleteLabel) -> LabelDeleted:
        project_id = ProjectId(cmd.project_id)
        actor = await self.actor_builder.build(self.identity, project_id)
        await self.label_service.delete(actor, project_id, LabelId(cmd.label_id))
        return LabelDeleted(id=str(cmd.label_id))
