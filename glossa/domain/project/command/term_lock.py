"""SetTermLock and SetAllTermsLock commands and handlers."""

from datetime import datetime
from uuid import UUID

from glossa.domain.auth.model.identity import Identity
from glossa.domain.auth.service.actor import ActorContextBuilder
from glossa.domain.project.model.value import ProjectId, TermId
from glossa.domain.project.service.term_lock import TermLockService
from glossa.domain.shared.command import Command, CommandHandler, Result


class SetTermLock(Command):
    project_id: UUID
    term_id: UUID
    locked: bool


class TermLockResult(Result):
    id: str
    value: str
    context: str | None
    is_locked: bool
    updated_at: datetime


class SetTermLockHandler(CommandHandler[SetTermLock, TermLockResult]):
    identity: Identity
    actor_builder: ActorContextBuilder
    term_lock_service: TermLockService

    async def run(self, cmd: SetTermLock) -> TermLockResult:
        project_id = ProjectId(cmd.project_id)
        actor = await self.actor_builder.build(self.identity, project_id)
        term = await self.term_lock_service.set_lock(
            actor, project_id, TermId(cmd.term_id), cmd.locked
        )
        return TermLockResult(
            id=str(term.id),
            value=term.value,
            context=term.context,
            is_locked=term.locked,
            updated_at=term.updated_at,
        )


class SetAllTermsLock(Command):
    project_id: UUID
    locked: bool


class BulkLockResult(Result):
    count: int
    locked: bool


class SetAllTermsLockHandler(CommandHandler[SetAllTermsLock, BulkLockResult]):
    identity: Identity
    actor_builder: ActorContextBuilder
    term_lock_service: TermLockService

    async def run(self, cmd: SetAllTermsLock) -> BulkLockResult:
        project_id = ProjectId(cmd.project_id)
        actor = await self.actor_builder.build(self.identity, project_id)
        count = await self.term_lock_service.set_all_locked(actor, project_id, cmd.locked)
        return BulkLockResult(count=count, locked=cmd.locked)
