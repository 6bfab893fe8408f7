"""Term entity: a source string with its lock flag."""

from datetime import UTC, datetime

from glossa.domain.project.model.value import ProjectId, TermId
from glossa.domain.shared.authorization.resource import TermResource
from glossa.domain.shared.model.entity import Entity


class Term(Entity):
    """A source string to be translated.

    Lock state cycles Unlocked -> Locked -> Unlocked with no terminal state.
    Transitions are unconditional (last write wins); who may trigger them is
    decided by the policy engine, not here.
    """

    id: TermId
    project_id: ProjectId
    value: str
    context: str | None = None
    locked: bool = False
    created_at: datetime
    updated_at: datetime

    def edit(self, value: str | None = None, context: str | None = None) -> None:
        if value is not None:
            self.value = value
        if context is not None:
            self.context = context
        self.updated_at = datetime.now(UTC)

    def set_locked(self, locked: bool) -> bool:
        """Apply a lock transition. Returns True if the state changed."""
        if self.locked == locked:
            return False
        self.locked = locked
        self.updated_at = datetime.now(UTC)
        return True

    def lock(self) -> bool:
        return self.set_locked(True)

    def unlock(self) -> bool:
        return self.set_locked(False)

    def snapshot(self) -> TermResource:
        """Immutable view handed to the policy engine."""
        return TermResource(id=self.id, project_id=self.project_id, locked=self.locked)

    @classmethod
    def create(cls, project_id: ProjectId, value: str, context: str | None = None) -> "Term":
        now = datetime.now(UTC)
        return cls(
            id=TermId.generate(),
            project_id=project_id,
            value=value,
            context=context,
            locked=False,
            created_at=now,
            updated_at=now,
        )
