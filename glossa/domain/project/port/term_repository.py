"""Repository port for Term persistence."""

from abc import abstractmethod
from typing import Protocol

from glossa.domain.project.model.term import Term
from glossa.domain.project.model.value import LabelId, ProjectId, TermId
from glossa.domain.shared.port import Port


class TermRepository(Port, Protocol):
    @abstractmethod
    async def get(self, term_id: TermId) -> Term | None:
        ...

    @abstractmethod
    async def get_by_value(self, project_id: ProjectId, value: str) -> Term | None:
        ...

    @abstractmethod
    async def create(self, term: Term) -> None:
        ...

    @abstractmethod
    async def update_content(self, term: Term) -> None:
        """Write value and context. The lock flag is left untouched."""
        ...

    @abstractmethod
    async def delete(self, term_id: TermId) -> bool:
        """Delete a term with its translations and label links. Returns True if deleted."""
        ...

    @abstractmethod
    async def set_locked(self, term_id: TermId, locked: bool) -> None:
        """Write only the lock flag; concurrent writes are last-write-wins."""
        ...

    @abstractmethod
    async def set_all_locked(self, project_id: ProjectId, locked: bool) -> int:
        """Set the lock flag on every term of a project. Returns the number of rows changed."""
        ...

    @abstractmethod
    async def set_labels(self, term_id: TermId, label_ids: list[LabelId]) -> None:
        """Replace the set of labels attached to a term."""
        ...
