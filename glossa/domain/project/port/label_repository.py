"""Repository port for Label persistence."""

from abc import abstractmethod
from typing import Protocol

from glossa.domain.project.model.label import Label
from glossa.domain.project.model.value import LabelId, ProjectId
from glossa.domain.shared.port import Port


class LabelRepository(Port, Protocol):
    @abstractmethod
    async def get(self, label_id: LabelId) -> Label | None:
        ...

    @abstractmethod
    async def get_by_name(self, project_id: ProjectId, name: str) -> Label | None:
        ...

    @abstractmethod
    async def existing_ids(self, project_id: ProjectId, label_ids: list[LabelId]) -> set[LabelId]:
        """Return the subset of ``label_ids`` that belong to the project."""
        ...

    @abstractmethod
    async def create(self, label: Label) -> None:
        """Insert a label. Raises ConflictError if the name is taken in the project."""
        ...

    @abstractmethod
    async def update(self, label: Label) -> None:
        """Write name, color and value. Raises ConflictError on a name collision."""
        ...

    @abstractmethod
    async def delete(self, label_id: LabelId) -> bool:
        """Delete a label and detach it from every term. Returns True if deleted."""
        ...
