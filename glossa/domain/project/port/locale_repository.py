"""Repository port for project Locale lookups."""

from abc import abstractmethod
from typing import Protocol

from glossa.domain.project.model.locale import Locale
from glossa.domain.project.model.value import LocaleCode, LocaleId, ProjectId
from glossa.domain.shared.port import Port


class LocaleRepository(Port, Protocol):
    @abstractmethod
    async def get_by_code(self, project_id: ProjectId, code: LocaleCode) -> Locale | None:
        ...

    @abstractmethod
    async def existing_codes(
        self, project_id: ProjectId, codes: list[LocaleCode]
    ) -> set[LocaleCode]:
        """Return the subset of ``codes`` that exist in the project."""
        ...

    @abstractmethod
    async def create(self, locale: Locale) -> None:
        """Insert a locale. Raises ConflictError if the code is already enabled."""
        ...

    @abstractmethod
    async def delete(self, locale_id: LocaleId) -> bool:
        """Delete a locale with all of its translations. Returns True if deleted."""
        ...
