"""Repository port for Translation persistence."""

from abc import abstractmethod
from typing import Protocol

from glossa.domain.project.model.translation import Translation
from glossa.domain.project.model.value import LocaleId, TermId, TranslationId
from glossa.domain.shared.port import Port


class TranslationRepository(Port, Protocol):
    @abstractmethod
    async def get(self, term_id: TermId, locale_id: LocaleId) -> Translation | None:
        ...

    @abstractmethod
    async def create(self, translation: Translation) -> None:
        """Insert a new translation.

        Raises ConflictError if a translation for the same (term, locale)
        cell already exists.
        """
        ...

    @abstractmethod
    async def update_value(self, translation_id: TranslationId, value: str) -> None:
        ...
