"""Translation entity: the value of one term in one locale."""

from datetime import UTC, datetime

from glossa.domain.project.model.value import LocaleId, TermId, TranslationId
from glossa.domain.shared.model.entity import Entity


class Translation(Entity):
    """Invariant: `(term_id, locale_id)` is unique."""

    id: TranslationId
    term_id: TermId
    locale_id: LocaleId
    value: str
    created_at: datetime
    updated_at: datetime

    def set_value(self, value: str) -> None:
        self.value = value
        self.updated_at = datetime.now(UTC)

    @classmethod
    def create(cls, term_id: TermId, locale_id: LocaleId, value: str) -> "Translation":
        now = datetime.now(UTC)
        return cls(
            id=TranslationId.generate(),
            term_id=term_id,
            locale_id=locale_id,
            value=value,
            created_at=now,
            updated_at=now,
        )
