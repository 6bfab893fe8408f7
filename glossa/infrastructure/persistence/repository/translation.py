"""SQL implementation of the TranslationRepository port."""

from datetime import UTC, datetime
from uuid import UUID

from sqlalchemy import insert, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from glossa.domain.project.model.translation import Translation
from glossa.domain.project.model.value import LocaleId, TermId, TranslationId
from glossa.domain.project.port.translation_repository import TranslationRepository
from glossa.domain.shared.error import ConflictError
from glossa.infrastructure.persistence.tables import translations_table


def _row_to_translation(row: dict) -> Translation:
    return Translation(
        id=TranslationId(UUID(row["id"])),
        term_id=TermId(UUID(row["term_id"])),
        locale_id=LocaleId(UUID(row["locale_id"])),
        value=row["value"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def _translation_to_dict(translation: Translation) -> dict:
    return {
        "id": str(translation.id),
        "term_id": str(translation.term_id),
        "locale_id": str(translation.locale_id),
        "value": translation.value,
        "created_at": translation.created_at,
        "updated_at": translation.updated_at,
    }


class SqlTranslationRepository(TranslationRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def get(self, term_id: TermId, locale_id: LocaleId) -> Translation | None:
        stmt = select(translations_table).where(
            translations_table.c.term_id == str(term_id),
            translations_table.c.locale_id == str(locale_id),
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return _row_to_translation(dict(row)) if row else None

    async def create(self, translation: Translation) -> None:
        stmt = insert(translations_table).values(**_translation_to_dict(translation))
        try:
            # Savepoint keeps the outer transaction usable after a unique violation
            async with self.session.begin_nested():
                await self.session.execute(stmt)
        except IntegrityError as e:
            raise ConflictError(
                "Translation already exists for this term and locale",
                code="translation_exists",
            ) from e

    async def update_value(self, translation_id: TranslationId, value: str) -> None:
        stmt = (
            update(translations_table)
            .where(translations_table.c.id == str(translation_id))
            .values(value=value, updated_at=datetime.now(UTC))
        )
        await self.session.execute(stmt)
        await self.session.flush()
