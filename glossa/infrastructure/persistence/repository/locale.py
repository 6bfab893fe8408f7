"""SQL implementation of the LocaleRepository port."""

from datetime import UTC, datetime
from uuid import UUID

from sqlalchemy import delete, insert, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from glossa.domain.project.model.locale import Locale
from glossa.domain.project.model.value import LocaleCode, LocaleId, ProjectId
from glossa.domain.project.port.locale_repository import LocaleRepository
from glossa.domain.shared.error import ConflictError
from glossa.infrastructure.persistence.tables import locales_table


def _row_to_locale(row: dict) -> Locale:
    return Locale(
        id=LocaleId(UUID(row["id"])),
        project_id=ProjectId(UUID(row["project_id"])),
        code=row["code"],
        language=row["language"],
        region=row["region"],
    )


class SqlLocaleRepository(LocaleRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def get_by_code(self, project_id: ProjectId, code: LocaleCode) -> Locale | None:
        stmt = select(locales_table).where(
            locales_table.c.project_id == str(project_id),
            locales_table.c.code == code,
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return _row_to_locale(dict(row)) if row else None

    async def existing_codes(
        self, project_id: ProjectId, codes: list[LocaleCode]
    ) -> set[LocaleCode]:
        if not codes:
            return set()
        stmt = select(locales_table.c.code).where(
            locales_table.c.project_id == str(project_id),
            locales_table.c.code.in_(codes),
        )
        result = await self.session.execute(stmt)
        return set(result.scalars().all())

    async def create(self, locale: Locale) -> None:
        stmt = insert(locales_table).values(
            id=str(locale.id),
            project_id=str(locale.project_id),
            code=locale.code,
            language=locale.language,
            region=locale.region,
            created_at=datetime.now(UTC),
        )
        try:
            async with self.session.begin_nested():
                await self.session.execute(stmt)
        except IntegrityError as e:
            raise ConflictError(
                "This locale is already enabled for the project", code="locale_exists"
            ) from e

    async def delete(self, locale_id: LocaleId) -> bool:
        # Translations in this locale go with it via ON DELETE CASCADE
        stmt = delete(locales_table).where(locales_table.c.id == str(locale_id))
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0
