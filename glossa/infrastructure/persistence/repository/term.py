"""SQL implementation of the TermRepository port."""

from datetime import UTC, datetime
from uuid import UUID

from sqlalchemy import delete, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from glossa.domain.project.model.term import Term
from glossa.domain.project.model.value import LabelId, ProjectId, TermId
from glossa.domain.project.port.term_repository import TermRepository
from glossa.infrastructure.persistence.tables import term_labels_table, terms_table


def _row_to_term(row: dict) -> Term:
    return Term(
        id=TermId(UUID(row["id"])),
        project_id=ProjectId(UUID(row["project_id"])),
        value=row["value"],
        context=row["context"],
        locked=bool(row["is_locked"]),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


class SqlTermRepository(TermRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def get(self, term_id: TermId) -> Term | None:
        stmt = select(terms_table).where(terms_table.c.id == str(term_id))
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return _row_to_term(dict(row)) if row else None

    async def get_by_value(self, project_id: ProjectId, value: str) -> Term | None:
        stmt = select(terms_table).where(
            terms_table.c.project_id == str(project_id),
            terms_table.c.value == value,
        )
        row = (await self.session.execute(stmt)).mappings().first()
        return _row_to_term(dict(row)) if row else None

    async def create(self, term: Term) -> None:
        stmt = insert(terms_table).values(
            id=str(term.id),
            project_id=str(term.project_id),
            value=term.value,
            context=term.context,
            is_locked=term.locked,
            created_at=term.created_at,
            updated_at=term.updated_at,
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def update_content(self, term: Term) -> None:
        stmt = (
            update(terms_table)
            .where(terms_table.c.id == str(term.id))
            .values(value=term.value, context=term.context, updated_at=term.updated_at)
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def delete(self, term_id: TermId) -> bool:
        stmt = delete(terms_table).where(terms_table.c.id == str(term_id))
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0

    async def set_locked(self, term_id: TermId, locked: bool) -> None:
        stmt = (
            update(terms_table)
            .where(terms_table.c.id == str(term_id))
            .values(is_locked=locked, updated_at=datetime.now(UTC))
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def set_all_locked(self, project_id: ProjectId, locked: bool) -> int:
        stmt = (
            update(terms_table)
            .where(terms_table.c.project_id == str(project_id))
            .values(is_locked=locked, updated_at=datetime.now(UTC))
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount

    async def set_labels(self, term_id: TermId, label_ids: list[LabelId]) -> None:
        await self.session.execute(
            delete(term_labels_table).where(term_labels_table.c.term_id == str(term_id))
        )
        if label_ids:
            await self.session.execute(
                insert(term_labels_table),
                [{"term_id": str(term_id), "label_id": str(label_id)} for label_id in label_ids],
            )
        await self.session.flush()
