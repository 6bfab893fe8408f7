"""SQL implementation of the LabelRepository port."""

from uuid import UUID

from sqlalchemy import delete, insert, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from glossa.domain.project.model.label import Label
from glossa.domain.project.model.value import LabelId, ProjectId
from glossa.domain.project.port.label_repository import LabelRepository
from glossa.domain.shared.error import ConflictError
from glossa.infrastructure.persistence.tables import labels_table


def _row_to_label(row: dict) -> Label:
    return Label(
        id=LabelId(UUID(row["id"])),
        project_id=ProjectId(UUID(row["project_id"])),
        name=row["name"],
        color=row["color"],
        value=row["value"],
        created_at=row["created_at"],
    )


def _name_taken() -> ConflictError:
    return ConflictError("A label with this name already exists", code="label_exists")


class SqlLabelRepository(LabelRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def get(self, label_id: LabelId) -> Label | None:
        stmt = select(labels_table).where(labels_table.c.id == str(label_id))
        row = (await self.session.execute(stmt)).mappings().first()
        return _row_to_label(dict(row)) if row else None

    async def get_by_name(self, project_id: ProjectId, name: str) -> Label | None:
        stmt = select(labels_table).where(
            labels_table.c.project_id == str(project_id),
            labels_table.c.name == name,
        )
        row = (await self.session.execute(stmt)).mappings().first()
        return _row_to_label(dict(row)) if row else None

    async def existing_ids(self, project_id: ProjectId, label_ids: list[LabelId]) -> set[LabelId]:
        if not label_ids:
            return set()
        stmt = select(labels_table.c.id).where(
            labels_table.c.project_id == str(project_id),
            labels_table.c.id.in_([str(label_id) for label_id in label_ids]),
        )
        result = await self.session.execute(stmt)
        return {LabelId(UUID(label_id)) for label_id in result.scalars().all()}

    async def create(self, label: Label) -> None:
        stmt = insert(labels_table).values(
            id=str(label.id),
            project_id=str(label.project_id),
            name=label.name,
            color=label.color,
            value=label.value,
            created_at=label.created_at,
        )
        try:
            async with self.session.begin_nested():
                await self.session.execute(stmt)
        except IntegrityError as e:
            raise _name_taken() from e

    async def update(self, label: Label) -> None:
        stmt = (
            update(labels_table)
            .where(labels_table.c.id == str(label.id))
            .values(name=label.name, color=label.color, value=label.value)
        )
        try:
            async with self.session.begin_nested():
                await self.session.execute(stmt)
        except IntegrityError as e:
            raise _name_taken() from e

    async def delete(self, label_id: LabelId) -> bool:
        # term_labels rows go with it via ON DELETE CASCADE
        stmt = delete(labels_table).where(labels_table.c.id == str(label_id))
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0
