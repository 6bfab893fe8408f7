"""SQL implementation of the ProjectRepository port."""

from uuid import UUID

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from glossa.domain.auth.model.value import UserId
from glossa.domain.project.model.project import Project
from glossa.domain.project.model.value import ProjectId
from glossa.domain.project.port.project_repository import ProjectRepository
from glossa.infrastructure.persistence.tables import projects_table


def _row_to_project(row: dict) -> Project:
    return Project(
        id=ProjectId(UUID(row["id"])),
        name=row["name"],
        description=row["description"],
        owner_id=UserId(UUID(row["owner_id"])),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


class SqlProjectRepository(ProjectRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def get(self, project_id: ProjectId) -> Project | None:
        stmt = select(projects_table).where(projects_table.c.id == str(project_id))
        row = (await self.session.execute(stmt)).mappings().first()
        return _row_to_project(dict(row)) if row else None

    async def get_owner_id(self, project_id: ProjectId) -> UserId | None:
        stmt = select(projects_table.c.owner_id).where(projects_table.c.id == str(project_id))
        owner_id = (await self.session.execute(stmt)).scalar_one_or_none()
        return UserId(UUID(owner_id)) if owner_id else None

    async def update_settings(self, project: Project) -> None:
        stmt = (
            update(projects_table)
            .where(projects_table.c.id == str(project.id))
            .values(
                name=project.name,
                description=project.description,
                updated_at=project.updated_at,
            )
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def delete(self, project_id: ProjectId) -> bool:
        # Terms, locales, labels, members and keys go with it via ON DELETE CASCADE
        stmt = delete(projects_table).where(projects_table.c.id == str(project_id))
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0
