"""SQL implementation of the UserDirectory port."""

from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from glossa.domain.auth.model.value import UserId
from glossa.domain.project.model.user import UserSummary
from glossa.domain.project.port.user_repository import UserDirectory
from glossa.infrastructure.persistence.tables import users_table


class SqlUserDirectory(UserDirectory):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def get_by_email(self, email: str) -> UserSummary | None:
        stmt = select(users_table.c.id, users_table.c.email, users_table.c.name).where(
            func.lower(users_table.c.email) == email.lower()
        )
        row = (await self.session.execute(stmt)).mappings().first()
        if row is None:
            return None
        return UserSummary(id=UserId(UUID(row["id"])), email=row["email"], name=row["name"])
