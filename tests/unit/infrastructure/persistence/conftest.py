"""Fixtures for repository tests against in-memory SQLite."""

from datetime import UTC, datetime
from uuid import uuid4

import pytest_asyncio
from sqlalchemy import insert
from sqlalchemy.ext.asyncio import AsyncSession

from glossa.config import Config, DatabaseConfig
from glossa.infrastructure.persistence.database import (
    create_db_engine,
    create_session_factory,
    create_tables,
)
from glossa.infrastructure.persistence.tables import (
    labels_table,
    locales_table,
    project_members_table,
    projects_table,
    terms_table,
    users_table,
)


class Seeder:
    """Inserts raw rows so foreign keys hold for repository tests."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def user(self, email: str | None = None) -> str:
        user_id = str(uuid4())
        await self.session.execute(
            insert(users_table).values(
                id=user_id,
                email=email or f"{user_id}@example.com",
                name="Test User",
                created_at=datetime.now(UTC),
            )
        )
        return user_id

    async def project(self, owner_id: str) -> str:
        project_id = str(uuid4())
        now = datetime.now(UTC)
        await self.session.execute(
            insert(projects_table).values(
                id=project_id,
                name="Storefront",
                owner_id=owner_id,
                created_at=now,
                updated_at=now,
            )
        )
        return project_id

    async def term(self, project_id: str, locked: bool = False) -> str:
        term_id = str(uuid4())
        now = datetime.now(UTC)
        await self.session.execute(
            insert(terms_table).values(
                id=term_id,
                project_id=project_id,
                value="checkout.title",
                is_locked=locked,
                created_at=now,
                updated_at=now,
            )
        )
        return term_id

    async def locale(self, project_id: str, code: str) -> str:
        locale_id = str(uuid4())
        await self.session.execute(
            insert(locales_table).values(
                id=locale_id,
                project_id=project_id,
                code=code,
                created_at=datetime.now(UTC),
            )
        )
        return locale_id

    async def label(self, project_id: str, name: str) -> str:
        label_id = str(uuid4())
        await self.session.execute(
            insert(labels_table).values(
                id=label_id,
                project_id=project_id,
                name=name,
                color="#808080",
                created_at=datetime.now(UTC),
            )
        )
        return label_id

    async def membership(
        self, project_id: str, user_id: str, role: str, assigned: str | None = None
    ) -> None:
        now = datetime.now(UTC)
        await self.session.execute(
            insert(project_members_table).values(
                id=str(uuid4()),
                project_id=project_id,
                user_id=user_id,
                role=role,
                assigned_locales=assigned,
                created_at=now,
                updated_at=now,
            )
        )


@pytest_asyncio.fixture
async def engine():
    config = Config(database=DatabaseConfig(url="sqlite+aiosqlite:///:memory:"))
    engine = create_db_engine(config)
    await create_tables(engine)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def session(engine):
    factory = create_session_factory(engine)
    async with factory() as session:
        yield session
        await session.rollback()


@pytest_asyncio.fixture
async def seed(session) -> Seeder:
    return Seeder(session)
