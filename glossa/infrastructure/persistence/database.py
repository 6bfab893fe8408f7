"""Async engine, session factory and schema bootstrap."""

import logging
from pathlib import Path
from typing import Any

from sqlalchemy import event
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from glossa.config import Config
from glossa.infrastructure.persistence.tables import metadata

logger = logging.getLogger(__name__)


def _is_sqlite(url: str) -> bool:
    return make_url(url).get_backend_name() == "sqlite"


def resolve_database_url(url: str) -> str:
    """Make file-backed SQLite paths absolute and create their directory.

    In-memory and non-SQLite URLs pass through unchanged.
    """
    parsed = make_url(url)
    if parsed.get_backend_name() != "sqlite":
        return url
    database = parsed.database
    if not database or database == ":memory:" or database.startswith("file:"):
        return url

    path = Path(database).expanduser().resolve()
    path.parent.mkdir(parents=True, exist_ok=True)
    return parsed.set(database=str(path)).render_as_string(hide_password=False)


def _sqlite_options(config: Config) -> dict[str, Any]:
    # One shared connection: aiosqlite sees the same database from every task
    return {
        "echo": config.database.echo,
        "poolclass": StaticPool,
        "connect_args": {"check_same_thread": False},
    }


def _server_options(config: Config) -> dict[str, Any]:
    return {
        "echo": config.database.echo,
        "pool_pre_ping": True,
        "pool_size": 5,
        "max_overflow": 10,
    }


def _on_sqlite_connect(dbapi_connection: Any, connection_record: Any) -> None:
    # Hand BEGIN to SQLAlchemy so SAVEPOINTs nest correctly
    dbapi_connection.isolation_level = None
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def _on_sqlite_begin(conn: Any) -> None:
    conn.exec_driver_sql("BEGIN")


def create_db_engine(config: Config) -> AsyncEngine:
    url = resolve_database_url(config.database.url)
    sqlite = _is_sqlite(url)

    options = _sqlite_options(config) if sqlite else _server_options(config)
    engine = create_async_engine(url, **options)
    if sqlite:
        # Foreign keys drive ON DELETE CASCADE for project deletion
        event.listen(engine.sync_engine, "connect", _on_sqlite_connect)
        event.listen(engine.sync_engine, "begin", _on_sqlite_begin)
    logger.debug("Database engine created for %s", engine.url.render_as_string(hide_password=True))
    return engine


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False, autoflush=False)


async def create_tables(engine: AsyncEngine) -> None:
    """Create missing tables. Existing tables are left as they are."""
    async with engine.begin() as conn:
        await conn.run_sync(metadata.create_all)
    logger.info("Database tables ensured")
