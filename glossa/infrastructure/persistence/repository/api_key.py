"""SQL implementation of the ApiKeyRepository port."""

from uuid import UUID

from sqlalchemy import insert, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from glossa.domain.auth.model.api_key import ApiKey
from glossa.domain.auth.model.role import ApiKeyRole
from glossa.domain.auth.model.value import ApiKeyId
from glossa.domain.auth.port.api_key_repository import ApiKeyRepository
from glossa.domain.project.model.value import ProjectId
from glossa.domain.shared.error import StorageUnavailableError
from glossa.infrastructure.persistence.tables import api_keys_table


def _row_to_api_key(row: dict) -> ApiKey:
    """Convert a database row to an ApiKey model."""
    return ApiKey(
        id=ApiKeyId(UUID(row["id"])),
        project_id=ProjectId(UUID(row["project_id"])),
        name=row["name"],
        key_hash=row["key_hash"],
        role=ApiKeyRole(row["role"]),
        created_at=row["created_at"],
        revoked_at=row["revoked_at"],
    )


def _api_key_to_dict(api_key: ApiKey) -> dict:
    """Convert an ApiKey model to a database row dict."""
    return {
        "id": str(api_key.id),
        "project_id": str(api_key.project_id),
        "name": api_key.name,
        "key_hash": api_key.key_hash,
        "role": api_key.role.value,
        "created_at": api_key.created_at,
        "revoked_at": api_key.revoked_at,
    }


class SqlApiKeyRepository(ApiKeyRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def get(self, key_id: ApiKeyId) -> ApiKey | None:
        stmt = select(api_keys_table).where(api_keys_table.c.id == str(key_id))
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return _row_to_api_key(dict(row)) if row else None

    async def get_by_hash(self, key_hash: str) -> ApiKey | None:
        stmt = select(api_keys_table).where(api_keys_table.c.key_hash == key_hash)
        try:
            result = await self.session.execute(stmt)
        except SQLAlchemyError as e:
            raise StorageUnavailableError(
                "API key lookup failed", code="storage_unavailable"
            ) from e
        row = result.mappings().first()
        return _row_to_api_key(dict(row)) if row else None

    async def list_active(self, project_id: ProjectId) -> list[ApiKey]:
        stmt = (
            select(api_keys_table)
            .where(
                api_keys_table.c.project_id == str(project_id),
                api_keys_table.c.revoked_at.is_(None),
            )
            .order_by(api_keys_table.c.created_at.desc())
        )
        result = await self.session.execute(stmt)
        return [_row_to_api_key(dict(row)) for row in result.mappings().all()]

    async def save(self, api_key: ApiKey) -> None:
        key_dict = _api_key_to_dict(api_key)
        existing = await self.get(api_key.id)

        if existing:
            stmt = (
                update(api_keys_table)
                .where(api_keys_table.c.id == str(api_key.id))
                .values(**key_dict)
            )
        else:
            stmt = insert(api_keys_table).values(**key_dict)

        await self.session.execute(stmt)
        await self.session.flush()
