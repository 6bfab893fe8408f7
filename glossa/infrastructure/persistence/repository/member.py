"""SQL implementation of the MemberRepository port."""

from uuid import UUID

from sqlalchemy import delete, insert, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from glossa.domain.auth.model.role import MemberRole
from glossa.domain.auth.model.value import UserId
from glossa.domain.project.model.member import ProjectMember
from glossa.domain.project.model.value import (
    MemberId,
    ProjectId,
    parse_assigned_locales,
    serialize_assigned_locales,
)
from glossa.domain.project.port.member_repository import MemberRepository
from glossa.domain.shared.error import ConflictError
from glossa.infrastructure.persistence.tables import project_members_table, users_table


def _row_to_member(row: dict) -> ProjectMember:
    assigned = parse_assigned_locales(row["assigned_locales"])
    return ProjectMember(
        id=MemberId(UUID(row["id"])),
        project_id=ProjectId(UUID(row["project_id"])),
        user_id=UserId(UUID(row["user_id"])),
        role=MemberRole(row["role"]),
        assigned_locales=sorted(assigned) if assigned is not None else None,
        email=row.get("email"),
        name=row.get("name"),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def _member_to_dict(member: ProjectMember) -> dict:
    return {
        "id": str(member.id),
        "project_id": str(member.project_id),
        "user_id": str(member.user_id),
        "role": member.role.value,
        "assigned_locales": serialize_assigned_locales(member.assigned_locales),
        "created_at": member.created_at,
        "updated_at": member.updated_at,
    }


def _member_update_values(member: ProjectMember) -> dict:
    """Columns to write for an existing row.

    The stored locale restriction is kept verbatim unless the entity replaced
    it, so a value that failed to parse stays deny-all.
    """
    values = _member_to_dict(member)
    del values["id"], values["created_at"]
    if not member.locales_changed:
        del values["assigned_locales"]
    return values


def _select_members():
    return select(
        project_members_table,
        users_table.c.email,
        users_table.c.name,
    ).select_from(
        project_members_table.outerjoin(
            users_table, users_table.c.id == project_members_table.c.user_id
        )
    )


class SqlMemberRepository(MemberRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def list_for_project(self, project_id: ProjectId) -> list[ProjectMember]:
        stmt = (
            _select_members()
            .where(project_members_table.c.project_id == str(project_id))
            .order_by(project_members_table.c.created_at)
        )
        result = await self.session.execute(stmt)
        return [_row_to_member(dict(row)) for row in result.mappings().all()]

    async def get(self, project_id: ProjectId, user_id: UserId) -> ProjectMember | None:
        stmt = _select_members().where(
            project_members_table.c.project_id == str(project_id),
            project_members_table.c.user_id == str(user_id),
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return _row_to_member(dict(row)) if row else None

    async def save(self, member: ProjectMember) -> None:
        exists_stmt = select(project_members_table.c.id).where(
            project_members_table.c.id == str(member.id)
        )
        existing = (await self.session.execute(exists_stmt)).scalar_one_or_none()

        if existing:
            stmt = (
                update(project_members_table)
                .where(project_members_table.c.id == str(member.id))
                .values(**_member_update_values(member))
            )
            await self.session.execute(stmt)
            await self.session.flush()
            return

        try:
            async with self.session.begin_nested():
                stmt = insert(project_members_table).values(**_member_to_dict(member))
                await self.session.execute(stmt)
        except IntegrityError as e:
            raise ConflictError(
                "User is already a member of this project", code="already_member"
            ) from e

    async def delete(self, project_id: ProjectId, user_id: UserId) -> bool:
        stmt = delete(project_members_table).where(
            project_members_table.c.project_id == str(project_id),
            project_members_table.c.user_id == str(user_id),
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0
