"""SQL implementation of the MembershipLookup port."""

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from glossa.domain.auth.model.relationship import (
    MemberRelationship,
    NoRelationship,
    OwnerRelationship,
    Relationship,
)
from glossa.domain.auth.model.role import MemberRole
from glossa.domain.auth.model.value import UserId
from glossa.domain.auth.port.membership import MembershipLookup
from glossa.domain.project.model.value import ProjectId
from glossa.domain.shared.error import StorageUnavailableError
from glossa.infrastructure.persistence.tables import project_members_table, projects_table


class SqlMembershipLookup(MembershipLookup):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def get_relationship(self, user_id: UserId, project_id: ProjectId) -> Relationship:
        try:
            owner_stmt = select(projects_table.c.owner_id).where(
                projects_table.c.id == str(project_id)
            )
            owner_id = (await self.session.execute(owner_stmt)).scalar_one_or_none()
            if owner_id is not None and UUID(owner_id) == user_id.root:
                return OwnerRelationship()

            member_stmt = select(
                project_members_table.c.role,
                project_members_table.c.assigned_locales,
            ).where(
                project_members_table.c.project_id == str(project_id),
                project_members_table.c.user_id == str(user_id),
            )
            row = (await self.session.execute(member_stmt)).mappings().first()
        except SQLAlchemyError as e:
            raise StorageUnavailableError(
                "Membership lookup failed", code="storage_unavailable"
            ) from e

        if row is None:
            return NoRelationship()
        return MemberRelationship(
            role=MemberRole(row["role"]),
            assigned_locales=row["assigned_locales"],
        )
