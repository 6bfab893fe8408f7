"""ActorContextBuilder: the one place that merges identity with membership."""

import logging

from glossa.domain.auth.model.actor import (
    Actor,
    ApiKeyActor,
    Member,
    Outsider,
    Owner,
)
from glossa.domain.auth.model.identity import (
    Anonymous,
    ApiKeyIdentity,
    Identity,
    UserIdentity,
)
from glossa.domain.auth.model.relationship import (
    MemberRelationship,
    OwnerRelationship,
)
from glossa.domain.auth.model.role import MemberRole
from glossa.domain.auth.port.membership import MembershipLookup
from glossa.domain.project.model.value import ProjectId, parse_assigned_locales
from glossa.domain.shared.service import Service

logger = logging.getLogger(__name__)


class ActorContextBuilder(Service):
    """Builds the immutable Actor for one request and one project.

    Rules:
    - Owner status wins over any membership row for the same user.
    - A member's assigned locales are parsed here, once, and only for editors.
    - A user with no relationship becomes an Outsider (denied as not found).
    - A revoked API key becomes Anonymous.
    - An API key keeps its own project; a mismatch is denied by the policy.
    """

    _membership: MembershipLookup

    async def build(self, identity: Identity, project_id: ProjectId) -> Actor:
        if isinstance(identity, ApiKeyIdentity):
            return self._from_api_key(identity, project_id)
        if isinstance(identity, UserIdentity):
            return await self._from_user(identity, project_id)
        return Anonymous()

    def _from_api_key(self, identity: ApiKeyIdentity, project_id: ProjectId) -> Actor:
        if identity.revoked:
            logger.info("Revoked API key presented: key=%s", identity.key_id)
            return Anonymous()
        if identity.project_id != project_id:
            logger.debug(
                "API key %s is scoped to project %s, request targets %s",
                identity.key_id,
                identity.project_id,
                project_id,
            )
        return ApiKeyActor(
            project_id=identity.project_id,
            key_id=identity.key_id,
            role=identity.role,
        )

    async def _from_user(self, identity: UserIdentity, project_id: ProjectId) -> Actor:
        # Storage failures propagate as StorageUnavailableError, never a default actor
        relationship = await self._membership.get_relationship(identity.user_id, project_id)

        if isinstance(relationship, OwnerRelationship):
            return Owner(project_id=project_id, user_id=identity.user_id)

        if isinstance(relationship, MemberRelationship):
            assigned = None
            if relationship.role is MemberRole.EDITOR:
                assigned = parse_assigned_locales(relationship.assigned_locales)
            return Member(
                project_id=project_id,
                user_id=identity.user_id,
                role=relationship.role,
                assigned_locales=assigned,
            )

        return Outsider(project_id=project_id, user_id=identity.user_id)
