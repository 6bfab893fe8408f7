"""Port for looking up a user's relationship to a project."""

from abc import abstractmethod
from typing import Protocol

from glossa.domain.auth.model.relationship import Relationship
from glossa.domain.auth.model.value import UserId
from glossa.domain.project.model.value import ProjectId
from glossa.domain.shared.port import Port


class MembershipLookup(Port, Protocol):
    """Reports ownership or membership of a user in a project.

    Implementations must report OwnerRelationship whenever the user owns the
    project, even if a membership row also exists for them.
    """

    @abstractmethod
    async def get_relationship(self, user_id: UserId, project_id: ProjectId) -> Relationship:
        ...
