"""Actor: the canonical, per-request view of who is acting on a project.

Built once per request by the ActorContextBuilder and never mutated. Every
policy decision takes an Actor; no other component merges identity with
membership.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import StrEnum

from glossa.domain.auth.model.identity import Anonymous
from glossa.domain.auth.model.role import AccessLevel, ApiKeyRole, MemberRole
from glossa.domain.auth.model.value import ApiKeyId, UserId
from glossa.domain.project.model.value import LocaleCode, ProjectId


class ActorKind(StrEnum):
    OWNER = "owner"
    MEMBER = "member"
    API_KEY = "api_key"
    OUTSIDER = "outsider"
    ANONYMOUS = "anonymous"


@dataclass(frozen=True)
class ProjectActor(ABC):
    """Base for actors bound to a single project."""

    project_id: ProjectId

    @property
    @abstractmethod
    def kind(self) -> ActorKind: ...

    @property
    @abstractmethod
    def level(self) -> AccessLevel | None:
        """Position in the access hierarchy; None means no access at all."""

    def has_level(self, level: AccessLevel) -> bool:
        return self.level is not None and self.level >= level


@dataclass(frozen=True)
class Owner(ProjectActor):
    """The single user who created the project."""

    user_id: UserId

    @property
    def kind(self) -> ActorKind:
        return ActorKind.OWNER

    @property
    def level(self) -> AccessLevel:
        return AccessLevel.OWNER


@dataclass(frozen=True)
class Member(ProjectActor):
    """A human team member.

    ``assigned_locales`` of None means unrestricted. It only applies to
    editors; admins are unrestricted whatever is stored.
    """

    user_id: UserId
    role: MemberRole
    assigned_locales: frozenset[LocaleCode] | None = None

    @property
    def kind(self) -> ActorKind:
        return ActorKind.MEMBER

    @property
    def level(self) -> AccessLevel:
        return self.role.level

    @property
    def locale_restriction(self) -> frozenset[LocaleCode] | None:
        if self.role is MemberRole.ADMIN:
            return None
        return self.assigned_locales


@dataclass(frozen=True)
class ApiKeyActor(ProjectActor):
    """A project-scoped API key. Never locale-scoped."""

    key_id: ApiKeyId
    role: ApiKeyRole
    revoked: bool = False

    @property
    def kind(self) -> ActorKind:
        return ActorKind.API_KEY

    @property
    def level(self) -> AccessLevel | None:
        if self.revoked:
            return None
        return self.role.level


@dataclass(frozen=True)
class Outsider(ProjectActor):
    """An authenticated user with no relationship to the project."""

    user_id: UserId

    @property
    def kind(self) -> ActorKind:
        return ActorKind.OUTSIDER

    @property
    def level(self) -> None:
        return None


Actor = Owner | Member | ApiKeyActor | Outsider | Anonymous


def actor_kind(actor: Actor) -> ActorKind:
    if isinstance(actor, ProjectActor):
        return actor.kind
    return ActorKind.ANONYMOUS
