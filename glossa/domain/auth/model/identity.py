"""Raw request identities: what a credential resolves to, before any policy."""

from dataclasses import dataclass

from glossa.domain.auth.model.role import ApiKeyRole
from glossa.domain.auth.model.value import ApiKeyId, UserId
from glossa.domain.project.model.value import ProjectId


@dataclass(frozen=True)
class Identity:
    """Base for all request identities."""

    pass


@dataclass(frozen=True)
class Anonymous(Identity):
    """No valid credential. Doubles as the actor that every decision denies."""

    pass


@dataclass(frozen=True)
class UserIdentity(Identity):
    """A session-authenticated user."""

    user_id: UserId


@dataclass(frozen=True)
class ApiKeyIdentity(Identity):
    """A bearer API key. Scope and role are fixed at key creation."""

    key_id: ApiKeyId
    project_id: ProjectId
    role: ApiKeyRole
    revoked: bool = False
