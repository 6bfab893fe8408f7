"""A user's relationship to a single project, as reported by the membership lookup."""

from dataclasses import dataclass

from glossa.domain.auth.model.role import MemberRole


@dataclass(frozen=True)
class Relationship:
    pass


@dataclass(frozen=True)
class OwnerRelationship(Relationship):
    pass


@dataclass(frozen=True)
class MemberRelationship(Relationship):
    """A membership row.

    ``assigned_locales`` is the stored serialized form (JSON list or None);
    only the actor builder parses it.
    """

    role: MemberRole
    assigned_locales: str | None = None


@dataclass(frozen=True)
class NoRelationship(Relationship):
    pass
