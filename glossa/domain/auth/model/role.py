"""Project roles and the access hierarchy they map onto."""

from enum import IntEnum, StrEnum


class AccessLevel(IntEnum):
    """Hierarchical access levels with numeric ordering.

    Higher values inherit all permissions of lower values.
    Gaps allow future level insertion without renumbering.
    """

    READ_ONLY = 10
    EDITOR = 20
    ADMIN = 30
    OWNER = 40


class MemberRole(StrEnum):
    """Assignable role of a human team member."""

    EDITOR = "editor"
    ADMIN = "admin"

    @property
    def level(self) -> AccessLevel:
        return AccessLevel.ADMIN if self is MemberRole.ADMIN else AccessLevel.EDITOR


class ApiKeyRole(StrEnum):
    """Role fixed on an API key at creation."""

    READ_ONLY = "read-only"
    EDITOR = "editor"
    ADMIN = "admin"

    @property
    def level(self) -> AccessLevel:
        return _API_KEY_LEVELS[self]


_API_KEY_LEVELS = {
    ApiKeyRole.READ_ONLY: AccessLevel.READ_ONLY,
    ApiKeyRole.EDITOR: AccessLevel.EDITOR,
    ApiKeyRole.ADMIN: AccessLevel.ADMIN,
}
