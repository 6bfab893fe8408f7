"""Decision values returned by the policy engine.

The engine never raises; callers either inspect the decision or convert a
denial into a domain error with ``Deny.to_error()``.
"""

from dataclasses import dataclass
from enum import StrEnum

from glossa.domain.shared.error import (
    DomainError,
    ForbiddenError,
    NotAuthenticatedError,
    NotFoundError,
)


class DenyReason(StrEnum):
    NOT_AUTHENTICATED = "not_authenticated"
    NOT_FOUND = "not_found"
    FORBIDDEN = "forbidden"


@dataclass(frozen=True)
class Allow:
    @property
    def allowed(self) -> bool:
        return True


@dataclass(frozen=True)
class Deny:
    """A denial with a single-sentence, non-leaking reason.

    ``code`` is a stable machine-readable identifier (``term_locked``,
    ``locale_not_assigned``, ...) surfaced to API clients.
    """

    reason: DenyReason
    message: str
    code: str

    @property
    def allowed(self) -> bool:
        return False

    def to_error(self) -> DomainError:
        if self.reason == DenyReason.NOT_FOUND:
            return NotFoundError(self.message, code=self.code)
        if self.reason == DenyReason.NOT_AUTHENTICATED:
            return NotAuthenticatedError(self.message, code=self.code)
        return ForbiddenError(self.message, code=self.code)


Decision = Allow | Deny

ALLOW = Allow()


def not_authenticated() -> Deny:
    return Deny(
        reason=DenyReason.NOT_AUTHENTICATED,
        message="Authentication required",
        code="not_authenticated",
    )


def not_found(message: str = "Project not found", code: str = "project_not_found") -> Deny:
    return Deny(reason=DenyReason.NOT_FOUND, message=message, code=code)


def forbidden(message: str, code: str = "access_denied") -> Deny:
    return Deny(reason=DenyReason.FORBIDDEN, message=message, code=code)
