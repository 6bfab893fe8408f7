"""Glossa error taxonomy.

Denials come in two flavours: ``NotAuthenticatedError`` when there is no
usable credential and ``ForbiddenError`` when the actor is known but lacks
the role, is blocked by a term lock, or is outside its locale scope.
``NotFoundError`` doubles as the denial for projects the actor has no
relationship to, so their existence is never confirmed.

Backend failures are ``InfrastructureError`` and are never reported as a
denial. The HTTP mapping lives in ``glossa.application.api.v1.errors``.
"""


class GlossaError(Exception):
    default_code = "error"

    def __init__(self, message: str, code: str | None = None) -> None:
        self.message = message
        self.code = code or self.default_code
        super().__init__(message)


class DomainError(GlossaError):
    """A request the domain refuses: bad input, missing resource, or a denial."""


class NotFoundError(DomainError):
    default_code = "not_found"


class ValidationError(DomainError):
    """Malformed input. ``field`` names the offending request field, if any."""

    default_code = "validation_error"

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message)
        self.field = field


class ConflictError(DomainError):
    """Uniqueness violation, or a concurrent write won the race."""

    default_code = "conflict"


class AuthorizationError(DomainError):
    """Base for denials. Catch this to handle both kinds."""

    default_code = "access_denied"


class NotAuthenticatedError(AuthorizationError):
    default_code = "not_authenticated"

    def __init__(self, message: str = "Authentication required", code: str | None = None) -> None:
        super().__init__(message, code)


class ForbiddenError(AuthorizationError):
    """Authenticated and related to the project, but not allowed this action."""


class InfrastructureError(GlossaError):
    default_code = "infrastructure_error"


class StorageUnavailableError(InfrastructureError):
    default_code = "storage_unavailable"


class ConfigurationError(InfrastructureError):
    default_code = "configuration_error"
