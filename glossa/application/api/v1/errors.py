"""Translate GlossaError into HTTPException.

Response bodies are always ``{"code": ..., "message": ...}`` plus ``field``
for validation errors, so clients can branch on ``code`` alone.
"""

from fastapi import HTTPException

from glossa.domain.shared.error import (
    AuthorizationError,
    ConflictError,
    DomainError,
    GlossaError,
    InfrastructureError,
    NotAuthenticatedError,
    NotFoundError,
    ValidationError,
)

# Checked in order; subclasses come before their bases
DOMAIN_ERROR_STATUS: tuple[tuple[type[DomainError], int], ...] = (
    (NotAuthenticatedError, 401),
    (AuthorizationError, 403),
    (NotFoundError, 404),
    (ConflictError, 409),
    (ValidationError, 422),
)


def _status_for(error: GlossaError) -> int:
    if isinstance(error, InfrastructureError):
        return 503
    for error_type, status in DOMAIN_ERROR_STATUS:
        if isinstance(error, error_type):
            return status
    return 400 if isinstance(error, DomainError) else 500


def map_glossa_error(error: GlossaError) -> HTTPException:
    status = _status_for(error)
    body: dict[str, str] = {"code": error.code, "message": error.message}
    if isinstance(error, ValidationError) and error.field is not None:
        body["field"] = error.field

    # RFC 7235: a 401 must name the scheme the client should retry with
    headers = {"WWW-Authenticate": "Bearer"} if status == 401 else None
    return HTTPException(status_code=status, detail=body, headers=headers)
