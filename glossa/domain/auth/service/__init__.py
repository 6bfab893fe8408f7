"""Auth domain services."""

from .actor import ActorContextBuilder
from .api_key import ApiKeyService
from .identity import IdentityResolver

__all__ = ["ActorContextBuilder", "ApiKeyService", "IdentityResolver"]
