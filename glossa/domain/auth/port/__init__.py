"""Auth domain ports."""

from .api_key_repository import ApiKeyRepository
from .membership import MembershipLookup

__all__ = ["ApiKeyRepository", "MembershipLookup"]
