"""Resolve raw request credentials into an Identity."""

import logging
from uuid import UUID

import jwt

from glossa.config import AuthConfig
from glossa.domain.auth.model.api_key import hash_api_key
from glossa.domain.auth.model.identity import (
    Anonymous,
    ApiKeyIdentity,
    Identity,
    UserIdentity,
)
from glossa.domain.auth.model.value import UserId
from glossa.domain.auth.port.api_key_repository import ApiKeyRepository
from glossa.domain.shared.service import Service

logger = logging.getLogger(__name__)


class IdentityResolver(Service):
    """Turns a bearer API key or a session token into an Identity.

    A bearer token always wins over the session cookie. Anything that does
    not verify resolves to Anonymous; rejecting it is the policy's job.
    """

    _api_key_repo: ApiKeyRepository
    _config: AuthConfig

    async def resolve(self, bearer: str | None, session_token: str | None) -> Identity:
        if bearer:
            return await self.resolve_api_key(bearer)
        if session_token:
            user_id = self.decode_session_token(session_token)
            if user_id is not None:
                return UserIdentity(user_id=user_id)
        return Anonymous()

    async def resolve_api_key(self, raw_key: str) -> Identity:
        if not raw_key.startswith(self._config.api_key_prefix):
            logger.debug("Bearer token without API key prefix")
            return Anonymous()

        api_key = await self._api_key_repo.get_by_hash(hash_api_key(raw_key))
        if api_key is None:
            logger.debug("Unknown API key presented")
            return Anonymous()

        return ApiKeyIdentity(
            key_id=api_key.id,
            project_id=api_key.project_id,
            role=api_key.role,
            revoked=api_key.is_revoked,
        )

    def decode_session_token(self, token: str) -> UserId | None:
        """Verify a session JWT and return its subject, or None if invalid."""
        jwt_config = self._config.jwt
        try:
            payload = jwt.decode(
                token,
                jwt_config.secret,
                algorithms=[jwt_config.algorithm],
                audience=jwt_config.audience,
                leeway=jwt_config.leeway_seconds,
                options={"verify_aud": jwt_config.audience is not None},
            )
        except jwt.InvalidTokenError as e:
            logger.debug("Rejected session token: %s", e)
            return None

        # Frontend-issued tokens carry the user id as "userId"
        subject = payload.get("sub") or payload.get("userId")
        if not subject:
            return None
        try:
            return UserId(UUID(str(subject)))
        except ValueError:
            logger.debug("Session token subject is not a user id: %r", subject)
            return None
