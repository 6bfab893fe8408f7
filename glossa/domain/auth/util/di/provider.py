"""DI provider for the auth domain."""

import logging

from dishka import from_context, provide
from starlette.requests import Request

from glossa.config import Config
from glossa.domain.auth.command.api_key import CreateApiKeyHandler, RevokeApiKeyHandler
from glossa.domain.auth.model.identity import Identity
from glossa.domain.auth.port.api_key_repository import ApiKeyRepository
from glossa.domain.auth.port.membership import MembershipLookup
from glossa.domain.auth.query.get_permissions import GetProjectPermissionsHandler
from glossa.domain.auth.query.list_api_keys import ListApiKeysHandler
from glossa.domain.auth.service.actor import ActorContextBuilder
from glossa.domain.auth.service.api_key import ApiKeyService
from glossa.domain.auth.service.identity import IdentityResolver
from glossa.domain.shared.authorization import POLICY_SET, PolicySet
from glossa.util.di.base import Provider
from glossa.util.di.scope import Scope

logger = logging.getLogger(__name__)


def bearer_token(request: Request) -> str | None:
    """Extract the token from an ``Authorization: Bearer`` header, if any."""
    auth_header = request.headers.get("Authorization")
    if not auth_header or not auth_header.startswith("Bearer "):
        return None
    return auth_header[7:].strip() or None


class AuthProvider(Provider):
    """DI provider for identity resolution, actor building and API keys."""

    config = from_context(provides=Config, scope=Scope.APP)
    request = from_context(provides=Request, scope=Scope.UOW)

    @provide(scope=Scope.APP)
    def get_policy_set(self) -> PolicySet:
        return POLICY_SET

    # Command Handlers
    create_api_key_handler = provide(CreateApiKeyHandler, scope=Scope.UOW)
    revoke_api_key_handler = provide(RevokeApiKeyHandler, scope=Scope.UOW)

    # Query Handlers
    list_api_keys_handler = provide(ListApiKeysHandler, scope=Scope.UOW)
    get_permissions_handler = provide(GetProjectPermissionsHandler, scope=Scope.UOW)

    @provide(scope=Scope.UOW)
    def get_identity_resolver(
        self, config: Config, api_key_repo: ApiKeyRepository
    ) -> IdentityResolver:
        return IdentityResolver(_api_key_repo=api_key_repo, _config=config.auth)

    @provide(scope=Scope.UOW)
    def get_actor_builder(self, membership: MembershipLookup) -> ActorContextBuilder:
        return ActorContextBuilder(_membership=membership)

    @provide(scope=Scope.UOW)
    def get_api_key_service(
        self,
        config: Config,
        api_key_repo: ApiKeyRepository,
        policy: PolicySet,
    ) -> ApiKeyService:
        return ApiKeyService(_api_key_repo=api_key_repo, _policy=policy, _config=config.auth)

    @provide(scope=Scope.UOW)
    async def get_identity(
        self,
        request: Request,
        config: Config,
        resolver: IdentityResolver,
    ) -> Identity:
        """Resolve the raw Identity of this request.

        A bearer API key takes precedence over the session cookie. Returns
        Anonymous when neither verifies.
        """
        identity = await resolver.resolve(
            bearer=bearer_token(request),
            session_token=request.cookies.get(config.auth.session_cookie),
        )
        logger.debug("Identity resolved: %s", type(identity).__name__)
        return identity
