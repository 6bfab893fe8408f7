"""PolicySet: the declarative decision table and the decide() evaluation.

This is the single source of truth for "can this actor perform this action
on this resource, given its current state". Evaluation is pure: it reads the
actor and the resource snapshot and returns a Decision, never raising.

Stages, first failure wins:
1. Authentication: anonymous actors and revoked keys are NOT_AUTHENTICATED.
2. Project scope: a resource outside the actor's project is NOT_FOUND for
   humans (no existence leak) and FORBIDDEN for API keys.
3. Role table: at least one rule for the action must match the actor.
4. Term lock: locked terms raise the bar for content actions to admin.
5. Locale scope: editors restricted to locales may only translate those.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from glossa.domain.auth.model.actor import (
    Actor,
    ActorKind,
    ApiKeyActor,
    Outsider,
    ProjectActor,
    actor_kind,
)
from glossa.domain.auth.model.role import AccessLevel
from glossa.domain.shared.authorization.action import Action
from glossa.domain.shared.authorization.decision import (
    ALLOW,
    Decision,
    Deny,
    forbidden,
    not_authenticated,
    not_found,
)
from glossa.domain.shared.authorization.locale_scope import can_act_on_locale
from glossa.domain.shared.authorization.resource import Resource, TranslationResource
from glossa.domain.shared.authorization.term_lock import check_term_lock

logger = logging.getLogger(__name__)

HUMANS = frozenset({ActorKind.OWNER, ActorKind.MEMBER})
API_KEYS = frozenset({ActorKind.API_KEY})


@dataclass(frozen=True)
class PolicyRule:
    """A single authorization rule in the policy set.

    ``kinds`` restricts the rule to some actor kinds; None means any.
    """

    action: Action
    level: AccessLevel
    kinds: frozenset[ActorKind] | None = None


def allow(
    action: Action,
    *,
    level: AccessLevel,
    kinds: frozenset[ActorKind] | None = None,
) -> PolicyRule:
    """Convenience constructor for a policy rule."""
    return PolicyRule(action=action, level=level, kinds=kinds)


def describe_actor(actor: Actor) -> str:
    """Short label for logs. Never includes role assignments of other users."""
    kind = actor_kind(actor)
    if isinstance(actor, ApiKeyActor):
        return f"{kind}:{actor.key_id}"
    user_id = getattr(actor, "user_id", None)
    return f"{kind}:{user_id}" if user_id is not None else str(kind)


class PolicySet:
    """Declarative set of all authorization rules.

    For a given action, rules are tried in order. First match wins (allow).
    No match means deny.
    """

    def __init__(self, rules: list[PolicyRule]) -> None:
        self._rules = rules
        self._by_action: dict[Action, list[PolicyRule]] = {}
        for rule in rules:
            self._by_action.setdefault(rule.action, []).append(rule)

    def decide(
        self,
        actor: Actor,
        action: Action,
        resource: Resource | None = None,
    ) -> Decision:
        """Decide whether ``actor`` may perform ``action`` on ``resource``.

        With no resource the actor is evaluated against its own project.
        """
        decision = self._evaluate(actor, action, resource)
        if isinstance(decision, Deny):
            logger.warning(
                "Authorization denied: actor=%s action=%s code=%s",
                describe_actor(actor),
                action,
                decision.code,
            )
        else:
            logger.info(
                "Authorization allowed: actor=%s action=%s",
                describe_actor(actor),
                action,
            )
        return decision

    def is_allowed(self, actor: Actor, action: Action, resource: Resource | None = None) -> bool:
        """Unlogged check, used to compute capability flags."""
        return self._evaluate(actor, action, resource).allowed

    def guard(self, actor: Actor, action: Action, resource: Resource | None = None) -> None:
        """Raise the mapped domain error if the decision is a denial."""
        decision = self.decide(actor, action, resource)
        if isinstance(decision, Deny):
            raise decision.to_error()

    def _evaluate(self, actor: Actor, action: Action, resource: Resource | None) -> Decision:
        if not isinstance(actor, ProjectActor):
            return not_authenticated()
        if isinstance(actor, ApiKeyActor) and actor.revoked:
            return not_authenticated()

        if resource is not None and resource.project_id != actor.project_id:
            if isinstance(actor, ApiKeyActor):
                return forbidden(
                    "API key is not valid for this project",
                    code="api_key_project_mismatch",
                )
            return not_found()

        if isinstance(actor, Outsider):
            return not_found()

        rules = self._by_action.get(action, [])
        if not any(self._matches(rule, actor) for rule in rules):
            return forbidden(f"Insufficient permissions for {action}")

        lock_denial = check_term_lock(actor, action, resource)
        if lock_denial is not None:
            return lock_denial

        if (
            action == Action.TRANSLATE_LOCALE
            and isinstance(resource, TranslationResource)
            and not can_act_on_locale(actor, resource.locale_code)
        ):
            return forbidden(
                "You do not have access to translate this locale",
                code="locale_not_assigned",
            )

        return ALLOW

    def _matches(self, rule: PolicyRule, actor: ProjectActor) -> bool:
        if rule.kinds is not None and actor.kind not in rule.kinds:
            return False
        return actor.has_level(rule.level)

    def validate_coverage(self) -> None:
        """Startup check: every Action enum member must have at least one rule."""
        from glossa.domain.shared.error import ConfigurationError

        covered = {r.action for r in self._rules}
        missing = set(Action) - covered
        if missing:
            raise ConfigurationError(f"Actions without policy rules: {sorted(missing)}")


POLICY_SET = PolicySet(
    [
        # Reads
        allow(Action.VIEW_PROJECT, level=AccessLevel.READ_ONLY),
        allow(Action.LIST_MEMBERS, level=AccessLevel.EDITOR, kinds=HUMANS),
        allow(Action.LIST_MEMBERS, level=AccessLevel.ADMIN, kinds=API_KEYS),
        # Project (deletion is owner-only, never delegated)
        allow(Action.MANAGE_PROJECT_SETTINGS, level=AccessLevel.ADMIN),
        allow(Action.DELETE_PROJECT, level=AccessLevel.OWNER),
        # Term structure
        allow(Action.CREATE_TERM, level=AccessLevel.ADMIN),
        allow(Action.UPDATE_TERM, level=AccessLevel.ADMIN),
        allow(Action.DELETE_TERM, level=AccessLevel.ADMIN),
        allow(Action.LOCK_TERM, level=AccessLevel.ADMIN),
        allow(Action.UNLOCK_TERM, level=AccessLevel.ADMIN),
        allow(Action.LOCK_ALL_TERMS, level=AccessLevel.ADMIN),
        allow(Action.UNLOCK_ALL_TERMS, level=AccessLevel.ADMIN),
        # Editor-level content work (lock state and locale scope apply on top)
        allow(Action.SET_TERM_LABELS, level=AccessLevel.EDITOR),
        allow(Action.TRANSLATE_LOCALE, level=AccessLevel.EDITOR),
        # Locales and labels
        allow(Action.ADD_LOCALE, level=AccessLevel.ADMIN),
        allow(Action.DELETE_LOCALE, level=AccessLevel.ADMIN),
        allow(Action.CREATE_LABEL, level=AccessLevel.ADMIN),
        allow(Action.UPDATE_LABEL, level=AccessLevel.ADMIN),
        allow(Action.DELETE_LABEL, level=AccessLevel.ADMIN),
        # Team
        allow(Action.INVITE_MEMBER, level=AccessLevel.ADMIN),
        allow(Action.UPDATE_MEMBER, level=AccessLevel.ADMIN),
        allow(Action.REMOVE_MEMBER, level=AccessLevel.ADMIN),
        # API keys
        allow(Action.LIST_API_KEYS, level=AccessLevel.ADMIN),
        allow(Action.CREATE_API_KEY, level=AccessLevel.ADMIN),
        allow(Action.REVOKE_API_KEY, level=AccessLevel.ADMIN),
    ]
)
