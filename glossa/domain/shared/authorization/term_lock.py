"""Term lock guard: how a term's lock state constrains other actions.

Lock and unlock transitions are themselves gated by the policy rules
(admin or above). This module covers the other direction: while a term is
locked, content actions on it require admin-or-owner regardless of what the
base role table grants.
"""

from glossa.domain.auth.model.actor import Actor, ProjectActor
from glossa.domain.auth.model.role import AccessLevel
from glossa.domain.shared.authorization.action import Action
from glossa.domain.shared.authorization.decision import Deny, forbidden
from glossa.domain.shared.authorization.resource import Resource, TermResource, TranslationResource

LOCKED_TERM_LEVEL = AccessLevel.ADMIN

LOCK_SENSITIVE_ACTIONS: frozenset[Action] = frozenset(
    {
        Action.UPDATE_TERM,
        Action.DELETE_TERM,
        Action.SET_TERM_LABELS,
        Action.TRANSLATE_LOCALE,
    }
)


def lock_action(locked: bool, *, bulk: bool = False) -> Action:
    """The transition action that moves a term (or every term) into the given state."""
    if bulk:
        return Action.LOCK_ALL_TERMS if locked else Action.UNLOCK_ALL_TERMS
    return Action.LOCK_TERM if locked else Action.UNLOCK_TERM


def is_term_locked(resource: Resource | None) -> bool:
    if isinstance(resource, TermResource):
        return resource.locked
    if isinstance(resource, TranslationResource):
        return resource.term_locked
    return False


def check_term_lock(actor: Actor, action: Action, resource: Resource | None) -> Deny | None:
    """Return a denial if the resource's term is locked and the actor is below admin."""
    if action not in LOCK_SENSITIVE_ACTIONS or not is_term_locked(resource):
        return None
    if isinstance(actor, ProjectActor) and actor.has_level(LOCKED_TERM_LEVEL):
        return None
    return forbidden(
        "This term is locked and can only be modified by admins",
        code="term_locked",
    )
