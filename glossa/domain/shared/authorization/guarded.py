"""Guarded[T]: generic wrapper forcing an explicit authorization check."""

from __future__ import annotations

from typing import TYPE_CHECKING, Generic, TypeVar

from glossa.domain.shared.authorization.action import Action

if TYPE_CHECKING:
    from glossa.domain.auth.model.actor import Actor
    from glossa.domain.shared.authorization.policy_set import PolicySet
    from glossa.domain.shared.authorization.resource import Resource

T = TypeVar("T")


class Guarded(Generic[T]):
    """Wraps a loaded domain entity together with the snapshot it was decided on.

    The ONLY way to access the inner entity is via `.check(action)`, which
    evaluates the policy against the snapshot captured at load time. Callers
    write against that same entity; the state is never re-fetched between
    decision and write.
    """

    __slots__ = ("_entity", "_snapshot", "_actor", "_policy_set")

    def __init__(
        self,
        entity: T,
        snapshot: Resource,
        actor: Actor,
        policy_set: PolicySet,
    ) -> None:
        self._entity = entity
        self._snapshot = snapshot
        self._actor = actor
        self._policy_set = policy_set

    @property
    def snapshot(self) -> Resource:
        return self._snapshot

    def check(self, action: Action) -> T:
        """Evaluate authorization and return the unwrapped entity.

        Raises AuthorizationError or NotFoundError if access is denied.
        """
        self._policy_set.guard(self._actor, action, self._snapshot)
        return self._entity
