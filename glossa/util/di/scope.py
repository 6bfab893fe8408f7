"""Custom Dishka scopes for Glossa."""

from dishka import BaseScope, new_scope


class Scope(BaseScope):  # type: ignore[misc]  # BaseScope is designed to be subclassed
    """Glossa dependency injection scopes.

    Hierarchy: APP -> UOW

    - APP: Application lifetime (engine, config, policy set)
    - UOW: Unit of Work (one HTTP request: session, identity, handlers)
    """

    APP = new_scope("APP")
    UOW = new_scope("UOW")
