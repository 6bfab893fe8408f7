"""Locale scope filter for translation writes."""

from glossa.domain.auth.model.actor import Actor, ApiKeyActor, Member, Owner


def can_act_on_locale(actor: Actor, locale_code: str) -> bool:
    """Whether the actor may write translations for the given locale.

    Only editor members carry a locale restriction; owners, admins and API
    keys of any role are never locale-scoped.
    """
    if isinstance(actor, Member):
        restriction = actor.locale_restriction
        return restriction is None or locale_code in restriction
    if isinstance(actor, ApiKeyActor):
        return not actor.revoked
    return isinstance(actor, Owner)
