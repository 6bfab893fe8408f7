"""Authorization actions: every project operation subject to access control."""

from enum import StrEnum


class Action(StrEnum):
    """Structured enum of all authorization-relevant operations."""

    # Project
    VIEW_PROJECT = "project:view"
    MANAGE_PROJECT_SETTINGS = "project:manage_settings"
    DELETE_PROJECT = "project:delete"

    # Terms
    CREATE_TERM = "term:create"
    UPDATE_TERM = "term:update"
    DELETE_TERM = "term:delete"
    LOCK_TERM = "term:lock"
    UNLOCK_TERM = "term:unlock"
    LOCK_ALL_TERMS = "term:lock_all"
    UNLOCK_ALL_TERMS = "term:unlock_all"
    SET_TERM_LABELS = "term:set_labels"

    # Translations
    TRANSLATE_LOCALE = "translation:write"

    # Locales
    ADD_LOCALE = "locale:add"
    DELETE_LOCALE = "locale:delete"

    # Labels
    CREATE_LABEL = "label:create"
    UPDATE_LABEL = "label:update"
    DELETE_LABEL = "label:delete"

    # Team
    LIST_MEMBERS = "member:list"
    INVITE_MEMBER = "member:invite"
    UPDATE_MEMBER = "member:update"
    REMOVE_MEMBER = "member:remove"

    # API keys
    LIST_API_KEYS = "api_key:list"
    CREATE_API_KEY = "api_key:create"
    REVOKE_API_KEY = "api_key:revoke"

