"""Value objects for the project domain."""

import json
import logging
from uuid import UUID, uuid4

from pydantic import RootModel

logger = logging.getLogger(__name__)

LocaleCode = str
"""A project locale code such as ``en_US`` or ``de``."""


class _UUIDValue(RootModel[UUID]):
    def __str__(self) -> str:
        return str(self.root)

    def __hash__(self) -> int:
        return hash(self.root)


class ProjectId(_UUIDValue):
    """Unique identifier for a Project."""

    @classmethod
    def generate(cls) -> "ProjectId":
        return cls(uuid4())


class TermId(_UUIDValue):
    """Unique identifier for a Term."""

    @classmethod
    def generate(cls) -> "TermId":
        return cls(uuid4())


class LocaleId(_UUIDValue):
    """Unique identifier for a project Locale."""

    @classmethod
    def generate(cls) -> "LocaleId":
        return cls(uuid4())


class LabelId(_UUIDValue):
    """Unique identifier for a Label."""

    @classmethod
    def generate(cls) -> "LabelId":
        return cls(uuid4())


class MemberId(_UUIDValue):
    """Unique identifier for a ProjectMember row."""

    @classmethod
    def generate(cls) -> "MemberId":
        return cls(uuid4())


class TranslationId(_UUIDValue):
    """Unique identifier for a Translation."""

    @classmethod
    def generate(cls) -> "TranslationId":
        return cls(uuid4())


def parse_assigned_locales(raw: str | None) -> frozenset[LocaleCode] | None:
    """Parse the stored assigned-locales column.

    NULL or an empty list means unrestricted (None). A malformed value yields
    an empty set, which matches no locale.
    """
    if not raw:
        return None
    try:
        codes = json.loads(raw)
    except json.JSONDecodeError:
        logger.error("Malformed assigned_locales value, denying all locales: %r", raw)
        return frozenset()
    if not isinstance(codes, list) or not all(isinstance(c, str) for c in codes):
        logger.error("Unexpected assigned_locales shape, denying all locales: %r", raw)
        return frozenset()
    if not codes:
        return None
    return frozenset(codes)


def serialize_assigned_locales(codes: list[LocaleCode] | None) -> str | None:
    """Inverse of parse_assigned_locales. An empty list is stored as NULL."""
    if not codes:
        return None
    return json.dumps(codes)
