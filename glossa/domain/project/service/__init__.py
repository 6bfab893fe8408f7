"""Project domain services."""

from .member import MemberService
from .project import ProjectService
from .term_lock import TermLockService
from .translation import TranslationService

__all__ = ["MemberService", "ProjectService", "TermLockService", "TranslationService"]
