"""Project domain ports."""

from .label_repository import LabelRepository
from .locale_repository import LocaleRepository
from .member_repository import MemberRepository
from .project_repository import ProjectRepository
from .term_repository import TermRepository
from .translation_repository import TranslationRepository
from .user_repository import UserDirectory

__all__ = [
    "LabelRepository",
    "LocaleRepository",
    "MemberRepository",
    "ProjectRepository",
    "TermRepository",
    "TranslationRepository",
    "UserDirectory",
]
