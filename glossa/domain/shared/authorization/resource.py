"""Resource snapshots passed to the policy engine.

Each resource is an immutable snapshot taken by the caller. Whatever state the
engine decides on (notably a term's lock flag) is the state the caller must
write against; nothing is re-read after the decision.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Union

if TYPE_CHECKING:
    from glossa.domain.auth.model.value import ApiKeyId, UserId
    from glossa.domain.project.model.value import LabelId, LocaleCode, ProjectId, TermId


@dataclass(frozen=True)
class ProjectResource:
    id: "ProjectId"

    @property
    def project_id(self) -> "ProjectId":
        return self.id


@dataclass(frozen=True)
class TermResource:
    id: "TermId"
    project_id: "ProjectId"
    locked: bool = False


@dataclass(frozen=True)
class TranslationResource:
    """A (term, locale) cell. ``term_locked`` is the lock snapshot of the owning term."""

    term_id: "TermId"
    locale_code: "LocaleCode"
    project_id: "ProjectId"
    term_locked: bool = False


@dataclass(frozen=True)
class LocaleResource:
    code: "LocaleCode"
    project_id: "ProjectId"


@dataclass(frozen=True)
class LabelResource:
    id: "LabelId"
    project_id: "ProjectId"


@dataclass(frozen=True)
class MembershipResource:
    target_user_id: "UserId"
    project_id: "ProjectId"


@dataclass(frozen=True)
class ApiKeyResource:
    id: "ApiKeyId"
    project_id: "ProjectId"


Resource = Union[
    ProjectResource,
    TermResource,
    TranslationResource,
    LocaleResource,
    LabelResource,
    MembershipResource,
    ApiKeyResource,
]
