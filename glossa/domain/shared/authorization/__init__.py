"""Project authorization: actions, resource snapshots and the policy engine."""

from .action import Action
from .decision import ALLOW, Allow, Decision, Deny, DenyReason
from .locale_scope import can_act_on_locale
from .policy_set import POLICY_SET, PolicyRule, PolicySet, allow
from .resource import (
    ApiKeyResource,
    LabelResource,
    LocaleResource,
    MembershipResource,
    ProjectResource,
    Resource,
    TermResource,
    TranslationResource,
)

__all__ = [
    "ALLOW",
    "Action",
    "Allow",
    "ApiKeyResource",
    "Decision",
    "Deny",
    "DenyReason",
    "LabelResource",
    "LocaleResource",
    "MembershipResource",
    "POLICY_SET",
    "PolicyRule",
    "PolicySet",
    "ProjectResource",
    "Resource",
    "TermResource",
    "TranslationResource",
    "allow",
    "can_act_on_locale",
]
