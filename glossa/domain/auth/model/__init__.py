"""Auth domain models."""

from .actor import Actor, ActorKind, ApiKeyActor, Member, Outsider, Owner, ProjectActor
from .api_key import ApiKey
from .identity import Anonymous, ApiKeyIdentity, Identity, UserIdentity
from .relationship import MemberRelationship, NoRelationship, OwnerRelationship, Relationship
from .role import AccessLevel, ApiKeyRole, MemberRole
from .value import ApiKeyId, UserId

__all__ = [
    "AccessLevel",
    "Actor",
    "ActorKind",
    "Anonymous",
    "ApiKey",
    "ApiKeyActor",
    "ApiKeyId",
    "ApiKeyIdentity",
    "ApiKeyRole",
    "Identity",
    "Member",
    "MemberRelationship",
    "MemberRole",
    "NoRelationship",
    "Outsider",
    "Owner",
    "OwnerRelationship",
    "ProjectActor",
    "Relationship",
    "UserId",
    "UserIdentity",
]
