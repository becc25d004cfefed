"""baton-gitlab type definitions.

This module exports the GitLab records and the platform model types.
"""

from baton_gitlab.types.access_levels import GRANTABLE_ACCESS_LEVELS, AccessLevel
from baton_gitlab.types.gitlab import Group, Member, MemberKind, Project, User
from baton_gitlab.types.resources import (
    Annotation,
    ChildResourceType,
    Entitlement,
    Grant,
    GrantAlreadyExists,
    GrantAlreadyRevoked,
    IdempotentConflict,
    Resource,
    ResourceId,
    ResourceType,
    Trait,
    UserStatus,
    UserTrait,
)

__all__ = [
    # Access levels
    "AccessLevel",
    "GRANTABLE_ACCESS_LEVELS",
    # GitLab records
    "Group",
    "Project",
    "Member",
    "MemberKind",
    "User",
    # Platform model
    "ResourceType",
    "ResourceId",
    "Resource",
    "Trait",
    "UserStatus",
    "UserTrait",
    "Entitlement",
    "Grant",
    # Annotations
    "Annotation",
    "ChildResourceType",
    "IdempotentConflict",
    "GrantAlreadyExists",
    "GrantAlreadyRevoked",
]
