"""Resource builders and the connector that serves them."""

from baton_gitlab.connector.base import (
    MembershipBuilder,
    ResourceBuilder,
    grant_membership,
    list_entitlements,
    membership_grant,
    revoke_membership,
)
from baton_gitlab.connector.connector import ConnectorMetadata, GitLabConnector
from baton_gitlab.connector.groups import GroupBuilder, group_resource
from baton_gitlab.connector.ids import compose_resource_id, decompose_resource_id
from baton_gitlab.connector.projects import ProjectBuilder, project_resource
from baton_gitlab.connector.resource_types import (
    GROUP_RESOURCE_TYPE,
    PROJECT_RESOURCE_TYPE,
    USER_RESOURCE_TYPE,
)
from baton_gitlab.connector.users import UserBuilder, user_resource

__all__ = [
    "GitLabConnector",
    "ConnectorMetadata",
    # Builders
    "ResourceBuilder",
    "MembershipBuilder",
    "GroupBuilder",
    "ProjectBuilder",
    "UserBuilder",
    # Resource types
    "GROUP_RESOURCE_TYPE",
    "PROJECT_RESOURCE_TYPE",
    "USER_RESOURCE_TYPE",
    # Mapping
    "group_resource",
    "project_resource",
    "user_resource",
    "compose_resource_id",
    "decompose_resource_id",
    # Entitlements, grants and mutations
    "list_entitlements",
    "membership_grant",
    "grant_membership",
    "revoke_membership",
]
