"""Group resource builder."""

from baton_gitlab.clients.groups import GroupsClient
from baton_gitlab.clients.members import MembersClient
from baton_gitlab.connector.base import MembershipBuilder
from baton_gitlab.connector.ids import compose_resource_id, decompose_resource_id
from baton_gitlab.connector.resource_types import (
    GROUP_RESOURCE_TYPE,
    PROJECT_RESOURCE_TYPE,
    USER_RESOURCE_TYPE,
)
from baton_gitlab.types.gitlab import Group, MemberKind
from baton_gitlab.types.resources import ChildResourceType, Resource, ResourceId


def group_resource(group: Group) -> Resource:
    """Map a GitLab group to a resource with id "<group id>/<group name>"."""
    profile = {
        "id": group.id,
        "name": group.name,
        "description": group.description,
    }
    if group.parent_id:
        profile["parent_group_id"] = group.parent_id

    return Resource(
        id=ResourceId(
            GROUP_RESOURCE_TYPE.id,
            compose_resource_id(str(group.id), group.name),
        ),
        display_name=group.name,
        profile=profile,
        annotations=(
            ChildResourceType(PROJECT_RESOURCE_TYPE.id),
            ChildResourceType(USER_RESOURCE_TYPE.id),
        ),
    )


def group_id_of(resource_id: ResourceId) -> str:
    """
    Raises:
        MalformedResourceIdError: If the id is not "<group id>/<group name>"
    """
    group_id, _ = decompose_resource_id(resource_id.resource)
    return group_id


class GroupBuilder(MembershipBuilder):
    """Syncs every group the token can see, with memberships as grants."""

    resource_type = GROUP_RESOURCE_TYPE
    member_kind = MemberKind.GROUP
    kind_label = "Group"

    def __init__(self, groups: GroupsClient, members: MembersClient) -> None:
        super().__init__(members)
        self.groups = groups

    def membership_key(self, resource_id: ResourceId) -> str:
        return group_id_of(resource_id)

    def list(
        self, parent_id: ResourceId | None, cursor: str
    ) -> tuple[list[Resource], str]:
        groups, next_cursor = self.groups.list(cursor)
        return [group_resource(group) for group in groups], next_cursor
