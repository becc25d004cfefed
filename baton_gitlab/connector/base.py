"""
Shared resource builder machinery.

A builder serves one resource type to the platform: it lists resources page
by page, enumerates the entitlements a resource offers, lists the grants
currently held on it, and applies grant/revoke requests. Groups and projects
both model access as GitLab memberships, so that part lives here once.
"""

from baton_gitlab.clients.members import MembersClient
from baton_gitlab.connector.resource_types import USER_RESOURCE_TYPE
from baton_gitlab.exceptions import (
    ConflictError,
    NotFoundError,
    UnknownPrincipalReferenceError,
)
from baton_gitlab.logging import get_logger
from baton_gitlab.types.access_levels import GRANTABLE_ACCESS_LEVELS, AccessLevel
from baton_gitlab.types.gitlab import Member, MemberKind
from baton_gitlab.types.resources import (
    Annotation,
    Entitlement,
    Grant,
    GrantAlreadyExists,
    GrantAlreadyRevoked,
    Resource,
    ResourceId,
    ResourceType,
)

logger = get_logger("connector")


def level_entitlement(resource: Resource, kind_label: str, level: AccessLevel) -> Entitlement:
    """The entitlement for holding `level` on `resource`."""
    name = level.display_name
    return Entitlement.assignment(
        resource,
        name,
        display_name=f"{resource.display_name} {kind_label} {name}",
        description=f"{name} on the {resource.display_name} {kind_label.lower()} in GitLab",
        grantable_to=(USER_RESOURCE_TYPE.id,),
    )


def list_entitlements(resource: Resource, kind_label: str) -> list[Entitlement]:
    """One entitlement per grantable access level, lowest privilege first."""
    return [
        level_entitlement(resource, kind_label, level)
        for level in GRANTABLE_ACCESS_LEVELS
    ]


def membership_grant(resource: Resource, kind_label: str, member: Member) -> Grant:
    """
    The grant a membership record represents.

    Codes GitLab may add later map to the "None" entitlement instead of
    failing the whole page.
    """
    level = AccessLevel.from_code(member.access_level)
    principal = ResourceId(USER_RESOURCE_TYPE.id, str(member.id))
    return Grant.of(level_entitlement(resource, kind_label, level), principal)


def parse_principal_id(principal_id: str) -> int:
    """
    Raises:
        UnknownPrincipalReferenceError: If the id is not a GitLab user id
    """
    try:
        return int(principal_id)
    except ValueError as e:
        raise UnknownPrincipalReferenceError(principal_id) from e


def grant_membership(
    members: MembersClient,
    kind: MemberKind,
    parent_key: str,
    level_name: str,
    principal_id: str,
) -> list[Annotation]:
    """
    Add a member, treating "already a member" as success.

    Args:
        members: Membership client
        kind: Group or project membership
        parent_key: Group or project id
        level_name: Access level display name; unknown names send level 0
            and leave the rejection to GitLab
        principal_id: GitLab user id

    Returns:
        [GrantAlreadyExists()] if the user was already a member, else []

    Raises:
        UnknownPrincipalReferenceError: If principal_id is not numeric
        RemoteRequestFailed: On any other API error
    """
    user_id = parse_principal_id(principal_id)
    level = AccessLevel.from_name(level_name)
    try:
        members.add(kind, parent_key, user_id, level)
    except ConflictError:
        logger.info(
            "user %d is already a member of %s %s", user_id, kind.value, parent_key
        )
        return [GrantAlreadyExists()]
    logger.info(
        "granted %s on %s %s to user %d",
        level.display_name,
        kind.value,
        parent_key,
        user_id,
    )
    return []


def revoke_membership(
    members: MembersClient,
    kind: MemberKind,
    parent_key: str,
    principal_id: str,
) -> list[Annotation]:
    """
    Remove a member, treating "not a member" as success.

    Returns:
        [GrantAlreadyRevoked()] if the user was not a member, else []

    Raises:
        UnknownPrincipalReferenceError: If principal_id is not numeric
        RemoteRequestFailed: On any other API error
    """
    user_id = parse_principal_id(principal_id)
    try:
        members.remove(kind, parent_key, user_id)
    except NotFoundError:
        logger.info(
            "user %d is not a member of %s %s", user_id, kind.value, parent_key
        )
        return [GrantAlreadyRevoked()]
    logger.info("revoked user %d from %s %s", user_id, kind.value, parent_key)
    return []


class ResourceBuilder:
    """Base for the per-type builders the platform drives."""

    resource_type: ResourceType

    def entitlements(
        self, resource: Resource, cursor: str
    ) -> tuple[list[Entitlement], str]:
        return [], ""

    def grants(self, resource: Resource, cursor: str) -> tuple[list[Grant], str]:
        return [], ""

    def list(
        self, parent_id: ResourceId | None, cursor: str
    ) -> tuple[list[Resource], str]:
        raise NotImplementedError


class MembershipBuilder(ResourceBuilder):
    """Builder for resources whose access is GitLab membership."""

    member_kind: MemberKind
    kind_label: str

    def __init__(self, members: MembersClient) -> None:
        self.members = members

    def membership_key(self, resource_id: ResourceId) -> str:
        """The group/project id GitLab's member API is addressed by."""
        raise NotImplementedError

    def entitlements(
        self, resource: Resource, cursor: str
    ) -> tuple[list[Entitlement], str]:
        return list_entitlements(resource, self.kind_label), ""

    def grants(self, resource: Resource, cursor: str) -> tuple[list[Grant], str]:
        key = self.membership_key(resource.id)
        members, next_cursor = self.members.list(self.member_kind, key, cursor)
        return [membership_grant(resource, self.kind_label, m) for m in members], next_cursor

    def grant(self, principal: Resource, entitlement: Entitlement) -> list[Annotation]:
        return grant_membership(
            self.members,
            self.member_kind,
            self.membership_key(entitlement.resource.id),
            entitlement.slug,
            principal.id.resource,
        )

    def revoke(self, grant: Grant) -> list[Annotation]:
        return revoke_membership(
            self.members,
            self.member_kind,
            self.membership_key(grant.entitlement.resource.id),
            grant.principal.resource,
        )
