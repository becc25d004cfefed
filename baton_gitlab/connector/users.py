"""User resource builder.

Users are discovered as the members of groups and projects; they carry no
entitlements or grants of their own.
"""

from dataclasses import replace

from baton_gitlab.clients.members import MembersClient
from baton_gitlab.clients.users import UsersClient
from baton_gitlab.connector.base import ResourceBuilder
from baton_gitlab.connector.groups import group_id_of
from baton_gitlab.connector.resource_types import (
    GROUP_RESOURCE_TYPE,
    PROJECT_RESOURCE_TYPE,
    USER_RESOURCE_TYPE,
)
from baton_gitlab.exceptions import AuthorizationError, NotFoundError
from baton_gitlab.logging import get_logger
from baton_gitlab.types.gitlab import Member, MemberKind
from baton_gitlab.types.resources import Resource, ResourceId, UserTrait

logger = get_logger("connector")


def user_resource(member: Member, parent_id: ResourceId | None) -> Resource:
    """
    Map a membership record to a user resource keyed by the user id.

    The email doubles as the login, and every listed member is enabled.
    """
    profile = {
        "first_name": member.name,
        "username": member.username,
        "email": member.email,
        "state": member.state,
        "access_level": member.access_level,
        "id": member.id,
    }
    return Resource(
        id=ResourceId(USER_RESOURCE_TYPE.id, str(member.id)),
        display_name=member.name,
        profile=profile,
        parent_id=parent_id,
        annotations=(UserTrait(email=member.email, login=member.email),),
    )


class UserBuilder(ResourceBuilder):
    """Syncs the direct members of a group or project as users."""

    resource_type = USER_RESOURCE_TYPE

    def __init__(
        self,
        members: MembersClient,
        users: UsersClient,
        enrich_emails: bool = True,
    ) -> None:
        """
        Initialize the user builder.

        Args:
            members: Membership client used for listing
            users: User client used to look up email addresses
            enrich_emails: Fetch each member's account to fill in its email;
                member listings only include it for enterprise group owners
        """
        self.members = members
        self.users = users
        self.enrich_emails = enrich_emails

    def with_email(self, member: Member) -> Member:
        """Return the member with the email from its user account, if visible."""
        try:
            user = self.users.get(member.id)
        except (NotFoundError, AuthorizationError) as e:
            logger.debug("no account details for user %d: %s", member.id, e)
            return member
        if not user.best_email:
            return member
        return replace(member, email=user.best_email)

    def list(
        self, parent_id: ResourceId | None, cursor: str
    ) -> tuple[list[Resource], str]:
        if parent_id is None:
            return [], ""

        if parent_id.resource_type == GROUP_RESOURCE_TYPE.id:
            kind, key = MemberKind.GROUP, group_id_of(parent_id)
        elif parent_id.resource_type == PROJECT_RESOURCE_TYPE.id:
            kind, key = MemberKind.PROJECT, parent_id.resource
        else:
            return [], ""

        members, next_cursor = self.members.list(kind, key, cursor)
        if self.enrich_emails:
            members = [self.with_email(member) for member in members]
        return [user_resource(member, parent_id) for member in members], next_cursor
