"""Group and project membership client.

Design note: group and project memberships share one API shape, so a single
client serves both and tags every record with its MemberKind.
"""

from typing import TYPE_CHECKING

from baton_gitlab.pagination import CollectionKind, PageWalker, encode_path_key
from baton_gitlab.types.access_levels import AccessLevel
from baton_gitlab.types.gitlab import Member, MemberKind

if TYPE_CHECKING:
    from baton_gitlab.transport import HTTPTransport

_COLLECTIONS = {
    MemberKind.GROUP: CollectionKind.GROUP_MEMBERS,
    MemberKind.PROJECT: CollectionKind.PROJECT_MEMBERS,
}


class MembersClient:
    """Client for listing, adding and removing members."""

    def __init__(self, transport: "HTTPTransport", walker: PageWalker) -> None:
        """
        Initialize the members client.

        Args:
            transport: HTTP transport for membership mutations
            walker: Page walker for membership listings
        """
        self.transport = transport
        self.walker = walker

    def list(
        self, kind: MemberKind, parent_key: str, cursor: str = ""
    ) -> tuple[list[Member], str]:
        """
        List one page of direct members of a group or project.

        Args:
            kind: Whether parent_key names a group or a project
            parent_key: Numeric id or full path of the group/project
            cursor: "" for the first page, or the cursor returned by the previous call

        Returns:
            The page's members and the next cursor ("" on the last page)

        Raises:
            InvalidCursorError: If the cursor is malformed
            RemoteRequestFailed: On API errors
        """
        page = self.walker.fetch_page(_COLLECTIONS[kind], parent_key, cursor)
        return [Member.from_json(kind, item) for item in page.items], page.next_cursor

    def add(
        self,
        kind: MemberKind,
        parent_key: str,
        user_id: int,
        access_level: AccessLevel,
    ) -> Member:
        """
        Add a user as a direct member.

        Args:
            kind: Whether parent_key names a group or a project
            parent_key: Numeric id or full path of the group/project
            user_id: GitLab user id
            access_level: Level to grant

        Returns:
            The created membership

        Raises:
            ConflictError: If the user is already a member
            RemoteRequestFailed: On other API errors
        """
        response = self.transport.request(
            "POST",
            _COLLECTIONS[kind].path(parent_key),
            body={"user_id": user_id, "access_level": int(access_level)},
        )
        return Member.from_json(kind, response.data)

    def remove(self, kind: MemberKind, parent_key: str, user_id: int) -> None:
        """
        Remove a direct member.

        Raises:
            NotFoundError: If the user is not a member
            RemoteRequestFailed: On other API errors
        """
        self.transport.request(
            "DELETE",
            f"{_COLLECTIONS[kind].path(parent_key)}/{encode_path_key(str(user_id))}",
        )
