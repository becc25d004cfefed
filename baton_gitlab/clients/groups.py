"""Groups resource client."""

from baton_gitlab.pagination import CollectionKind, PageWalker
from baton_gitlab.types.gitlab import Group


class GroupsClient:
    """Client for GitLab group listing."""

    def __init__(self, walker: PageWalker) -> None:
        """
        Initialize the groups client.

        Args:
            walker: Page walker shared by all listing clients
        """
        self.walker = walker

    def list(self, cursor: str = "") -> tuple[list[Group], str]:
        """
        List one page of the groups visible to the token.

        Args:
            cursor: "" for the first page, or the cursor returned by the previous call

        Returns:
            The page's groups and the next cursor ("" on the last page)

        Raises:
            InvalidCursorError: If the cursor is malformed
            RemoteRequestFailed: On API errors
        """
        page = self.walker.fetch_page(CollectionKind.GROUPS, "", cursor)
        return [Group.from_json(item) for item in page.items], page.next_cursor
