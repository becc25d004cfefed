"""Projects resource client."""

from baton_gitlab.pagination import CollectionKind, PageWalker
from baton_gitlab.types.gitlab import Project


class ProjectsClient:
    """Client for listing the projects of a group."""

    def __init__(self, walker: PageWalker) -> None:
        self.walker = walker

    def list_for_group(
        self, group_id: str, cursor: str = ""
    ) -> tuple[list[Project], str]:
        """
        List one page of a group's projects.

        Args:
            group_id: Numeric id or full path of the group
            cursor: "" for the first page, or the cursor returned by the previous call

        Returns:
            The page's projects and the next cursor ("" on the last page)

        Raises:
            InvalidCursorError: If the cursor is malformed
            NotFoundError: If the group does not exist
            RemoteRequestFailed: On other API errors
        """
        page = self.walker.fetch_page(CollectionKind.GROUP_PROJECTS, group_id, cursor)
        return [Project.from_json(item) for item in page.items], page.next_cursor
