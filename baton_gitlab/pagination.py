"""
Page-number pagination over GitLab collections.

Every collection the connector walks (groups, the projects of a group, the
members of a group or project) uses the same continuation protocol: the
cursor handed to the platform is the 1-based page number as a string, and an
empty cursor means "start from the first page". The next cursor comes from
GitLab's X-Next-Page header and is empty once the last page is reached.
"""

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any
from urllib.parse import quote

from baton_gitlab.exceptions import InvalidCursorError, RemoteRequestFailed
from baton_gitlab.logging import get_logger

if TYPE_CHECKING:
    from baton_gitlab.transport import HTTPTransport

logger = get_logger("connector")

_PAGE_NUMBER = re.compile(r"-?[0-9]+")


def encode_path_key(key: str) -> str:
    """URL-encode a group/project id or full path for use in an API path."""
    return quote(str(key), safe="")


class CollectionKind(Enum):
    """A paginated GitLab collection, keyed by its path template."""

    GROUPS = "/groups"
    GROUP_PROJECTS = "/groups/{key}/projects"
    GROUP_MEMBERS = "/groups/{key}/members"
    PROJECT_MEMBERS = "/projects/{key}/members"

    @property
    def needs_parent(self) -> bool:
        return "{key}" in self.value

    def path(self, parent_key: str) -> str:
        if not self.needs_parent:
            return self.value
        if not parent_key:
            raise ValueError(f"{self.name} listing requires a parent key")
        return self.value.format(key=encode_path_key(parent_key))


@dataclass(frozen=True)
class Cursor:
    """A validated continuation cursor. page is None for the first request."""

    page: int | None = None

    @classmethod
    def parse(cls, token: str) -> "Cursor":
        """
        Parse a cursor string handed back by the platform.

        Args:
            token: "" for the first page, otherwise a page number >= 1

        Returns:
            Cursor for the requested page

        Raises:
            InvalidCursorError: If the token is not a number or is below 1
        """
        if token == "":
            return cls()
        if not _PAGE_NUMBER.fullmatch(token):
            raise InvalidCursorError(token, "not a page number")
        try:
            page = int(token)
        except ValueError as e:
            raise InvalidCursorError(token, "not a page number") from e
        if page < 1:
            raise InvalidCursorError(token, "page must be at least 1")
        return cls(page=page)

    @staticmethod
    def next_token(next_page: int | None) -> str:
        """Render the cursor for the following page, "" when there is none."""
        if not next_page:
            return ""
        return str(next_page)

    def params(self, page_size: int) -> dict[str, int]:
        params = {"per_page": page_size}
        if self.page is not None:
            params["page"] = self.page
        return params


@dataclass(frozen=True)
class Page:
    """One page of raw GitLab items and the cursor that resumes after it."""

    items: list[dict[str, Any]] = field(default_factory=list)
    next_cursor: str = ""
    total_pages: int | None = None
    total_items: int | None = None

    @property
    def done(self) -> bool:
        return self.next_cursor == ""


class PageWalker:
    """Fetches single pages of any GitLab collection."""

    def __init__(self, transport: "HTTPTransport", page_size: int = 2) -> None:
        """
        Initialize the page walker.

        Args:
            transport: HTTP transport for making requests
            page_size: Items requested per page
        """
        self.transport = transport
        self.page_size = page_size

    def fetch_page(
        self,
        kind: CollectionKind,
        parent_key: str,
        cursor: str,
    ) -> Page:
        """
        Fetch one page of a collection.

        The cursor is validated before any request is made. Each call issues
        exactly one API request (retries aside) and returns only that page's
        items.

        Args:
            kind: Which collection to list
            parent_key: Group or project id scoping the collection ("" for GROUPS)
            cursor: "" for the first page, or a cursor returned by a previous call

        Returns:
            Page with the items and the next cursor ("" on the last page)

        Raises:
            InvalidCursorError: If the cursor is malformed or out of range
            ValueError: If a scoped collection is listed without a parent key
            RemoteRequestFailed: On transport errors or non-2xx responses
        """
        parsed = Cursor.parse(cursor)
        path = kind.path(parent_key)

        response = self.transport.request(
            "GET", path, params=parsed.params(self.page_size)
        )

        if not isinstance(response.data, list):
            raise RemoteRequestFailed(
                "UNEXPECTED_RESPONSE",
                f"expected a JSON array from {path}",
                response.status_code,
            )

        next_cursor = Cursor.next_token(response.next_page)
        logger.debug(
            "fetched %d %s item(s) for %r page=%s next=%r",
            len(response.data),
            kind.name,
            parent_key,
            parsed.page or 1,
            next_cursor,
        )
        return Page(
            items=response.data,
            next_cursor=next_cursor,
            total_pages=response.total_pages,
            total_items=response.total_items,
        )
