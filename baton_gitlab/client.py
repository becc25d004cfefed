"""
baton-gitlab API client.

Bundles the transport, the shared page walker and the per-resource REST
clients behind one object.
"""

from typing import Any

import httpx

from baton_gitlab.clients import (
    GroupsClient,
    MembersClient,
    ProjectsClient,
    UsersClient,
)
from baton_gitlab.config import DEFAULT_BASE_URL, DEFAULT_PAGE_SIZE, DEFAULT_TIMEOUT, ConnectorConfig
from baton_gitlab.pagination import PageWalker
from baton_gitlab.transport import HTTPTransport, RetryConfig


class GitLabClient:
    """
    Client for the parts of the GitLab REST API the connector uses.

    Example:
        ```python
        from baton_gitlab import GitLabClient

        with GitLabClient(access_token="glpat-...") as client:
            groups, cursor = client.groups.list()
            while cursor:
                more, cursor = client.groups.list(cursor)
        ```
    """

    def __init__(
        self,
        access_token: str,
        base_url: str = DEFAULT_BASE_URL,
        page_size: int = DEFAULT_PAGE_SIZE,
        timeout: float = DEFAULT_TIMEOUT,
        retry_config: RetryConfig | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """
        Initialize the GitLab client.

        Args:
            access_token: Personal, group or project access token
            base_url: GitLab instance URL (default: https://gitlab.com/)
            page_size: Items requested per page for every listing
            timeout: Request timeout in seconds (default: 30.0)
            retry_config: Configuration for retry behavior (optional)
            transport: Optional httpx transport, e.g. httpx.MockTransport in tests
        """
        self.base_url = base_url
        self.page_size = page_size

        self._transport = HTTPTransport(
            base_url=base_url,
            access_token=access_token,
            timeout=timeout,
            retry_config=retry_config,
            transport=transport,
        )
        self.walker = PageWalker(self._transport, page_size=page_size)

        self.groups = GroupsClient(self.walker)
        self.projects = ProjectsClient(self.walker)
        self.members = MembersClient(self._transport, self.walker)
        self.users = UsersClient(self._transport)

    @classmethod
    def from_config(
        cls,
        config: ConnectorConfig,
        transport: httpx.BaseTransport | None = None,
    ) -> "GitLabClient":
        """
        Create a client from a validated configuration.

        Raises:
            ConfigurationError: If the configuration is invalid
        """
        config.validate()
        return cls(
            access_token=config.access_token,
            base_url=config.base_url,
            page_size=config.page_size,
            timeout=config.timeout,
            retry_config=config.retry_config,
            transport=transport,
        )

    @property
    def transport(self) -> HTTPTransport:
        """Get the underlying HTTP transport (for advanced use cases)."""
        return self._transport

    def close(self) -> None:
        """Close the client and release resources."""
        self._transport.close()

    def __enter__(self) -> "GitLabClient":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()
