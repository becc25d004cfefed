"""
The GitLab connector entry point handed to the platform.
"""

from dataclasses import dataclass
from typing import Any

import httpx

from baton_gitlab.client import GitLabClient
from baton_gitlab.config import ConnectorConfig
from baton_gitlab.connector.base import ResourceBuilder
from baton_gitlab.connector.groups import GroupBuilder
from baton_gitlab.connector.projects import ProjectBuilder
from baton_gitlab.connector.users import UserBuilder
from baton_gitlab.logging import get_logger
from baton_gitlab.types.gitlab import User

logger = get_logger("connector")


@dataclass(frozen=True)
class ConnectorMetadata:
    """How the connector presents itself to the platform."""

    display_name: str
    description: str


class GitLabConnector:
    """
    Exposes GitLab groups, projects and members to the platform.

    Example:
        ```python
        from baton_gitlab import ConnectorConfig, GitLabConnector

        with GitLabConnector.from_config(ConnectorConfig.from_env()) as connector:
            connector.validate()
            for builder in connector.resource_syncers():
                resources, cursor = builder.list(None, "")
        ```
    """

    def __init__(self, client: GitLabClient, enrich_member_emails: bool = True) -> None:
        """
        Initialize the connector.

        Args:
            client: GitLab API client
            enrich_member_emails: Look up member emails on their user accounts
        """
        self.client = client
        self._builders: list[ResourceBuilder] = [
            GroupBuilder(client.groups, client.members),
            ProjectBuilder(client.projects, client.members),
            UserBuilder(client.members, client.users, enrich_member_emails),
        ]

    @classmethod
    def from_config(
        cls,
        config: ConnectorConfig,
        transport: httpx.BaseTransport | None = None,
    ) -> "GitLabConnector":
        """
        Create a connector from configuration.

        Raises:
            ConfigurationError: If the configuration is invalid
        """
        client = GitLabClient.from_config(config, transport=transport)
        return cls(client, enrich_member_emails=config.enrich_member_emails)

    def metadata(self) -> ConnectorMetadata:
        return ConnectorMetadata(
            display_name="GitLab",
            description="Syncs GitLab groups, projects and their members",
        )

    def validate(self) -> User:
        """
        Check that the access token works.

        Returns:
            The user the token belongs to

        Raises:
            AuthenticationError: If the token is rejected
            RemoteRequestFailed: On other API errors
        """
        user = self.client.users.current()
        logger.info("authenticated to %s as %s", self.client.base_url, user.username)
        return user

    def resource_syncers(self) -> list[ResourceBuilder]:
        """The builders for groups, projects and users, in that order."""
        return list(self._builders)

    def builder_for(self, resource_type_id: str) -> ResourceBuilder:
        """
        Raises:
            KeyError: If no builder serves the resource type
        """
        for builder in self._builders:
            if builder.resource_type.id == resource_type_id:
                return builder
        raise KeyError(resource_type_id)

    def close(self) -> None:
        """Close the connector and release resources."""
        self.client.close()

    def __enter__(self) -> "GitLabConnector":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()
