"""Connector configuration.

The host platform hands the connector an access token and the base URL of
the GitLab instance; everything else has a working default.
"""

import os
from dataclasses import dataclass

from baton_gitlab.exceptions import ConfigurationError
from baton_gitlab.transport import RetryConfig

DEFAULT_BASE_URL = "https://gitlab.com/"
DEFAULT_PAGE_SIZE = 2
DEFAULT_TIMEOUT = 30.0


@dataclass
class ConnectorConfig:
    """Settings needed to talk to one GitLab instance."""

    access_token: str
    base_url: str = DEFAULT_BASE_URL
    page_size: int = DEFAULT_PAGE_SIZE
    timeout: float = DEFAULT_TIMEOUT
    enrich_member_emails: bool = True
    retry_config: RetryConfig | None = None

    def validate(self) -> None:
        """
        Check the configuration before any API call is attempted.

        Raises:
            ConfigurationError: If the token or base URL is empty, or the
                page size is not positive
        """
        if not self.access_token or not self.access_token.strip():
            raise ConfigurationError("access token must not be empty")
        if not self.base_url or not self.base_url.strip():
            raise ConfigurationError("base URL must not be empty")
        if not self.base_url.startswith(("http://", "https://")):
            raise ConfigurationError(
                f"base URL must start with http:// or https://: {self.base_url}"
            )
        if self.page_size < 1:
            raise ConfigurationError(
                f"page size must be at least 1, got {self.page_size}"
            )

    def __repr__(self) -> str:
        return (
            f"ConnectorConfig(access_token='[REDACTED]', base_url={self.base_url!r}, "
            f"page_size={self.page_size}, timeout={self.timeout}, "
            f"enrich_member_emails={self.enrich_member_emails})"
        )

    @classmethod
    def from_env(cls) -> "ConnectorConfig":
        """
        Create a configuration from environment variables.

        Environment variables:
            GITLAB_ACCESS_TOKEN: The access token (required)
            GITLAB_BASE_URL: Base URL of the instance (optional, default: https://gitlab.com/)
            GITLAB_PAGE_SIZE: Items requested per page (optional, default: 2)

        Returns:
            A validated ConnectorConfig

        Raises:
            ConfigurationError: If required variables are missing or invalid
        """
        access_token = os.environ.get("GITLAB_ACCESS_TOKEN")
        base_url = os.environ.get("GITLAB_BASE_URL", DEFAULT_BASE_URL)
        page_size_str = os.environ.get("GITLAB_PAGE_SIZE", str(DEFAULT_PAGE_SIZE))

        if not access_token:
            raise ConfigurationError("GITLAB_ACCESS_TOKEN environment variable not set")

        try:
            page_size = int(page_size_str)
        except ValueError as e:
            raise ConfigurationError(
                f"Invalid GITLAB_PAGE_SIZE: {page_size_str}. Must be an integer"
            ) from e

        config = cls(access_token=access_token, base_url=base_url, page_size=page_size)
        config.validate()
        return config
