"""baton-gitlab - GitLab connector for identity governance platforms."""

from baton_gitlab.client import GitLabClient
from baton_gitlab.config import ConnectorConfig
from baton_gitlab.connector import (
    GitLabConnector,
    GroupBuilder,
    ProjectBuilder,
    UserBuilder,
)
from baton_gitlab.exceptions import (
    AuthenticationError,
    AuthorizationError,
    ConfigurationError,
    ConflictError,
    GitLabConnectorError,
    InvalidCursorError,
    MalformedResourceIdError,
    NotFoundError,
    RateLimitedError,
    RemoteRequestFailed,
    ServerError,
    UnknownPrincipalReferenceError,
    ValidationError,
)
from baton_gitlab.logging import configure_logging, get_logger
from baton_gitlab.pagination import CollectionKind, Cursor, Page, PageWalker
from baton_gitlab.transport import HTTPTransport, RetryConfig
from baton_gitlab.types import AccessLevel

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Connector
    "GitLabConnector",
    "GroupBuilder",
    "ProjectBuilder",
    "UserBuilder",
    # Client and configuration
    "GitLabClient",
    "ConnectorConfig",
    # Pagination
    "PageWalker",
    "CollectionKind",
    "Cursor",
    "Page",
    # Types
    "AccessLevel",
    # Exceptions
    "GitLabConnectorError",
    "ConfigurationError",
    "InvalidCursorError",
    "MalformedResourceIdError",
    "UnknownPrincipalReferenceError",
    "RemoteRequestFailed",
    "AuthenticationError",
    "AuthorizationError",
    "NotFoundError",
    "ConflictError",
    "RateLimitedError",
    "ValidationError",
    "ServerError",
    # Transport
    "HTTPTransport",
    "RetryConfig",
    # Logging
    "configure_logging",
    "get_logger",
]
