"""baton-gitlab exception classes."""


class GitLabConnectorError(Exception):
    """Base exception for all connector errors."""

    def __init__(
        self, code: str, message: str, request_id: str | None = None
    ) -> None:
        self.code = code
        self.message = message
        self.request_id = request_id
        super().__init__(f"[{code}] {message}")


class ConfigurationError(GitLabConnectorError):
    """Raised when connector configuration is invalid or missing."""

    def __init__(self, message: str) -> None:
        super().__init__("CONFIGURATION_ERROR", message)


class InvalidCursorError(GitLabConnectorError):
    """Raised when a pagination cursor is malformed or out of range."""

    def __init__(self, cursor: str, reason: str) -> None:
        super().__init__("INVALID_CURSOR", f"invalid cursor {cursor!r}: {reason}")
        self.cursor = cursor


class MalformedResourceIdError(GitLabConnectorError):
    """Raised when a composite resource id cannot be split into its parts."""

    def __init__(self, resource_id: str) -> None:
        super().__init__(
            "MALFORMED_RESOURCE_ID", f"invalid resource id: {resource_id}"
        )
        self.resource_id = resource_id


class UnknownPrincipalReferenceError(GitLabConnectorError):
    """Raised when a principal id is not a numeric GitLab user id."""

    def __init__(self, principal_id: str) -> None:
        super().__init__(
            "UNKNOWN_PRINCIPAL",
            f"error converting user ID to int: {principal_id!r}",
        )
        self.principal_id = principal_id


class RemoteRequestFailed(GitLabConnectorError):
    """Raised on transport errors or non-2xx responses from GitLab."""

    def __init__(
        self,
        code: str,
        message: str,
        status_code: int | None = None,
        request_id: str | None = None,
    ) -> None:
        super().__init__(code, message, request_id)
        self.status_code = status_code


class AuthenticationError(RemoteRequestFailed):
    """Raised when the access token is rejected (401)."""

    pass


class AuthorizationError(RemoteRequestFailed):
    """Raised when access is denied (403)."""

    pass


class NotFoundError(RemoteRequestFailed):
    """Raised when a resource is not found (404)."""

    pass


class ConflictError(RemoteRequestFailed):
    """Raised on conflicts, e.g. a member that already exists (409)."""

    pass


class RateLimitedError(RemoteRequestFailed):
    """Raised when rate limited (429)."""

    def __init__(
        self,
        code: str,
        message: str,
        retry_after: int,
        status_code: int | None = 429,
        request_id: str | None = None,
    ) -> None:
        super().__init__(code, message, status_code, request_id)
        self.retry_after = retry_after


class ValidationError(RemoteRequestFailed):
    """Raised on other client errors (4xx)."""

    pass


class ServerError(RemoteRequestFailed):
    """Raised on server errors (5xx) and connection failures."""

    pass
