"""
HTTP Transport for baton-gitlab.

Handles HTTP communication with the GitLab REST API: token authentication,
pagination headers, automatic retry on rate limits and server errors, and
mapping of error responses onto typed exceptions.
"""

import random
import time
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

import httpx

from baton_gitlab.exceptions import (
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    GitLabConnectorError,
    NotFoundError,
    RateLimitedError,
    RemoteRequestFailed,
    ServerError,
    ValidationError,
)
from baton_gitlab.logging import log_http_request, log_http_response

API_PREFIX = "/api/v4"


@dataclass
class RetryConfig:
    """Configuration for automatic retry behavior."""

    max_retries: int = 3
    backoff_factor: float = 2.0
    retry_on: list[int] = field(default_factory=lambda: [429, 500, 502, 503])
    respect_retry_after: bool = True
    max_backoff: float = 60.0  # Maximum backoff time in seconds
    jitter: float = 0.1  # Jitter factor (0.1 = ±10%)


@dataclass(frozen=True)
class TransportResponse:
    """A successful GitLab API response with its pagination metadata."""

    status_code: int
    data: Any
    headers: dict[str, str]

    @property
    def next_page(self) -> int | None:
        """Next page number from the X-Next-Page header, None on the last page."""
        return _int_header(self.headers, "x-next-page")

    @property
    def total_pages(self) -> int | None:
        return _int_header(self.headers, "x-total-pages")

    @property
    def total_items(self) -> int | None:
        return _int_header(self.headers, "x-total")


def _int_header(headers: dict[str, str], name: str) -> int | None:
    value = headers.get(name, "").strip()
    if not value:
        return None
    try:
        number = int(value)
    except ValueError as e:
        raise RemoteRequestFailed(
            "INVALID_PAGINATION_HEADER",
            f"{name} header is not a number: {value!r}",
        ) from e
    return number or None


class HTTPTransport:
    """
    HTTP transport layer for the GitLab REST API.

    Handles:
    - PRIVATE-TOKEN authentication
    - Exponential backoff with jitter for retries
    - Retry-After header respect for rate limiting
    - Error response parsing into typed exceptions
    """

    def __init__(
        self,
        base_url: str,
        access_token: str,
        timeout: float = 30.0,
        retry_config: RetryConfig | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """
        Initialize HTTP transport.

        Args:
            base_url: GitLab instance URL (e.g., "https://gitlab.com/")
            access_token: Personal, group or project access token
            timeout: Request timeout in seconds
            retry_config: Configuration for retry behavior
            transport: Optional httpx transport (used by tests to serve a fake GitLab)
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.retry_config = retry_config or RetryConfig()

        self._client = httpx.Client(
            base_url=self.base_url + API_PREFIX,
            timeout=timeout,
            headers={
                "Accept": "application/json",
                "PRIVATE-TOKEN": access_token,
            },
            transport=transport,
        )

    def close(self) -> None:
        """Close the HTTP client."""
        self._client.close()

    def __enter__(self) -> "HTTPTransport":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def request(
        self,
        method: str,
        path: str,
        params: dict[str, Any] | None = None,
        body: dict[str, Any] | None = None,
    ) -> TransportResponse:
        """
        Make an authenticated request with automatic retry.

        Args:
            method: HTTP method
            path: API path relative to /api/v4 (e.g., "/groups")
            params: Query parameters
            body: JSON request body (for POST/PUT)

        Returns:
            TransportResponse with parsed JSON data and response headers

        Raises:
            RemoteRequestFailed: On transport errors or non-2xx responses
        """
        def make_request() -> httpx.Response:
            log_http_request(
                method,
                f"{self._client.base_url}{path.lstrip('/')}",
                headers=dict(self._client.headers),
                params=params,
                body=body,
            )
            return self._client.request(method, path, params=params, json=body)

        return self._execute_with_retry(make_request)

    def _execute_with_retry(
        self, request_fn: Callable[[], httpx.Response]
    ) -> TransportResponse:
        """
        Execute a request with automatic retry on retryable errors.

        Args:
            request_fn: Function that makes the HTTP request

        Returns:
            TransportResponse for the first successful attempt

        Raises:
            RemoteRequestFailed: On non-retryable errors or after max retries
        """
        last_error: Exception | None = None

        for attempt in range(self.retry_config.max_retries + 1):
            try:
                response = request_fn()

                log_http_response(
                    response.status_code,
                    str(response.request.url),
                    next_page=response.headers.get("x-next-page") or None,
                    elapsed_ms=_elapsed_ms(response),
                )

                if 200 <= response.status_code < 300:
                    return TransportResponse(
                        status_code=response.status_code,
                        data=_parse_body(response),
                        headers={k.lower(): v for k, v in response.headers.items()},
                    )

                error = self._parse_error_response(response)

                if not self._should_retry(response.status_code, attempt):
                    raise error

                last_error = error

                retry_after = response.headers.get("Retry-After")
                wait_time = self._get_backoff_time(attempt, retry_after)
                time.sleep(wait_time)

            except httpx.RequestError as e:
                # Network errors are retryable
                if attempt >= self.retry_config.max_retries:
                    raise ServerError("CONNECTION_ERROR", str(e)) from e

                last_error = e
                wait_time = self._get_backoff_time(attempt, None)
                time.sleep(wait_time)

        if last_error:
            if isinstance(last_error, GitLabConnectorError):
                raise last_error
            raise ServerError("MAX_RETRIES_EXCEEDED", str(last_error))

        raise ServerError("UNKNOWN_ERROR", "Request failed with no error details")

    def _should_retry(self, status_code: int, attempt: int) -> bool:
        """
        Determine if a request should be retried.

        Args:
            status_code: HTTP status code
            attempt: Current attempt number (0-indexed)

        Returns:
            True if the request should be retried
        """
        if attempt >= self.retry_config.max_retries:
            return False

        return status_code in self.retry_config.retry_on

    def _get_backoff_time(
        self, attempt: int, retry_after: str | None
    ) -> float:
        """
        Calculate backoff time for retry.

        Uses exponential backoff with jitter, respecting Retry-After header
        if present. Both are capped at max_backoff.

        Args:
            attempt: Current attempt number (0-indexed)
            retry_after: Value of Retry-After header (if present)

        Returns:
            Time to wait in seconds
        """
        if retry_after and self.retry_config.respect_retry_after:
            try:
                return min(float(retry_after), self.retry_config.max_backoff)
            except ValueError:
                pass  # Fall through to exponential backoff

        base_wait = self.retry_config.backoff_factor ** attempt

        jitter_range = base_wait * self.retry_config.jitter
        jitter = random.uniform(-jitter_range, jitter_range)
        wait_time = base_wait + jitter

        return min(wait_time, self.retry_config.max_backoff)

    def _parse_error_response(self, response: httpx.Response) -> RemoteRequestFailed:
        """
        Parse a GitLab error response into a typed exception.

        GitLab reports errors as {"message": ...} or {"error": ...}, where
        message may itself be a mapping of field names to problems.

        Args:
            response: HTTP response with error status

        Returns:
            Appropriate RemoteRequestFailed subclass
        """
        try:
            data = response.json()
        except ValueError:
            data = {}
        if not isinstance(data, dict):
            data = {}

        status_code = response.status_code
        message = data.get("message") or data.get("error") or f"HTTP {status_code}"
        if not isinstance(message, str):
            message = str(message)
        code = f"HTTP_{status_code}"
        request_id = response.headers.get("X-Request-Id")

        if status_code == 401:
            return AuthenticationError(code, message, status_code, request_id)
        elif status_code == 403:
            return AuthorizationError(code, message, status_code, request_id)
        elif status_code == 404:
            return NotFoundError(code, message, status_code, request_id)
        elif status_code == 409:
            return ConflictError(code, message, status_code, request_id)
        elif status_code == 429:
            retry_after_str = response.headers.get("Retry-After", "60")
            try:
                retry_after = int(retry_after_str)
            except ValueError:
                retry_after = 60
            return RateLimitedError(code, message, retry_after, status_code, request_id)
        elif status_code >= 500:
            return ServerError(code, message, status_code, request_id)
        elif status_code >= 400:
            return ValidationError(code, message, status_code, request_id)
        else:
            return RemoteRequestFailed(code, message, status_code, request_id)


def _parse_body(response: httpx.Response) -> Any:
    if response.status_code == 204 or not response.content:
        return None
    try:
        return response.json()
    except ValueError as e:
        raise RemoteRequestFailed(
            "UNEXPECTED_RESPONSE",
            "response body is not valid JSON",
            response.status_code,
        ) from e


def _elapsed_ms(response: httpx.Response) -> float | None:
    try:
        return response.elapsed.total_seconds() * 1000
    except RuntimeError:
        return None
