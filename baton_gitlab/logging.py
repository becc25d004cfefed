"""
baton-gitlab logging utilities.

Provides configurable logging for HTTP requests/responses and connector
operations. Ensures access tokens are never written to the logs.
"""

import logging
import re
from typing import Any

# Create connector-specific loggers
_sdk_logger = logging.getLogger("baton_gitlab")
_http_logger = logging.getLogger("baton_gitlab.http")
_connector_logger = logging.getLogger("baton_gitlab.connector")

# Patterns for sensitive data that should be masked
_SENSITIVE_PATTERNS = [
    # GitLab personal/project/group access tokens
    (re.compile(r"\bglpat-[A-Za-z0-9_\-]{20,}"), "[TOKEN_REDACTED]"),
    # Authorization headers
    (re.compile(r"(Bearer)\s+[A-Za-z0-9._\-]+", re.IGNORECASE), r"\1 [REDACTED]"),
    # PRIVATE-TOKEN header rendered as key/value
    (re.compile(r"(private-token)['\"]?\s*[:=]\s*['\"]?[^'\",\s}]+['\"]?", re.IGNORECASE), r"\1: [REDACTED]"),
    # Secret/token patterns
    (re.compile(r"(secret|token|password|access_token)['\"]?\s*[:=]\s*['\"][^'\"]+['\"]", re.IGNORECASE), r"\1: [REDACTED]"),
]

_DEFAULT_SENSITIVE_KEYS = {
    "private-token",
    "authorization",
    "secret",
    "token",
    "password",
}


def configure_logging(
    level: int = logging.INFO,
    http_level: int | None = None,
    connector_level: int | None = None,
    handler: logging.Handler | None = None,
    format_string: str | None = None,
) -> None:
    """
    Configure connector logging.

    Args:
        level: Default log level for all connector loggers (default: INFO)
        http_level: Log level for HTTP request/response logging (default: same as level)
        connector_level: Log level for resource sync and mutations (default: same as level)
        handler: Custom handler to use (default: StreamHandler to stderr)
        format_string: Custom format string (default: includes timestamp, level, logger name)

    Example:
        ```python
        import logging
        from baton_gitlab.logging import configure_logging

        # Trace every GitLab API call
        configure_logging(level=logging.INFO, http_level=logging.DEBUG)
        ```
    """
    if format_string is None:
        format_string = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    formatter = logging.Formatter(format_string)

    if handler is None:
        handler = logging.StreamHandler()

    handler.setFormatter(formatter)

    _sdk_logger.setLevel(level)
    _sdk_logger.addHandler(handler)

    _http_logger.setLevel(http_level if http_level is not None else level)
    _connector_logger.setLevel(
        connector_level if connector_level is not None else level
    )


def get_logger(name: str | None = None) -> logging.Logger:
    """
    Get a connector logger.

    Args:
        name: Logger name suffix (e.g., "http", "connector"). If None, returns the main logger.

    Returns:
        Logger instance
    """
    if name is None:
        return _sdk_logger
    return logging.getLogger(f"baton_gitlab.{name}")


def mask_sensitive_data(text: str) -> str:
    """
    Mask access tokens and other credentials in a string.

    Args:
        text: Text that may contain sensitive data

    Returns:
        Text with sensitive data masked
    """
    result = text
    for pattern, replacement in _SENSITIVE_PATTERNS:
        result = pattern.sub(replacement, result)
    return result


def safe_log_dict(data: dict[str, Any], sensitive_keys: set[str] | None = None) -> dict[str, Any]:
    """
    Create a copy of a dictionary with sensitive values masked.

    Args:
        data: Dictionary that may contain sensitive values
        sensitive_keys: Set of keys to mask (default: private-token, authorization, secret, token, password)

    Returns:
        Dictionary with sensitive values replaced with "[REDACTED]"
    """
    if sensitive_keys is None:
        sensitive_keys = _DEFAULT_SENSITIVE_KEYS

    result: dict[str, Any] = {}
    for key, value in data.items():
        key_lower = str(key).lower()
        if key_lower in sensitive_keys or any(sk in key_lower for sk in sensitive_keys):
            result[key] = "[REDACTED]"
        elif isinstance(value, dict):
            result[key] = safe_log_dict(value, sensitive_keys)
        elif isinstance(value, list):
            result[key] = [
                safe_log_dict(item, sensitive_keys) if isinstance(item, dict) else item
                for item in value
            ]
        else:
            result[key] = value

    return result


def log_http_request(
    method: str,
    url: str,
    headers: dict[str, str] | None = None,
    params: dict[str, Any] | None = None,
    body: dict[str, Any] | None = None,
) -> None:
    """
    Log an HTTP request at DEBUG level with sensitive data masked.

    Args:
        method: HTTP method (GET, POST, etc.)
        url: Request URL
        headers: Request headers (optional)
        params: Query parameters (optional)
        body: Request body (optional)
    """
    if not _http_logger.isEnabledFor(logging.DEBUG):
        return

    log_parts = [f"{method} {url}"]

    if headers:
        log_parts.append(f"headers={safe_log_dict(headers)}")

    if params:
        log_parts.append(f"params={safe_log_dict(params)}")

    if body:
        log_parts.append(f"body={safe_log_dict(body)}")

    _http_logger.debug(mask_sensitive_data(" | ".join(log_parts)))


def log_http_response(
    status_code: int,
    url: str,
    next_page: int | None = None,
    elapsed_ms: float | None = None,
) -> None:
    """
    Log an HTTP response at DEBUG level.

    Args:
        status_code: HTTP status code
        url: Request URL
        next_page: Value of the X-Next-Page header, if any
        elapsed_ms: Request duration in milliseconds (optional)
    """
    if not _http_logger.isEnabledFor(logging.DEBUG):
        return

    log_parts = [f"Response {status_code} from {url}"]

    if elapsed_ms is not None:
        log_parts.append(f"elapsed={elapsed_ms:.2f}ms")

    if next_page:
        log_parts.append(f"next_page={next_page}")

    _http_logger.debug(mask_sensitive_data(" | ".join(log_parts)))


__all__ = [
    "configure_logging",
    "get_logger",
    "mask_sensitive_data",
    "safe_log_dict",
    "log_http_request",
    "log_http_response",
]
