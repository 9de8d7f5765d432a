"""
Maintainer report logging utilities.

Provides configurable logging for HTTP requests/responses and report progress.
Ensures the GitHub token is never logged.
"""

import logging
import re
from typing import Any

# Create package-specific loggers
_root_logger = logging.getLogger("maintainer_report")
_http_logger = logging.getLogger("maintainer_report.http")

# Patterns for credentials that should be masked
_SENSITIVE_PATTERNS = [
    # Authorization header values ("token ..." / "Bearer ...")
    (re.compile(r"\b(token|bearer)\s+[A-Za-z0-9_\-\.]{8,}", re.IGNORECASE), r"\1 [REDACTED]"),
    # GitHub personal access tokens
    (re.compile(r"\b(ghp|gho|ghu|ghs|ghr)_[A-Za-z0-9]{20,}"), "[TOKEN_REDACTED]"),
    (re.compile(r"\bgithub_pat_[A-Za-z0-9_]{20,}"), "[TOKEN_REDACTED]"),
]

_SENSITIVE_HEADERS = {"authorization", "cookie", "set-cookie"}

# Characters of a token shown in previews
_TOKEN_PREVIEW_LENGTH = 4


def configure_logging(
    level: int = logging.INFO,
    http_level: int | None = None,
    handler: logging.Handler | None = None,
    format_string: str | None = None,
) -> None:
    """
    Configure maintainer report logging.

    Args:
        level: Default log level for all package loggers (default: INFO)
        http_level: Log level for HTTP request/response logging (default: same as level)
        handler: Custom handler to use (default: StreamHandler to stderr)
        format_string: Custom format string (default: includes timestamp, level, logger name)

    Example:
        ```python
        import logging
        from maintainer_report.logging import configure_logging

        # Show every GitHub request
        configure_logging(level=logging.INFO, http_level=logging.DEBUG)
        ```
    """
    if format_string is None:
        format_string = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    formatter = logging.Formatter(format_string)

    if handler is None:
        handler = logging.StreamHandler()

    handler.setFormatter(formatter)

    # Replace handlers from an earlier call so repeated runs do not duplicate lines
    for existing in list(_root_logger.handlers):
        _root_logger.removeHandler(existing)

    _root_logger.setLevel(level)
    _root_logger.addHandler(handler)

    _http_logger.setLevel(http_level if http_level is not None else level)


def get_logger(name: str | None = None) -> logging.Logger:
    """
    Get a maintainer report logger.

    Args:
        name: Logger name suffix (e.g., "http", "report"). If None, returns the package logger.

    Returns:
        Logger instance
    """
    if name is None:
        return _root_logger
    return logging.getLogger(f"maintainer_report.{name}")


def mask_sensitive_data(text: str) -> str:
    """
    Mask credentials in a string.

    Args:
        text: Text that may contain a token

    Returns:
        Text with tokens masked
    """
    result = text
    for pattern, replacement in _SENSITIVE_PATTERNS:
        result = pattern.sub(replacement, result)
    return result


def mask_token(token: str | None) -> str:
    """
    Shorten a token for safe display.

    Returns only the last few characters, e.g. "****abcd".
    """
    if not token:
        return "[UNSET]"
    if len(token) <= _TOKEN_PREVIEW_LENGTH * 2:
        return "[REDACTED]"
    return f"****{token[-_TOKEN_PREVIEW_LENGTH:]}"


def safe_log_headers(headers: dict[str, str] | Any) -> dict[str, str]:
    """Copy request headers, masking credential-bearing ones."""
    result: dict[str, str] = {}
    for key, value in dict(headers).items():
        if key.lower() in _SENSITIVE_HEADERS:
            result[key] = "[REDACTED]"
        else:
            result[key] = value
    return result


def log_http_request(
    method: str,
    url: str,
    headers: dict[str, str] | None = None,
) -> None:
    """
    Log an HTTP request at DEBUG level with credentials masked.

    Args:
        method: HTTP method (GET, POST, etc.)
        url: Request URL
        headers: Request headers (optional)
    """
    if not _http_logger.isEnabledFor(logging.DEBUG):
        return

    log_parts = [f"{method} {mask_sensitive_data(url)}"]

    if headers:
        log_parts.append(f"headers={safe_log_headers(headers)}")

    _http_logger.debug(" | ".join(log_parts))


def log_http_response(
    status_code: int,
    url: str,
    item_count: int | None = None,
    elapsed_ms: float | None = None,
) -> None:
    """
    Log an HTTP response at DEBUG level.

    Args:
        status_code: HTTP status code
        url: Request URL
        item_count: Number of items in a list response (optional)
        elapsed_ms: Request duration in milliseconds (optional)
    """
    if not _http_logger.isEnabledFor(logging.DEBUG):
        return

    log_parts = [f"Response {status_code} from {mask_sensitive_data(url)}"]

    if elapsed_ms is not None:
        log_parts.append(f"elapsed={elapsed_ms:.2f}ms")

    if item_count is not None:
        log_parts.append(f"items={item_count}")

    _http_logger.debug(" | ".join(log_parts))


# Export public API
__all__ = [
    "configure_logging",
    "get_logger",
    "mask_sensitive_data",
    "mask_token",
    "safe_log_headers",
    "log_http_request",
    "log_http_response",
]
