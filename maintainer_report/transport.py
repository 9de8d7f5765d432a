"""
HTTP Transport for the maintainer report.

Handles HTTP communication with the GitHub REST API, authentication headers
and error handling. Requests are never retried.
"""

import time
from typing import Any

import httpx

from maintainer_report.exceptions import (
    AuthenticationError,
    AuthorizationError,
    FetchError,
    NotFoundError,
    RateLimitedError,
    ServerError,
)
from maintainer_report.logging import log_http_request, log_http_response

GITHUB_ACCEPT = "application/vnd.github.v3+json"


class HTTPTransport:
    """
    HTTP transport layer bound to one GitHub API base URL.

    Handles:
    - Token authentication and the v3 Accept header on every request
    - Error response parsing into typed exceptions
    - Request/response debug logging with the token masked
    """

    def __init__(
        self,
        base_url: str,
        token: str,
        timeout: float | None = 30.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """
        Initialize HTTP transport.

        Args:
            base_url: Base URL for API requests (e.g., "https://api.github.com")
            token: GitHub token sent as ``Authorization: token <token>``
            timeout: Request timeout in seconds; None, 0 or negative disables it
            transport: Optional httpx transport (used by tests to serve canned responses)
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout if timeout and timeout > 0 else None

        self._client = httpx.Client(
            base_url=self.base_url,
            timeout=self.timeout,
            headers={
                "Authorization": f"token {token}",
                "Accept": GITHUB_ACCEPT,
            },
            transport=transport,
            follow_redirects=True,
        )

    def close(self) -> None:
        """Close the HTTP client."""
        self._client.close()

    def __enter__(self) -> "HTTPTransport":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def get_json(
        self,
        path: str,
        params: dict[str, Any] | None = None,
        page: int | None = None,
    ) -> Any:
        """
        Make a GET request and return the decoded JSON body.

        Args:
            path: API path (e.g., "/orgs/acme/repos")
            params: Query parameters
            page: Page number, attached to any raised error

        Returns:
            Parsed JSON response

        Raises:
            FetchError: On transport failures and non-2xx responses
        """
        request = self._client.build_request("GET", path, params=params)
        log_http_request(request.method, str(request.url), dict(request.headers))

        started = time.monotonic()
        try:
            response = self._client.send(request)
        except httpx.RequestError as e:
            raise FetchError(
                "CONNECTION_ERROR", str(e), url=str(request.url), page=page
            ) from e
        elapsed_ms = (time.monotonic() - started) * 1000

        if not response.is_success:
            log_http_response(response.status_code, str(request.url), elapsed_ms=elapsed_ms)
            raise self._parse_error_response(response, page)

        try:
            data = response.json()
        except ValueError as e:
            raise FetchError(
                "UNEXPECTED_RESPONSE",
                f"Response from {request.url} is not valid JSON",
                response.status_code,
                str(request.url),
                page,
            ) from e

        log_http_response(
            response.status_code,
            str(request.url),
            item_count=len(data) if isinstance(data, list) else None,
            elapsed_ms=elapsed_ms,
        )
        return data

    def _parse_error_response(
        self, response: httpx.Response, page: int | None
    ) -> FetchError:
        """
        Parse an error response into a typed exception.

        Args:
            response: HTTP response with error status
            page: Page number of the failed request

        Returns:
            Appropriate FetchError subclass
        """
        try:
            data = response.json()
        except ValueError:
            data = {}
        if not isinstance(data, dict):
            data = {}

        status_code = response.status_code
        url = str(response.request.url)
        api_message = data.get("message") or response.reason_phrase or "request failed"
        message = f"GET {url} failed with status {status_code}: {api_message}"

        if status_code == 429 or (
            status_code == 403 and response.headers.get("X-RateLimit-Remaining") == "0"
        ):
            reset_str = response.headers.get("X-RateLimit-Reset")
            try:
                reset_at = int(reset_str) if reset_str is not None else None
            except ValueError:
                reset_at = None
            return RateLimitedError("RATE_LIMITED", message, status_code, reset_at, url, page)
        elif status_code == 401:
            return AuthenticationError("UNAUTHORIZED", message, status_code, url, page)
        elif status_code == 403:
            return AuthorizationError("FORBIDDEN", message, status_code, url, page)
        elif status_code == 404:
            return NotFoundError("NOT_FOUND", message, status_code, url, page)
        elif status_code >= 500:
            return ServerError("SERVER_ERROR", message, status_code, url, page)
        else:
            return FetchError("HTTP_ERROR", message, status_code, url, page)
