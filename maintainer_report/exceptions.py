"""Maintainer report exception classes."""



class MaintainerReportError(Exception):
    """Base exception for all maintainer report errors."""

    def __init__(self, code: str, message: str) -> None:
        self.code = code
        self.message = message
        super().__init__(f"[{code}] {message}")


class ConfigurationError(MaintainerReportError):
    """Raised when configuration is invalid or missing."""

    def __init__(self, message: str) -> None:
        super().__init__("CONFIGURATION_ERROR", message)


class FetchError(MaintainerReportError):
    """Raised when a GitHub API request does not succeed."""

    def __init__(
        self,
        code: str,
        message: str,
        status_code: int = 0,
        url: str | None = None,
        page: int | None = None,
    ) -> None:
        super().__init__(code, message)
        self.status_code = status_code
        self.url = url
        self.page = page

    def __str__(self) -> str:
        text = super().__str__()
        if self.page is not None:
            text = f"{text} (page {self.page})"
        return text


class AuthenticationError(FetchError):
    """Raised when the token is rejected (401)."""

    pass


class AuthorizationError(FetchError):
    """Raised when the token lacks access (403)."""

    pass


class NotFoundError(FetchError):
    """Raised when a resource is not found (404)."""

    pass


class RateLimitedError(FetchError):
    """Raised when the API rate limit is exhausted."""

    def __init__(
        self,
        code: str,
        message: str,
        status_code: int,
        reset_at: int | None = None,
        url: str | None = None,
        page: int | None = None,
    ) -> None:
        super().__init__(code, message, status_code, url, page)
        self.reset_at = reset_at


class ServerError(FetchError):
    """Raised on server errors (5xx)."""

    pass
