"""
GitHub API client for the maintainer report.

Aggregates the resource clients over one HTTP transport.
"""

from typing import Any

import httpx

from maintainer_report.clients import CollaboratorsClient, IssuesClient, ReposClient
from maintainer_report.config import ReportConfig
from maintainer_report.pagination import PER_PAGE
from maintainer_report.transport import HTTPTransport


class GitHubClient:
    """
    Client for the GitHub endpoints the report reads.

    Example:
        ```python
        from maintainer_report import GitHubClient, ReportConfig

        config = ReportConfig.from_env()
        with GitHubClient.from_config(config) as client:
            repos = client.repos.list_public(config.org)
            for repo in repos:
                client.collaborators.list_outside(config.org, repo.name)
        ```
    """

    DEFAULT_BASE_URL = "https://api.github.com"
    DEFAULT_TIMEOUT = 30.0

    def __init__(
        self,
        token: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float | None = DEFAULT_TIMEOUT,
        per_page: int = PER_PAGE,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """
        Initialize the GitHub client.

        Args:
            token: GitHub token
            base_url: Base URL for API requests (default: https://api.github.com)
            timeout: Request timeout in seconds (default: 30.0)
            per_page: Page size for list requests (default: 100)
            transport: Optional httpx transport, e.g. ``httpx.MockTransport`` in tests
        """
        self.base_url = base_url
        self.timeout = timeout

        self._transport = HTTPTransport(
            base_url=base_url,
            token=token,
            timeout=timeout,
            transport=transport,
        )

        self.repos = ReposClient(self._transport, per_page)
        self.collaborators = CollaboratorsClient(self._transport, per_page)
        self.issues = IssuesClient(self._transport, per_page)

    @classmethod
    def from_config(
        cls,
        config: ReportConfig,
        transport: httpx.BaseTransport | None = None,
    ) -> "GitHubClient":
        """
        Create a client from a report configuration.

        Args:
            config: Validated report configuration
            transport: Optional httpx transport

        Returns:
            Configured GitHubClient instance
        """
        return cls(
            token=config.token,
            base_url=config.base_url,
            timeout=config.timeout,
            per_page=config.per_page,
            transport=transport,
        )

    @property
    def transport(self) -> HTTPTransport:
        """Get the underlying HTTP transport."""
        return self._transport

    def close(self) -> None:
        """Close the client and release resources."""
        self._transport.close()

    def __enter__(self) -> "GitHubClient":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()
