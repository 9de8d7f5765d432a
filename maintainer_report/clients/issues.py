"""Issues resource client."""

from typing import TYPE_CHECKING, Any
from urllib.parse import quote

from maintainer_report.pagination import PER_PAGE, paginate
from maintainer_report.types.issues import Issue

if TYPE_CHECKING:
    from maintainer_report.transport import HTTPTransport


def _is_issue(item: dict[str, Any]) -> bool:
    """Pull requests come back from the issues endpoint with a pull_request object."""
    return item.get("pull_request") is None


class IssuesClient:
    """Client for repository issue listings."""

    def __init__(self, transport: "HTTPTransport", per_page: int = PER_PAGE) -> None:
        """
        Initialize the issues client.

        Args:
            transport: HTTP transport for making requests
            per_page: Page size for list requests
        """
        self.transport = transport
        self.per_page = per_page

    def list_open(self, org: str, repo: str) -> list[Issue]:
        """
        List the open issues of a repository, without pull requests.

        Args:
            org: Organization login
            repo: Repository name

        Returns:
            Open issues in API order

        Raises:
            FetchError: On any non-success response
        """
        data = paginate(
            self.transport,
            f"/repos/{quote(org, safe='')}/{quote(repo, safe='')}/issues",
            params={"state": "open"},
            per_page=self.per_page,
            predicate=_is_issue,
        )
        return [Issue.from_api(item) for item in data]
