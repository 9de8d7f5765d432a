"""Repositories resource client."""

from collections.abc import Iterable
from typing import TYPE_CHECKING
from urllib.parse import quote

from maintainer_report.pagination import PER_PAGE, paginate
from maintainer_report.types.repos import Repository

if TYPE_CHECKING:
    from maintainer_report.transport import HTTPTransport


class ReposClient:
    """Client for organization repository listings."""

    def __init__(self, transport: "HTTPTransport", per_page: int = PER_PAGE) -> None:
        """
        Initialize the repos client.

        Args:
            transport: HTTP transport for making requests
            per_page: Page size for list requests
        """
        self.transport = transport
        self.per_page = per_page

    def list_public(self, org: str, exclude: Iterable[str] = ()) -> list[Repository]:
        """
        List every public repository of an organization.

        Args:
            org: Organization login
            exclude: Repository names to leave out (e.g. ".github")

        Returns:
            Repositories in API order, minus the excluded names

        Raises:
            FetchError: On any non-success response
        """
        excluded = set(exclude)
        data = paginate(
            self.transport,
            f"/orgs/{quote(org, safe='')}/repos",
            params={"type": "public"},
            per_page=self.per_page,
        )
        repos = [Repository.from_api(item) for item in data]
        return [repo for repo in repos if repo.name not in excluded]
