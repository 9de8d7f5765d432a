"""Collaborators resource client."""

from typing import TYPE_CHECKING
from urllib.parse import quote

from maintainer_report.exceptions import NotFoundError
from maintainer_report.logging import get_logger
from maintainer_report.pagination import PER_PAGE, paginate
from maintainer_report.types.repos import Collaborator

if TYPE_CHECKING:
    from maintainer_report.transport import HTTPTransport

logger = get_logger()


class CollaboratorsClient:
    """Client for repository collaborator listings."""

    def __init__(self, transport: "HTTPTransport", per_page: int = PER_PAGE) -> None:
        """
        Initialize the collaborators client.

        Args:
            transport: HTTP transport for making requests
            per_page: Page size for list requests
        """
        self.transport = transport
        self.per_page = per_page

    def list_outside(self, org: str, repo: str) -> list[Collaborator]:
        """
        List the outside collaborators of a repository.

        A 404 means the repository is gone or the token cannot see its
        collaborators; it is logged and reported as no collaborators.

        Args:
            org: Organization login
            repo: Repository name

        Returns:
            Collaborators in API order

        Raises:
            FetchError: On any non-success response other than 404
        """
        path = f"/repos/{quote(org, safe='')}/{quote(repo, safe='')}/collaborators"
        try:
            data = paginate(
                self.transport,
                path,
                params={"affiliation": "outside"},
                per_page=self.per_page,
            )
        except NotFoundError as e:
            logger.warning(
                "No collaborator data for %s/%s (404 on page %s); treating as none",
                org,
                repo,
                e.page,
            )
            return []

        return [Collaborator.from_api(item) for item in data]
