"""Page-number pagination over GitHub list endpoints."""

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from maintainer_report.exceptions import FetchError

if TYPE_CHECKING:
    from maintainer_report.transport import HTTPTransport

PER_PAGE = 100


def paginate(
    transport: "HTTPTransport",
    path: str,
    params: dict[str, Any] | None = None,
    per_page: int = PER_PAGE,
    predicate: Callable[[dict[str, Any]], bool] | None = None,
) -> list[dict[str, Any]]:
    """
    Fetch every page of a list endpoint.

    Requests ``page=1, 2, ...`` until a page comes back empty or shorter than
    ``per_page``. The short-page check counts raw items, before ``predicate``
    is applied, so filtering never ends the walk early.

    Args:
        transport: HTTP transport to send requests through
        path: API path of the list endpoint
        params: Extra query parameters sent with every page
        per_page: Page size to request
        predicate: Keeps only the items it returns True for (all items when None)

    Returns:
        Accumulated items in response order

    Raises:
        FetchError: On any failed page, or a page body that is not a JSON array
    """
    items: list[dict[str, Any]] = []
    page = 1

    while True:
        query = dict(params or {})
        query["per_page"] = per_page
        query["page"] = page

        batch = transport.get_json(path, params=query, page=page)
        if not isinstance(batch, list):
            raise FetchError(
                "UNEXPECTED_RESPONSE",
                f"Expected a JSON array from {path}, got {type(batch).__name__}",
                page=page,
            )

        if not batch:
            break

        if predicate is None:
            items.extend(batch)
        else:
            items.extend(item for item in batch if predicate(item))

        # A short page is the final page
        if len(batch) < per_page:
            break

        page += 1

    return items
