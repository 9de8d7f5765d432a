"""
Property-based tests for page-number pagination.

Feature: maintainer-report
"""

import math
from typing import Any
from unittest.mock import MagicMock

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from maintainer_report.exceptions import FetchError, NotFoundError
from maintainer_report.pagination import paginate


def make_transport(items: list[Any], per_page: int) -> MagicMock:
    """Transport stub serving ``items`` in pages of ``per_page``."""
    transport = MagicMock()

    def get_json(path: str, params: dict[str, Any], page: int) -> list[Any]:
        assert params["page"] == page
        start = (page - 1) * per_page
        return items[start:start + per_page]

    transport.get_json.side_effect = get_json
    return transport


def expected_request_count(total: int, per_page: int) -> int:
    if total == 0:
        return 1
    if total % per_page == 0:
        # The last full page is followed by an empty one
        return total // per_page + 1
    return math.ceil(total / per_page)


@given(
    total=st.integers(min_value=0, max_value=350),
    per_page=st.integers(min_value=1, max_value=100),
)
@settings(max_examples=100)
def test_paginate_returns_all_items_in_order(total: int, per_page: int) -> None:
    """
    For N items and page size P, every item is returned once, in order,
    after the expected number of page requests.
    """
    items = [{"id": i} for i in range(total)]
    transport = make_transport(items, per_page)

    result = paginate(transport, "/things", per_page=per_page)

    assert result == items
    assert transport.get_json.call_count == expected_request_count(total, per_page)


@given(
    full_pages=st.integers(min_value=0, max_value=3),
    last_page=st.integers(min_value=1, max_value=99),
)
@settings(max_examples=50)
def test_short_page_is_last_page(full_pages: int, last_page: int) -> None:
    """A page with fewer items than the page size ends the walk, even if non-empty."""
    items = [{"id": i} for i in range(full_pages * 100 + last_page)]
    transport = make_transport(items, 100)

    paginate(transport, "/things", per_page=100)

    assert transport.get_json.call_count == full_pages + 1


def test_predicate_does_not_end_walk_early() -> None:
    """A full raw page is followed by another request even if filtering shrinks it."""
    first = [{"id": i, "keep": i % 5 < 2} for i in range(100)]  # 40 kept, 60 dropped
    second = [{"id": 100 + i, "keep": True} for i in range(3)]
    transport = make_transport(first + second, 100)

    result = paginate(transport, "/things", predicate=lambda item: item["keep"])

    assert len(result) == 43
    assert transport.get_json.call_count == 2


def test_params_are_sent_with_every_page() -> None:
    transport = make_transport([{"id": i} for i in range(150)], 100)

    paginate(transport, "/things", params={"state": "open"})

    pages = [c.kwargs["params"] for c in transport.get_json.call_args_list]
    assert pages == [
        {"state": "open", "per_page": 100, "page": 1},
        {"state": "open", "per_page": 100, "page": 2},
    ]


def test_error_on_later_page_propagates() -> None:
    transport = MagicMock()
    transport.get_json.side_effect = [
        [{"id": i} for i in range(100)],
        NotFoundError("NOT_FOUND", "gone", 404, page=2),
    ]

    with pytest.raises(NotFoundError) as exc_info:
        paginate(transport, "/things")

    assert exc_info.value.page == 2


def test_non_list_body_is_rejected() -> None:
    transport = MagicMock()
    transport.get_json.return_value = {"message": "not a list"}

    with pytest.raises(FetchError) as exc_info:
        paginate(transport, "/things")

    assert exc_info.value.code == "UNEXPECTED_RESPONSE"
    assert exc_info.value.page == 1
