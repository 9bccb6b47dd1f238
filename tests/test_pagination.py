"""Tests for page window coercion and the pagination descriptor."""

import pytest

from app.core.constants import MAX_PAGE_VALUE
from app.repositories.base.pagination import PageWindow, PaginatedResult, coerce_positive_int


@pytest.mark.parametrize(
    "raw, expected",
    [
        (None, 7),
        ("3", 3),
        (" 4 ", 4),
        ("abc", 7),
        ("0", 7),
        ("-2", 7),
        ("2.5", 7),
        (5, 5),
    ],
)
def test_coerce_positive_int(raw, expected):
    assert coerce_positive_int(raw, 7) == expected


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("99999999999999999999", MAX_PAGE_VALUE),
        (str(MAX_PAGE_VALUE + 1), MAX_PAGE_VALUE),
        (str(MAX_PAGE_VALUE), MAX_PAGE_VALUE),
        ("-99999999999999999999", 7),
    ],
)
def test_coerce_positive_int_clamps_large_values(raw, expected):
    assert coerce_positive_int(raw, 7) == expected


def test_coerce_positive_int_custom_maximum():
    assert coerce_positive_int("500", 7, maximum=100) == 100


def test_window_defaults():
    window = PageWindow.from_raw()
    assert window.page == 1
    assert window.limit == 25
    assert window.start_index == 0
    assert window.end_index == 25


def test_window_uses_configured_default_limit():
    assert PageWindow.from_raw(None, "nope", default_limit=10).limit == 10


def test_first_page_only_links_next():
    window = PageWindow.from_raw("1", "2")
    assert window.links(5) == {"next": {"page": 2, "limit": 2}}


def test_middle_page_links_both_ways():
    window = PageWindow.from_raw("2", "2")
    assert window.links(5) == {
        "next": {"page": 3, "limit": 2},
        "prev": {"page": 1, "limit": 2},
    }


def test_last_page_only_links_prev():
    window = PageWindow.from_raw("3", "2")
    assert window.links(5) == {"prev": {"page": 2, "limit": 2}}


def test_exact_fit_has_no_next():
    window = PageWindow.from_raw("1", "5")
    assert window.links(5) == {}


def test_empty_result_has_no_links():
    assert PageWindow().links(0) == {}


def test_paginated_result_counts_page_items():
    result = PaginatedResult(items=["a", "b"], total=9, window=PageWindow(page=1, limit=2))
    assert result.count == 2
    assert result.pagination == {"next": {"page": 2, "limit": 2}}
