"""Unit tests for paginator arithmetic."""

import pytest
from pydantic import ValidationError

from pagelinks.core.pagination import Paginator, compute


@pytest.mark.parametrize(
    "total,page,per_page,expected",
    [
        # middle page
        (100, 5, 10, dict(per_page=10, current_page=5, total_pages=10, offset=40, item_count=10,
                          has_previous=True, has_next=True, prev_page=4, next_page=6)),
        # first page
        (23, 1, 5, dict(per_page=5, current_page=1, total_pages=5, offset=0, item_count=5,
                        has_previous=False, has_next=True, prev_page=0, next_page=2)),
        # partial last page
        (23, 5, 5, dict(per_page=5, current_page=5, total_pages=5, offset=20, item_count=3,
                        has_previous=True, has_next=False, prev_page=4, next_page=0)),
        # page past the end is clamped
        (12, 99, 5, dict(per_page=5, current_page=3, total_pages=3, offset=10, item_count=2,
                         has_previous=True, has_next=False, prev_page=2, next_page=0)),
        # page below 1 is clamped
        (12, 0, 5, dict(per_page=5, current_page=1, total_pages=3, offset=0, item_count=5,
                        has_previous=False, has_next=True, prev_page=0, next_page=2)),
        # per_page falls back to 10
        (25, 1, 0, dict(per_page=10, current_page=1, total_pages=3, offset=0, item_count=10,
                        has_previous=False, has_next=True, prev_page=0, next_page=2)),
        # exact multiple: last page is full
        (30, 3, 10, dict(per_page=10, current_page=3, total_pages=3, offset=20, item_count=10,
                         has_previous=True, has_next=False, prev_page=2, next_page=0)),
    ],
)
def test_compute(total, page, per_page, expected):
    p = compute(total, page, per_page)
    assert p.model_dump(exclude={"total_items"}) == expected
    assert p.total_items == total


@pytest.mark.parametrize("total", [0, -7])
def test_empty_collection_is_single_empty_page(total):
    p = compute(total, 5, 10)
    assert p.total_items == 0
    assert p.total_pages == 1
    assert p.current_page == 1
    assert p.offset == 0
    assert p.item_count == 0
    assert not p.has_previous and not p.has_next
    assert p.prev_page == 0 and p.next_page == 0


def test_empty_collection_still_normalizes_per_page():
    assert compute(0, 1, -3).per_page == 10


def test_invariants_hold_across_inputs():
    for total in range(1, 60):
        for per_page in (1, 3, 7, 10):
            for page in (-1, 1, 2, 5, 100):
                p = compute(total, page, per_page)
                assert p.total_pages == -(-total // per_page)
                assert 1 <= p.current_page <= p.total_pages
                assert 0 <= p.offset < total
                last = compute(total, p.total_pages, per_page)
                assert last.item_count + per_page * (last.total_pages - 1) == total


def test_paginator_is_frozen():
    p = compute(10, 1, 5)
    with pytest.raises(ValidationError):
        p.current_page = 2


def test_slice_returns_items_on_page():
    items = list(range(23))
    assert Paginator.compute(23, 2, 10).slice(items) == list(range(10, 20))
    assert Paginator.compute(23, 3, 10).slice(items) == [20, 21, 22]
    assert Paginator.compute(0, 1, 10).slice([]) == []
