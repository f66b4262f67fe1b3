"""Pagination arithmetic."""

from typing import Sequence, TypeVar

from pydantic import BaseModel, ConfigDict

T = TypeVar("T")

DEFAULT_PER_PAGE = 10


class Paginator(BaseModel):
    """Page counts, offset and neighbours for one page of a collection.

    Built once by `compute` and frozen afterwards. `prev_page`/`next_page`
    are 0 when there is no such page.
    """

    model_config = ConfigDict(frozen=True)

    per_page: int
    current_page: int
    total_items: int

    total_pages: int
    offset: int
    item_count: int
    has_previous: bool
    has_next: bool
    prev_page: int
    next_page: int

    @classmethod
    def compute(cls, total_items: int, current_page: int, per_page: int) -> "Paginator":
        """Normalize the raw inputs and derive every field.

        Invalid input never raises: `per_page <= 0` falls back to 10, an
        empty collection yields a single empty page and `current_page` is
        clamped into `[1, total_pages]`.
        """
        if per_page <= 0:
            per_page = DEFAULT_PER_PAGE
        if total_items <= 0:
            return cls(
                per_page=per_page,
                current_page=1,
                total_items=0,
                total_pages=1,
                offset=0,
                item_count=0,
                has_previous=False,
                has_next=False,
                prev_page=0,
                next_page=0,
            )

        total_pages = (total_items + per_page - 1) // per_page
        current_page = max(1, min(current_page, total_pages))
        if current_page < total_pages:
            item_count = per_page
        else:
            item_count = total_items - per_page * (total_pages - 1)
        has_previous = current_page > 1
        has_next = current_page < total_pages
        return cls(
            per_page=per_page,
            current_page=current_page,
            total_items=total_items,
            total_pages=total_pages,
            offset=(current_page - 1) * per_page,
            item_count=item_count,
            has_previous=has_previous,
            has_next=has_next,
            prev_page=current_page - 1 if has_previous else 0,
            next_page=current_page + 1 if has_next else 0,
        )

    def slice(self, items: Sequence[T]) -> Sequence[T]:
        """Return the part of an in-memory sequence that falls on this page."""
        return items[self.offset:self.offset + self.item_count]


def compute(total_items: int, current_page: int, per_page: int) -> Paginator:
    return Paginator.compute(total_items, current_page, per_page)
