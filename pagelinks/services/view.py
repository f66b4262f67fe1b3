"""Navigation view model: prev/next links and a window of page links."""

from pydantic import BaseModel, Field

from pagelinks.core.request_context import RequestContext
from pagelinks.services.urls import BuildOptions, build_page_url


class PageItem(BaseModel):
    num: int
    url: str
    active: bool = False


class View(BaseModel):
    current: int
    total: int
    prev_url: str = ""
    next_url: str = ""
    pages: list[PageItem] = Field(default_factory=list)


def window_bounds(current: int, total: int, window: int) -> tuple[int, int]:
    """First and last page number to render, inclusive.

    window <= 0 or window >= total renders every page. Otherwise the window is
    centred on `current` and shifted back inside [1, total] at either end.
    """
    if window <= 0 or window >= total:
        return 1, total
    half = window // 2
    start = max(1, current - half)
    end = start + window - 1
    if end > total:
        end = total
        start = max(1, end - window + 1)
    return start, end


def build_view(
    ctx: RequestContext,
    current: int,
    total: int,
    options: BuildOptions | None = None,
    window: int = 0,
) -> View:
    """Build the View for page `current` of `total`.

    Both numbers are raised to at least 1 but `current` is not capped at
    `total`: a current page past the end gets no next link and no active item.
    """
    current = max(1, current)
    total = max(1, total)

    view = View(current=current, total=total)
    if current > 1:
        view.prev_url = build_page_url(ctx, current - 1, options)
    if current < total:
        view.next_url = build_page_url(ctx, current + 1, options)

    start, end = window_bounds(current, total, window)
    view.pages = [
        PageItem(num=i, url=build_page_url(ctx, i, options), active=i == current)
        for i in range(start, end + 1)
    ]
    return view
