from typing import Literal

from fastapi import APIRouter, Depends, Query

from pagelinks.core.config import Settings, get_settings
from pagelinks.core.exceptions import BadRequestError
from pagelinks.core.logging import get_logger
from pagelinks.core.pagination import Paginator
from pagelinks.core.request_context import StarletteRequestContext
from pagelinks.deps import get_request_context
from pagelinks.services.urls import build_page_url
from pagelinks.services.view import build_view

router = APIRouter()
log = get_logger(__name__)


@router.get("")
async def pagination_view(
    ctx: StarletteRequestContext = Depends(get_request_context),
    settings: Settings = Depends(get_settings),
    total: int = Query(0),
    page: int = Query(1),
    per_page: int | None = Query(None),
    window: int | None = Query(None),
    mode: Literal["relative", "absolute"] | None = None,
):
    """Paginate `total` items and return the navigation links for this URL."""
    if per_page is None:
        per_page = settings.default_per_page
    if per_page > settings.max_per_page:
        raise BadRequestError("per_page too large", details={"max_per_page": settings.max_per_page})
    if window is None:
        window = settings.page_window
    # window <= 0 renders every page
    if window <= 0 or window > settings.max_page_window:
        raise BadRequestError(
            "window out of range",
            details={"min_page_window": 1, "max_page_window": settings.max_page_window},
        )
    paginator = Paginator.compute(total, page, per_page)
    view = build_view(ctx, paginator.current_page, paginator.total_pages, settings.build_options(mode), window)
    log.info(
        "pagination_view",
        total_items=paginator.total_items,
        current_page=paginator.current_page,
        total_pages=paginator.total_pages,
        links=len(view.pages),
    )
    return {"paginator": paginator.model_dump(), "view": view.model_dump()}


@router.get("/url")
async def pagination_url(
    page: int,
    ctx: StarletteRequestContext = Depends(get_request_context),
    settings: Settings = Depends(get_settings),
    mode: Literal["relative", "absolute"] | None = None,
):
    """Return the link to `page` of the current listing."""
    return {"url": build_page_url(ctx, page, settings.build_options(mode))}
