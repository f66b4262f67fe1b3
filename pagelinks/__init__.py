"""Pagination metadata and page-link URLs for paged views."""

from pagelinks.core.pagination import Paginator, compute
from pagelinks.core.request_context import RequestContext, StarletteRequestContext
from pagelinks.services.urls import BuildOptions, UrlMode, build_page_url, resolve_options
from pagelinks.services.view import PageItem, View, build_view

__all__ = [
    "BuildOptions",
    "PageItem",
    "Paginator",
    "RequestContext",
    "StarletteRequestContext",
    "UrlMode",
    "View",
    "build_page_url",
    "build_view",
    "compute",
    "resolve_options",
]
