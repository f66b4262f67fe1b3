"""Shared FastAPI dependencies."""

from fastapi import Request

from pagelinks.core.request_context import StarletteRequestContext


def get_request_context(request: Request) -> StarletteRequestContext:
    """Dependency: expose the incoming request to the link builders."""
    return StarletteRequestContext(request)
