import os
from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from starlette.requests import Request

from pagelinks.core.request_context import StarletteRequestContext

os.environ.setdefault("ENV", "test")


def _scope(url_path: str, query: str = "", host: str | None = "localhost:8080",
           scheme: str = "http", headers: dict[str, str] | None = None) -> dict:
    raw_headers = []
    if host is not None:
        raw_headers.append((b"host", host.encode("latin-1")))
    for name, value in (headers or {}).items():
        raw_headers.append((name.lower().encode("latin-1"), value.encode("latin-1")))
    return {
        "type": "http",
        "method": "GET",
        "scheme": scheme,
        "path": url_path,
        "raw_path": url_path.encode("latin-1"),
        "query_string": query.encode("latin-1"),
        "headers": raw_headers,
        "server": None,
        "client": ("127.0.0.1", 50000),
    }


@pytest.fixture
def make_ctx():
    """Build a StarletteRequestContext from path, query string and headers."""

    def _make(url_path: str, query: str = "", **kwargs) -> StarletteRequestContext:
        return StarletteRequestContext(Request(_scope(url_path, query, **kwargs)))

    return _make


@pytest_asyncio.fixture
async def client() -> AsyncGenerator[AsyncClient, None]:
    from pagelinks.main import app
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac
