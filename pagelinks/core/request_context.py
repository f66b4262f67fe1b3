"""Request capabilities the link builders read, and the Starlette adapter."""

from typing import Mapping, Protocol, Sequence

from starlette.requests import Request


class RequestContext(Protocol):
    @property
    def path(self) -> str:
        """Current request path."""
        ...

    def query(self) -> Mapping[str, Sequence[str]]:
        """Query string as key -> values, in the order they were sent."""
        ...

    def header(self, name: str) -> str | None:
        """Header value by case-insensitive name, or None."""
        ...

    @property
    def is_secure(self) -> bool:
        """True when the connection itself is encrypted."""
        ...

    @property
    def host(self) -> str:
        """Host the request was addressed to, port included when given."""
        ...


class StarletteRequestContext:
    """RequestContext over a Starlette (or FastAPI) request."""

    def __init__(self, request: Request):
        self._request = request

    @property
    def path(self) -> str:
        return self._request.url.path

    def query(self) -> Mapping[str, Sequence[str]]:
        params = self._request.query_params
        # QueryParams.__getitem__ returns the last value; keep them all
        return {key: params.getlist(key) for key in params.keys()}

    def header(self, name: str) -> str | None:
        return self._request.headers.get(name)

    @property
    def is_secure(self) -> bool:
        return self._request.url.scheme in ("https", "wss")

    @property
    def host(self) -> str:
        return self._request.headers.get("host") or self._request.url.netloc
