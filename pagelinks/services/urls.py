"""Page-link URLs: rewrite the page query parameter of the current request."""

from enum import Enum
from urllib.parse import quote, urlencode, urlunsplit

from pydantic import BaseModel, ConfigDict

from pagelinks.core.request_context import RequestContext

DEFAULT_PAGE_PARAM = "page"
FORWARDED_PROTO_HEADER = "X-Forwarded-Proto"
FORWARDED_HOST_HEADER = "X-Forwarded-Host"

# Left bare in absolute paths, as Go's url.URL does; !'()* get escaped
_PATH_SAFE = "/:@$&+,;="


class UrlMode(str, Enum):
    RELATIVE = "relative"  # /courses?foo=bar&page=2
    ABSOLUTE = "absolute"  # https://example.com/courses?foo=bar&page=2


class BuildOptions(BaseModel):
    """How page links are built. Unset fields are filled from the request.

    scheme and host only matter for absolute links; when unset they come from
    X-Forwarded-Proto / X-Forwarded-Host, then from the request itself.
    """

    model_config = ConfigDict(frozen=True)

    mode: UrlMode = UrlMode.RELATIVE
    path: str | None = None
    page_param: str | None = None
    scheme: str | None = None
    host: str | None = None
    keep_existing_query: bool | None = None


def _first_non_empty(*values: str | None) -> str:
    for v in values:
        if v:
            return v
    return ""


def _forwarded_proto(ctx: RequestContext) -> str:
    return (ctx.header(FORWARDED_PROTO_HEADER) or "").strip().lower()


def resolve_options(ctx: RequestContext, options: BuildOptions | None = None) -> BuildOptions:
    """Return a copy of `options` with every default filled in for `ctx`."""
    o = options or BuildOptions()
    resolved = {
        "page_param": o.page_param or DEFAULT_PAGE_PARAM,
        "path": o.path or ctx.path,
        "keep_existing_query": True if o.keep_existing_query is None else o.keep_existing_query,
    }
    if o.mode == UrlMode.ABSOLUTE:
        if not o.scheme:
            secure = ctx.is_secure or _forwarded_proto(ctx) == "https"
            resolved["scheme"] = "https" if secure else "http"
        if not o.host:
            resolved["host"] = _first_non_empty(ctx.header(FORWARDED_HOST_HEADER), ctx.host)
    return o.model_copy(update=resolved)


def build_query(ctx: RequestContext, page: int, page_param: str, keep_existing_query: bool = True) -> str:
    """Encode the query for `page`, sorted by key.

    Repeated keys keep only their first value. A stale page value in the
    current query is always replaced.
    """
    q: dict[str, str] = {}
    if keep_existing_query:
        for key, values in ctx.query().items():
            if key == page_param or not values:
                continue
            q[key] = values[0]
    q[page_param] = str(page)
    return urlencode(sorted(q.items()))


def build_page_url(ctx: RequestContext, page: int, options: BuildOptions | None = None) -> str:
    """URL of `page` for the current request, other query parameters kept."""
    o = resolve_options(ctx, options)
    query = build_query(ctx, page, o.page_param, o.keep_existing_query)
    if o.mode == UrlMode.ABSOLUTE:
        return urlunsplit((o.scheme, o.host, quote(o.path, safe=_PATH_SAFE), query, ""))
    return f"{o.path}?{query}"
