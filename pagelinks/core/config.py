from functools import lru_cache
from typing import Any, List, Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from pagelinks.services.urls import BuildOptions, UrlMode

_DEFAULT_CORS = ["http://localhost:3000", "http://localhost:5173"]


def _parse_cors_origins(v: Any) -> List[str]:
    try:
        if v is None or v == "":
            return _DEFAULT_CORS.copy()
        if isinstance(v, list):
            return [x for x in v if isinstance(x, str) and x.strip()]
        s = str(v).strip()
        if not s:
            return _DEFAULT_CORS.copy()
        if s.startswith("["):
            import json
            out = json.loads(s)
            return [x for x in out if isinstance(x, str) and x.strip()] or _DEFAULT_CORS.copy()
        return [x.strip() for x in s.split(",") if x.strip()] or _DEFAULT_CORS.copy()
    except ValueError:
        return _DEFAULT_CORS.copy()


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # App
    env: str = Field(default="development", description="ENV")
    debug: bool = Field(default=False, description="DEBUG")
    host: str = Field(default="127.0.0.1", alias="HOST")
    port: int = Field(default=8000, alias="PORT")

    # Paging
    page_param: str = Field(default="page", alias="PAGE_PARAM")
    default_per_page: int = Field(default=10, alias="DEFAULT_PER_PAGE")
    max_per_page: int = Field(default=200, alias="MAX_PER_PAGE")
    page_window: int = Field(default=5, alias="PAGE_WINDOW")
    max_page_window: int = Field(default=25, alias="MAX_PAGE_WINDOW")

    # Link building; scheme/host only apply to absolute links
    url_mode: Literal["relative", "absolute"] = Field(default="relative", alias="URL_MODE")
    public_scheme: str | None = Field(default=None, alias="PUBLIC_SCHEME")
    public_host: str | None = Field(default=None, alias="PUBLIC_HOST")

    # Sentry
    sentry_dsn: str | None = Field(default=None, alias="SENTRY_DSN")

    # CORS: env as string, exposed as list
    cors_origins_raw: str = Field(
        default="http://localhost:3000,http://localhost:5173",
        alias="CORS_ORIGINS",
        description="Comma-separated or JSON list",
    )

    @property
    def cors_origins(self) -> List[str]:
        return _parse_cors_origins(getattr(self, "cors_origins_raw", None))

    def build_options(self, mode: str | None = None) -> BuildOptions:
        """Link options for this deployment; `mode` overrides URL_MODE."""
        return BuildOptions(
            mode=UrlMode(mode or self.url_mode),
            page_param=self.page_param,
            scheme=self.public_scheme,
            host=self.public_host,
        )


@lru_cache
def get_settings() -> Settings:
    return Settings()
