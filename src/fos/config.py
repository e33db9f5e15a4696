from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

DEFAULT_DATABASE_URL = "sqlite:///./food.sqlite"
DEFAULT_ORDER_PAGE_SIZE = 20
DEFAULT_CATALOG_CACHE_TTL = 300


def database_url() -> str:
    return os.getenv("DATABASE_URL") or DEFAULT_DATABASE_URL


def redis_url() -> str | None:
    return os.getenv("REDIS_URL") or None


def _positive_int(name: str, default: int) -> int:
    raw_value = os.getenv(name)
    if raw_value is None or not raw_value.strip():
        return default
    try:
        value = int(raw_value)
    except ValueError as exc:
        raise RuntimeError(f"{name} must be an integer, got {raw_value!r}") from exc
    if value < 1:
        raise RuntimeError(f"{name} must be >= 1, got {value}")
    return value


@dataclass(frozen=True)
class Settings:
    app_env: str
    database_url: str
    redis_url: str | None
    order_page_size: int
    catalog_cache_ttl: int
    public_dir: Path
    cors_allow_origins: list[str]


def _cors_allow_origins(app_env: str) -> list[str]:
    # Dev/test: unblock everything (no credentials allowed)
    if app_env in {"dev", "test"}:
        return ["*"]

    default_value = "http://localhost:5173"
    raw_value = os.getenv("CORS_ALLOW_ORIGINS", default_value)
    return [origin.strip() for origin in raw_value.split(",") if origin.strip()]


def load_settings() -> Settings:
    app_env = os.getenv("APP_ENV", "dev").lower()
    return Settings(
        app_env=app_env,
        database_url=database_url(),
        redis_url=redis_url(),
        order_page_size=_positive_int("ORDER_PAGE_SIZE", DEFAULT_ORDER_PAGE_SIZE),
        catalog_cache_ttl=_positive_int("CATALOG_CACHE_TTL", DEFAULT_CATALOG_CACHE_TTL),
        public_dir=Path(os.getenv("PUBLIC_DIR", "public")),
        cors_allow_origins=_cors_allow_origins(app_env),
    )
