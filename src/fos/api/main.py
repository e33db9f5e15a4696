from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from fos.api.error_handling import register_exception_handlers
from fos.api.middleware.access_log import AccessLogMiddleware
from fos.api.middleware.request_id import RequestIDMiddleware
from fos.api.routes.contact import router as contact_router
from fos.api.routes.health import router as health_router
from fos.api.routes.menu import router as menu_router
from fos.api.routes.metrics import router as metrics_router
from fos.api.routes.orders import router as orders_router
from fos.config import Settings, load_settings
from fos.infrastructure.cache.cache_store import NullCacheStore, RedisCacheStore
from fos.infrastructure.cache.redis_client import get_redis_client
from fos.infrastructure.db.session import build_engine
from fos.infrastructure.observability.logging_config import configure_logging
from fos.infrastructure.observability.otel import configure_otel

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings: Settings = app.state.settings
    engine = build_engine(settings.database_url)
    app.state.engine = engine
    app.state.redis_client = None
    app.state.cache_store = NullCacheStore()
    if settings.redis_url:
        app.state.redis_client = get_redis_client(settings.redis_url)
        app.state.cache_store = RedisCacheStore(app.state.redis_client)
    logger.info("store_opened")
    try:
        yield
    finally:
        engine.dispose()
        logger.info("store_closed")


def create_app(settings: Settings | None = None) -> FastAPI:
    configure_logging()
    settings = settings or load_settings()

    app = FastAPI(title="Food Ordering Storefront", version="0.1.0", lifespan=lifespan)
    app.state.settings = settings
    register_exception_handlers(app)
    app.include_router(health_router)
    app.include_router(metrics_router)
    app.include_router(menu_router)
    app.include_router(orders_router)
    app.include_router(contact_router)
    app.mount(
        "/public",
        StaticFiles(directory=settings.public_dir, check_dir=False),
        name="public",
    )

    app.add_middleware(AccessLogMiddleware)
    app.add_middleware(RequestIDMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-Id"],
    )

    configure_otel(app)
    return app


app = create_app()
