"""
province_registry.api.app

FastAPI app factory for the province registry service.

Responsibilities:
- Build the FastAPI application and register routers/middleware.
- Initialize and dispose shared infrastructure (DB engine/session factory).
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from province_registry import __version__
from province_registry.api.routers.health import router as health_router
from province_registry.api.routers.provinces import router as provinces_router
from province_registry.db.init_db import init_db
from province_registry.db.session import create_engine, create_sessionmaker
from province_registry.observability.logging import configure_logging, get_logger
from province_registry.observability.middleware import RequestContextMiddleware
from province_registry.settings import Settings

log = get_logger(__name__)


def create_app(*, settings: Settings) -> FastAPI:
    configure_logging(
        service_name=settings.service_name,
        level=settings.log_level,
        sql_echo=settings.sql_echo,
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        log.info("startup", env=settings.env)
        engine = create_engine(settings)
        app.state.engine = engine
        app.state.sessionmaker = create_sessionmaker(engine)
        if settings.env in ("dev", "test"):
            # Prod schemas are managed by Alembic.
            await init_db(engine)
        try:
            yield
        finally:
            await engine.dispose()
            log.info("shutdown")

    app = FastAPI(
        title="Province Registry",
        version=__version__,
        docs_url="/docs",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    app.state.settings = settings
    app.add_middleware(RequestContextMiddleware)
    app.include_router(health_router, tags=["health"])
    app.include_router(provinces_router)

    return app


# --- Module Notes -----------------------------------------------------------
# Composition root only; query and transaction logic live in services/db.
