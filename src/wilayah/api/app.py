"""
wilayah.api.app

FastAPI app factory for the hierarchy service.

Responsibilities:
- Build the FastAPI application and register routers/middleware/error handlers.
- Create and dispose the DB engine and the shared `HierarchyStore`.
- Create the schema if absent.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from wilayah import __version__
from wilayah.api.errors import install_error_handlers
from wilayah.api.routers.health import router as health_router
from wilayah.api.routers.levels import routers as level_routers
from wilayah.db.init_db import ensure_database_dir, init_db
from wilayah.db.session import HierarchyStore, create_engine, create_sessionmaker
from wilayah.observability.logging import configure_logging, get_logger
from wilayah.observability.middleware import RequestContextMiddleware
from wilayah.settings import Settings

log = get_logger(__name__)


def create_app(*, settings: Settings) -> FastAPI:
    configure_logging(
        service_name=settings.service_name, level=settings.log_level, env=settings.env
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        log.info("startup", database_url=settings.database_url)
        ensure_database_dir(settings.database_url)
        engine = create_engine(settings)
        try:
            await init_db(engine)
            app.state.engine = engine
            app.state.store = HierarchyStore(create_sessionmaker(engine))
            yield
        finally:
            await engine.dispose()
            log.info("shutdown")

    app = FastAPI(
        title="Wilayah Indonesia",
        version=__version__,
        docs_url="/docs",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    app.add_middleware(RequestContextMiddleware)
    install_error_handlers(app)
    app.include_router(health_router, tags=["health"])
    for router in level_routers:
        app.include_router(router)

    return app
