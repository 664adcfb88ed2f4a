"""FastAPI application factory."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from lottodesk.api.middleware import setup_middleware
from lottodesk.core.config import Settings
from lottodesk.core.constants import UPLOAD_URL_PREFIX
from lottodesk.core.database import close_pool, init_pool
from lottodesk.core.logging import setup_logging
from lottodesk.core.schema import ensure_schema

logger = logging.getLogger(__name__)


async def _start_database(app: FastAPI, settings: Settings) -> None:
    """Bring up the pool and schema; on failure the API keeps answering 503."""
    if not settings.database_configured:
        logger.warning(
            "DATABASE SETUP REQUIRED: ORACLE_DSN is not set. "
            "Starting without a database; /api routes will answer 503."
        )
        return

    try:
        pool = await init_pool(settings)
        if settings.auto_migrate:
            conn = pool.acquire()
            try:
                actions = ensure_schema(conn)
            finally:
                conn.close()
            logger.info("Schema ready (%d change(s))", len(actions))
        app.state.db_pool = pool
        logger.info("Database pool ready")
    except Exception:
        logger.exception("Could not connect to Oracle; /api routes will answer 503")
        await close_pool()


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    if settings is None:
        settings = Settings()

    if not settings.is_testing:
        setup_logging(level=settings.log_level, log_format=settings.log_format)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        logger.info("Starting LottoDesk API (env=%s)", settings.app_env)
        app.state.db_pool = None
        if not settings.is_testing:
            settings.upload_path.mkdir(parents=True, exist_ok=True)
            await _start_database(app, settings)
        yield
        logger.info("Shutting down LottoDesk API")
        if not settings.is_testing:
            await close_pool()

    application = FastAPI(
        title="LottoDesk API",
        description="Lottery ticket submission and winning-numbers administration",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    application.state.settings = settings

    setup_middleware(application)
    _register_routes(application)

    # Uploaded receipts and article images; the directory is created at startup
    application.mount(
        f"/{UPLOAD_URL_PREFIX}",
        StaticFiles(directory=str(settings.upload_path), check_dir=False),
        name="uploads",
    )

    # Player pages and other assets. Matches every path, so it must stay last
    if settings.static_path.is_dir():
        application.mount(
            "/",
            StaticFiles(directory=str(settings.static_path), html=True),
            name="static",
        )
    else:
        logger.info("No static directory at %s; only the API is served", settings.static_path)

    return application


def _register_routes(app: FastAPI) -> None:
    """Register all API route modules."""
    from lottodesk.api.routes.admin import router as admin_router
    from lottodesk.api.routes.articles import router as articles_router
    from lottodesk.api.routes.health import router as health_router
    from lottodesk.api.routes.tickets import router as tickets_router
    from lottodesk.api.routes.winning_numbers import router as winning_numbers_router

    app.include_router(health_router, tags=["health"])
    app.include_router(tickets_router)
    app.include_router(winning_numbers_router)
    app.include_router(articles_router)
    app.include_router(admin_router)


def run() -> None:
    """Console entry point: ``lottodesk``."""
    import uvicorn

    settings = Settings()
    uvicorn.run(
        "lottodesk.main:app",
        host=settings.app_host,
        port=settings.app_port,
        reload=settings.is_development,
    )


# Module-level app instance for uvicorn (uvicorn lottodesk.main:app)
app = create_app()
