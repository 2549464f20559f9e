"""FastAPI application entry point."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.core.config import get_settings
from app.core.database import Database
from app.core.exceptions import register_exception_handlers
from app.core.health import router as health_router
from app.core.logging import configure_logging, get_logger
from app.core.middleware import RequestIdMiddleware
from app.features.catalog.routes import router as catalog_router
from app.features.dashboard.routes import router as dashboard_router

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Open the database on startup and dispose it on shutdown.

    Args:
        app: FastAPI application; the database handle is kept on ``app.state``.

    Yields:
        None while the application is serving.
    """
    settings = get_settings()

    configure_logging(settings.log_level, settings.log_format, settings.app_name)

    database = Database.from_settings(settings)
    database.open()
    app.state.database = database

    logger.info(
        "app.startup_completed",
        app_name=settings.app_name,
        app_env=settings.app_env,
        port=settings.port,
    )

    try:
        yield
    finally:
        await database.close()
        logger.info("app.shutdown_completed")


def create_app() -> FastAPI:
    """Create and configure FastAPI application.

    Returns:
        Configured FastAPI application instance.
    """
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Product catalog, purchase recording and sales dashboard metrics",
        version="0.1.0",
        lifespan=lifespan,
        docs_url="/docs" if settings.is_development else None,
        redoc_url="/redoc" if settings.is_development else None,
    )

    # Middleware (last added = outermost)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(RequestIdMiddleware)

    register_exception_handlers(app)

    app.include_router(health_router)
    app.include_router(catalog_router)
    app.include_router(dashboard_router)

    return app


app = create_app()


def run() -> None:
    """Serve the application with uvicorn on the configured host and port."""
    settings = get_settings()
    uvicorn.run(
        "app.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
