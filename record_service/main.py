"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from record_service.config import Settings, get_settings
from record_service.infrastructure.database import Database
from record_service.infrastructure.logging.log_config import setup_logging
from record_service.presentation.api.errors import register_exception_handlers
from record_service.presentation.api.router import router as api_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan: open the database, create tables, close on exit."""
    settings: Settings = app.state.settings
    setup_logging(settings)

    database = Database.from_settings(settings)
    try:
        await database.create_tables()
    except Exception:
        await database.dispose()
        raise
    app.state.database = database
    logger.info("Database ready (%s)", database.engine.url.drivername)

    yield

    # Shutdown
    await database.dispose()
    logger.info("Database connections released")


def create_app(settings: Settings | None = None) -> FastAPI:
    """Factory function that builds and configures the FastAPI application."""
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        lifespan=lifespan,
    )
    app.state.settings = settings

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)
    app.include_router(api_router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "record_service.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.app_env == "development",
    )
