"""FastAPI application factory."""

import logging
from contextlib import asynccontextmanager
from collections.abc import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from assignment_service.config import get_settings
from assignment_service.domain.exceptions import StoreError
from assignment_service.infrastructure.database import Base, DatabaseGateway
from assignment_service.infrastructure.logging.log_config import setup_logging
from assignment_service.presentation.api.errors import register_error_handlers
from assignment_service.presentation.api.router import router as api_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan — open the connection pool, create the table, close on shutdown."""
    settings = get_settings()
    setup_logging(settings)

    gateway = DatabaseGateway.from_settings(settings)
    if settings.create_schema_on_startup:
        try:
            await gateway.create_schema(Base.metadata)
        except StoreError as exc:
            # Keep serving; requests report the store failure individually
            logger.warning("Could not create database schema: %s", exc.detail)

    app.state.gateway = gateway
    logger.info("Assignment service started (env=%s, port=%d)", settings.app_env, settings.port)

    yield

    # Shutdown
    await gateway.dispose()
    logger.info("Connection pool closed")


def create_app() -> FastAPI:
    """Factory function that builds and configures the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(app)
    app.include_router(api_router)

    return app


app = create_app()


def run() -> None:
    """Console entry point — serve the app with uvicorn."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "assignment_service.main:app",
        host=settings.host,
        port=settings.port,
        reload=(settings.app_env == "development"),
    )


if __name__ == "__main__":
    run()
