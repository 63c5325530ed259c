"""
FastAPI application factory and configuration.

This module creates the FastAPI application instance,
configures exception handlers, and lifespan events.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from psycopg_pool import ConnectionPool

from src.adapters.repository.memory import InMemoryConfigRepository, InMemoryRegistrationRepository
from src.adapters.repository.postgres import (
    PostgresConfigRepository,
    PostgresRegistrationRepository,
    run_migrations,
)
from src.api.v1 import router as v1_router
from src.config.settings import get_settings
from src.domain.config import ConfigStore
from src.domain.exceptions import HostError

logger = logging.getLogger(__name__)

# OpenAPI tags for documentation grouping
tags_metadata = [
    {
        "name": "v1",
        "description": "Event Registration API v1 - Register, update and remove registrations",
    },
]


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    FastAPI lifespan context manager.

    Manages application startup and shutdown:
    - Creates storage (database pool + migrations, or in-memory stores)
    - Initializes the config singleton on first start
    - Closes connection pool on shutdown
    """
    settings = get_settings()
    logging.basicConfig(level=settings.log_level.upper())

    logger.info("Starting application...")

    pool = None
    if settings.storage_backend == "postgres":
        logger.info("Connecting to database...")
        pool = ConnectionPool(
            conninfo=settings.database_url,
            min_size=settings.pool_min_size,
            max_size=settings.pool_max_size,
        )

        logger.info("Running database migrations...")
        run_migrations(pool)

        app.state.registration_repository = PostgresRegistrationRepository(pool)
        app.state.config_repository = PostgresConfigRepository(pool)
    else:
        logger.info("Using in-memory storage")
        app.state.registration_repository = InMemoryRegistrationRepository()
        app.state.config_repository = InMemoryConfigRepository()

    app.state.pool = pool
    ConfigStore(app.state.config_repository).initialize(
        admin=settings.admin, deadline=settings.registration_deadline
    )

    logger.info("Application startup complete")

    yield

    # Shutdown
    logger.info("Shutting down application...")
    if pool is not None:
        pool.close()
        logger.info("Database connection pool closed")


app = FastAPI(
    title="event-registration",
    description="Event Registration API - One registration per identity with optional referrer",
    version="0.1.0",
    openapi_tags=tags_metadata,
    lifespan=lifespan,
)

# Include v1 API routes
app.include_router(v1_router, prefix="/v1")


@app.exception_handler(HostError)
async def host_error_handler(request: Request, exc: HostError) -> JSONResponse:
    """Translate storage/host failures into 503 without leaking details."""
    logger.error("Host failure: %s", exc)
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"detail": "Service unavailable"},
    )


@app.get("/health")
async def health_check(request: Request) -> dict[str, str]:
    """
    Health check endpoint with storage validation.

    Returns 200 OK if application and storage are healthy.
    Raises HostError (503) if the config cannot be read.
    """
    request.app.state.config_repository.load()
    return {"status": "healthy"}
