"""
FastAPI application entry point.

Initializes FastAPI app, registers routers, adds middleware, and configures lifespan.

Dependencies: fastapi, uvicorn, course_records.api, course_records.observability, course_records.configs
System role: Application initialization and configuration
"""

from contextlib import asynccontextmanager
import logging

import uvicorn
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from course_records.configs import Settings, get_settings
from course_records.api import api_router
from course_records.api.error_handling import request_validation_exception_handler
from course_records.boundary.db import Database
from course_records.observability.logger import configure_logging
from course_records.observability.middleware import (
    CorrelationMiddleware,
    RequestLoggingMiddleware,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Connects the store client once at startup, shares it through app.state
    and disposes it at shutdown. A client already placed on app.state (tests)
    is used as-is.
    """
    settings: Settings = app.state.settings
    configure_logging(settings.log_level)

    database = getattr(app.state, "database", None)
    owns_database = database is None
    if owns_database:
        database = Database(settings.database)
        app.state.database = database

    try:
        database.connect()
        if settings.database.create_tables:
            await database.create_tables()
    except Exception as e:
        logger.exception(
            "Failed to initialize database",
            extra={"error": str(e)},
        )
        raise

    logger.info("Application startup complete")

    yield

    if owns_database:
        await database.dispose()
    logger.info("Application shutdown")


def create_app(
    settings: Settings | None = None,
    database: Database | None = None,
) -> FastAPI:
    """
    Create and configure FastAPI application.

    Args:
        settings: Settings to use (defaults to the environment)
        database: Pre-built store client to inject instead of creating one

    Returns:
        FastAPI: Configured application instance
    """
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Course definitions and per-semester grade datasets",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.settings = settings
    if database is not None:
        app.state.database = database

    app.add_exception_handler(RequestValidationError, request_validation_exception_handler)

    # Added first = innermost
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(CorrelationMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.server.cors_origins,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(api_router)

    return app


app = create_app()


def run() -> None:
    """Serve the application with uvicorn on the configured address."""
    settings = get_settings()
    uvicorn.run(
        "course_records.main:app",
        host=settings.server.host,
        port=settings.server.port,
    )


if __name__ == "__main__":
    run()
