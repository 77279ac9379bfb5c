"""
Main Application Entry Point.

This module builds the FastAPI application, configures middleware (CORS,
request monitoring) and exception handlers, and includes all API routers.
The ``Database`` handle is created at startup unless one is injected, and
is disposed on shutdown.
"""

from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from venuease.core.database import Database
from venuease.core.logging_config import get_logger, setup_logging
from venuease.core.monitoring import initialize_logfire

from .api import admin, customer, health, venues
from .core import constant
from .core.config import settings
from .exception_handlers import setup_exception_handlers
from .middleware import RequestMonitoringMiddleware

# Initialize logging
setup_logging()
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Manage application lifespan events.

    Opens the connection pool on startup (unless a ``Database`` was injected)
    and closes it on shutdown. A database that cannot be reached at startup
    stops the server from starting.
    """
    logger.info(f"Starting up {constant.PROJECT_NAME} Server...")
    database: Optional[Database] = app.state.database
    owned = database is None
    if owned:
        database = Database.from_config(settings.database)
        app.state.database = database
        logger.info(f"Database handle created for dialect '{database.dialect_name}'")

    if owned and settings.database.create_tables:
        await database.create_all()

    yield

    logger.info(f"Shutting down {constant.PROJECT_NAME} Server...")
    if owned:
        await database.dispose()
        app.state.database = None


def create_app(database: Optional[Database] = None) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        database: Pre-built database handle. When given, the application uses
            it as-is and leaves its lifecycle to the caller.

    Returns:
        Configured FastAPI application
    """
    app = FastAPI(
        title=constant.PROJECT_NAME,
        description="""
        VenuEase Server API

        Backend of the VenuEase venue booking site and its admin console.
        It manages customers, staff, venues, events, bookings and payments, and
        offers a query builder that runs ad-hoc SQL against the live database.
        """,
        version=constant.VERSION,
        openapi_url=f"{constant.API_PREFIX}/openapi.json",
        docs_url=f"{constant.API_PREFIX}/docs",
        redoc_url=f"{constant.API_PREFIX}/redoc",
        lifespan=lifespan,
    )
    app.state.database = database

    cors = settings.cors
    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors.origins,
        allow_credentials=cors.allow_credentials,
        allow_methods=cors.allow_methods,
        allow_headers=cors.allow_headers,
    )
    app.add_middleware(RequestMonitoringMiddleware)

    setup_exception_handlers(app)

    app.include_router(health.router, tags=["health"])
    app.include_router(customer.router, prefix=f"{constant.API_PREFIX}/customer")
    app.include_router(venues.router, prefix=f"{constant.API_PREFIX}/venues")
    app.include_router(admin.router, prefix=constant.ADMIN_PREFIX)

    initialize_logfire(app)
    return app


app = create_app()


def run() -> None:
    """Run the server with uvicorn using the configured host and port."""
    uvicorn.run(app, host=settings.server_host, port=settings.server_port, log_config=None)
