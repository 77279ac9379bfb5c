"""
Exception handlers for the VenuEase server.

This package maps every error type onto a JSON error response and exposes a
setup function to register them with the FastAPI application:

- client input errors (validation, HTTPException) → 4xx ``{"error": ...}``
- query executor errors → 400 with category and raw engine message
- anything else → 500 with an error ID
"""

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from venuease.core.logging_config import get_logger
from venuease.core.query import QueryExecutionError, QueryValidationError

from .client_errors import http_exception_handler, validation_exception_handler
from .global_handler import global_exception_handler
from .query_errors import query_execution_handler, query_validation_handler

logger = get_logger(__name__)


def setup_exception_handlers(app: FastAPI) -> None:
    """
    Register exception handlers with the FastAPI application.

    Args:
        app: The FastAPI application instance
    """
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(QueryValidationError, query_validation_handler)
    app.add_exception_handler(QueryExecutionError, query_execution_handler)
    app.add_exception_handler(Exception, global_exception_handler)
    logger.debug("Exception handlers registered successfully")


__all__ = ["setup_exception_handlers"]
