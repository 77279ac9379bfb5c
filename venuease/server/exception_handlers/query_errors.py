"""Handlers for errors raised by the ad-hoc query executor."""

from fastapi import Request, status
from fastapi.responses import JSONResponse

from venuease.core.logging_config import get_logger
from venuease.core.query import QueryExecutionError, QueryValidationError

logger = get_logger(__name__)


async def query_validation_handler(request: Request, exc: QueryValidationError) -> JSONResponse:
    """The query text was rejected before reaching the database."""
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": str(exc)})


async def query_execution_handler(request: Request, exc: QueryExecutionError) -> JSONResponse:
    """The engine rejected the query: category message plus the raw engine text."""
    logger.debug(f"Returning classified query error [{exc.category.value}] for {request.url.path}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "error": exc.message,
            "sqlError": exc.engine_message,
            "category": exc.category.value,
        },
    )
