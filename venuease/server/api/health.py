"""
Health Check Endpoints.

This module provides basic system status endpoints (banner, health, version,
database connectivity) used for monitoring and deployment verification.
"""

from fastapi import APIRouter, HTTPException, status
from sqlalchemy import text

from venuease.core.logging_config import get_logger
from venuease.server.core import constant
from venuease.server.services.deps import DatabaseDep, ReposDep

logger = get_logger(__name__)

router = APIRouter()


@router.get("/", summary="Service Banner")
async def root():
    """Confirm the server is running."""
    return {"message": f"{constant.PROJECT_NAME} Server is running!"}


@router.get(
    "/health",
    summary="Health Check",
    description="Check the operational status of the API server.",
    response_description="Status object.",
)
async def health_check():
    """
    Health check endpoint.

    Returns a simple status indicator to confirm the server is running and reachable.
    """
    return {"status": "ok"}


@router.get(
    "/version",
    summary="Get Version",
    description="Retrieve version information for the API server.",
    response_description="Version object.",
)
async def version():
    """Return the current semantic version of the API."""
    return {"version": constant.VERSION}


@router.get(
    f"{constant.API_PREFIX}/test-db",
    summary="Database Connectivity Check",
    description="Run a trivial statement and count staff accounts to prove the database is reachable.",
    responses={500: {"description": "Database unreachable"}},
)
async def test_database(database: DatabaseDep, repos: ReposDep):
    """
    Database connectivity check.

    Executes ``SELECT 1 + 1`` on a pooled connection and counts the rows of the
    staff table.
    """
    try:
        async with database.engine.connect() as conn:
            test_result = (await conn.execute(text("SELECT 1 + 1 AS result"))).scalar_one()
        admin_count = await repos.staff.count()
    except Exception as e:
        logger.error(f"Database connectivity check failed: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Database connection failed: {e}",
        ) from e
    return {
        "message": "Database connected successfully",
        "test_result": test_result,
        "admin_count": admin_count,
        "status": "OK",
    }
