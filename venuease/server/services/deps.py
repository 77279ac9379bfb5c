"""
Request Dependencies.

The ``Database`` handle lives on ``app.state``; these dependencies hand it,
a per-request session, the repository bundle, or the query services to the
endpoints.
"""

from typing import Annotated, AsyncGenerator

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from venuease.core.database.repositories import RepoBundle, build_repos
from venuease.core.database.session import Database
from venuease.core.query import QueryExecutor, SchemaInspector


def get_database(request: Request) -> Database:
    """Return the ``Database`` handle attached to the running application."""
    database = getattr(request.app.state, "database", None)
    if database is None:
        raise RuntimeError("Database handle is not initialised")
    return database


DatabaseDep = Annotated[Database, Depends(get_database)]


async def get_session(database: DatabaseDep) -> AsyncGenerator[AsyncSession, None]:
    """
    Dependency generator for database sessions.

    Yields:
        AsyncSession: A session whose connection is returned to the pool when the request ends.
    """
    async with database.session() as session:
        yield session


SessionDep = Annotated[AsyncSession, Depends(get_session)]


def get_repos(session: SessionDep) -> RepoBundle:
    return build_repos(session)


ReposDep = Annotated[RepoBundle, Depends(get_repos)]


def get_query_executor(database: DatabaseDep) -> QueryExecutor:
    return QueryExecutor(database)


def get_schema_inspector(database: DatabaseDep) -> SchemaInspector:
    return SchemaInspector(database)


QueryExecutorDep = Annotated[QueryExecutor, Depends(get_query_executor)]
SchemaInspectorDep = Annotated[SchemaInspector, Depends(get_schema_inspector)]
