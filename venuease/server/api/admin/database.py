"""
Query builder endpoints of the admin console.

``POST /query`` runs operator-supplied SQL as-is and ``GET /schema-info``
describes every table for the sidebar. Failures are turned into responses
by the query exception handlers.
"""

from typing import List

from fastapi import APIRouter
from fastapi.encoders import jsonable_encoder

from venuease.core.models.io import QueryErrorResponse, QueryRequest, QueryResponse, SchemaTableRead
from venuease.server.services.deps import QueryExecutorDep, SchemaInspectorDep

router = APIRouter(tags=["admin-database"])


@router.post(
    "/query",
    response_model=QueryResponse,
    response_model_by_alias=True,
    summary="Execute SQL Query",
    description="Execute one SQL statement against the live database and return its rows.",
    responses={400: {"model": QueryErrorResponse, "description": "Empty query or the engine rejected it"}},
)
async def execute_query(request: QueryRequest, executor: QueryExecutorDep) -> QueryResponse:
    """
    Execute an ad-hoc SQL query.

    The statement is executed unmodified with the application's database
    privileges. Row-returning statements report their rows in ``results``;
    other statements report ``affectedRows``.

    - **query**: SQL text.
    """
    result = await executor.execute(request.query)
    return QueryResponse(
        results=jsonable_encoder(result.rows, custom_encoder={bytes: bytes.hex}),
        row_count=result.row_count,
        affected_rows=result.affected_rows,
        columns=result.columns,
        execution_time=round(result.duration_ms, 3),
        message=result.summary(),
    )


@router.get(
    "/schema-info",
    response_model=List[SchemaTableRead],
    response_model_by_alias=True,
    summary="Describe Database Schema",
    description="List every table with its estimated row count and its columns' types and key roles.",
)
async def schema_info(inspector: SchemaInspectorDep) -> List[SchemaTableRead]:
    tables = await inspector.describe()
    return [SchemaTableRead.model_validate(table) for table in tables]
