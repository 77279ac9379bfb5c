"""
Ad-hoc Query Executor.

Runs operator-supplied SQL against the live database and returns the rows,
or a classified error. There is deliberately no statement-type allow-list:
any text the engine accepts is executed as-is with the privileges of the
application's database user, so this is the one place where a free-form
command (rather than a fixed parameterized statement) crosses the trust
boundary.
"""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List

from sqlalchemy.exc import DBAPIError

from venuease.core.database.base import utc_now
from venuease.core.database.session import Database
from venuease.core.logging_config import get_logger
from venuease.core.monitoring import log_query_execution

from .errors import QueryExecutionError, QueryValidationError, to_execution_error

logger = get_logger(__name__)

_LOG_PREVIEW_CHARS = 200


@dataclass(frozen=True)
class Query:
    """One submitted query. Exists only for the duration of a request."""

    raw: str
    submitted_at: datetime = field(default_factory=utc_now)

    @property
    def text(self) -> str:
        """Trimmed form of the submitted text."""
        return self.raw.strip()

    @property
    def preview(self) -> str:
        flat = " ".join(self.text.split())
        if len(flat) <= _LOG_PREVIEW_CHARS:
            return flat
        return flat[:_LOG_PREVIEW_CHARS] + "..."

    @classmethod
    def parse(cls, value: Any) -> "Query":
        """Validate raw input and wrap it.

        Raises:
            QueryValidationError: When ``value`` is not a string or is blank
        """
        if not isinstance(value, str):
            raise QueryValidationError("Query must be a string")
        if not value.strip():
            raise QueryValidationError("Please enter a SQL query")
        return cls(raw=value)


@dataclass
class ResultSet:
    """Rows and metadata produced by one query execution.

    ``rows`` keep the engine's order; each row maps column name to value.
    ``affected_rows`` is the driver rowcount for statements that return no
    rows (``-1`` when the driver does not report it).
    """

    query: Query
    columns: List[str]
    rows: List[Dict[str, Any]]
    affected_rows: int
    duration_ms: float
    executed_at: datetime

    @property
    def row_count(self) -> int:
        return len(self.rows)

    @property
    def returns_rows(self) -> bool:
        return bool(self.columns)

    def summary(self) -> str:
        if self.returns_rows:
            return f"Query executed successfully. {self.row_count} row(s) returned."
        if self.affected_rows >= 0:
            return f"Query executed successfully. {self.affected_rows} row(s) affected."
        return "Query executed successfully."


class QueryExecutor:
    """Executes ad-hoc SQL through a ``Database`` handle.

    Each call acquires one pooled connection, runs exactly one statement in a
    transaction (committed on success, rolled back on failure) and releases
    the connection. Nothing is retried.
    """

    def __init__(self, database: Database) -> None:
        self.database = database

    async def execute(self, value: Any) -> ResultSet:
        """Validate and execute a query.

        The text is handed to the driver unmodified, so no bind-parameter
        parsing happens and ``:name`` or ``%`` sequences reach the engine
        verbatim.

        Args:
            value: Query text as received from the caller

        Returns:
            The ``ResultSet`` of the execution

        Raises:
            QueryValidationError: Input was not a non-empty string; the
                database was not contacted
            QueryExecutionError: The engine rejected the statement
        """
        query = Query.parse(value)
        logger.info(f"Executing ad-hoc query: {query.preview}")

        started = time.perf_counter()
        try:
            async with self.database.transaction() as conn:
                result = await conn.exec_driver_sql(query.raw, execution_options={"no_parameters": True})
                if result.returns_rows:
                    columns = list(result.keys())
                    rows = [dict(row._mapping) for row in result.fetchall()]
                    affected = -1
                else:
                    columns = []
                    rows = []
                    affected = result.rowcount
        except DBAPIError as exc:
            duration_ms = (time.perf_counter() - started) * 1000
            error = to_execution_error(exc)
            logger.warning(
                f"Ad-hoc query failed [{error.category.value}]: {error.engine_message}",
                extra={"code": error.code, "duration_ms": duration_ms},
            )
            log_query_execution(0, duration_ms, error.category.value)
            raise error from exc

        duration_ms = (time.perf_counter() - started) * 1000
        result_set = ResultSet(
            query=query,
            columns=columns,
            rows=rows,
            affected_rows=affected,
            duration_ms=duration_ms,
            executed_at=utc_now(),
        )
        logger.info(f"Ad-hoc query finished: {result_set.summary()} ({duration_ms:.2f}ms)")
        log_query_execution(result_set.row_count, duration_ms)
        return result_set


__all__ = ["Query", "QueryExecutionError", "QueryExecutor", "QueryValidationError", "ResultSet"]
