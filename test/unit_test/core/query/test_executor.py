"""
Unit tests for the ad-hoc query executor.

Run against an in-memory SQLite database with the application tables.
"""

from unittest.mock import MagicMock

import pytest
import pytest_asyncio

from venuease.core.database.entities import Customer, Venue
from venuease.core.query import (
    ErrorCategory,
    Query,
    QueryExecutionError,
    QueryExecutor,
    QueryValidationError,
)

pytestmark = pytest.mark.asyncio


@pytest_asyncio.fixture
async def seeded(session):
    session.add_all(
        [
            Customer(full_name="Ada Lovelace", email="ada@example.com", password_hash="x"),
            Customer(full_name="Alan Turing", email="alan@example.com", password_hash="x"),
            Venue(venue_name="Grand Hall", address="1 Main St", capacity=200),
        ]
    )
    await session.commit()


class TestQueryParse:
    def test_keeps_raw_text(self):
        query = Query.parse("  SELECT 1  ")
        assert query.raw == "  SELECT 1  "
        assert query.text == "SELECT 1"

    @pytest.mark.parametrize("value", ["", "   ", "\n\t "])
    def test_blank_text_is_rejected(self, value):
        with pytest.raises(QueryValidationError, match="Please enter a SQL query"):
            Query.parse(value)

    @pytest.mark.parametrize("value", [None, 42, ["SELECT 1"]])
    def test_non_string_is_rejected(self, value):
        with pytest.raises(QueryValidationError, match="Query must be a string"):
            Query.parse(value)

    def test_preview_is_flattened_and_truncated(self):
        query = Query.parse("SELECT\n  " + "x, " * 200 + "1")
        assert "\n" not in query.preview
        assert query.preview.endswith("...")
        assert len(query.preview) == 203


class TestExecuteSelect:
    async def test_rows_are_mapped_by_column(self, database, seeded):
        result = await QueryExecutor(database).execute("SELECT full_name, email FROM customers ORDER BY email")

        assert result.columns == ["full_name", "email"]
        assert result.rows == [
            {"full_name": "Ada Lovelace", "email": "ada@example.com"},
            {"full_name": "Alan Turing", "email": "alan@example.com"},
        ]
        assert result.row_count == len(result.rows) == 2
        assert result.returns_rows is True
        assert result.summary() == "Query executed successfully. 2 row(s) returned."
        assert result.duration_ms >= 0

    async def test_uppercase_table_name(self, database, seeded):
        result = await QueryExecutor(database).execute("SELECT * FROM CUSTOMERS")

        assert result.row_count == 2
        assert {"customer_id", "full_name", "email", "password_hash"} <= set(result.columns)

    async def test_empty_result(self, database):
        result = await QueryExecutor(database).execute("SELECT * FROM venue")

        assert result.rows == []
        assert result.row_count == 0
        assert "venue_name" in result.columns

    async def test_percent_and_colon_reach_the_engine_verbatim(self, database, seeded):
        result = await QueryExecutor(database).execute(
            "SELECT email FROM customers WHERE email LIKE 'a%' AND ':name' = ':name' ORDER BY email"
        )
        assert result.row_count == 2


class TestExecuteStatements:
    async def test_update_reports_affected_rows(self, database, seeded):
        executor = QueryExecutor(database)

        result = await executor.execute("UPDATE customers SET phone = '555-0100'")

        assert result.rows == []
        assert result.columns == []
        assert result.returns_rows is False
        assert result.affected_rows == 2
        assert result.summary() == "Query executed successfully. 2 row(s) affected."

        check = await executor.execute("SELECT phone FROM customers WHERE phone = '555-0100'")
        assert check.row_count == 2

    async def test_failed_statement_is_rolled_back(self, database, seeded):
        executor = QueryExecutor(database)

        with pytest.raises(QueryExecutionError):
            await executor.execute("INSERT INTO customers (full_name) VALUES ('no email')")

        result = await executor.execute("SELECT * FROM customers")
        assert result.row_count == 2


class TestExecuteErrors:
    async def test_missing_table(self, database):
        with pytest.raises(QueryExecutionError) as exc_info:
            await QueryExecutor(database).execute("SELECT * FROM NOPE")

        error = exc_info.value
        assert error.category is ErrorCategory.table_not_found
        assert error.message == "Table not found. Please check the table name."
        assert "NOPE" in error.engine_message

    async def test_missing_column(self, database):
        with pytest.raises(QueryExecutionError) as exc_info:
            await QueryExecutor(database).execute("SELECT no_such_col FROM customers")

        assert exc_info.value.category is ErrorCategory.column_not_found

    async def test_syntax_error(self, database):
        with pytest.raises(QueryExecutionError) as exc_info:
            await QueryExecutor(database).execute("SELEC * FROM customers")

        assert exc_info.value.category is ErrorCategory.syntax_error

    async def test_blank_query_never_touches_the_database(self):
        database = MagicMock()

        with pytest.raises(QueryValidationError):
            await QueryExecutor(database).execute("   ")

        database.transaction.assert_not_called()
