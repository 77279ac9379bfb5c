"""
Unit tests for the query builder endpoints.

Tests cover:
- Row-returning queries and the camelCase response shape
- Statements that change rows
- Rejected input (blank, wrong type, missing)
- Classified engine errors
- Schema description for the sidebar
"""

import pytest
import pytest_asyncio
from httpx import AsyncClient

from venuease.core.database.entities import Customer

pytestmark = pytest.mark.asyncio

QUERY_URL = "/api/admin/database/query"


@pytest_asyncio.fixture
async def customers(repos):
    for name, email in (("Ada Lovelace", "ada@example.com"), ("Alan Turing", "alan@example.com")):
        await repos.customers.create(Customer(full_name=name, email=email, password_hash="x"))


class TestExecuteQuery:
    async def test_select_all_customers(self, client: AsyncClient, customers):
        response = await client.post(QUERY_URL, json={"query": "SELECT * FROM CUSTOMERS"})

        assert response.status_code == 200
        data = response.json()
        assert data["success"] is True
        assert data["rowCount"] == len(data["results"]) == 2
        assert "customer_id" in data["columns"]
        assert set(data["columns"]) == set(data["results"][0].keys())
        assert {row["email"] for row in data["results"]} == {"ada@example.com", "alan@example.com"}
        assert data["message"] == "Query executed successfully. 2 row(s) returned."
        assert data["executionTime"] >= 0

    async def test_select_empty_table(self, client: AsyncClient):
        response = await client.post(QUERY_URL, json={"query": "SELECT * FROM venue"})

        data = response.json()
        assert data["rowCount"] == 0
        assert data["results"] == []

    async def test_update_reports_affected_rows(self, client: AsyncClient, customers):
        response = await client.post(QUERY_URL, json={"query": "UPDATE customers SET phone = '555-0100'"})

        assert response.status_code == 200
        data = response.json()
        assert data["rowCount"] == 0
        assert data["affectedRows"] == 2
        assert data["results"] == []

    async def test_values_are_json_encoded(self, client: AsyncClient, customers):
        response = await client.post(QUERY_URL, json={"query": "SELECT date_created, is_active FROM customers"})

        row = response.json()["results"][0]
        assert isinstance(row["date_created"], str)
        assert row["is_active"] in (1, True)


class TestRejectedInput:
    @pytest.mark.parametrize("query", ["", "   ", "\n\t"])
    async def test_blank_query(self, client: AsyncClient, query):
        response = await client.post(QUERY_URL, json={"query": query})

        assert response.status_code == 400
        assert response.json() == {"error": "Please enter a SQL query"}

    async def test_missing_query(self, client: AsyncClient):
        response = await client.post(QUERY_URL, json={})

        assert response.status_code == 400
        assert "error" in response.json()

    async def test_non_string_query(self, client: AsyncClient):
        response = await client.post(QUERY_URL, json={"query": 42})
        assert response.status_code == 400


class TestClassifiedErrors:
    async def test_missing_table(self, client: AsyncClient):
        response = await client.post(QUERY_URL, json={"query": "SELECT * FROM NOPE"})

        assert response.status_code == 400
        data = response.json()
        assert data["category"] == "table_not_found"
        assert data["error"] == "Table not found. Please check the table name."
        assert "NOPE" in data["sqlError"]

    async def test_missing_column(self, client: AsyncClient):
        response = await client.post(QUERY_URL, json={"query": "SELECT nope FROM customers"})

        assert response.status_code == 400
        assert response.json()["category"] == "column_not_found"

    async def test_syntax_error(self, client: AsyncClient):
        response = await client.post(QUERY_URL, json={"query": "SELEC * FROM customers"})

        assert response.status_code == 400
        assert response.json()["category"] == "syntax_error"

    async def test_other_engine_error(self, client: AsyncClient, customers):
        response = await client.post(
            QUERY_URL,
            json={"query": "INSERT INTO customers (full_name, email, password_hash, is_active, date_created) "
                  "VALUES ('Dup', 'ada@example.com', 'x', 1, '2026-01-01 00:00:00')"},
        )

        assert response.status_code == 400
        data = response.json()
        assert data["category"] == "database_error"
        assert data["error"] == data["sqlError"]


class TestSchemaInfo:
    async def test_lists_every_table(self, client: AsyncClient, customers):
        response = await client.get("/api/admin/database/schema-info")

        assert response.status_code == 200
        tables = {t["tableName"]: t for t in response.json()}
        assert set(tables) == {"admin", "booking", "customers", "events", "payment", "venue"}
        assert tables["customers"]["rowCount"] == 2
        assert all(t["columns"] for t in tables.values())

        columns = {c["name"]: c for c in tables["customers"]["columns"]}
        assert columns["customer_id"]["keyType"] == "PRI"
        assert columns["email"]["keyType"] == "UNI"
        assert set(columns["email"]) == {"name", "type", "keyType"}
