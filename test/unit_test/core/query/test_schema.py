"""Unit tests for schema introspection."""

import pytest

from venuease.core.database.entities import Customer, Venue
from venuease.core.query import SchemaInspector

pytestmark = pytest.mark.asyncio

APP_TABLES = {"admin", "booking", "customers", "events", "payment", "venue"}


class TestDescribe:
    async def test_lists_every_table_sorted(self, database):
        tables = await SchemaInspector(database).describe()

        names = [t.table_name for t in tables]
        assert set(names) == APP_TABLES
        assert names == sorted(names)
        assert all(t.columns for t in tables)

    async def test_row_counts_match_the_engine(self, database, session):
        session.add(Customer(full_name="Ada", email="ada@example.com", password_hash="x"))
        session.add(Venue(venue_name="Hall", address="1 Main St", capacity=10))
        session.add(Venue(venue_name="Loft", address="2 Main St", capacity=20))
        await session.commit()

        tables = {t.table_name: t for t in await SchemaInspector(database).describe()}

        assert tables["customers"].row_count == 1
        assert tables["venue"].row_count == 2
        assert tables["booking"].row_count == 0

    async def test_key_types(self, database):
        tables = {t.table_name: t for t in await SchemaInspector(database).describe()}

        customers = {c.name: c for c in tables["customers"].columns}
        assert customers["customer_id"].key_type == "PRI"
        assert customers["email"].key_type == "UNI"
        assert customers["full_name"].key_type == ""

        booking = {c.name: c for c in tables["booking"].columns}
        assert booking["booking_id"].key_type == "PRI"
        assert booking["customer_id"].key_type == "MUL"
        assert booking["event_id"].key_type == "MUL"

    async def test_column_types_are_reported(self, database):
        tables = {t.table_name: t for t in await SchemaInspector(database).describe()}

        venue = {c.name: c for c in tables["venue"].columns}
        assert venue["capacity"].type == "INTEGER"
        assert venue["venue_name"].type.startswith("VARCHAR")
