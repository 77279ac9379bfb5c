"""
Schema introspection for the query builder sidebar.

Read-only. Table and column metadata come from the engine catalog through
SQLAlchemy's inspector; row counts use the engine's own estimate where it
keeps one (MySQL ``TABLE_ROWS``, PostgreSQL ``reltuples``) and an exact
``COUNT(*)`` otherwise.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional

from sqlalchemy import inspect, text
from sqlalchemy.engine import Connection

from venuease.core.database.session import Database
from venuease.core.logging_config import get_logger

logger = get_logger(__name__)

PRIMARY_KEY = "PRI"
UNIQUE_KEY = "UNI"
MULTIPLE_KEY = "MUL"


@dataclass
class ColumnInfo:
    name: str
    type: str
    key_type: str


@dataclass
class TableInfo:
    table_name: str
    row_count: int
    columns: List[ColumnInfo]


def _column_key_types(inspector, table_name: str) -> Dict[str, str]:
    """Key role per column, using MySQL's ``COLUMN_KEY`` vocabulary.

    ``PRI`` wins over ``UNI`` which wins over ``MUL``. Only single-column
    unique constraints/indexes mark a column ``UNI``; a column leading a
    composite or non-unique index, or carrying a foreign key, is ``MUL``.
    """
    key_types: Dict[str, str] = {}

    def mark(column: Optional[str], key_type: str) -> None:
        if not column:
            return
        rank = (PRIMARY_KEY, UNIQUE_KEY, MULTIPLE_KEY)
        current = key_types.get(column)
        if current is None or rank.index(key_type) < rank.index(current):
            key_types[column] = key_type

    pk = inspector.get_pk_constraint(table_name) or {}
    for column in pk.get("constrained_columns") or []:
        mark(column, PRIMARY_KEY)

    unique_sets: List[List[str]] = [
        list(constraint.get("column_names") or []) for constraint in inspector.get_unique_constraints(table_name)
    ]
    for index in inspector.get_indexes(table_name):
        columns = [c for c in (index.get("column_names") or []) if c]
        if not columns:
            continue
        if index.get("unique"):
            unique_sets.append(columns)
        else:
            mark(columns[0], MULTIPLE_KEY)

    for columns in unique_sets:
        if len(columns) == 1:
            mark(columns[0], UNIQUE_KEY)
        elif columns:
            mark(columns[0], MULTIPLE_KEY)

    for fk in inspector.get_foreign_keys(table_name):
        for column in fk.get("constrained_columns") or []:
            mark(column, MULTIPLE_KEY)

    return key_types


def _row_estimates(conn: Connection) -> Dict[str, int]:
    """Engine-maintained row estimates keyed by table name, where available."""
    dialect = conn.dialect.name
    if dialect == "mysql":
        rows = conn.execute(
            text(
                "SELECT TABLE_NAME, TABLE_ROWS FROM information_schema.TABLES "
                "WHERE TABLE_SCHEMA = DATABASE() AND TABLE_TYPE = 'BASE TABLE'"
            )
        )
        return {name: int(count) for name, count in rows if count is not None}
    if dialect == "postgresql":
        rows = conn.execute(
            text(
                "SELECT c.relname, c.reltuples FROM pg_class c "
                "JOIN pg_namespace n ON n.oid = c.relnamespace "
                "WHERE n.nspname = current_schema() AND c.relkind = 'r'"
            )
        )
        # reltuples is -1 for tables that were never vacuumed or analyzed
        return {name: int(count) for name, count in rows if count is not None and count >= 0}
    return {}


def _count_rows(conn: Connection, table_name: str) -> int:
    quoted = conn.dialect.identifier_preparer.quote(table_name)
    return int(conn.execute(text(f"SELECT COUNT(*) FROM {quoted}")).scalar_one())


def _collect_schema(conn: Connection) -> List[TableInfo]:
    inspector = inspect(conn)
    estimates = _row_estimates(conn)
    tables: List[TableInfo] = []
    for table_name in sorted(inspector.get_table_names()):
        key_types = _column_key_types(inspector, table_name)
        columns = [
            ColumnInfo(
                name=column["name"],
                type=str(column["type"]),
                key_type=key_types.get(column["name"], ""),
            )
            for column in inspector.get_columns(table_name)
        ]
        row_count = estimates.get(table_name)
        if row_count is None:
            row_count = _count_rows(conn, table_name)
        tables.append(TableInfo(table_name=table_name, row_count=row_count, columns=columns))
    return tables


class SchemaInspector:
    """Reads table and column metadata through a ``Database`` handle."""

    def __init__(self, database: Database) -> None:
        self.database = database

    async def describe(self) -> List[TableInfo]:
        """Describe every table of the current schema, sorted by name."""
        async with self.database.engine.connect() as conn:
            tables = await conn.run_sync(_collect_schema)
        logger.debug(f"Described {len(tables)} tables")
        return tables

