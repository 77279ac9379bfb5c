"""
Ad-hoc query execution for the admin query builder.

- executor: validates and runs operator-supplied SQL, returning a ``ResultSet``
- errors: error types and the engine error classifier
- schema: read-only table/column introspection for the sidebar
"""

from .errors import (
    ErrorCategory,
    QueryError,
    QueryExecutionError,
    QueryValidationError,
    classify_engine_error,
)
from .executor import Query, QueryExecutor, ResultSet
from .schema import ColumnInfo, SchemaInspector, TableInfo

__all__ = [
    "ColumnInfo",
    "ErrorCategory",
    "Query",
    "QueryError",
    "QueryExecutionError",
    "QueryExecutor",
    "QueryValidationError",
    "ResultSet",
    "SchemaInspector",
    "TableInfo",
    "classify_engine_error",
]
