"""
Query executor errors and engine error classification.

Engine failures are mapped onto a small set of user-facing categories.
The structured error code of the driver is consulted first (MySQL errno,
SQLSTATE); the keyword rules on the engine message only apply when no
known code is present.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple, Union

from sqlalchemy.exc import DBAPIError


class ErrorCategory(str, Enum):
    """User-facing class of a failed query."""

    table_not_found = "table_not_found"
    column_not_found = "column_not_found"
    syntax_error = "syntax_error"
    database_error = "database_error"

    @property
    def label(self) -> str:
        return _LABELS[self]


_LABELS = {
    ErrorCategory.table_not_found: "Table not found",
    ErrorCategory.column_not_found: "Column not found",
    ErrorCategory.syntax_error: "Syntax error",
    ErrorCategory.database_error: "Database error",
}

_HINTS = {
    ErrorCategory.table_not_found: "Please check the table name.",
    ErrorCategory.column_not_found: "Please check the column names.",
    ErrorCategory.syntax_error: "Please check your SQL syntax.",
}

# MySQL server error numbers (ER_NO_SUCH_TABLE, ER_BAD_FIELD_ERROR, ER_PARSE_ERROR)
MYSQL_ERROR_CODES = {
    1146: ErrorCategory.table_not_found,
    1054: ErrorCategory.column_not_found,
    1064: ErrorCategory.syntax_error,
}

SQLSTATE_CODES = {
    "42P01": ErrorCategory.table_not_found,  # PostgreSQL undefined_table
    "42S02": ErrorCategory.table_not_found,  # ODBC base table not found
    "42703": ErrorCategory.column_not_found,  # PostgreSQL undefined_column
    "42S22": ErrorCategory.column_not_found,  # ODBC column not found
    "42601": ErrorCategory.syntax_error,  # PostgreSQL syntax_error
}

# (category, any of these phrases, and any of these subjects); evaluated in order
KEYWORD_RULES: Tuple[Tuple[ErrorCategory, Tuple[str, ...], Tuple[str, ...]], ...] = (
    (ErrorCategory.table_not_found, ("doesn't exist", "does not exist", "no such table"), ("table", "relation")),
    (ErrorCategory.column_not_found, ("unknown", "no such column", "does not exist"), ("column",)),
    (ErrorCategory.syntax_error, ("syntax",), ()),
)


class QueryError(Exception):
    """Base class for errors raised by the query executor."""


class QueryValidationError(QueryError):
    """The submitted query is not a non-empty string; nothing was executed."""


@dataclass(eq=False)
class QueryExecutionError(QueryError):
    """The engine rejected the query.

    Attributes:
        category: Classified error category
        message: Human-readable message for the caller
        engine_message: Raw message reported by the engine
        code: Structured engine code (errno or SQLSTATE) when available
    """

    category: ErrorCategory
    message: str
    engine_message: str
    code: Optional[Union[int, str]] = None

    def __post_init__(self) -> None:
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message


def engine_error_details(exc: BaseException) -> Tuple[str, Optional[Union[int, str]]]:
    """Extract the raw engine message and structured code from a driver error.

    SQLAlchemy wraps driver errors in ``DBAPIError``; the driver exception is
    available as ``orig``. MySQL drivers carry ``(errno, message)`` in
    ``args``; PostgreSQL drivers expose ``sqlstate`` or ``pgcode``.

    Args:
        exc: The exception raised while executing

    Returns:
        Tuple of (engine message, code or None)
    """
    orig = exc.orig if isinstance(exc, DBAPIError) and exc.orig is not None else exc

    code: Optional[Union[int, str]] = None
    message: Optional[str] = None

    args = getattr(orig, "args", ())
    if len(args) >= 2 and isinstance(args[0], int):
        code, message = args[0], str(args[1])

    if code is None:
        sqlstate = getattr(orig, "sqlstate", None) or getattr(orig, "pgcode", None)
        if isinstance(sqlstate, str) and sqlstate:
            code = sqlstate

    if message is None:
        message = str(orig).strip() or type(orig).__name__
    return message, code


def classify_engine_error(engine_message: str, code: Optional[Union[int, str]] = None) -> ErrorCategory:
    """Map an engine error onto an ``ErrorCategory``.

    Args:
        engine_message: Raw message reported by the engine
        code: MySQL errno or SQLSTATE when the driver provided one

    Returns:
        The matching category, ``database_error`` when nothing matches
    """
    if isinstance(code, int) and code in MYSQL_ERROR_CODES:
        return MYSQL_ERROR_CODES[code]
    if isinstance(code, str) and code.upper() in SQLSTATE_CODES:
        return SQLSTATE_CODES[code.upper()]

    lowered = engine_message.lower()
    for category, phrases, subjects in KEYWORD_RULES:
        if not any(phrase in lowered for phrase in phrases):
            continue
        if subjects and not any(subject in lowered for subject in subjects):
            continue
        return category
    return ErrorCategory.database_error


def to_execution_error(exc: BaseException) -> QueryExecutionError:
    """Build the classified ``QueryExecutionError`` for an engine failure.

    Recognised categories get a label and a hint; anything else passes the
    raw engine message through unchanged.
    """
    engine_message, code = engine_error_details(exc)
    category = classify_engine_error(engine_message, code)
    if category is ErrorCategory.database_error:
        message = engine_message
    else:
        message = f"{category.label}. {_HINTS[category]}"
    return QueryExecutionError(category=category, message=message, engine_message=engine_message, code=code)
