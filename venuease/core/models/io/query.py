"""
Query builder I/O models.

The wire format uses camelCase keys (``rowCount``, ``tableName``, ...), the
shape the admin console consumes.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class QueryRequest(BaseModel):
    """Body of an ad-hoc query submission."""

    query: str = Field(description="SQL text, executed as-is", examples=["SELECT * FROM CUSTOMERS"])


class QueryResponse(BaseModel):
    """Successful execution of an ad-hoc query."""

    success: bool = True
    results: List[Dict[str, Any]] = Field(description="Rows in engine order, keyed by column name")
    row_count: int = Field(description="Number of rows in results")
    affected_rows: int = Field(description="Rows changed by a statement that returns no rows, -1 if unknown")
    columns: List[str]
    execution_time: float = Field(description="Server-side execution time in milliseconds")
    message: str

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class QueryErrorResponse(BaseModel):
    """Failed validation or execution of an ad-hoc query."""

    error: str
    sql_error: Optional[str] = Field(default=None, description="Raw engine message")
    category: Optional[str] = None

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class SchemaColumnRead(BaseModel):
    name: str
    type: str
    key_type: str = Field(description="PRI, UNI, MUL or empty")

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


class SchemaTableRead(BaseModel):
    table_name: str
    row_count: int
    columns: List[SchemaColumnRead]

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)
