"""
Centralized database layer for VenuEase.

Structure:
- entities/: Database entity models, one module per table
- repositories/: Data access layer, one repository per entity
- session.py: The injectable ``Database`` handle (engine, pool, sessions)
- utils.py: Engine, session factory and table creation helpers
"""

from .base import Base
from .session import Database
from .utils import (
    create_all,
    create_engine,
    create_sessionmaker,
    is_memory_database,
    normalize_database_url,
)

__all__ = [
    "Base",
    "Database",
    "create_all",
    "create_engine",
    "create_sessionmaker",
    "is_memory_database",
    "normalize_database_url",
]
