"""
Database utility functions for engine and session management.

Functions:
- normalize_database_url: Rewrites sync driver URLs to their async drivers
- is_memory_database: Detects in-memory SQLite URLs
- create_engine: Creates async SQLAlchemy engine with a bounded pool
- create_sessionmaker: Creates async session factory with safe defaults
- create_all: Creates all tables from ORM metadata (for tests/dev)
"""

from __future__ import annotations

import re
from typing import Any, Dict

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.engine import make_url
from sqlalchemy.pool import StaticPool

from .base import Base

_ASYNC_DRIVERS = (
    (re.compile(r"^postgres(?:ql)?(?:\+[a-z0-9_]+)?://"), "postgresql+asyncpg://"),
    (re.compile(r"^mysql(?:\+[a-z0-9_]+)?://"), "mysql+aiomysql://"),
    (re.compile(r"^sqlite(?:\+[a-z0-9_]+)?://"), "sqlite+aiosqlite://"),
)


def normalize_database_url(db_url: str) -> str:
    """Rewrite a database URL so the async driver is used.

    For example ``postgresql://`` becomes ``postgresql+asyncpg://`` and
    ``mysql+pymysql://`` becomes ``mysql+aiomysql://``.

    Args:
        db_url: Database connection URL

    Returns:
        URL using the async driver of the same backend
    """
    for pattern, replacement in _ASYNC_DRIVERS:
        if pattern.match(db_url):
            return pattern.sub(replacement, db_url, count=1)
    return db_url


def is_memory_database(db_url: str) -> bool:
    """Whether ``db_url`` points at an in-memory SQLite database."""
    url = make_url(db_url)
    if url.get_backend_name() != "sqlite":
        return False
    database = url.database or ""
    return database in ("", ":memory:") or url.query.get("mode") == "memory"


def create_engine(db_url: str, *, pool_size: int = 10, echo: bool = False) -> AsyncEngine:
    """Create an async SQLAlchemy engine.

    Server backends get a fixed-size pool (no overflow) with pre-ping.
    An in-memory SQLite database lives in one connection, so it is shared
    through a static pool; file-backed SQLite is pooled like any server.

    Args:
        db_url: Database connection URL
        pool_size: Number of pooled connections
        echo: Log every statement through SQLAlchemy

    Returns:
        Configured AsyncEngine instance
    """
    url = normalize_database_url(db_url)
    kwargs: Dict[str, Any] = {"echo": echo}
    if is_memory_database(url):
        kwargs["connect_args"] = {"check_same_thread": False}
        kwargs["poolclass"] = StaticPool
    else:
        kwargs["pool_size"] = pool_size
        kwargs["max_overflow"] = 0
        kwargs["pool_pre_ping"] = True
    return create_async_engine(url, **kwargs)


def create_sessionmaker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create an ``async_sessionmaker`` with safe defaults for this project.

    Args:
        engine: Async SQLAlchemy engine

    Returns:
        Configured async session factory
    """
    return async_sessionmaker(engine, expire_on_commit=False)


async def create_all(engine: AsyncEngine) -> None:
    """Create all tables for the current ORM metadata.

    This is mainly intended for tests and local development.
    Production should use Alembic migrations instead.

    Args:
        engine: Async SQLAlchemy engine
    """
    # Register every table on the metadata before creating it
    from . import entities  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
