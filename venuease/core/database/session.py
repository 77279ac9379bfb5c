"""
Database handle and session management.

The ``Database`` handle owns the AsyncEngine (and with it the bounded
connection pool) plus the session factory. It is constructed once at process
start, handed to request handlers through dependency injection and disposed
on shutdown. Nothing in this module holds a global engine.
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import TYPE_CHECKING, AsyncIterator

from sqlalchemy.ext.asyncio import AsyncConnection, AsyncEngine, AsyncSession

from venuease.core.logging_config import get_logger

from .utils import create_all, create_engine, create_sessionmaker

if TYPE_CHECKING:
    from venuease.server.core.config import DatabaseConfig

logger = get_logger(__name__)


class Database:
    """Explicitly constructed handle around one engine and its session factory."""

    def __init__(self, url: str, *, pool_size: int = 10, echo: bool = False) -> None:
        self.engine: AsyncEngine = create_engine(url, pool_size=pool_size, echo=echo)
        self.session_maker = create_sessionmaker(self.engine)

    @classmethod
    def from_config(cls, config: DatabaseConfig) -> "Database":
        """Build a handle from the grouped database settings."""
        return cls(config.connection_url, pool_size=config.pool_size)

    @property
    def dialect_name(self) -> str:
        return self.engine.dialect.name

    @asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        """Yield an ORM session; the underlying connection returns to the pool on exit."""
        async with self.session_maker() as session:
            yield session

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[AsyncConnection]:
        """Yield one pooled connection inside a transaction.

        Commits when the block exits normally and rolls back when it raises.
        """
        async with self.engine.begin() as conn:
            yield conn

    async def create_all(self) -> None:
        """Create any missing tables from the ORM metadata."""
        await create_all(self.engine)
        logger.info("Database tables ensured")

    async def dispose(self) -> None:
        """Close every pooled connection."""
        await self.engine.dispose()
        logger.info("Database connection pool disposed")

    def __repr__(self) -> str:
        return f"Database(url={self.engine.url!r})"
