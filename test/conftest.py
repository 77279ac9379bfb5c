"""Shared fixtures: an in-memory SQLite database, a session and an HTTP client per test."""

import os
from typing import AsyncGenerator

# Settings are read at import time; point them at SQLite before importing the app
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["LOGFIRE_ENABLED"] = "false"

import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from venuease.core.database import Database
from venuease.core.database.repositories import RepoBundle, build_repos

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest_asyncio.fixture(name="database")
async def database_fixture() -> AsyncGenerator[Database, None]:
    """A fresh in-memory database with every table created."""
    database = Database(TEST_DATABASE_URL)
    await database.create_all()
    try:
        yield database
    finally:
        await database.dispose()


@pytest_asyncio.fixture(name="session")
async def session_fixture(database: Database) -> AsyncGenerator[AsyncSession, None]:
    async with database.session() as session:
        yield session


@pytest_asyncio.fixture(name="repos")
async def repos_fixture(session: AsyncSession) -> RepoBundle:
    return build_repos(session)


@pytest_asyncio.fixture(name="client")
async def client_fixture(database: Database) -> AsyncGenerator[AsyncClient, None]:
    """Async HTTP client against an app wired to the test database."""
    from venuease.server.main import create_app

    app = create_app(database)
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://localhost") as client:
        yield client
