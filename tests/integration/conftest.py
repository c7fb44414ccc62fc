"""Fixtures for tests against a real SQL database.

The schema is created on an in-memory SQLite database through aiosqlite,
so the SQL repositories run their actual statements.
"""

import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlalchemy.pool import StaticPool

from newsboard.persistence.database import create_schema, create_session_factory


@pytest_asyncio.fixture
async def db_session():
    """Session on a fresh schema, rolled back after the test."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    await create_schema(engine)

    session_factory = create_session_factory(engine)
    session: AsyncSession = session_factory()
    try:
        yield session
    finally:
        await session.rollback()
        await session.close()
        await engine.dispose()
