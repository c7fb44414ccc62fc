"""Test harness for unit and API tests.

Settings are loaded from environment variables (configure via .env or export).
"""

import asyncio

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

from newsboard.config import DatabaseSettings, Settings
from newsboard.interface.api.app import create_app
from newsboard.persistence.database import create_engine, create_schema
from newsboard.util.di import Component
from tests.di import build_test_container


def create_env_fixture(unmock: set[Component] | None = None):
    """Factory for creating test environment fixtures.

    Creates a pytest fixture that builds a test container with the given
    components unmocked and yields a request-scoped container for
    service access.

    Args:
        unmock: Components to use real implementations for

    Returns:
        Pytest fixture function that yields AsyncContainer

    Usage:
        unit_env = create_env_fixture()

        @pytest.mark.asyncio
        async def test_toggle(unit_env):
            service = await unit_env.get(UpvoteService)
            ...
    """

    @pytest_asyncio.fixture
    async def _test_environment():
        container = build_test_container(unmock=unmock or set())

        async with container() as request_container:
            yield request_container

        await container.close()

    return _test_environment


def create_client_fixture(
    unmock: set[Component] | None = None, raise_server_exceptions: bool = True
):
    """Factory for TestClient fixtures over the mocked container.

    Every test gets a fresh app and therefore an empty in-memory store.
    """

    @pytest.fixture
    def _client():
        settings = Settings()
        container = build_test_container(unmock=unmock or set(), settings=settings)
        app_instance = create_app(settings=settings, container=container)
        with TestClient(
            app_instance, raise_server_exceptions=raise_server_exceptions
        ) as client:
            yield client

    return _client


def create_sql_client_fixture(unmock: set[Component] | None = None):
    """Factory for TestClient fixtures over the production SQL persistence.

    Each test gets a fresh SQLite file, so requests run through the real
    request-scoped session with its commit and rollback.
    """

    @pytest.fixture
    def _client(tmp_path):
        settings = Settings(
            database=DatabaseSettings(
                url=f"sqlite+aiosqlite:///{tmp_path / 'newsboard.db'}"
            )
        )
        asyncio.run(_init_schema(settings))
        container = build_test_container(
            unmock={"persistence", *(unmock or set())}, settings=settings
        )
        app_instance = create_app(settings=settings, container=container)
        with TestClient(app_instance) as client:
            yield client

    return _client


async def _init_schema(settings: Settings) -> None:
    engine = create_engine(settings)
    try:
        await create_schema(engine)
    finally:
        await engine.dispose()
