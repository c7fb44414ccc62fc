"""Unit tests for settings flowing through the DI container."""

import pytest
from fastapi.testclient import TestClient

from newsboard.config import AuthSettings, Settings
from newsboard.interface.api.app import create_app
from newsboard.util.di.container import create_container
from tests.di import build_test_container


def custom_settings() -> Settings:
    return Settings(auth=AuthSettings(session_cookie_name="sid"))


class TestContainerSettings:
    @pytest.mark.asyncio
    async def test_container_exposes_given_settings(self):
        settings = custom_settings()
        container = create_container(settings)

        try:
            assert await container.get(Settings) is settings
            assert await container.get(AuthSettings) is settings.auth
        finally:
            await container.close()

    def test_session_cookie_follows_app_settings(self):
        # Arrange
        settings = custom_settings()
        app = create_app(
            settings=settings, container=build_test_container(settings=settings)
        )

        # Act
        with TestClient(app) as client:
            signup = client.post(
                "/api/auth/signup", data={"username": "alice", "password": "secret123"}
            )
            user = client.get("/api/auth/user")

        # Assert
        assert signup.headers["set-cookie"].startswith("sid=")
        assert user.status_code == 200
