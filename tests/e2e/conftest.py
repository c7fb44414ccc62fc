"""Fixtures for end-to-end API tests."""

import pytest
from fastapi.testclient import TestClient

from tests.harness import create_client_fixture

# App over mocked persistence and password hashing
client = create_client_fixture()


def signup(client: TestClient, username: str) -> TestClient:
    """Sign a user up; the client keeps the session cookie."""
    response = client.post(
        "/api/auth/signup", data={"username": username, "password": "secret123"}
    )
    assert response.status_code == 200, response.text
    return client


@pytest.fixture
def alice(client) -> TestClient:
    """Client signed in as alice."""
    return signup(client, "alice")
