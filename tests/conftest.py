"""Test configuration and fixtures."""

import logfire
import pytest

from newsboard.domain.model import Authenticated
from newsboard.domain.service import AuthService, SessionService

# Keep test runs local and quiet
logfire.configure(send_to_logfire=False, console=False)


@pytest.fixture
def credentials() -> dict[str, str]:
    """Default signup/login payload."""
    return {"username": "alice", "password": "secret123"}


async def sign_in(env, username: str = "alice") -> Authenticated:
    """Register a user in the test environment and return its identity."""
    auth_service = await env.get(AuthService)
    session_service = await env.get(SessionService)
    user = await auth_service.signup(username, "secret123")
    session = await session_service.create_session(user.id)
    return Authenticated(user=user, session=session)
