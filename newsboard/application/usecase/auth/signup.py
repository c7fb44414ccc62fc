"""Signup use case."""

from datetime import datetime

import logfire
from pydantic import BaseModel

from newsboard.application.usecase.base import BaseUseCase, ResponseModel
from newsboard.domain.service import AuthService, SessionService


class SignupRequest(BaseModel):
    """Signup request."""

    username: str
    password: str


class SignupResponse(ResponseModel):
    """Signup response.

    The session fields are used by the route to set the cookie.
    """

    user_id: str
    username: str
    session_id: str
    expires_at: datetime


class SignupUseCase(BaseUseCase):
    """Use case for registering an account and signing it in."""

    def __init__(
        self, auth_service: AuthService, session_service: SessionService
    ) -> None:
        """Initialize signup use case.

        Args:
            auth_service: Auth domain service
            session_service: Session domain service
        """
        self.auth_service = auth_service
        self.session_service = session_service

    async def execute(self, request: SignupRequest) -> SignupResponse:
        """Execute signup flow.

        Steps:
        1. Create the user (fails if the username is taken)
        2. Start a session for the new user

        Raises:
            UsernameTakenError: If the username already exists
        """
        with logfire.span("signup.execute", username=request.username):
            user = await self.auth_service.signup(request.username, request.password)
            session = await self.session_service.create_session(user.id)

            return SignupResponse(
                user_id=user.id,
                username=user.username,
                session_id=session.id,
                expires_at=session.expires_at,
            )
