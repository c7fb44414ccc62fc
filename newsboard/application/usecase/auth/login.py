"""Login use case."""

from datetime import datetime

import logfire
from pydantic import BaseModel

from newsboard.application.usecase.base import BaseUseCase, ResponseModel
from newsboard.domain.service import AuthService, SessionService


class LoginRequest(BaseModel):
    """Login request."""

    username: str
    password: str


class LoginResponse(ResponseModel):
    """Login response."""

    user_id: str
    username: str
    session_id: str
    expires_at: datetime


class LoginUseCase(BaseUseCase):
    """Use case for username/password login."""

    def __init__(
        self, auth_service: AuthService, session_service: SessionService
    ) -> None:
        """Initialize login use case.

        Args:
            auth_service: Auth domain service
            session_service: Session domain service
        """
        self.auth_service = auth_service
        self.session_service = session_service

    async def execute(self, request: LoginRequest) -> LoginResponse:
        """Execute login flow.

        Raises:
            InvalidCredentialsError: If the username or password is wrong
        """
        with logfire.span("login.execute", username=request.username):
            user = await self.auth_service.authenticate(
                request.username, request.password
            )
            session = await self.session_service.create_session(user.id)
            logfire.info("User logged in", user_id=user.id)

            return LoginResponse(
                user_id=user.id,
                username=user.username,
                session_id=session.id,
                expires_at=session.expires_at,
            )
