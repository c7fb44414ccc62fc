"""Logout use case."""

from pydantic import BaseModel

from newsboard.application.usecase.base import BaseUseCase
from newsboard.domain.model import Identity, require_user
from newsboard.domain.service import SessionService


class LogoutRequest(BaseModel):
    """Logout request."""

    identity: Identity


class LogoutUseCase(BaseUseCase):
    """Use case for ending the caller's session."""

    def __init__(self, session_service: SessionService) -> None:
        self.session_service = session_service

    async def execute(self, request: LogoutRequest) -> None:
        """Invalidate the caller's session.

        Raises:
            UnauthorizedError: If the caller is not signed in
        """
        require_user(request.identity)
        await self.session_service.invalidate_session(request.identity.session.id)
