"""Get current user use case."""

from pydantic import BaseModel

from newsboard.application.usecase.base import BaseUseCase, ResponseModel
from newsboard.domain.model import Identity, require_user


class GetCurrentUserRequest(BaseModel):
    """Get current user request."""

    identity: Identity


class GetCurrentUserResponse(ResponseModel):
    """Get current user response."""

    username: str


class GetCurrentUserUseCase(BaseUseCase):
    """Use case for getting the signed-in user."""

    async def execute(self, request: GetCurrentUserRequest) -> GetCurrentUserResponse:
        """Return the caller's username.

        Raises:
            UnauthorizedError: If the caller is not signed in
        """
        user = require_user(request.identity)
        return GetCurrentUserResponse(username=user.username)
