"""Toggle upvote use case."""

from pydantic import BaseModel

from newsboard.application.usecase.base import BaseUseCase, ResponseModel
from newsboard.domain.model import Identity, require_user
from newsboard.domain.service import UpvoteService
from newsboard.domain.value import UpvoteTarget


class ToggleUpvoteRequest(BaseModel):
    """Toggle upvote request."""

    identity: Identity
    target_type: UpvoteTarget
    target_id: int


class ToggleUpvoteResponse(ResponseModel):
    """Toggle upvote response."""

    count: int  # New points total
    is_upvoted: bool


class ToggleUpvoteUseCase(BaseUseCase):
    """Use case for upvoting, or taking back an upvote on, a post or comment."""

    def __init__(self, upvote_service: UpvoteService) -> None:
        """Initialize toggle upvote use case.

        Args:
            upvote_service: Upvote domain service
        """
        self.upvote_service = upvote_service

    async def execute(self, request: ToggleUpvoteRequest) -> ToggleUpvoteResponse:
        """Execute toggle upvote flow.

        Raises:
            UnauthorizedError: If the caller is not signed in
            NotFoundError: If the target does not exist
        """
        user = require_user(request.identity)
        result = await self.upvote_service.toggle(
            request.target_type, request.target_id, user.id
        )
        return ToggleUpvoteResponse(count=result.points, is_upvoted=result.is_upvoted)
