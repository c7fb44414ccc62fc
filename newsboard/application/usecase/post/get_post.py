"""Get post use case."""

from pydantic import BaseModel

from newsboard.application.usecase.base import BaseUseCase, PostItem
from newsboard.domain.model import Identity, viewer_id
from newsboard.domain.service import PostService
from newsboard.domain.value import PostId


class GetPostRequest(BaseModel):
    """Get post request."""

    identity: Identity
    post_id: int


class GetPostUseCase(BaseUseCase):
    """Use case for fetching a single post."""

    def __init__(self, post_service: PostService) -> None:
        self.post_service = post_service

    async def execute(self, request: GetPostRequest) -> PostItem:
        """Fetch the post with its author and the caller's upvote state.

        Raises:
            NotFoundError: If the post does not exist
        """
        view = await self.post_service.get_post(
            PostId(request.post_id), viewer_id=viewer_id(request.identity)
        )
        return PostItem.from_view(view)
