"""Create post use case."""

from pydantic import BaseModel

from newsboard.application.usecase.base import BaseUseCase, ResponseModel
from newsboard.domain.model import Identity, require_user
from newsboard.domain.service import PostService


class CreatePostRequest(BaseModel):
    """Create post request."""

    identity: Identity
    title: str
    url: str | None = None
    content: str | None = None


class CreatePostResponse(ResponseModel):
    """Create post response."""

    post_id: int


class CreatePostUseCase(BaseUseCase):
    """Use case for submitting a post."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize create post use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: CreatePostRequest) -> CreatePostResponse:
        """Execute create post flow.

        Raises:
            UnauthorizedError: If the caller is not signed in
            EmptyPostError: If neither url nor content is given
        """
        user = require_user(request.identity)
        post = await self.post_service.create_post(
            author_id=user.id,
            title=request.title,
            url=request.url,
            content=request.content,
        )
        return CreatePostResponse(post_id=post.id)
