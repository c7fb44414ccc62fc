"""Create comment use case."""

import logfire
from pydantic import BaseModel, model_validator

from newsboard.application.usecase.base import BaseUseCase, CommentItem
from newsboard.domain.model import CommentView, Identity, require_user
from newsboard.domain.model.user import Author
from newsboard.domain.service import CommentService
from newsboard.domain.value import CommentId, PostId


class CreateCommentRequest(BaseModel):
    """Create comment request.

    Exactly one of post_id (root comment) or parent_comment_id (reply)
    is set.
    """

    identity: Identity
    content: str
    post_id: int | None = None
    parent_comment_id: int | None = None

    @model_validator(mode="after")
    def check_target(self) -> "CreateCommentRequest":
        if (self.post_id is None) == (self.parent_comment_id is None):
            raise ValueError("Exactly one of post_id or parent_comment_id is required")
        return self


class CreateCommentUseCase(BaseUseCase):
    """Use case for commenting on a post or replying to another comment."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: CreateCommentRequest) -> CommentItem:
        """Execute create comment flow.

        Args:
            request: Create comment request

        Returns:
            The created comment, not upvoted and without replies

        Raises:
            UnauthorizedError: If the caller is not signed in
            NotFoundError: If the post or parent comment does not exist
        """
        user = require_user(request.identity)

        with logfire.span(
            "create_comment.execute",
            post_id=request.post_id,
            parent_comment_id=request.parent_comment_id,
        ):
            if request.parent_comment_id is not None:
                comment = await self.comment_service.create_reply(
                    CommentId(request.parent_comment_id), user.id, request.content
                )
            else:
                comment = await self.comment_service.create_root_comment(
                    PostId(request.post_id), user.id, request.content
                )

            return CommentItem.from_view(
                CommentView(
                    comment=comment,
                    author=Author(id=user.id, username=user.username),
                    is_upvoted=False,
                )
            )
