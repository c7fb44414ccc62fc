"""List comments use cases."""

import logfire
from pydantic import BaseModel, Field

from newsboard.application.usecase.base import (
    BaseUseCase,
    CommentItem,
    PageInfo,
    ResponseModel,
)
from newsboard.domain.model import Identity, viewer_id
from newsboard.domain.service import CommentService
from newsboard.domain.value import CommentId, PageRequest, PostId, SortBy, SortOrder


class ListCommentsResponse(ResponseModel):
    """Page of comments."""

    comments: list[CommentItem]
    pagination: PageInfo


class ListPostCommentsRequest(BaseModel):
    """List a post's root comments."""

    identity: Identity
    post_id: int
    page: int = Field(default=1, ge=1)
    limit: int = Field(default=10, ge=1, le=100)
    sort_by: SortBy = SortBy.POINTS
    order: SortOrder = SortOrder.DESC
    include_children: bool = False


class ListRepliesRequest(BaseModel):
    """List the direct replies to a comment."""

    identity: Identity
    comment_id: int
    page: int = Field(default=1, ge=1)
    limit: int = Field(default=10, ge=1, le=100)
    sort_by: SortBy = SortBy.POINTS
    order: SortOrder = SortOrder.DESC


class ListPostCommentsUseCase(BaseUseCase):
    """Use case for a post's comment thread."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize list post comments use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: ListPostCommentsRequest) -> ListCommentsResponse:
        """List one page of root comments, optionally with a reply preview.

        Raises:
            NotFoundError: If the post does not exist
        """
        with logfire.span(
            "list_post_comments.execute",
            post_id=request.post_id,
            include_children=request.include_children,
        ):
            views, page = await self.comment_service.list_post_comments(
                PostId(request.post_id),
                PageRequest(
                    page=request.page,
                    limit=request.limit,
                    sort_by=request.sort_by,
                    order=request.order,
                ),
                viewer_id=viewer_id(request.identity),
                include_children=request.include_children,
            )
            return ListCommentsResponse(
                comments=[CommentItem.from_view(view) for view in views],
                pagination=PageInfo.from_page(page),
            )


class ListRepliesUseCase(BaseUseCase):
    """Use case for the replies under one comment."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: ListRepliesRequest) -> ListCommentsResponse:
        """List one page of direct replies.

        Raises:
            NotFoundError: If the comment does not exist
        """
        views, page = await self.comment_service.list_replies(
            CommentId(request.comment_id),
            PageRequest(
                page=request.page,
                limit=request.limit,
                sort_by=request.sort_by,
                order=request.order,
            ),
            viewer_id=viewer_id(request.identity),
        )
        return ListCommentsResponse(
            comments=[CommentItem.from_view(view) for view in views],
            pagination=PageInfo.from_page(page),
        )
