"""List posts use case."""

import logfire
from pydantic import BaseModel, Field

from newsboard.application.usecase.base import (
    BaseUseCase,
    PageInfo,
    PostItem,
    ResponseModel,
)
from newsboard.domain.model import Identity, viewer_id
from newsboard.domain.service import PostService
from newsboard.domain.value import PageRequest, SortBy, SortOrder, UserId


class ListPostsRequest(BaseModel):
    """List posts request."""

    identity: Identity
    page: int = Field(default=1, ge=1)
    limit: int = Field(default=10, ge=1, le=100)
    sort_by: SortBy = SortBy.POINTS
    order: SortOrder = SortOrder.DESC
    author: str | None = None  # Filter by author user ID
    site: str | None = None  # Filter by exact url


class ListPostsResponse(ResponseModel):
    """List posts response."""

    posts: list[PostItem]
    pagination: PageInfo


class ListPostsUseCase(BaseUseCase):
    """Use case for listing posts with filtering and pagination."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize list posts use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: ListPostsRequest) -> ListPostsResponse:
        """Execute list posts flow.

        Args:
            request: List posts request with filters and pagination

        Returns:
            Posts on the requested page and the total number of pages
        """
        with logfire.span(
            "list_posts.execute",
            page=request.page,
            limit=request.limit,
            author=request.author,
            site=request.site,
        ):
            views, page = await self.post_service.list_posts(
                PageRequest(
                    page=request.page,
                    limit=request.limit,
                    sort_by=request.sort_by,
                    order=request.order,
                ),
                viewer_id=viewer_id(request.identity),
                author_id=UserId(request.author) if request.author else None,
                site=request.site,
            )

            return ListPostsResponse(
                posts=[PostItem.from_view(view) for view in views],
                pagination=PageInfo.from_page(page),
            )
