"""Post domain service."""

import logfire

from newsboard.domain.error import EmptyPostError, NotFoundError
from newsboard.domain.model import Post, PostView
from newsboard.domain.repository import PostRepository
from newsboard.domain.value import Page, PageRequest, PostId, UserId

from .base import Service


class PostService(Service):
    """Domain service for post operations."""

    def __init__(self, post_repository: PostRepository) -> None:
        """Initialize post service.

        Args:
            post_repository: Post repository
        """
        self.post_repository = post_repository

    async def create_post(
        self,
        author_id: UserId,
        title: str,
        url: str | None = None,
        content: str | None = None,
    ) -> Post:
        """Submit a link or text post.

        Args:
            author_id: Author user ID
            title: Post title
            url: Link target (optional)
            content: Text body (optional)

        Returns:
            Created post

        Raises:
            EmptyPostError: If neither url nor content is given
        """
        with logfire.span("post_service.create_post", author_id=author_id):
            if not url and not content:
                raise EmptyPostError()

            post = await self.post_repository.create(
                author_id=author_id, title=title, url=url, content=content
            )
            logfire.info("Post created", post_id=post.id, author_id=author_id)
            return post

    async def get_post(
        self, post_id: PostId, viewer_id: UserId | None = None
    ) -> PostView:
        """Get a post as seen by the viewer.

        Raises:
            NotFoundError: If the post does not exist
        """
        with logfire.span("post_service.get_post", post_id=post_id):
            view = await self.post_repository.find_view(post_id, viewer_id=viewer_id)
            if not view:
                logfire.warn("Post not found", post_id=post_id)
                raise NotFoundError("Post", post_id)
            return view

    async def list_posts(
        self,
        page: PageRequest,
        viewer_id: UserId | None = None,
        author_id: UserId | None = None,
        site: str | None = None,
    ) -> tuple[list[PostView], Page]:
        """List one page of posts.

        Args:
            page: Page number, size and ordering
            viewer_id: Caller to annotate upvote state for
            author_id: Only posts by this author
            site: Only posts linking exactly to this url

        Returns:
            Posts on the page and the page position
        """
        with logfire.span(
            "post_service.list_posts",
            page=page.page,
            limit=page.limit,
            sort_by=page.sort_by.value,
            order=page.order.value,
        ):
            count = await self.post_repository.count(author_id=author_id, site=site)
            views = await self.post_repository.find_views(
                page, viewer_id=viewer_id, author_id=author_id, site=site
            )
            logfire.info("Posts listed", count=len(views), total=count)
            return views, Page(page=page.page, total_pages=page.total_pages(count))
