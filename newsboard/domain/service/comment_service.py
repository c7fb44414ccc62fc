"""Comment domain service."""

import logfire

from newsboard.domain.error import NotFoundError
from newsboard.domain.model import Comment, CommentView
from newsboard.domain.repository import CommentRepository, PostRepository
from newsboard.domain.value import CommentId, Page, PageRequest, PostId, UserId

from .base import Service

# Replies attached to each root comment when a preview is requested
CHILD_PREVIEW_LIMIT = 2


class CommentService(Service):
    """Domain service for threaded comments.

    Creating a comment bumps the owning post's comment_count and, for replies,
    the parent's comment_count. Every write runs in the caller's transaction
    and nothing is inserted when a counter update finds no row.
    """

    def __init__(
        self, comment_repository: CommentRepository, post_repository: PostRepository
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            post_repository: Post repository
        """
        self.comment_repository = comment_repository
        self.post_repository = post_repository

    async def create_root_comment(
        self, post_id: PostId, author_id: UserId, content: str
    ) -> Comment:
        """Comment directly on a post.

        Args:
            post_id: Post ID
            author_id: Author user ID
            content: Comment text

        Returns:
            Created comment (depth 0)

        Raises:
            NotFoundError: If the post does not exist
        """
        with logfire.span(
            "comment_service.create_root_comment",
            post_id=post_id,
            author_id=author_id,
        ):
            comment_count = await self.post_repository.increment_comment_count(post_id)
            if comment_count is None:
                logfire.warn("Comment on non-existent post", post_id=post_id)
                raise NotFoundError("Post", post_id)

            comment = await self.comment_repository.create(
                post_id=post_id,
                author_id=author_id,
                content=content,
                parent_comment_id=None,
                depth=0,
            )
            logfire.info(
                "Comment created",
                comment_id=comment.id,
                post_id=post_id,
                post_comment_count=comment_count,
            )
            return comment

    async def create_reply(
        self, parent_comment_id: CommentId, author_id: UserId, content: str
    ) -> Comment:
        """Reply to a comment.

        The reply joins the parent's post one level deeper.

        Args:
            parent_comment_id: Comment being replied to
            author_id: Author user ID
            content: Comment text

        Returns:
            Created comment

        Raises:
            NotFoundError: If the parent comment (or its post) does not exist
        """
        with logfire.span(
            "comment_service.create_reply",
            parent_comment_id=parent_comment_id,
            author_id=author_id,
        ):
            parent = await self.comment_repository.find_by_id(parent_comment_id)
            if not parent:
                logfire.warn(
                    "Reply to non-existent comment",
                    parent_comment_id=parent_comment_id,
                )
                raise NotFoundError("Comment", parent_comment_id)

            # Parent row was just read, only the post update can miss
            post_comment_count = await self.post_repository.increment_comment_count(
                parent.post_id
            )
            if post_comment_count is None:
                logfire.error("Reply to comment of missing post", post_id=parent.post_id)
                raise NotFoundError("Post", parent.post_id)

            reply_count = await self.comment_repository.increment_comment_count(
                parent.id
            )
            if reply_count is None:
                raise NotFoundError("Comment", parent_comment_id)

            comment = await self.comment_repository.create(
                post_id=parent.post_id,
                author_id=author_id,
                content=content,
                parent_comment_id=parent.id,
                depth=parent.depth + 1,
            )
            logfire.info(
                "Reply created",
                comment_id=comment.id,
                parent_comment_id=parent.id,
                post_id=parent.post_id,
                depth=comment.depth,
            )
            return comment

    async def list_post_comments(
        self,
        post_id: PostId,
        page: PageRequest,
        viewer_id: UserId | None = None,
        include_children: bool = False,
    ) -> tuple[list[CommentView], Page]:
        """List one page of a post's root comments.

        Args:
            post_id: Post ID
            page: Page number, size and ordering
            viewer_id: Caller to annotate upvote state for
            include_children: Attach the first replies of each root comment

        Returns:
            Root comments on the page and the page position

        Raises:
            NotFoundError: If the post does not exist
        """
        with logfire.span(
            "comment_service.list_post_comments",
            post_id=post_id,
            page=page.page,
            include_children=include_children,
        ):
            if not await self.post_repository.exists(post_id):
                logfire.warn("Comments requested for missing post", post_id=post_id)
                raise NotFoundError("Post", post_id)

            count = await self.comment_repository.count_roots(post_id)
            views = await self.comment_repository.find_root_views(
                post_id, page, viewer_id=viewer_id
            )

            if include_children and views:
                previews = await self.comment_repository.find_reply_previews(
                    [view.comment.id for view in views],
                    page,
                    per_parent=CHILD_PREVIEW_LIMIT,
                    viewer_id=viewer_id,
                )
                views = [
                    view.model_copy(
                        update={"child_comments": previews.get(view.comment.id, [])}
                    )
                    for view in views
                ]

            logfire.info("Comments listed", post_id=post_id, count=len(views))
            return views, Page(page=page.page, total_pages=page.total_pages(count))

    async def list_replies(
        self,
        parent_comment_id: CommentId,
        page: PageRequest,
        viewer_id: UserId | None = None,
    ) -> tuple[list[CommentView], Page]:
        """List one page of direct replies to a comment.

        Raises:
            NotFoundError: If the comment does not exist
        """
        with logfire.span(
            "comment_service.list_replies",
            parent_comment_id=parent_comment_id,
            page=page.page,
        ):
            if not await self.comment_repository.find_by_id(parent_comment_id):
                raise NotFoundError("Comment", parent_comment_id)

            count = await self.comment_repository.count_replies(parent_comment_id)
            views = await self.comment_repository.find_reply_views(
                parent_comment_id, page, viewer_id=viewer_id
            )
            return views, Page(page=page.page, total_pages=page.total_pages(count))
