"""Post repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from newsboard.domain.model.post import Post, PostView
from newsboard.domain.value import PageRequest, PostId, UserId


class PostRepository(ABC):
    """Repository for Post aggregate.

    Counter mutations are single store-evaluated expressions
    (``counter = counter + delta``) so concurrent requests never lose updates.
    """

    @abstractmethod
    async def create(
        self,
        author_id: UserId,
        title: str,
        url: Optional[str],
        content: Optional[str],
    ) -> Post:
        """Insert a post and return it with its store-assigned id and timestamp."""
        pass

    @abstractmethod
    async def exists(self, post_id: PostId) -> bool:
        """Check whether a post exists."""
        pass

    @abstractmethod
    async def find_view(
        self, post_id: PostId, viewer_id: Optional[UserId] = None
    ) -> Optional[PostView]:
        """Find a post with its author and the viewer's upvote state.

        Args:
            post_id: The post ID
            viewer_id: Caller to annotate upvote state for (None for anonymous)

        Returns:
            The post view if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_views(
        self,
        page: PageRequest,
        viewer_id: Optional[UserId] = None,
        author_id: Optional[UserId] = None,
        site: Optional[str] = None,
    ) -> List[PostView]:
        """Find one page of posts.

        Args:
            page: Page number, size and ordering
            viewer_id: Caller to annotate upvote state for (None for anonymous)
            author_id: Only posts by this author
            site: Only posts with exactly this url

        Returns:
            Posts on the requested page
        """
        pass

    @abstractmethod
    async def count(
        self,
        author_id: Optional[UserId] = None,
        site: Optional[str] = None,
    ) -> int:
        """Count posts matching the same filters as find_views."""
        pass

    @abstractmethod
    async def add_points(self, post_id: PostId, delta: int) -> Optional[int]:
        """Atomically add delta to points.

        Returns:
            New points total, or None if the post does not exist
        """
        pass

    @abstractmethod
    async def increment_comment_count(self, post_id: PostId) -> Optional[int]:
        """Atomically increment comment_count by 1.

        Returns:
            New comment count, or None if the post does not exist
        """
        pass
