"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import Dict, List, Optional, Sequence

from newsboard.domain.model.comment import Comment, CommentView
from newsboard.domain.value import CommentId, PageRequest, PostId, UserId


class CommentRepository(ABC):
    """Repository for Comment entity."""

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        pass

    @abstractmethod
    async def create(
        self,
        post_id: PostId,
        author_id: UserId,
        content: str,
        parent_comment_id: Optional[CommentId] = None,
        depth: int = 0,
    ) -> Comment:
        """Insert a comment and return it with its store-assigned id and timestamp."""
        pass

    @abstractmethod
    async def add_points(self, comment_id: CommentId, delta: int) -> Optional[int]:
        """Atomically add delta to points.

        Returns:
            New points total, or None if the comment does not exist
        """
        pass

    @abstractmethod
    async def increment_comment_count(self, comment_id: CommentId) -> Optional[int]:
        """Atomically increment the direct reply count by 1.

        Returns:
            New reply count, or None if the comment does not exist
        """
        pass

    @abstractmethod
    async def find_root_views(
        self,
        post_id: PostId,
        page: PageRequest,
        viewer_id: Optional[UserId] = None,
    ) -> List[CommentView]:
        """Find one page of a post's root comments."""
        pass

    @abstractmethod
    async def count_roots(self, post_id: PostId) -> int:
        """Count a post's root comments."""
        pass

    @abstractmethod
    async def find_reply_views(
        self,
        parent_comment_id: CommentId,
        page: PageRequest,
        viewer_id: Optional[UserId] = None,
    ) -> List[CommentView]:
        """Find one page of direct replies to a comment."""
        pass

    @abstractmethod
    async def count_replies(self, parent_comment_id: CommentId) -> int:
        """Count direct replies to a comment."""
        pass

    @abstractmethod
    async def find_reply_previews(
        self,
        parent_comment_ids: Sequence[CommentId],
        page: PageRequest,
        per_parent: int,
        viewer_id: Optional[UserId] = None,
    ) -> Dict[CommentId, List[CommentView]]:
        """Find the first replies of several comments in one query.

        Args:
            parent_comment_ids: Comments to fetch replies for
            page: Ordering to apply (page number and size are ignored)
            per_parent: Maximum replies per parent
            viewer_id: Caller to annotate upvote state for (None for anonymous)

        Returns:
            Replies keyed by parent id; parents without replies are absent
        """
        pass
