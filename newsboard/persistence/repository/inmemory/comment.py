"""In-memory comment repository for testing."""

from typing import Dict, List, Optional, Sequence

from newsboard.domain.model import Comment, CommentView
from newsboard.domain.repository import CommentRepository
from newsboard.domain.value import CommentId, PageRequest, PostId, UserId

from .store import InMemoryStore, paginate, sort_rows


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    def _roots(self, post_id: PostId) -> List[Comment]:
        return [
            c
            for c in self._store.comments.values()
            if c.post_id == post_id and c.parent_comment_id is None
        ]

    def _replies(self, parent_comment_id: CommentId) -> List[Comment]:
        return [
            c
            for c in self._store.comments.values()
            if c.parent_comment_id == parent_comment_id
        ]

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        return self._store.comments.get(comment_id)

    async def create(
        self,
        post_id: PostId,
        author_id: UserId,
        content: str,
        parent_comment_id: Optional[CommentId] = None,
        depth: int = 0,
    ) -> Comment:
        comment = Comment(
            id=CommentId(self._store.next_id("comments")),
            author_id=author_id,
            post_id=post_id,
            parent_comment_id=parent_comment_id,
            content=content,
            depth=depth,
            created_at=self._store.now(),
        )
        self._store.comments[comment.id] = comment
        return comment

    async def add_points(self, comment_id: CommentId, delta: int) -> Optional[int]:
        comment = self._store.comments.get(comment_id)
        if comment is None:
            return None
        comment = comment.model_copy(update={"points": comment.points + delta})
        self._store.comments[comment_id] = comment
        return comment.points

    async def increment_comment_count(self, comment_id: CommentId) -> Optional[int]:
        comment = self._store.comments.get(comment_id)
        if comment is None:
            return None
        comment = comment.model_copy(
            update={"comment_count": comment.comment_count + 1}
        )
        self._store.comments[comment_id] = comment
        return comment.comment_count

    async def find_root_views(
        self,
        post_id: PostId,
        page: PageRequest,
        viewer_id: Optional[UserId] = None,
    ) -> List[CommentView]:
        comments = paginate(self._roots(post_id), page)
        return [self._store.comment_view(c, viewer_id) for c in comments]

    async def count_roots(self, post_id: PostId) -> int:
        return len(self._roots(post_id))

    async def find_reply_views(
        self,
        parent_comment_id: CommentId,
        page: PageRequest,
        viewer_id: Optional[UserId] = None,
    ) -> List[CommentView]:
        comments = paginate(self._replies(parent_comment_id), page)
        return [self._store.comment_view(c, viewer_id) for c in comments]

    async def count_replies(self, parent_comment_id: CommentId) -> int:
        return len(self._replies(parent_comment_id))

    async def find_reply_previews(
        self,
        parent_comment_ids: Sequence[CommentId],
        page: PageRequest,
        per_parent: int,
        viewer_id: Optional[UserId] = None,
    ) -> Dict[CommentId, List[CommentView]]:
        previews: Dict[CommentId, List[CommentView]] = {}
        for parent_id in parent_comment_ids:
            replies = sort_rows(self._replies(parent_id), page)[:per_parent]
            if replies:
                previews[parent_id] = [
                    self._store.comment_view(c, viewer_id) for c in replies
                ]
        return previews
