"""Shared state for the in-memory repositories."""

from collections import defaultdict
from datetime import datetime, timezone
from typing import Any, Optional, TypeVar

from newsboard.domain.model import (
    Author,
    Comment,
    CommentView,
    Post,
    PostView,
    Session,
    Upvote,
    User,
)
from newsboard.domain.value import (
    CommentId,
    PageRequest,
    PostId,
    SessionId,
    SortBy,
    SortOrder,
    UpvoteId,
    UpvoteTarget,
    UserId,
)

T = TypeVar("T", Post, Comment)


class InMemoryStore:
    """Tables held in dictionaries.

    One store backs every in-memory repository of an application, so rows
    written in one request are visible in the next.
    """

    def __init__(self) -> None:
        self.users: dict[UserId, User] = {}
        self.sessions: dict[SessionId, Session] = {}
        self.posts: dict[PostId, Post] = {}
        self.comments: dict[CommentId, Comment] = {}
        self.upvotes: dict[UpvoteTarget, dict[UpvoteId, Upvote]] = {
            UpvoteTarget.POST: {},
            UpvoteTarget.COMMENT: {},
        }
        self._sequences: defaultdict[str, int] = defaultdict(int)

    def next_id(self, sequence: str) -> int:
        """Next value of a serial sequence, starting at 1."""
        self._sequences[sequence] += 1
        return self._sequences[sequence]

    @staticmethod
    def now() -> datetime:
        return datetime.now(timezone.utc)

    def author(self, user_id: UserId) -> Optional[Author]:
        user = self.users.get(user_id)
        return Author(id=user.id, username=user.username) if user else None

    def is_upvoted(
        self, target_type: UpvoteTarget, target_id: int, viewer_id: Optional[UserId]
    ) -> bool:
        if viewer_id is None:
            return False
        return any(
            upvote.target_id == target_id and upvote.user_id == viewer_id
            for upvote in self.upvotes[target_type].values()
        )

    def post_view(self, post: Post, viewer_id: Optional[UserId]) -> PostView:
        return PostView(
            post=post,
            author=self.author(post.author_id),
            is_upvoted=self.is_upvoted(UpvoteTarget.POST, post.id, viewer_id),
        )

    def comment_view(
        self, comment: Comment, viewer_id: Optional[UserId]
    ) -> CommentView:
        return CommentView(
            comment=comment,
            author=self.author(comment.author_id),
            is_upvoted=self.is_upvoted(UpvoteTarget.COMMENT, comment.id, viewer_id),
        )


def sort_rows(rows: list[T], page: PageRequest) -> list[T]:
    """Order rows like the SQL listings: sort key, then id."""

    def sort_key(row: T) -> tuple[Any, int]:
        if page.sort_by == SortBy.POINTS:
            return row.points, row.id
        return row.created_at, row.id

    return sorted(rows, key=sort_key, reverse=page.order == SortOrder.DESC)


def paginate(rows: list[T], page: PageRequest) -> list[T]:
    """Slice one page out of sorted rows."""
    return sort_rows(rows, page)[page.offset : page.offset + page.limit]
