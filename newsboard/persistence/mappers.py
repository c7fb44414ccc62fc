"""Mappers for converting between database rows and domain models.

Domain models are immutable pydantic models, so rows are mapped by hand
instead of through SQLAlchemy's ORM mapping.
"""

from datetime import datetime, timezone
from typing import Any, Dict

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
    PostId,
    SessionId,
    UpvoteId,
    UpvoteTarget,
    UserId,
)


def as_utc(value: datetime) -> datetime:
    """Attach UTC to naive timestamps (SQLite drops the offset)."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model."""
    return User(
        id=UserId(row["id"]),
        username=row["username"],
        password_hash=row["password_hash"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict."""
    return user.model_dump()


def row_to_session(row: Dict[str, Any]) -> Session:
    """Convert database row to Session domain model."""
    return Session(
        id=SessionId(row["id"]),
        user_id=UserId(row["user_id"]),
        expires_at=as_utc(row["expires_at"]),
    )


def session_to_dict(session: Session) -> Dict[str, Any]:
    """Convert Session domain model to database dict."""
    return session.model_dump()


def row_to_post(row: Dict[str, Any]) -> Post:
    """Convert database row to Post domain model.

    Args:
        row: Database row as dict

    Returns:
        Post domain model
    """
    return Post(
        id=PostId(row["id"]),
        author_id=UserId(row["user_id"]),
        title=row["title"],
        url=row.get("url"),
        content=row.get("content"),
        points=row["points"],
        comment_count=row["comment_count"],
        created_at=as_utc(row["created_at"]),
    )


def row_to_post_view(row: Dict[str, Any]) -> PostView:
    """Convert a joined post/author/upvote row to a PostView.

    The row carries ``author_username`` and ``is_upvoted`` next to the post
    columns.
    """
    username = row.get("author_username")
    return PostView(
        post=row_to_post(row),
        author=Author(id=row["user_id"], username=username) if username else None,
        is_upvoted=bool(row.get("is_upvoted")),
    )


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model.

    Args:
        row: Database row as dict

    Returns:
        Comment domain model
    """
    parent_comment_id = row.get("parent_comment_id")
    return Comment(
        id=CommentId(row["id"]),
        author_id=UserId(row["user_id"]),
        post_id=PostId(row["post_id"]),
        parent_comment_id=(
            CommentId(parent_comment_id) if parent_comment_id is not None else None
        ),
        content=row["content"],
        depth=row["depth"],
        comment_count=row["comment_count"],
        points=row["points"],
        created_at=as_utc(row["created_at"]),
    )


def row_to_comment_view(row: Dict[str, Any]) -> CommentView:
    """Convert a joined comment/author/upvote row to a CommentView."""
    username = row.get("author_username")
    return CommentView(
        comment=row_to_comment(row),
        author=Author(id=row["user_id"], username=username) if username else None,
        is_upvoted=bool(row.get("is_upvoted")),
    )


def row_to_upvote(row: Dict[str, Any], target_type: UpvoteTarget) -> Upvote:
    """Convert a post_upvotes or comment_upvotes row to an Upvote."""
    target_column = "post_id" if target_type == UpvoteTarget.POST else "comment_id"
    return Upvote(
        id=UpvoteId(row["id"]),
        target_type=target_type,
        target_id=row[target_column],
        user_id=UserId(row["user_id"]),
        created_at=as_utc(row["created_at"]),
    )
