"""PostgreSQL repository implementations."""

from newsboard.persistence.repository.comment import PostgresCommentRepository
from newsboard.persistence.repository.post import PostgresPostRepository
from newsboard.persistence.repository.session import PostgresSessionRepository
from newsboard.persistence.repository.upvote import PostgresUpvoteRepository
from newsboard.persistence.repository.user import PostgresUserRepository

__all__ = [
    "PostgresUserRepository",
    "PostgresSessionRepository",
    "PostgresPostRepository",
    "PostgresCommentRepository",
    "PostgresUpvoteRepository",
]
