"""In-memory repository implementations for testing."""

from .comment import InMemoryCommentRepository
from .post import InMemoryPostRepository
from .session import InMemorySessionRepository
from .store import InMemoryStore
from .upvote import InMemoryUpvoteRepository
from .user import InMemoryUserRepository

__all__ = [
    "InMemoryCommentRepository",
    "InMemoryPostRepository",
    "InMemorySessionRepository",
    "InMemoryStore",
    "InMemoryUpvoteRepository",
    "InMemoryUserRepository",
]
