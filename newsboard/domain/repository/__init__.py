"""Repository interfaces.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from newsboard.domain.repository.comment import CommentRepository
from newsboard.domain.repository.post import PostRepository
from newsboard.domain.repository.session import SessionRepository
from newsboard.domain.repository.upvote import UpvoteRepository
from newsboard.domain.repository.user import UserRepository

__all__ = [
    "UserRepository",
    "SessionRepository",
    "PostRepository",
    "CommentRepository",
    "UpvoteRepository",
]
