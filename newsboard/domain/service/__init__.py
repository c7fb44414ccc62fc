"""Domain services."""

from .auth_service import AuthService, PasswordHasher
from .base import Service
from .comment_service import CHILD_PREVIEW_LIMIT, CommentService
from .post_service import PostService
from .session_service import SessionService, SessionValidation
from .upvote_service import UpvoteService

__all__ = [
    "AuthService",
    "CHILD_PREVIEW_LIMIT",
    "CommentService",
    "PasswordHasher",
    "PostService",
    "Service",
    "SessionService",
    "SessionValidation",
    "UpvoteService",
]
