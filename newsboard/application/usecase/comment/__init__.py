"""Comment use cases."""

from .create_comment import CreateCommentRequest, CreateCommentUseCase
from .list_comments import (
    ListCommentsResponse,
    ListPostCommentsRequest,
    ListPostCommentsUseCase,
    ListRepliesRequest,
    ListRepliesUseCase,
)

__all__ = [
    "CreateCommentRequest",
    "CreateCommentUseCase",
    "ListCommentsResponse",
    "ListPostCommentsRequest",
    "ListPostCommentsUseCase",
    "ListRepliesRequest",
    "ListRepliesUseCase",
]
