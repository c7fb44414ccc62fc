"""Domain value objects."""

from newsboard.domain.value.identifiers import (
    CommentId,
    PostId,
    SessionId,
    UpvoteId,
    UserId,
)
from newsboard.domain.value.pagination import Page, PageRequest
from newsboard.domain.value.types import SortBy, SortOrder, UpvoteTarget, Username

__all__ = [
    # Identifiers
    "UserId",
    "SessionId",
    "PostId",
    "CommentId",
    "UpvoteId",
    # Types
    "UpvoteTarget",
    "SortBy",
    "SortOrder",
    "Username",
    # Pagination
    "Page",
    "PageRequest",
]
