"""Domain model entities."""

from newsboard.domain.model.comment import Comment, CommentView
from newsboard.domain.model.identity import (
    Anonymous,
    Authenticated,
    Identity,
    require_user,
    viewer_id,
)
from newsboard.domain.model.post import Post, PostView
from newsboard.domain.model.session import Session
from newsboard.domain.model.upvote import Upvote, UpvoteToggle
from newsboard.domain.model.user import Author, User

__all__ = [
    "User",
    "Author",
    "Session",
    "Post",
    "PostView",
    "Comment",
    "CommentView",
    "Upvote",
    "UpvoteToggle",
    "Authenticated",
    "Anonymous",
    "Identity",
    "require_user",
    "viewer_id",
]
