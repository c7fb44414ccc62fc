"""Upvote entity.

One row per (user, target) credits the target with a single point.
"""

from datetime import datetime

from newsboard.domain.model.common import DomainModel
from newsboard.domain.value import UpvoteId, UpvoteTarget, UserId


class Upvote(DomainModel):
    """Upvote on a post or a comment."""

    id: UpvoteId
    target_type: UpvoteTarget
    target_id: int  # PostId or CommentId
    user_id: UserId
    created_at: datetime


class UpvoteToggle(DomainModel):
    """Outcome of toggling an upvote."""

    points: int
    is_upvoted: bool
