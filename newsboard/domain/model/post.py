"""Post aggregate root.

Posts are links or text submissions. After creation only their counters
change, and only through atomic store-level increments.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from newsboard.domain.model.common import DomainModel
from newsboard.domain.model.user import Author
from newsboard.domain.value import PostId, UserId


class Post(DomainModel):
    """Post row."""

    id: PostId
    author_id: UserId
    title: str = Field(min_length=1, max_length=300)
    url: Optional[str] = None
    content: Optional[str] = None
    points: int = 0
    comment_count: int = Field(default=0, ge=0)
    created_at: datetime


class PostView(DomainModel):
    """Post as seen by a particular caller."""

    post: Post
    author: Author | None
    is_upvoted: bool = False
