"""Comment entity.

Comments form one tree per post. Roots have no parent and depth 0; every
reply sits one level below its parent and always belongs to the parent's post.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from newsboard.domain.model.common import DomainModel
from newsboard.domain.model.user import Author
from newsboard.domain.value import CommentId, PostId, UserId


class Comment(DomainModel):
    """Comment row.

    comment_count counts direct replies only.
    """

    id: CommentId
    author_id: UserId
    post_id: PostId
    parent_comment_id: Optional[CommentId] = None
    content: str = Field(min_length=1)
    depth: int = Field(default=0, ge=0)
    comment_count: int = Field(default=0, ge=0)
    points: int = 0
    created_at: datetime


class CommentView(DomainModel):
    """Comment as seen by a particular caller, with an optional reply preview."""

    comment: Comment
    author: Author | None
    is_upvoted: bool = False
    child_comments: list["CommentView"] = Field(default_factory=list)
