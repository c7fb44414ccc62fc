"""Base use case and shared response items."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from newsboard.domain.model import CommentView, PostView
from newsboard.domain.value import Page


class BaseUseCase(ABC):
    """Base use case for orchestrating domain services."""

    @abstractmethod
    async def execute(self, request: Any) -> Any:
        pass


class ResponseModel(BaseModel):
    """Response data serialized with camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class AuthorItem(ResponseModel):
    """Public author details."""

    id: str
    username: str


class PageInfo(ResponseModel):
    """Pagination block of listing responses."""

    page: int
    total_pages: int

    @classmethod
    def from_page(cls, page: Page) -> "PageInfo":
        return cls(page=page.page, total_pages=page.total_pages)


class PostItem(ResponseModel):
    """Post in responses."""

    id: int
    title: str
    url: str | None
    content: str | None
    points: int
    comment_count: int
    created_at: datetime
    author: AuthorItem | None
    is_upvoted: bool

    @classmethod
    def from_view(cls, view: PostView) -> "PostItem":
        post = view.post
        return cls(
            id=post.id,
            title=post.title,
            url=post.url,
            content=post.content,
            points=post.points,
            comment_count=post.comment_count,
            created_at=post.created_at,
            author=(
                AuthorItem(id=view.author.id, username=view.author.username)
                if view.author
                else None
            ),
            is_upvoted=view.is_upvoted,
        )


class CommentItem(ResponseModel):
    """Comment in responses, with any attached replies."""

    id: int
    user_id: str
    post_id: int
    parent_comment_id: int | None
    content: str
    depth: int
    comment_count: int
    points: int
    created_at: datetime
    author: AuthorItem | None
    is_upvoted: bool
    child_comments: list["CommentItem"]

    @classmethod
    def from_view(cls, view: CommentView) -> "CommentItem":
        comment = view.comment
        return cls(
            id=comment.id,
            user_id=comment.author_id,
            post_id=comment.post_id,
            parent_comment_id=comment.parent_comment_id,
            content=comment.content,
            depth=comment.depth,
            comment_count=comment.comment_count,
            points=comment.points,
            created_at=comment.created_at,
            author=(
                AuthorItem(id=view.author.id, username=view.author.username)
                if view.author
                else None
            ),
            is_upvoted=view.is_upvoted,
            child_comments=[cls.from_view(child) for child in view.child_comments],
        )
