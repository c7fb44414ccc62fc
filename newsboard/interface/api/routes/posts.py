"""Post routes."""

from typing import Annotated
from urllib.parse import urlparse

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Form, Query, Request, Response
from pydantic import BaseModel, Field, field_validator

from newsboard.application.usecase.auth import ResolveSessionUseCase
from newsboard.application.usecase.base import CommentItem, PostItem
from newsboard.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentUseCase,
    ListPostCommentsRequest,
    ListPostCommentsUseCase,
)
from newsboard.application.usecase.post import (
    CreatePostRequest,
    CreatePostResponse,
    CreatePostUseCase,
    GetPostRequest,
    GetPostUseCase,
    ListPostsRequest,
    ListPostsUseCase,
)
from newsboard.application.usecase.upvote import (
    ToggleUpvoteRequest,
    ToggleUpvoteResponse,
    ToggleUpvoteUseCase,
)
from newsboard.config import AuthSettings
from newsboard.domain.value import SortBy, SortOrder, UpvoteTarget
from newsboard.interface.api.envelope import PaginatedResponse, SuccessResponse
from newsboard.interface.api.params import PostIdPath
from newsboard.interface.api.session import resolve_identity

router = APIRouter(prefix="/posts", tags=["posts"], route_class=DishkaRoute)


class CreatePostAPIRequest(BaseModel):
    """API request for creating a post."""

    title: str = Field(min_length=3, max_length=300)
    url: str | None = None
    content: str | None = Field(default=None, max_length=10000)

    @field_validator("url")
    @classmethod
    def validate_url(cls, v: str | None) -> str | None:
        if not v:
            return None
        parsed = urlparse(v)
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            raise ValueError("URL must be a valid http(s) URL")
        return v

    @field_validator("content")
    @classmethod
    def empty_content_is_none(cls, v: str | None) -> str | None:
        return v or None


class CommentAPIRequest(BaseModel):
    """API request for creating a comment."""

    content: str = Field(min_length=3, max_length=10000)


@router.post("", response_model=SuccessResponse[CreatePostResponse])
async def create_post(
    body: Annotated[CreatePostAPIRequest, Form()],
    request: Request,
    response: Response,
    create_post_use_case: FromDishka[CreatePostUseCase],
    resolve_session: FromDishka[ResolveSessionUseCase],
    auth_settings: FromDishka[AuthSettings],
) -> SuccessResponse[CreatePostResponse]:
    """Submit a link or text post.

    Requires authentication.

    Raises:
        UnauthorizedError: If not signed in (401)
        EmptyPostError: If neither url nor content is given (400)
    """
    identity = await resolve_identity(request, response, resolve_session, auth_settings)
    result = await create_post_use_case.execute(
        CreatePostRequest(
            identity=identity,
            title=body.title,
            url=body.url,
            content=body.content,
        )
    )
    return SuccessResponse(message="Post created successfully", data=result)


@router.get("", response_model=PaginatedResponse[list[PostItem]])
async def list_posts(
    request: Request,
    response: Response,
    list_posts_use_case: FromDishka[ListPostsUseCase],
    resolve_session: FromDishka[ResolveSessionUseCase],
    auth_settings: FromDishka[AuthSettings],
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=10, ge=1, le=100),
    sort_by: SortBy = Query(default=SortBy.POINTS, alias="sortBy"),
    order: SortOrder = Query(default=SortOrder.DESC),
    author: str | None = Query(default=None),
    site: str | None = Query(default=None),
) -> PaginatedResponse[list[PostItem]]:
    """List posts, optionally filtered by author or exact url."""
    identity = await resolve_identity(request, response, resolve_session, auth_settings)
    result = await list_posts_use_case.execute(
        ListPostsRequest(
            identity=identity,
            page=page,
            limit=limit,
            sort_by=sort_by,
            order=order,
            author=author,
            site=site,
        )
    )
    return PaginatedResponse(
        message="Posts fetched successfully",
        data=result.posts,
        pagination=result.pagination,
    )


@router.get("/{post_id}", response_model=SuccessResponse[PostItem])
async def get_post(
    post_id: PostIdPath,
    request: Request,
    response: Response,
    get_post_use_case: FromDishka[GetPostUseCase],
    resolve_session: FromDishka[ResolveSessionUseCase],
    auth_settings: FromDishka[AuthSettings],
) -> SuccessResponse[PostItem]:
    """Fetch one post.

    Raises:
        NotFoundError: If the post does not exist (404)
    """
    identity = await resolve_identity(request, response, resolve_session, auth_settings)
    post = await get_post_use_case.execute(
        GetPostRequest(identity=identity, post_id=post_id)
    )
    return SuccessResponse(message="Post fetched successfully", data=post)


@router.post("/{post_id}/upvote", response_model=SuccessResponse[ToggleUpvoteResponse])
async def upvote_post(
    post_id: PostIdPath,
    request: Request,
    response: Response,
    toggle_upvote_use_case: FromDishka[ToggleUpvoteUseCase],
    resolve_session: FromDishka[ResolveSessionUseCase],
    auth_settings: FromDishka[AuthSettings],
) -> SuccessResponse[ToggleUpvoteResponse]:
    """Upvote a post, or take the upvote back.

    Requires authentication.

    Raises:
        UnauthorizedError: If not signed in (401)
        NotFoundError: If the post does not exist (404)
    """
    identity = await resolve_identity(request, response, resolve_session, auth_settings)
    result = await toggle_upvote_use_case.execute(
        ToggleUpvoteRequest(
            identity=identity, target_type=UpvoteTarget.POST, target_id=post_id
        )
    )
    return SuccessResponse(message="Post updated successfully", data=result)


@router.post("/{post_id}/comment", response_model=SuccessResponse[CommentItem])
async def create_root_comment(
    post_id: PostIdPath,
    body: Annotated[CommentAPIRequest, Form()],
    request: Request,
    response: Response,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
    resolve_session: FromDishka[ResolveSessionUseCase],
    auth_settings: FromDishka[AuthSettings],
) -> SuccessResponse[CommentItem]:
    """Comment on a post.

    Requires authentication.

    Raises:
        UnauthorizedError: If not signed in (401)
        NotFoundError: If the post does not exist (404)
    """
    identity = await resolve_identity(request, response, resolve_session, auth_settings)
    comment = await create_comment_use_case.execute(
        CreateCommentRequest(identity=identity, post_id=post_id, content=body.content)
    )
    return SuccessResponse(message="Comment created successfully", data=comment)


@router.get("/{post_id}/comments", response_model=PaginatedResponse[list[CommentItem]])
async def list_post_comments(
    post_id: PostIdPath,
    request: Request,
    response: Response,
    list_post_comments_use_case: FromDishka[ListPostCommentsUseCase],
    resolve_session: FromDishka[ResolveSessionUseCase],
    auth_settings: FromDishka[AuthSettings],
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=10, ge=1, le=100),
    sort_by: SortBy = Query(default=SortBy.POINTS, alias="sortBy"),
    order: SortOrder = Query(default=SortOrder.DESC),
    include_children: bool = Query(default=False, alias="includeChildren"),
) -> PaginatedResponse[list[CommentItem]]:
    """List a post's root comments, optionally with their first replies.

    Raises:
        NotFoundError: If the post does not exist (404)
    """
    identity = await resolve_identity(request, response, resolve_session, auth_settings)
    result = await list_post_comments_use_case.execute(
        ListPostCommentsRequest(
            identity=identity,
            post_id=post_id,
            page=page,
            limit=limit,
            sort_by=sort_by,
            order=order,
            include_children=include_children,
        )
    )
    return PaginatedResponse(
        message="Comments fetched successfully",
        data=result.comments,
        pagination=result.pagination,
    )
