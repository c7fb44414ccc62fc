"""Comment routes."""

from typing import Annotated

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Form, Query, Request, Response

from newsboard.application.usecase.auth import ResolveSessionUseCase
from newsboard.application.usecase.base import CommentItem
from newsboard.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentUseCase,
    ListRepliesRequest,
    ListRepliesUseCase,
)
from newsboard.application.usecase.upvote import (
    ToggleUpvoteRequest,
    ToggleUpvoteResponse,
    ToggleUpvoteUseCase,
)
from newsboard.config import AuthSettings
from newsboard.domain.value import SortBy, SortOrder, UpvoteTarget
from newsboard.interface.api.envelope import PaginatedResponse, SuccessResponse
from newsboard.interface.api.params import CommentIdPath
from newsboard.interface.api.routes.posts import CommentAPIRequest
from newsboard.interface.api.session import resolve_identity

router = APIRouter(prefix="/comments", tags=["comments"], route_class=DishkaRoute)


@router.post("/{comment_id}", response_model=SuccessResponse[CommentItem])
async def create_reply(
    comment_id: CommentIdPath,
    body: Annotated[CommentAPIRequest, Form()],
    request: Request,
    response: Response,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
    resolve_session: FromDishka[ResolveSessionUseCase],
    auth_settings: FromDishka[AuthSettings],
) -> SuccessResponse[CommentItem]:
    """Reply to a comment.

    Requires authentication.

    Raises:
        UnauthorizedError: If not signed in (401)
        NotFoundError: If the comment does not exist (404)
    """
    identity = await resolve_identity(request, response, resolve_session, auth_settings)
    comment = await create_comment_use_case.execute(
        CreateCommentRequest(
            identity=identity, parent_comment_id=comment_id, content=body.content
        )
    )
    return SuccessResponse(message="Comment created successfully", data=comment)


@router.post(
    "/{comment_id}/upvote", response_model=SuccessResponse[ToggleUpvoteResponse]
)
async def upvote_comment(
    comment_id: CommentIdPath,
    request: Request,
    response: Response,
    toggle_upvote_use_case: FromDishka[ToggleUpvoteUseCase],
    resolve_session: FromDishka[ResolveSessionUseCase],
    auth_settings: FromDishka[AuthSettings],
) -> SuccessResponse[ToggleUpvoteResponse]:
    """Upvote a comment, or take the upvote back.

    Requires authentication.

    Raises:
        UnauthorizedError: If not signed in (401)
        NotFoundError: If the comment does not exist (404)
    """
    identity = await resolve_identity(request, response, resolve_session, auth_settings)
    result = await toggle_upvote_use_case.execute(
        ToggleUpvoteRequest(
            identity=identity, target_type=UpvoteTarget.COMMENT, target_id=comment_id
        )
    )
    return SuccessResponse(message="Comment updated successfully", data=result)


@router.get(
    "/{comment_id}/comments", response_model=PaginatedResponse[list[CommentItem]]
)
async def list_replies(
    comment_id: CommentIdPath,
    request: Request,
    response: Response,
    list_replies_use_case: FromDishka[ListRepliesUseCase],
    resolve_session: FromDishka[ResolveSessionUseCase],
    auth_settings: FromDishka[AuthSettings],
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=10, ge=1, le=100),
    sort_by: SortBy = Query(default=SortBy.POINTS, alias="sortBy"),
    order: SortOrder = Query(default=SortOrder.DESC),
) -> PaginatedResponse[list[CommentItem]]:
    """List the direct replies to a comment.

    Raises:
        NotFoundError: If the comment does not exist (404)
    """
    identity = await resolve_identity(request, response, resolve_session, auth_settings)
    result = await list_replies_use_case.execute(
        ListRepliesRequest(
            identity=identity,
            comment_id=comment_id,
            page=page,
            limit=limit,
            sort_by=sort_by,
            order=order,
        )
    )
    return PaginatedResponse(
        message="Comments fetched successfully",
        data=result.comments,
        pagination=result.pagination,
    )
