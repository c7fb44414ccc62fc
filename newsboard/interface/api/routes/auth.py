"""Authentication routes."""

from typing import Annotated

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Form, Request, Response
from pydantic import BaseModel, Field

from newsboard.application.usecase.auth import (
    GetCurrentUserRequest,
    GetCurrentUserResponse,
    GetCurrentUserUseCase,
    LoginRequest,
    LoginUseCase,
    LogoutRequest,
    LogoutUseCase,
    ResolveSessionUseCase,
    SignupRequest,
    SignupUseCase,
)
from newsboard.config import AuthSettings
from newsboard.domain.value import Username
from newsboard.interface.api.envelope import MessageResponse, SuccessResponse
from newsboard.interface.api.session import (
    resolve_identity,
    set_blank_session_cookie,
    set_session_cookie,
)

router = APIRouter(prefix="/auth", tags=["authentication"], route_class=DishkaRoute)


class CredentialsAPIRequest(BaseModel):
    """Username and password, used for signup and login."""

    username: Username
    password: str = Field(min_length=3, max_length=255)


@router.post("/signup", response_model=MessageResponse)
async def signup(
    body: Annotated[CredentialsAPIRequest, Form()],
    response: Response,
    signup_use_case: FromDishka[SignupUseCase],
    auth_settings: FromDishka[AuthSettings],
) -> MessageResponse:
    """Create an account and sign it in.

    Raises:
        UsernameTakenError: If the username is already used (409)
    """
    result = await signup_use_case.execute(
        SignupRequest(username=body.username.root, password=body.password)
    )
    set_session_cookie(response, auth_settings, result.session_id, result.expires_at)
    return MessageResponse(message="User created")


@router.post("/login", response_model=MessageResponse)
async def login(
    body: Annotated[CredentialsAPIRequest, Form()],
    response: Response,
    login_use_case: FromDishka[LoginUseCase],
    auth_settings: FromDishka[AuthSettings],
) -> MessageResponse:
    """Sign in with username and password.

    Raises:
        InvalidCredentialsError: If the username or password is wrong (401)
    """
    result = await login_use_case.execute(
        LoginRequest(username=body.username.root, password=body.password)
    )
    set_session_cookie(response, auth_settings, result.session_id, result.expires_at)
    return MessageResponse(message="Logged in")


@router.post("/logout", response_model=MessageResponse)
async def logout(
    request: Request,
    response: Response,
    logout_use_case: FromDishka[LogoutUseCase],
    resolve_session: FromDishka[ResolveSessionUseCase],
    auth_settings: FromDishka[AuthSettings],
) -> MessageResponse:
    """End the current session and clear the cookie.

    Raises:
        UnauthorizedError: If there is no valid session (401)
    """
    identity = await resolve_identity(request, response, resolve_session, auth_settings)
    await logout_use_case.execute(LogoutRequest(identity=identity))
    set_blank_session_cookie(response, auth_settings)
    return MessageResponse(message="Logged out")


@router.get("/user", response_model=SuccessResponse[GetCurrentUserResponse])
async def get_user(
    request: Request,
    response: Response,
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    resolve_session: FromDishka[ResolveSessionUseCase],
    auth_settings: FromDishka[AuthSettings],
) -> SuccessResponse[GetCurrentUserResponse]:
    """Return the signed-in user.

    Raises:
        UnauthorizedError: If there is no valid session (401)
    """
    identity = await resolve_identity(request, response, resolve_session, auth_settings)
    user = await get_current_user_use_case.execute(
        GetCurrentUserRequest(identity=identity)
    )
    return SuccessResponse(message="User fetched", data=user)
