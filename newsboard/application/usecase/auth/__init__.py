"""Auth use cases."""

from .get_current_user import (
    GetCurrentUserRequest,
    GetCurrentUserResponse,
    GetCurrentUserUseCase,
)
from .login import LoginRequest, LoginResponse, LoginUseCase
from .logout import LogoutRequest, LogoutUseCase
from .resolve_session import (
    ResolveSessionRequest,
    ResolveSessionResponse,
    ResolveSessionUseCase,
)
from .signup import SignupRequest, SignupResponse, SignupUseCase

__all__ = [
    "GetCurrentUserRequest",
    "GetCurrentUserResponse",
    "GetCurrentUserUseCase",
    "LoginRequest",
    "LoginResponse",
    "LoginUseCase",
    "LogoutRequest",
    "LogoutUseCase",
    "ResolveSessionRequest",
    "ResolveSessionResponse",
    "ResolveSessionUseCase",
    "SignupRequest",
    "SignupResponse",
    "SignupUseCase",
]
