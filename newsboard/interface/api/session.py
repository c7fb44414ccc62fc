"""Session cookie handling.

Routes resolve the caller from the session cookie through
``resolve_identity``, which also refreshes or blanks the cookie on the
outgoing response.
"""

from datetime import datetime, timezone

from fastapi import Request, Response

from newsboard.application.usecase.auth import (
    ResolveSessionRequest,
    ResolveSessionUseCase,
)
from newsboard.config import AuthSettings
from newsboard.domain.model import Authenticated, Identity


def set_session_cookie(
    response: Response,
    auth_settings: AuthSettings,
    session_id: str,
    expires_at: datetime,
) -> None:
    """Issue the session cookie."""
    max_age = int((expires_at - datetime.now(timezone.utc)).total_seconds())
    response.set_cookie(
        key=auth_settings.session_cookie_name,
        value=session_id,
        max_age=max(max_age, 0),
        path="/",
        httponly=True,
        secure=auth_settings.secure_cookies,
        samesite="lax",
    )


def set_blank_session_cookie(response: Response, auth_settings: AuthSettings) -> None:
    """Replace the session cookie with an empty, already expired one."""
    response.set_cookie(
        key=auth_settings.session_cookie_name,
        value="",
        max_age=0,
        path="/",
        httponly=True,
        secure=auth_settings.secure_cookies,
        samesite="lax",
    )


async def resolve_identity(
    request: Request,
    response: Response,
    resolve_session: ResolveSessionUseCase,
    auth_settings: AuthSettings,
) -> Identity:
    """Resolve the caller from the session cookie.

    Args:
        request: Incoming request carrying the cookie
        response: Outgoing response to refresh or blank the cookie on
        resolve_session: Resolve session use case
        auth_settings: Authentication settings

    Returns:
        Authenticated caller, or Anonymous
    """
    result = await resolve_session.execute(
        ResolveSessionRequest(
            session_id=request.cookies.get(auth_settings.session_cookie_name)
        )
    )

    if isinstance(result.identity, Authenticated) and result.fresh:
        session = result.identity.session
        set_session_cookie(response, auth_settings, session.id, session.expires_at)
    elif result.invalid:
        set_blank_session_cookie(response, auth_settings)

    return result.identity
