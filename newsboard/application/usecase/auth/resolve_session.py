"""Resolve session use case."""

from pydantic import BaseModel

from newsboard.application.usecase.base import BaseUseCase
from newsboard.domain.model import Anonymous, Authenticated, Identity
from newsboard.domain.service import SessionService
from newsboard.domain.value import SessionId


class ResolveSessionRequest(BaseModel):
    """Session token read from the request cookie, if any."""

    session_id: str | None = None


class ResolveSessionResponse(BaseModel):
    """Resolved caller.

    ``fresh`` means the session was extended and its cookie should be
    issued again. ``invalid`` means a token was sent but is not usable and
    the cookie should be blanked.
    """

    identity: Identity
    fresh: bool = False
    invalid: bool = False


class ResolveSessionUseCase(BaseUseCase):
    """Use case for turning a session cookie into a caller identity."""

    def __init__(self, session_service: SessionService) -> None:
        """Initialize resolve session use case.

        Args:
            session_service: Session domain service
        """
        self.session_service = session_service

    async def execute(self, request: ResolveSessionRequest) -> ResolveSessionResponse:
        """Execute session resolution.

        Never raises for a bad token: the caller is then anonymous.
        """
        if not request.session_id:
            return ResolveSessionResponse(identity=Anonymous())

        result = await self.session_service.validate_session(
            SessionId(request.session_id)
        )
        if result is None:
            return ResolveSessionResponse(identity=Anonymous(), invalid=True)

        return ResolveSessionResponse(
            identity=Authenticated(user=result.user, session=result.session),
            fresh=result.fresh,
        )
