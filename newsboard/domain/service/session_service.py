"""Session domain service."""

import secrets
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

import logfire

from newsboard.config import AuthSettings
from newsboard.domain.model import Session, User
from newsboard.domain.repository import SessionRepository, UserRepository
from newsboard.domain.value import SessionId, UserId

from .base import Service


@dataclass
class SessionValidation:
    """A valid session and its user.

    ``fresh`` is set when the expiry was just extended and the cookie
    should be issued again.
    """

    session: Session
    user: User
    fresh: bool


def generate_session_id() -> SessionId:
    """Random 40 character session token."""
    return SessionId(secrets.token_hex(20))


class SessionService(Service):
    """Domain service for the login session lifecycle."""

    def __init__(
        self,
        session_repository: SessionRepository,
        user_repository: UserRepository,
        auth_settings: AuthSettings,
    ) -> None:
        """Initialize session service.

        Args:
            session_repository: Session repository
            user_repository: User repository
            auth_settings: Authentication settings
        """
        self.session_repository = session_repository
        self.user_repository = user_repository
        self.auth_settings = auth_settings

    @property
    def lifetime(self) -> timedelta:
        return timedelta(days=self.auth_settings.session_expiry_days)

    async def create_session(self, user_id: UserId) -> Session:
        """Start a new session for a user."""
        with logfire.span("session_service.create_session", user_id=user_id):
            session = Session(
                id=generate_session_id(),
                user_id=user_id,
                expires_at=datetime.now(timezone.utc) + self.lifetime,
            )
            saved = await self.session_repository.save(session)
            logfire.info("Session created", user_id=user_id)
            return saved

    async def validate_session(
        self, session_id: SessionId
    ) -> SessionValidation | None:
        """Resolve a session token.

        Expired sessions are deleted. Sessions past half of their lifetime
        are extended by a full lifetime.

        Args:
            session_id: Token read from the session cookie

        Returns:
            Session and user, or None if the token is unknown or expired
        """
        with logfire.span("session_service.validate_session"):
            session = await self.session_repository.find_by_id(session_id)
            if not session:
                logfire.debug("Unknown session token")
                return None

            now = datetime.now(timezone.utc)
            if session.is_expired(now):
                logfire.info("Session expired", user_id=session.user_id)
                await self.session_repository.delete(session.id)
                return None

            user = await self.user_repository.find_by_id(session.user_id)
            if not user:
                logfire.warn("Session for missing user", user_id=session.user_id)
                await self.session_repository.delete(session.id)
                return None

            fresh = False
            if session.expires_at - now < self.lifetime / 2:
                expires_at = now + self.lifetime
                await self.session_repository.update_expiry(session.id, expires_at)
                session = session.model_copy(update={"expires_at": expires_at})
                fresh = True
                logfire.info("Session extended", user_id=session.user_id)

            return SessionValidation(session=session, user=user, fresh=fresh)

    async def invalidate_session(self, session_id: SessionId) -> None:
        """End a session."""
        with logfire.span("session_service.invalidate_session"):
            await self.session_repository.delete(session_id)
            logfire.info("Session invalidated")

