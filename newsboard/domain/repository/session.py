"""Session repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional

from newsboard.domain.model.session import Session
from newsboard.domain.value import SessionId


class SessionRepository(ABC):
    """Repository for login sessions."""

    @abstractmethod
    async def find_by_id(self, session_id: SessionId) -> Optional[Session]:
        """Find a session by its token."""
        pass

    @abstractmethod
    async def save(self, session: Session) -> Session:
        """Insert a new session."""
        pass

    @abstractmethod
    async def update_expiry(self, session_id: SessionId, expires_at: datetime) -> None:
        """Move a session's expiry forward."""
        pass

    @abstractmethod
    async def delete(self, session_id: SessionId) -> None:
        """Delete one session."""
        pass

