"""In-memory session repository for testing."""

from datetime import datetime
from typing import Optional

from newsboard.domain.model import Session
from newsboard.domain.repository import SessionRepository
from newsboard.domain.value import SessionId

from .store import InMemoryStore


class InMemorySessionRepository(SessionRepository):
    """In-memory implementation of SessionRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    async def find_by_id(self, session_id: SessionId) -> Optional[Session]:
        return self._store.sessions.get(session_id)

    async def save(self, session: Session) -> Session:
        self._store.sessions[session.id] = session
        return session

    async def update_expiry(self, session_id: SessionId, expires_at: datetime) -> None:
        session = self._store.sessions.get(session_id)
        if session:
            self._store.sessions[session_id] = session.model_copy(
                update={"expires_at": expires_at}
            )

    async def delete(self, session_id: SessionId) -> None:
        self._store.sessions.pop(session_id, None)
