"""PostgreSQL implementation of Session repository."""

from datetime import datetime
from typing import Optional

from sqlalchemy import delete, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from newsboard.domain.model import Session
from newsboard.domain.repository import SessionRepository
from newsboard.domain.value import SessionId
from newsboard.persistence.mappers import row_to_session, session_to_dict
from newsboard.persistence.tables import sessions_table


class PostgresSessionRepository(SessionRepository):
    """PostgreSQL implementation of SessionRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, session_id: SessionId) -> Optional[Session]:
        stmt = select(sessions_table).where(sessions_table.c.id == session_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_session(row._asdict()) if row else None

    async def save(self, session: Session) -> Session:
        stmt = insert(sessions_table).values(**session_to_dict(session))
        await self.session.execute(stmt)
        await self.session.flush()
        return session

    async def update_expiry(self, session_id: SessionId, expires_at: datetime) -> None:
        stmt = (
            update(sessions_table)
            .where(sessions_table.c.id == session_id)
            .values(expires_at=expires_at)
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def delete(self, session_id: SessionId) -> None:
        stmt = delete(sessions_table).where(sessions_table.c.id == session_id)
        await self.session.execute(stmt)
        await self.session.flush()
