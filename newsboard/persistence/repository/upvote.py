"""PostgreSQL implementation of Upvote repository."""

from typing import Optional

from sqlalchemy import Table, delete, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from newsboard.domain.model import Upvote
from newsboard.domain.repository import UpvoteRepository
from newsboard.domain.value import UpvoteId, UpvoteTarget, UserId
from newsboard.persistence.mappers import row_to_upvote
from newsboard.persistence.tables import comment_upvotes_table, post_upvotes_table


def _table_for(target_type: UpvoteTarget) -> tuple[Table, str]:
    """Upvote table and its target column for a target type."""
    if target_type == UpvoteTarget.POST:
        return post_upvotes_table, "post_id"
    return comment_upvotes_table, "comment_id"


class PostgresUpvoteRepository(UpvoteRepository):
    """PostgreSQL implementation of UpvoteRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find(
        self, target_type: UpvoteTarget, target_id: int, user_id: UserId
    ) -> Optional[Upvote]:
        """Find a user's upvote on a target."""
        table, target_column = _table_for(target_type)
        stmt = select(table).where(
            table.c[target_column] == target_id,
            table.c.user_id == user_id,
        )
        result = await self.session.execute(stmt)
        row = result.first()
        return row_to_upvote(row._asdict(), target_type) if row else None

    async def create(
        self, target_type: UpvoteTarget, target_id: int, user_id: UserId
    ) -> Upvote:
        """Insert an upvote row."""
        table, target_column = _table_for(target_type)
        stmt = (
            insert(table)
            .values({target_column: target_id, "user_id": user_id})
            .returning(table)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_upvote(row._asdict(), target_type)

    async def delete(self, target_type: UpvoteTarget, upvote_id: UpvoteId) -> None:
        """Delete an upvote row."""
        table, _ = _table_for(target_type)
        stmt = delete(table).where(table.c.id == upvote_id)
        await self.session.execute(stmt)
        await self.session.flush()
