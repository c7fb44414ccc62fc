"""PostgreSQL implementation of User repository."""

from typing import Optional

from sqlalchemy import insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from newsboard.domain.model import User
from newsboard.domain.repository import UserRepository
from newsboard.domain.value import UserId
from newsboard.persistence.mappers import row_to_user, user_to_dict
from newsboard.persistence.tables import users_table


class PostgresUserRepository(UserRepository):
    """PostgreSQL implementation of UserRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        stmt = select(users_table).where(users_table.c.id == user_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_user(row._asdict()) if row else None

    async def find_by_username(self, username: str) -> Optional[User]:
        """Find a user by username."""
        stmt = select(users_table).where(users_table.c.username == username)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_user(row._asdict()) if row else None

    async def save(self, user: User) -> User:
        """Insert a user.

        Raises:
            IntegrityError: If the username is already taken
        """
        stmt = insert(users_table).values(**user_to_dict(user))
        await self.session.execute(stmt)
        await self.session.flush()
        return user
