"""In-memory user repository for testing."""

from typing import Optional

from sqlalchemy.exc import IntegrityError

from newsboard.domain.model import User
from newsboard.domain.repository import UserRepository
from newsboard.domain.value import UserId

from .store import InMemoryStore


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        return self._store.users.get(user_id)

    async def find_by_username(self, username: str) -> Optional[User]:
        for user in self._store.users.values():
            if user.username == username:
                return user
        return None

    async def save(self, user: User) -> User:
        """Save a user.

        Raises:
            IntegrityError: If the username is already taken
        """
        if await self.find_by_username(user.username):
            raise IntegrityError("Duplicate username", None, Exception())
        self._store.users[user.id] = user
        return user
