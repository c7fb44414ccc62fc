"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from newsboard.domain.model.user import User
from newsboard.domain.value import UserId


class UserRepository(ABC):
    """Repository for User aggregate."""

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        pass

    @abstractmethod
    async def find_by_username(self, username: str) -> Optional[User]:
        """Find a user by unique username."""
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Insert a new user.

        Raises:
            IntegrityError: If the username already exists
        """
        pass
