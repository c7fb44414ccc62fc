"""Upvote repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from newsboard.domain.model.upvote import Upvote
from newsboard.domain.value import UpvoteId, UpvoteTarget, UserId


class UpvoteRepository(ABC):
    """Repository for post and comment upvotes.

    Uniqueness of (user, target) is kept by the toggle logic, not by a
    database constraint.
    """

    @abstractmethod
    async def find(
        self, target_type: UpvoteTarget, target_id: int, user_id: UserId
    ) -> Optional[Upvote]:
        """Find a user's upvote on a target."""
        pass

    @abstractmethod
    async def create(
        self, target_type: UpvoteTarget, target_id: int, user_id: UserId
    ) -> Upvote:
        """Insert an upvote row."""
        pass

    @abstractmethod
    async def delete(self, target_type: UpvoteTarget, upvote_id: UpvoteId) -> None:
        """Delete an upvote row."""
        pass
