"""In-memory upvote repository for testing."""

from typing import Optional

from newsboard.domain.model import Upvote
from newsboard.domain.repository import UpvoteRepository
from newsboard.domain.value import UpvoteId, UpvoteTarget, UserId

from .store import InMemoryStore


class InMemoryUpvoteRepository(UpvoteRepository):
    """In-memory implementation of UpvoteRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    async def find(
        self, target_type: UpvoteTarget, target_id: int, user_id: UserId
    ) -> Optional[Upvote]:
        for upvote in self._store.upvotes[target_type].values():
            if upvote.target_id == target_id and upvote.user_id == user_id:
                return upvote
        return None

    async def create(
        self, target_type: UpvoteTarget, target_id: int, user_id: UserId
    ) -> Upvote:
        upvote = Upvote(
            id=UpvoteId(self._store.next_id(f"{target_type.value}_upvotes")),
            target_type=target_type,
            target_id=target_id,
            user_id=user_id,
            created_at=self._store.now(),
        )
        self._store.upvotes[target_type][upvote.id] = upvote
        return upvote

    async def delete(self, target_type: UpvoteTarget, upvote_id: UpvoteId) -> None:
        self._store.upvotes[target_type].pop(upvote_id, None)
