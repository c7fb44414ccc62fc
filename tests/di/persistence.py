"""Mock persistence providers for testing."""

from dishka import Scope, provide

from newsboard.domain.repository import (
    CommentRepository,
    PostRepository,
    SessionRepository,
    UpvoteRepository,
    UserRepository,
)
from newsboard.persistence.repository.inmemory import (
    InMemoryCommentRepository,
    InMemoryPostRepository,
    InMemorySessionRepository,
    InMemoryStore,
    InMemoryUpvoteRepository,
    InMemoryUserRepository,
)
from newsboard.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    The store is APP-scoped so rows survive across requests of one app;
    every container (one per test) starts from an empty store.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_store(self) -> InMemoryStore:
        """Provide the shared in-memory store."""
        return InMemoryStore()

    @provide(scope=Scope.REQUEST)
    def get_user_repository(self, store: InMemoryStore) -> UserRepository:
        """Provide in-memory user repository."""
        return InMemoryUserRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_session_repository(self, store: InMemoryStore) -> SessionRepository:
        """Provide in-memory session repository."""
        return InMemorySessionRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_post_repository(self, store: InMemoryStore) -> PostRepository:
        """Provide in-memory post repository."""
        return InMemoryPostRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_comment_repository(self, store: InMemoryStore) -> CommentRepository:
        """Provide in-memory comment repository."""
        return InMemoryCommentRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_upvote_repository(self, store: InMemoryStore) -> UpvoteRepository:
        """Provide in-memory upvote repository."""
        return InMemoryUpvoteRepository(store)
