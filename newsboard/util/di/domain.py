"""Domain layer DI providers."""

from dishka import Scope, provide

from newsboard.config import AuthSettings
from newsboard.domain.repository import (
    CommentRepository,
    PostRepository,
    SessionRepository,
    UpvoteRepository,
    UserRepository,
)
from newsboard.domain.service import (
    AuthService,
    CommentService,
    PasswordHasher,
    PostService,
    SessionService,
    UpvoteService,
)
from newsboard.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_auth_service(
        self, user_repository: UserRepository, password_hasher: PasswordHasher
    ) -> AuthService:
        """Provide username/password authentication domain service."""
        return AuthService(
            user_repository=user_repository, password_hasher=password_hasher
        )

    @provide
    def get_session_service(
        self,
        session_repository: SessionRepository,
        user_repository: UserRepository,
        auth_settings: AuthSettings,
    ) -> SessionService:
        """Provide session lifecycle domain service."""
        return SessionService(
            session_repository=session_repository,
            user_repository=user_repository,
            auth_settings=auth_settings,
        )

    @provide
    def get_post_service(self, post_repository: PostRepository) -> PostService:
        """Provide post domain service."""
        return PostService(post_repository=post_repository)

    @provide
    def get_comment_service(
        self, comment_repository: CommentRepository, post_repository: PostRepository
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(
            comment_repository=comment_repository, post_repository=post_repository
        )

    @provide
    def get_upvote_service(
        self,
        upvote_repository: UpvoteRepository,
        post_repository: PostRepository,
        comment_repository: CommentRepository,
    ) -> UpvoteService:
        """Provide upvote domain service."""
        return UpvoteService(
            upvote_repository=upvote_repository,
            post_repository=post_repository,
            comment_repository=comment_repository,
        )
