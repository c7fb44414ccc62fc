"""Application layer DI providers."""

from dishka import Scope, provide

from newsboard.application.usecase.auth import (
    GetCurrentUserUseCase,
    LoginUseCase,
    LogoutUseCase,
    ResolveSessionUseCase,
    SignupUseCase,
)
from newsboard.application.usecase.comment import (
    CreateCommentUseCase,
    ListPostCommentsUseCase,
    ListRepliesUseCase,
)
from newsboard.application.usecase.post import (
    CreatePostUseCase,
    GetPostUseCase,
    ListPostsUseCase,
)
from newsboard.application.usecase.upvote import ToggleUpvoteUseCase
from newsboard.domain.service import (
    AuthService,
    CommentService,
    PostService,
    SessionService,
    UpvoteService,
)
from newsboard.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production use case provider.

    Use cases are REQUEST-scoped like the services they wrap.
    """

    scope = Scope.REQUEST

    @provide
    def get_signup_use_case(
        self, auth_service: AuthService, session_service: SessionService
    ) -> SignupUseCase:
        return SignupUseCase(auth_service=auth_service, session_service=session_service)

    @provide
    def get_login_use_case(
        self, auth_service: AuthService, session_service: SessionService
    ) -> LoginUseCase:
        return LoginUseCase(auth_service=auth_service, session_service=session_service)

    @provide
    def get_logout_use_case(self, session_service: SessionService) -> LogoutUseCase:
        return LogoutUseCase(session_service=session_service)

    @provide
    def get_resolve_session_use_case(
        self, session_service: SessionService
    ) -> ResolveSessionUseCase:
        return ResolveSessionUseCase(session_service=session_service)

    @provide
    def get_current_user_use_case(self) -> GetCurrentUserUseCase:
        return GetCurrentUserUseCase()

    @provide
    def get_create_post_use_case(self, post_service: PostService) -> CreatePostUseCase:
        return CreatePostUseCase(post_service=post_service)

    @provide
    def get_get_post_use_case(self, post_service: PostService) -> GetPostUseCase:
        return GetPostUseCase(post_service=post_service)

    @provide
    def get_list_posts_use_case(self, post_service: PostService) -> ListPostsUseCase:
        return ListPostsUseCase(post_service=post_service)

    @provide
    def get_create_comment_use_case(
        self, comment_service: CommentService
    ) -> CreateCommentUseCase:
        return CreateCommentUseCase(comment_service=comment_service)

    @provide
    def get_list_post_comments_use_case(
        self, comment_service: CommentService
    ) -> ListPostCommentsUseCase:
        return ListPostCommentsUseCase(comment_service=comment_service)

    @provide
    def get_list_replies_use_case(
        self, comment_service: CommentService
    ) -> ListRepliesUseCase:
        return ListRepliesUseCase(comment_service=comment_service)

    @provide
    def get_toggle_upvote_use_case(
        self, upvote_service: UpvoteService
    ) -> ToggleUpvoteUseCase:
        return ToggleUpvoteUseCase(upvote_service=upvote_service)
