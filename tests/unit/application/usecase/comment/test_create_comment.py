"""Unit tests for CreateCommentUseCase."""

import pytest
from pydantic import ValidationError

from newsboard.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentUseCase,
)
from newsboard.domain.error import NotFoundError, UnauthorizedError
from newsboard.domain.model import Anonymous
from newsboard.domain.service import PostService
from tests.conftest import sign_in
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestCreateCommentUseCase:
    """Tests for CreateCommentUseCase."""

    @pytest.mark.asyncio
    async def test_comment_then_reply(self, unit_env):
        """A reply lands one level deeper on the same post."""
        # Arrange
        use_case = await unit_env.get(CreateCommentUseCase)
        post_service = await unit_env.get(PostService)
        alice = await sign_in(unit_env)
        post = await post_service.create_post(alice.user.id, "Title", content="x")

        # Act
        root = await use_case.execute(
            CreateCommentRequest(identity=alice, post_id=post.id, content="Root")
        )
        reply = await use_case.execute(
            CreateCommentRequest(
                identity=alice, parent_comment_id=root.id, content="Reply"
            )
        )

        # Assert
        assert root.depth == 0
        assert root.parent_comment_id is None
        assert root.author.username == "alice"
        assert root.is_upvoted is False
        assert root.child_comments == []
        assert reply.depth == 1
        assert reply.parent_comment_id == root.id
        assert reply.post_id == post.id
        assert (await post_service.get_post(post.id)).post.comment_count == 2

    @pytest.mark.asyncio
    async def test_comment_item_uses_camel_case_keys(self, unit_env):
        use_case = await unit_env.get(CreateCommentUseCase)
        post_service = await unit_env.get(PostService)
        alice = await sign_in(unit_env)
        post = await post_service.create_post(alice.user.id, "Title", content="x")

        item = await use_case.execute(
            CreateCommentRequest(identity=alice, post_id=post.id, content="Root")
        )
        data = item.model_dump(by_alias=True)

        assert data["userId"] == alice.user.id
        assert data["postId"] == post.id
        assert data["parentCommentId"] is None
        assert data["commentCount"] == 0
        assert data["childComments"] == []

    @pytest.mark.asyncio
    async def test_anonymous_caller_is_rejected(self, unit_env):
        use_case = await unit_env.get(CreateCommentUseCase)

        with pytest.raises(UnauthorizedError):
            await use_case.execute(
                CreateCommentRequest(identity=Anonymous(), post_id=1, content="Hi")
            )

    @pytest.mark.asyncio
    async def test_missing_post_raises(self, unit_env):
        use_case = await unit_env.get(CreateCommentUseCase)
        alice = await sign_in(unit_env)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                CreateCommentRequest(identity=alice, post_id=77, content="Hi")
            )

    @pytest.mark.parametrize(
        "targets", [{}, {"post_id": 1, "parent_comment_id": 2}]
    )
    def test_request_needs_exactly_one_target(self, targets):
        with pytest.raises(ValidationError):
            CreateCommentRequest(identity=Anonymous(), content="Hi", **targets)
