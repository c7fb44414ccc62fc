"""Unit tests for ToggleUpvoteUseCase."""

import pytest

from newsboard.application.usecase.upvote import (
    ToggleUpvoteRequest,
    ToggleUpvoteUseCase,
)
from newsboard.domain.error import UnauthorizedError
from newsboard.domain.model import Anonymous
from newsboard.domain.service import PostService
from newsboard.domain.value import UpvoteTarget
from tests.conftest import sign_in
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestToggleUpvoteUseCase:
    """Tests for ToggleUpvoteUseCase."""

    @pytest.mark.asyncio
    async def test_two_users_upvote_and_one_takes_it_back(self, unit_env):
        """A, A, B toggles end with one point upvoted by B only."""
        # Arrange
        use_case = await unit_env.get(ToggleUpvoteUseCase)
        post_service = await unit_env.get(PostService)
        alice = await sign_in(unit_env, "alice")
        bob = await sign_in(unit_env, "bob")
        post = await post_service.create_post(alice.user.id, "Title", content="x")

        def toggle(identity):
            return use_case.execute(
                ToggleUpvoteRequest(
                    identity=identity,
                    target_type=UpvoteTarget.POST,
                    target_id=post.id,
                )
            )

        # Act
        first = await toggle(alice)
        second = await toggle(alice)
        third = await toggle(bob)

        # Assert
        assert (first.count, first.is_upvoted) == (1, True)
        assert (second.count, second.is_upvoted) == (0, False)
        assert (third.count, third.is_upvoted) == (1, True)
        as_alice = await post_service.get_post(post.id, viewer_id=alice.user.id)
        as_bob = await post_service.get_post(post.id, viewer_id=bob.user.id)
        assert as_alice.is_upvoted is False
        assert as_bob.is_upvoted is True

    @pytest.mark.asyncio
    async def test_anonymous_caller_is_rejected(self, unit_env):
        """Anonymous callers cannot vote and nothing changes."""
        # Arrange
        use_case = await unit_env.get(ToggleUpvoteUseCase)
        post_service = await unit_env.get(PostService)
        alice = await sign_in(unit_env)
        post = await post_service.create_post(alice.user.id, "Title", content="x")

        # Act & Assert
        with pytest.raises(UnauthorizedError):
            await use_case.execute(
                ToggleUpvoteRequest(
                    identity=Anonymous(),
                    target_type=UpvoteTarget.POST,
                    target_id=post.id,
                )
            )

        assert (await post_service.get_post(post.id)).post.points == 0

    @pytest.mark.asyncio
    async def test_response_serializes_camel_case(self, unit_env):
        use_case = await unit_env.get(ToggleUpvoteUseCase)
        post_service = await unit_env.get(PostService)
        alice = await sign_in(unit_env)
        post = await post_service.create_post(alice.user.id, "Title", content="x")

        response = await use_case.execute(
            ToggleUpvoteRequest(
                identity=alice, target_type=UpvoteTarget.POST, target_id=post.id
            )
        )

        assert response.model_dump(by_alias=True) == {"count": 1, "isUpvoted": True}
