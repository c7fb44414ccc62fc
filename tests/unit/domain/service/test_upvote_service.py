"""Unit tests for UpvoteService."""

import asyncio

import pytest

from newsboard.domain.error import NotFoundError
from newsboard.domain.repository import (
    CommentRepository,
    PostRepository,
    UpvoteRepository,
)
from newsboard.domain.service import UpvoteService
from newsboard.domain.value import CommentId, PostId, UpvoteTarget, UserId
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked
unit_env = create_env_fixture()


class TestTogglePostUpvote:
    """Tests for toggling upvotes on posts."""

    @pytest.mark.asyncio
    async def test_first_toggle_adds_point_and_upvote(self, unit_env):
        """First toggle should add one point and create the upvote row."""
        # Arrange
        upvote_service = await unit_env.get(UpvoteService)
        post_repo = await unit_env.get(PostRepository)
        upvote_repo = await unit_env.get(UpvoteRepository)
        post = await post_repo.create(UserId("author"), "A post", None, "Body")
        user_id = UserId("voter")

        # Act
        result = await upvote_service.toggle(UpvoteTarget.POST, post.id, user_id)

        # Assert
        assert result.points == 1
        assert result.is_upvoted is True
        assert await upvote_repo.find(UpvoteTarget.POST, post.id, user_id)

    @pytest.mark.asyncio
    async def test_double_toggle_restores_points(self, unit_env):
        """Toggling twice should leave points and upvote rows as they were."""
        # Arrange
        upvote_service = await unit_env.get(UpvoteService)
        post_repo = await unit_env.get(PostRepository)
        upvote_repo = await unit_env.get(UpvoteRepository)
        post = await post_repo.create(UserId("author"), "A post", None, "Body")
        user_id = UserId("voter")

        # Act
        first = await upvote_service.toggle(UpvoteTarget.POST, post.id, user_id)
        second = await upvote_service.toggle(UpvoteTarget.POST, post.id, user_id)

        # Assert
        assert (first.points, first.is_upvoted) == (1, True)
        assert (second.points, second.is_upvoted) == (0, False)
        view = await post_repo.find_view(post.id)
        assert view.post.points == 0
        assert await upvote_repo.find(UpvoteTarget.POST, post.id, user_id) is None

    @pytest.mark.asyncio
    async def test_concurrent_toggles_by_distinct_users_all_count(self, unit_env):
        """Concurrent toggles by N users should add exactly N points."""
        # Arrange
        upvote_service = await unit_env.get(UpvoteService)
        post_repo = await unit_env.get(PostRepository)
        upvote_repo = await unit_env.get(UpvoteRepository)
        post = await post_repo.create(UserId("author"), "A post", None, "Body")
        voters = [UserId(f"voter{i}") for i in range(10)]

        # Act
        await asyncio.gather(
            *(
                upvote_service.toggle(UpvoteTarget.POST, post.id, voter)
                for voter in voters
            )
        )

        # Assert
        view = await post_repo.find_view(post.id)
        assert view.post.points == len(voters)
        for voter in voters:
            assert await upvote_repo.find(UpvoteTarget.POST, post.id, voter)

    @pytest.mark.asyncio
    async def test_toggle_missing_post_raises_not_found(self, unit_env):
        """Toggling a missing post should raise and create no upvote."""
        # Arrange
        upvote_service = await unit_env.get(UpvoteService)
        upvote_repo = await unit_env.get(UpvoteRepository)

        # Act & Assert
        with pytest.raises(NotFoundError, match="Post not found"):
            await upvote_service.toggle(UpvoteTarget.POST, PostId(999), UserId("voter"))

        assert await upvote_repo.find(UpvoteTarget.POST, 999, UserId("voter")) is None


class TestToggleCommentUpvote:
    """Tests for toggling upvotes on comments."""

    @pytest.mark.asyncio
    async def test_toggle_comment_moves_comment_points_only(self, unit_env):
        """Comment upvotes should not touch the post's points."""
        # Arrange
        upvote_service = await unit_env.get(UpvoteService)
        post_repo = await unit_env.get(PostRepository)
        comment_repo = await unit_env.get(CommentRepository)
        post = await post_repo.create(UserId("author"), "A post", None, "Body")
        comment = await comment_repo.create(post.id, UserId("author"), "Nice post")

        # Act
        result = await upvote_service.toggle(
            UpvoteTarget.COMMENT, comment.id, UserId("voter")
        )

        # Assert
        assert result.points == 1
        assert (await comment_repo.find_by_id(comment.id)).points == 1
        assert (await post_repo.find_view(post.id)).post.points == 0

    @pytest.mark.asyncio
    async def test_toggle_missing_comment_raises_not_found(self, unit_env):
        """Toggling a missing comment should raise NotFoundError."""
        upvote_service = await unit_env.get(UpvoteService)

        with pytest.raises(NotFoundError, match="Comment not found"):
            await upvote_service.toggle(
                UpvoteTarget.COMMENT, CommentId(42), UserId("voter")
            )
