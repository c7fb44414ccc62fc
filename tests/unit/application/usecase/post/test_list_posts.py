"""Unit tests for ListPostsUseCase."""

import pytest

from newsboard.application.usecase.post import ListPostsRequest, ListPostsUseCase
from newsboard.domain.model import Anonymous
from newsboard.domain.service import PostService, UpvoteService
from newsboard.domain.value import SortBy, SortOrder, UpvoteTarget
from tests.conftest import sign_in
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestListPostsUseCase:
    @pytest.mark.asyncio
    async def test_sorted_by_points_with_viewer_state(self, unit_env):
        """Default listing is points desc and marks the viewer's upvotes."""
        # Arrange
        use_case = await unit_env.get(ListPostsUseCase)
        post_service = await unit_env.get(PostService)
        upvote_service = await unit_env.get(UpvoteService)
        alice = await sign_in(unit_env)
        quiet = await post_service.create_post(alice.user.id, "Quiet", content="x")
        popular = await post_service.create_post(alice.user.id, "Popular", content="x")
        await upvote_service.toggle(UpvoteTarget.POST, popular.id, alice.user.id)

        # Act
        as_alice = await use_case.execute(ListPostsRequest(identity=alice))
        as_anonymous = await use_case.execute(ListPostsRequest(identity=Anonymous()))

        # Assert
        assert [p.id for p in as_alice.posts] == [popular.id, quiet.id]
        assert [p.is_upvoted for p in as_alice.posts] == [True, False]
        assert [p.is_upvoted for p in as_anonymous.posts] == [False, False]

    @pytest.mark.asyncio
    async def test_recent_ascending_second_page(self, unit_env):
        # Arrange
        use_case = await unit_env.get(ListPostsUseCase)
        post_service = await unit_env.get(PostService)
        alice = await sign_in(unit_env)
        posts = [
            await post_service.create_post(alice.user.id, f"Post {i}", content="x")
            for i in range(5)
        ]

        # Act
        response = await use_case.execute(
            ListPostsRequest(
                identity=Anonymous(),
                page=2,
                limit=2,
                sort_by=SortBy.RECENT,
                order=SortOrder.ASC,
            )
        )

        # Assert
        assert [p.id for p in response.posts] == [posts[2].id, posts[3].id]
        assert response.pagination.model_dump(by_alias=True) == {
            "page": 2,
            "totalPages": 3,
        }

    @pytest.mark.asyncio
    async def test_filter_by_author(self, unit_env):
        use_case = await unit_env.get(ListPostsUseCase)
        post_service = await unit_env.get(PostService)
        alice = await sign_in(unit_env, "alice")
        bob = await sign_in(unit_env, "bob")
        await post_service.create_post(alice.user.id, "By Alice", content="x")
        await post_service.create_post(bob.user.id, "By Bob", content="x")

        response = await use_case.execute(
            ListPostsRequest(identity=Anonymous(), author=bob.user.id)
        )

        assert [p.title for p in response.posts] == ["By Bob"]
