"""Unit tests for PostService."""

import pytest

from newsboard.domain.error import EmptyPostError, NotFoundError
from newsboard.domain.model import User
from newsboard.domain.repository import UserRepository
from newsboard.domain.service import PostService
from newsboard.domain.value import (
    PageRequest,
    PostId,
    SortBy,
    SortOrder,
    UserId,
)
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestCreatePost:
    """Tests for create_post."""

    @pytest.mark.asyncio
    async def test_create_link_post(self, unit_env):
        post_service = await unit_env.get(PostService)

        post = await post_service.create_post(
            UserId("author"), "A link", url="https://example.com"
        )

        assert post.id is not None
        assert post.url == "https://example.com"
        assert post.points == 0
        assert post.comment_count == 0

    @pytest.mark.asyncio
    async def test_post_without_url_or_content_is_rejected(self, unit_env):
        """A post needs a url or a text body."""
        post_service = await unit_env.get(PostService)

        with pytest.raises(EmptyPostError):
            await post_service.create_post(UserId("author"), "Nothing here")


class TestGetPost:
    """Tests for get_post."""

    @pytest.mark.asyncio
    async def test_get_post_includes_author(self, unit_env):
        # Arrange
        post_service = await unit_env.get(PostService)
        user_repo = await unit_env.get(UserRepository)
        await user_repo.save(
            User(id=UserId("author"), username="writer", password_hash="x")
        )
        post = await post_service.create_post(UserId("author"), "Hi", content="Body")

        # Act
        view = await post_service.get_post(post.id)

        # Assert
        assert view.post == post
        assert view.author.username == "writer"
        assert view.is_upvoted is False

    @pytest.mark.asyncio
    async def test_get_missing_post_raises(self, unit_env):
        post_service = await unit_env.get(PostService)

        with pytest.raises(NotFoundError, match="Post not found"):
            await post_service.get_post(PostId(1))


class TestListPosts:
    """Tests for list_posts."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "count, expected_pages", [(0, 0), (5, 1), (6, 2)]
    )
    async def test_total_pages_boundaries(self, unit_env, count, expected_pages):
        """Total pages is ceil(count / limit), zero for an empty listing."""
        # Arrange
        post_service = await unit_env.get(PostService)
        for i in range(count):
            await post_service.create_post(UserId("author"), f"Post {i}", content="x")

        # Act
        views, page = await post_service.list_posts(PageRequest(limit=5))

        # Assert
        assert page.total_pages == expected_pages
        assert page.page == 1
        assert len(views) == min(count, 5)

    @pytest.mark.asyncio
    async def test_filters_by_author_and_site(self, unit_env):
        # Arrange
        post_service = await unit_env.get(PostService)
        await post_service.create_post(UserId("a"), "One", url="https://a.example")
        await post_service.create_post(UserId("b"), "Two", url="https://b.example")
        await post_service.create_post(UserId("a"), "Three", content="text")

        # Act
        by_author, author_page = await post_service.list_posts(
            PageRequest(), author_id=UserId("a")
        )
        by_site, _ = await post_service.list_posts(
            PageRequest(), site="https://b.example"
        )

        # Assert
        assert {v.post.title for v in by_author} == {"One", "Three"}
        assert author_page.total_pages == 1
        assert [v.post.title for v in by_site] == ["Two"]

    @pytest.mark.asyncio
    async def test_recent_ascending_order(self, unit_env):
        """recent/asc lists posts oldest first."""
        post_service = await unit_env.get(PostService)
        for title in ("first", "second", "third"):
            await post_service.create_post(UserId("a"), title, content="x")

        views, _ = await post_service.list_posts(
            PageRequest(sort_by=SortBy.RECENT, order=SortOrder.ASC)
        )

        assert [v.post.title for v in views] == ["first", "second", "third"]
