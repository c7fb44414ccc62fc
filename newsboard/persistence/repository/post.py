"""PostgreSQL implementation of Post repository."""

from typing import Any, List, Optional

import logfire
from sqlalchemy import and_, false, func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql import Select

from newsboard.domain.model import Post, PostView
from newsboard.domain.repository import PostRepository
from newsboard.domain.value import PageRequest, PostId, UserId
from newsboard.persistence.mappers import row_to_post, row_to_post_view
from newsboard.persistence.repository.ordering import order_clauses
from newsboard.persistence.tables import (
    post_upvotes_table,
    posts_table,
    users_table,
)


class PostgresPostRepository(PostRepository):
    """PostgreSQL implementation of PostRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    def _select_views(self, viewer_id: Optional[UserId]) -> Select[Any]:
        """Select posts joined with author name and the viewer's upvote.

        Anonymous viewers get a constant false instead of the upvote join.
        """
        source = posts_table.outerjoin(
            users_table, users_table.c.id == posts_table.c.user_id
        )
        if viewer_id is None:
            is_upvoted = false().label("is_upvoted")
        else:
            source = source.outerjoin(
                post_upvotes_table,
                and_(
                    post_upvotes_table.c.post_id == posts_table.c.id,
                    post_upvotes_table.c.user_id == viewer_id,
                ),
            )
            is_upvoted = post_upvotes_table.c.id.is_not(None).label("is_upvoted")

        return select(
            posts_table,
            users_table.c.username.label("author_username"),
            is_upvoted,
        ).select_from(source)

    @staticmethod
    def _filters(
        author_id: Optional[UserId], site: Optional[str]
    ) -> List[Any]:
        filters = []
        if author_id is not None:
            filters.append(posts_table.c.user_id == author_id)
        if site is not None:
            filters.append(posts_table.c.url == site)
        return filters

    async def create(
        self,
        author_id: UserId,
        title: str,
        url: Optional[str],
        content: Optional[str],
    ) -> Post:
        """Insert a post and return the stored row."""
        stmt = (
            insert(posts_table)
            .values(user_id=author_id, title=title, url=url, content=content)
            .returning(posts_table)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_post(row._asdict())

    async def exists(self, post_id: PostId) -> bool:
        stmt = select(posts_table.c.id).where(posts_table.c.id == post_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none() is not None

    async def find_view(
        self, post_id: PostId, viewer_id: Optional[UserId] = None
    ) -> Optional[PostView]:
        """Find a post with its author and the viewer's upvote state."""
        stmt = self._select_views(viewer_id).where(posts_table.c.id == post_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_post_view(row._asdict()) if row else None

    async def find_views(
        self,
        page: PageRequest,
        viewer_id: Optional[UserId] = None,
        author_id: Optional[UserId] = None,
        site: Optional[str] = None,
    ) -> List[PostView]:
        """Find one page of posts."""
        with logfire.span(
            "post_repository.find_views",
            page=page.page,
            limit=page.limit,
            sort_by=page.sort_by.value,
        ):
            stmt = (
                self._select_views(viewer_id)
                .where(*self._filters(author_id, site))
                .order_by(*order_clauses(posts_table, page))
                .limit(page.limit)
                .offset(page.offset)
            )
            result = await self.session.execute(stmt)
            return [row_to_post_view(row._asdict()) for row in result.fetchall()]

    async def count(
        self,
        author_id: Optional[UserId] = None,
        site: Optional[str] = None,
    ) -> int:
        stmt = (
            select(func.count())
            .select_from(posts_table)
            .where(*self._filters(author_id, site))
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def add_points(self, post_id: PostId, delta: int) -> Optional[int]:
        """Atomically add delta to points."""
        stmt = (
            update(posts_table)
            .where(posts_table.c.id == post_id)
            .values(points=posts_table.c.points + delta)
            .returning(posts_table.c.points)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def increment_comment_count(self, post_id: PostId) -> Optional[int]:
        """Atomically increment comment_count by 1."""
        stmt = (
            update(posts_table)
            .where(posts_table.c.id == post_id)
            .values(comment_count=posts_table.c.comment_count + 1)
            .returning(posts_table.c.comment_count)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()
