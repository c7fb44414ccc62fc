"""PostgreSQL implementation of Comment repository."""

from collections import defaultdict
from typing import Any, Dict, List, Optional, Sequence

from sqlalchemy import and_, false, func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql import Select

from newsboard.domain.model import Comment, CommentView
from newsboard.domain.repository import CommentRepository
from newsboard.domain.value import CommentId, PageRequest, PostId, UserId
from newsboard.persistence.mappers import row_to_comment, row_to_comment_view
from newsboard.persistence.repository.ordering import order_clauses
from newsboard.persistence.tables import (
    comment_upvotes_table,
    comments_table,
    users_table,
)


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    def _select_views(self, viewer_id: Optional[UserId], *extra: Any) -> Select[Any]:
        """Select comments joined with author name and the viewer's upvote."""
        source = comments_table.outerjoin(
            users_table, users_table.c.id == comments_table.c.user_id
        )
        if viewer_id is None:
            is_upvoted = false().label("is_upvoted")
        else:
            source = source.outerjoin(
                comment_upvotes_table,
                and_(
                    comment_upvotes_table.c.comment_id == comments_table.c.id,
                    comment_upvotes_table.c.user_id == viewer_id,
                ),
            )
            is_upvoted = comment_upvotes_table.c.id.is_not(None).label("is_upvoted")

        return select(
            comments_table,
            users_table.c.username.label("author_username"),
            is_upvoted,
            *extra,
        ).select_from(source)

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        stmt = select(comments_table).where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    async def create(
        self,
        post_id: PostId,
        author_id: UserId,
        content: str,
        parent_comment_id: Optional[CommentId] = None,
        depth: int = 0,
    ) -> Comment:
        """Insert a comment and return the stored row."""
        stmt = (
            insert(comments_table)
            .values(
                post_id=post_id,
                user_id=author_id,
                content=content,
                parent_comment_id=parent_comment_id,
                depth=depth,
            )
            .returning(comments_table)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_comment(row._asdict())

    async def add_points(self, comment_id: CommentId, delta: int) -> Optional[int]:
        """Atomically add delta to points."""
        stmt = (
            update(comments_table)
            .where(comments_table.c.id == comment_id)
            .values(points=comments_table.c.points + delta)
            .returning(comments_table.c.points)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def increment_comment_count(self, comment_id: CommentId) -> Optional[int]:
        """Atomically increment the direct reply count by 1."""
        stmt = (
            update(comments_table)
            .where(comments_table.c.id == comment_id)
            .values(comment_count=comments_table.c.comment_count + 1)
            .returning(comments_table.c.comment_count)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def find_root_views(
        self,
        post_id: PostId,
        page: PageRequest,
        viewer_id: Optional[UserId] = None,
    ) -> List[CommentView]:
        """Find one page of a post's root comments."""
        stmt = (
            self._select_views(viewer_id)
            .where(
                comments_table.c.post_id == post_id,
                comments_table.c.parent_comment_id.is_(None),
            )
            .order_by(*order_clauses(comments_table, page))
            .limit(page.limit)
            .offset(page.offset)
        )
        result = await self.session.execute(stmt)
        return [row_to_comment_view(row._asdict()) for row in result.fetchall()]

    async def count_roots(self, post_id: PostId) -> int:
        stmt = (
            select(func.count())
            .select_from(comments_table)
            .where(
                comments_table.c.post_id == post_id,
                comments_table.c.parent_comment_id.is_(None),
            )
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def find_reply_views(
        self,
        parent_comment_id: CommentId,
        page: PageRequest,
        viewer_id: Optional[UserId] = None,
    ) -> List[CommentView]:
        """Find one page of direct replies to a comment."""
        stmt = (
            self._select_views(viewer_id)
            .where(comments_table.c.parent_comment_id == parent_comment_id)
            .order_by(*order_clauses(comments_table, page))
            .limit(page.limit)
            .offset(page.offset)
        )
        result = await self.session.execute(stmt)
        return [row_to_comment_view(row._asdict()) for row in result.fetchall()]

    async def count_replies(self, parent_comment_id: CommentId) -> int:
        stmt = (
            select(func.count())
            .select_from(comments_table)
            .where(comments_table.c.parent_comment_id == parent_comment_id)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def find_reply_previews(
        self,
        parent_comment_ids: Sequence[CommentId],
        page: PageRequest,
        per_parent: int,
        viewer_id: Optional[UserId] = None,
    ) -> Dict[CommentId, List[CommentView]]:
        """Find the first replies of several comments in one query.

        Replies are ranked per parent with a window function and cut at
        ``per_parent``.
        """
        if not parent_comment_ids:
            return {}

        rank = (
            func.row_number()
            .over(
                partition_by=comments_table.c.parent_comment_id,
                order_by=order_clauses(comments_table, page),
            )
            .label("reply_rank")
        )
        ranked = (
            self._select_views(viewer_id, rank)
            .where(comments_table.c.parent_comment_id.in_(parent_comment_ids))
            .subquery()
        )
        stmt = (
            select(ranked)
            .where(ranked.c.reply_rank <= per_parent)
            .order_by(ranked.c.parent_comment_id, ranked.c.reply_rank)
        )
        result = await self.session.execute(stmt)

        previews: Dict[CommentId, List[CommentView]] = defaultdict(list)
        for row in result.fetchall():
            view = row_to_comment_view(row._asdict())
            previews[CommentId(row.parent_comment_id)].append(view)
        return dict(previews)
