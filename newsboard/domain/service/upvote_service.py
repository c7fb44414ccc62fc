"""Upvote domain service."""

import logfire

from newsboard.domain.error import NotFoundError
from newsboard.domain.model import UpvoteToggle
from newsboard.domain.repository import (
    CommentRepository,
    PostRepository,
    UpvoteRepository,
)
from newsboard.domain.value import CommentId, PostId, UpvoteTarget, UserId

from .base import Service


class UpvoteService(Service):
    """Domain service for toggling upvotes.

    A toggle reads the caller's upvote row, moves the target's points by one
    with a store-evaluated increment and then inserts or deletes the row.
    All of it runs in the caller's transaction.
    """

    def __init__(
        self,
        upvote_repository: UpvoteRepository,
        post_repository: PostRepository,
        comment_repository: CommentRepository,
    ) -> None:
        """Initialize upvote service.

        Args:
            upvote_repository: Upvote repository
            post_repository: Post repository
            comment_repository: Comment repository
        """
        self.upvote_repository = upvote_repository
        self.post_repository = post_repository
        self.comment_repository = comment_repository

    async def toggle(
        self, target_type: UpvoteTarget, target_id: int, user_id: UserId
    ) -> UpvoteToggle:
        """Add the user's upvote, or take it back if it already exists.

        Args:
            target_type: Post or comment
            target_id: Target ID
            user_id: Voting user ID

        Returns:
            New points total and whether the user now upvotes the target

        Raises:
            NotFoundError: If the target does not exist
        """
        with logfire.span(
            "upvote_service.toggle",
            target_type=target_type.value,
            target_id=target_id,
            user_id=user_id,
        ):
            existing = await self.upvote_repository.find(
                target_type, target_id, user_id
            )
            delta = -1 if existing else 1

            if target_type == UpvoteTarget.POST:
                points = await self.post_repository.add_points(
                    PostId(target_id), delta
                )
            else:  # UpvoteTarget.COMMENT
                points = await self.comment_repository.add_points(
                    CommentId(target_id), delta
                )

            if points is None:
                logfire.warn(
                    "Upvote on non-existent target",
                    target_type=target_type.value,
                    target_id=target_id,
                )
                raise NotFoundError(target_type.value.capitalize(), target_id)

            if existing:
                await self.upvote_repository.delete(target_type, existing.id)
            else:
                await self.upvote_repository.create(target_type, target_id, user_id)

            logfire.info(
                "Upvote toggled",
                target_type=target_type.value,
                target_id=target_id,
                points=points,
                is_upvoted=not existing,
            )
            return UpvoteToggle(points=points, is_upvoted=not existing)
