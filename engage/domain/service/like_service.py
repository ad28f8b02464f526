"""Like domain service."""

from datetime import datetime, timezone
from typing import Sequence
from uuid import uuid4

import logfire

from engage.domain.error import ConflictError, NotFoundError
from engage.domain.model import CommentLike
from engage.domain.repository import CommentRepository, LikeRepository
from engage.domain.value import CommentId, LikeId, LikerId

from .base import Service


class LikeService(Service):
    """Domain service for the comment like ledger.

    Liking and unliking are idempotent and report whether anything changed
    instead of raising on repeats.
    """

    def __init__(
        self,
        like_repository: LikeRepository,
        comment_repository: CommentRepository,
    ) -> None:
        """Initialize like service.

        Args:
            like_repository: Like ledger repository
            comment_repository: Comment repository
        """
        self.like_repository = like_repository
        self.comment_repository = comment_repository

    async def _require_comment(self, comment_id: CommentId) -> None:
        if not await self.comment_repository.find_by_id(comment_id):
            logfire.warn("Like operation on non-existent comment", comment_id=str(comment_id))
            raise NotFoundError("Comment", str(comment_id))

    async def has_user_liked_comment(self, comment_id: CommentId, user_id: str) -> bool:
        """Check whether a user has liked a comment.

        Raises:
            NotFoundError: If the comment doesn't exist
            ValidationError: If the user ID is malformed
        """
        with logfire.span(
            "like_service.has_user_liked_comment",
            comment_id=str(comment_id),
            user_id=user_id,
        ):
            liker = self._parse(LikerId, user_id)
            await self._require_comment(comment_id)
            return await self.like_repository.exists(comment_id, liker)

    async def like_comment(self, comment_id: CommentId, user_id: str) -> bool:
        """Like a comment.

        Inserts the ledger row and increments the comment's counter as one
        unit.

        Args:
            comment_id: Comment ID
            user_id: Liker token

        Returns:
            True if the like was recorded, False if the user had already
            liked the comment

        Raises:
            NotFoundError: If the comment doesn't exist
            ValidationError: If the user ID is malformed
        """
        with logfire.span(
            "like_service.like_comment", comment_id=str(comment_id), user_id=user_id
        ):
            liker = self._parse(LikerId, user_id)
            await self._require_comment(comment_id)

            if await self.like_repository.exists(comment_id, liker):
                return False

            like = CommentLike(
                id=LikeId(uuid4()),
                comment_id=comment_id,
                user_id=liker,
                timestamp=datetime.now(timezone.utc),
            )
            try:
                await self.like_repository.add(like)
            except ConflictError:
                # Lost a race against a concurrent like by the same user
                logfire.warn(
                    "Duplicate like attempt", comment_id=str(comment_id), user_id=user_id
                )
                return False

            logfire.info("Comment liked", comment_id=str(comment_id), user_id=user_id)
            return True

    async def unlike_comment(self, comment_id: CommentId, user_id: str) -> bool:
        """Remove a like from a comment.

        Args:
            comment_id: Comment ID
            user_id: Liker token

        Returns:
            True if a like was removed, False if there was none

        Raises:
            NotFoundError: If the comment doesn't exist
            ValidationError: If the user ID is malformed
        """
        with logfire.span(
            "like_service.unlike_comment", comment_id=str(comment_id), user_id=user_id
        ):
            liker = self._parse(LikerId, user_id)
            await self._require_comment(comment_id)

            removed = await self.like_repository.remove(comment_id, liker)
            if removed:
                logfire.info("Comment unliked", comment_id=str(comment_id), user_id=user_id)
            return removed

    async def get_liked_comment_ids(
        self, user_id: str, comment_ids: Sequence[CommentId]
    ) -> set[CommentId]:
        """Get which of several comments a user has liked (one query).

        Args:
            user_id: Liker token
            comment_ids: Comment IDs to check

        Returns:
            Subset of ``comment_ids`` liked by the user
        """
        with logfire.span(
            "like_service.get_liked_comment_ids",
            user_id=user_id,
            count=len(comment_ids),
        ):
            liker = self._parse(LikerId, user_id)
            return await self.like_repository.find_liked_comment_ids(liker, comment_ids)
