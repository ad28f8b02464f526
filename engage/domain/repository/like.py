"""Like-ledger repository interface."""

from abc import ABC, abstractmethod
from typing import Sequence, Set

from engage.domain.model.like import CommentLike
from engage.domain.value import CommentId, LikerId


class LikeRepository(ABC):
    """Repository for the comment like ledger.

    This is the only place a comment's ``likes`` counter changes: each
    ledger mutation and its counter mutation are committed together or
    not at all.
    """

    @abstractmethod
    async def exists(self, comment_id: CommentId, user_id: LikerId) -> bool:
        """Check whether a user has liked a comment.

        Args:
            comment_id: The comment ID
            user_id: The liker token

        Returns:
            True if a ledger row exists for the pair
        """
        pass

    @abstractmethod
    async def add(self, like: CommentLike) -> None:
        """Insert a ledger row and increment the comment's counter.

        Args:
            like: The ledger row to insert

        Raises:
            ConflictError: If the (comment, user) pair already has a row;
                the counter is left untouched
            NotFoundError: If the comment doesn't exist
        """
        pass

    @abstractmethod
    async def remove(self, comment_id: CommentId, user_id: LikerId) -> bool:
        """Delete a ledger row and decrement the comment's counter.

        The counter never drops below zero.

        Args:
            comment_id: The comment ID
            user_id: The liker token

        Returns:
            True if a row was deleted, False if none existed
        """
        pass

    @abstractmethod
    async def count_by_comment(self, comment_id: CommentId) -> int:
        """Count ledger rows for a comment.

        Args:
            comment_id: The comment ID

        Returns:
            Number of likes recorded in the ledger
        """
        pass

    @abstractmethod
    async def find_liked_comment_ids(
        self, user_id: LikerId, comment_ids: Sequence[CommentId]
    ) -> Set[CommentId]:
        """Find which of several comments a user has liked (batch query).

        Args:
            user_id: The liker token
            comment_ids: Comment IDs to check

        Returns:
            Subset of ``comment_ids`` the user has liked
        """
        pass
