"""In-memory like ledger for testing."""

from typing import Sequence

from engage.domain.error import ConflictError, NotFoundError
from engage.domain.model import CommentLike
from engage.domain.repository import LikeRepository
from engage.domain.value import CommentId, LikerId
from engage.persistence.repository.inmemory.store import InMemoryDatabase


class InMemoryLikeRepository(LikeRepository):
    """In-memory implementation of LikeRepository for testing.

    Mirrors the database constraints: a duplicate pair raises
    ``ConflictError`` and a missing comment raises ``NotFoundError``, both
    before anything is written.
    """

    def __init__(self, db: InMemoryDatabase) -> None:
        self._db = db

    def _find(self, comment_id: CommentId, user_id: LikerId) -> CommentLike | None:
        return next(
            (
                like
                for like in self._db.likes
                if like.comment_id == comment_id and like.user_id == user_id
            ),
            None,
        )

    def _bump(self, comment_id: CommentId, delta: int) -> None:
        comment = self._db.comments[comment_id]
        self._db.comments[comment_id] = comment.model_copy(
            update={"likes": max(comment.likes + delta, 0)}
        )

    async def exists(self, comment_id: CommentId, user_id: LikerId) -> bool:
        """Check whether a user has liked a comment."""
        return self._find(comment_id, user_id) is not None

    async def add(self, like: CommentLike) -> None:
        """Insert a ledger row and increment the comment's counter."""
        if like.comment_id not in self._db.comments:
            raise NotFoundError("Comment", str(like.comment_id))
        if self._find(like.comment_id, like.user_id) is not None:
            raise ConflictError(
                f"{like.user_id} already liked comment {like.comment_id}"
            )

        self._db.likes.append(like)
        self._bump(like.comment_id, 1)

    async def remove(self, comment_id: CommentId, user_id: LikerId) -> bool:
        """Delete a ledger row and decrement the comment's counter."""
        like = self._find(comment_id, user_id)
        if like is None:
            return False

        self._db.likes.remove(like)
        if comment_id in self._db.comments:
            self._bump(comment_id, -1)
        return True

    async def count_by_comment(self, comment_id: CommentId) -> int:
        """Count ledger rows for a comment."""
        return sum(1 for like in self._db.likes if like.comment_id == comment_id)

    async def find_liked_comment_ids(
        self, user_id: LikerId, comment_ids: Sequence[CommentId]
    ) -> set[CommentId]:
        """Find which of several comments a user has liked."""
        wanted = set(comment_ids)
        return {
            like.comment_id
            for like in self._db.likes
            if like.user_id == user_id and like.comment_id in wanted
        }
