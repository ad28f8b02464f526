"""PostgreSQL implementation of the like ledger."""

from typing import Sequence, Set

from sqlalchemy import and_, case, delete, func, insert, select, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from engage.domain.error import ConflictError, NotFoundError, StorageError
from engage.domain.model import CommentLike
from engage.domain.repository import LikeRepository
from engage.domain.value import CommentId, LikerId
from engage.persistence.mappers import like_to_dict
from engage.persistence.tables import comment_likes_table, comments_table

# SQLSTATE for foreign_key_violation
_FOREIGN_KEY_VIOLATION = "23503"


class PostgresLikeRepository(LikeRepository):
    """PostgreSQL implementation of LikeRepository.

    Every ledger write and its counter write run inside one savepoint, so
    a failure of either rolls back both while leaving the request's outer
    transaction usable.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    def _pair(self, comment_id: CommentId, user_id: LikerId):
        return and_(
            comment_likes_table.c.comment_id == comment_id,
            comment_likes_table.c.user_id == user_id.root,
        )

    async def exists(self, comment_id: CommentId, user_id: LikerId) -> bool:
        """Check whether a user has liked a comment."""
        stmt = select(comment_likes_table.c.id).where(self._pair(comment_id, user_id))
        result = await self.session.execute(stmt)
        return result.first() is not None

    async def add(self, like: CommentLike) -> None:
        """Insert a ledger row and increment the comment's counter."""
        try:
            async with self.session.begin_nested():
                await self.session.execute(
                    insert(comment_likes_table).values(**like_to_dict(like))
                )
                result = await self.session.execute(
                    update(comments_table)
                    .where(comments_table.c.id == like.comment_id)
                    .values(likes=comments_table.c.likes + 1)
                )
                if result.rowcount == 0:  # type: ignore[attr-defined]
                    raise NotFoundError("Comment", str(like.comment_id))
        except IntegrityError as e:
            if getattr(e.orig, "sqlstate", None) == _FOREIGN_KEY_VIOLATION:
                raise NotFoundError("Comment", str(like.comment_id)) from e
            raise ConflictError(
                f"{like.user_id} already liked comment {like.comment_id}"
            ) from e
        except SQLAlchemyError as e:
            raise StorageError(f"Could not like comment {like.comment_id}") from e

    async def remove(self, comment_id: CommentId, user_id: LikerId) -> bool:
        """Delete a ledger row and decrement the comment's counter."""
        try:
            async with self.session.begin_nested():
                deleted = await self.session.execute(
                    delete(comment_likes_table).where(self._pair(comment_id, user_id))
                )
                if deleted.rowcount == 0:  # type: ignore[attr-defined]
                    return False

                await self.session.execute(
                    update(comments_table)
                    .where(comments_table.c.id == comment_id)
                    .values(
                        likes=case(
                            (comments_table.c.likes > 0, comments_table.c.likes - 1),
                            else_=0,
                        )
                    )
                )
        except SQLAlchemyError as e:
            raise StorageError(f"Could not unlike comment {comment_id}") from e

        return True

    async def count_by_comment(self, comment_id: CommentId) -> int:
        """Count ledger rows for a comment."""
        stmt = (
            select(func.count())
            .select_from(comment_likes_table)
            .where(comment_likes_table.c.comment_id == comment_id)
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def find_liked_comment_ids(
        self, user_id: LikerId, comment_ids: Sequence[CommentId]
    ) -> Set[CommentId]:
        """Find which of several comments a user has liked (batch query)."""
        if not comment_ids:
            return set()

        stmt = select(comment_likes_table.c.comment_id).where(
            and_(
                comment_likes_table.c.user_id == user_id.root,
                comment_likes_table.c.comment_id.in_(comment_ids),
            )
        )
        result = await self.session.execute(stmt)
        return {CommentId(cid) for cid in result.scalars().all()}
