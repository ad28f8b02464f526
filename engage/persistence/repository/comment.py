"""PostgreSQL implementation of Comment repository."""

from typing import List, Optional, Sequence

from sqlalchemy import delete, desc, func, insert, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from engage.domain.error import NotFoundError, StorageError
from engage.domain.model import Comment
from engage.domain.repository import CommentRepository, CommentSortOrder
from engage.domain.value import AnimeId, CommentId, EpisodeId, UserName
from engage.persistence.mappers import comment_to_dict, row_to_comment
from engage.persistence.tables import comment_likes_table, comments_table

_ORDER_BY = {
    CommentSortOrder.RECENT: (
        desc(comments_table.c.created_at),
        desc(comments_table.c.id),
    ),
    CommentSortOrder.LIKES: (
        desc(comments_table.c.likes),
        desc(comments_table.c.created_at),
        desc(comments_table.c.id),
    ),
}


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        stmt = select(comments_table).where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    async def find_top_level(
        self,
        anime_id: AnimeId,
        episode_id: EpisodeId,
        sort: CommentSortOrder = CommentSortOrder.RECENT,
        limit: int = 10,
        offset: int = 0,
    ) -> List[Comment]:
        """Find one slice of an episode's top-level comments."""
        stmt = (
            select(comments_table)
            .where(comments_table.c.anime_id == anime_id)
            .where(comments_table.c.episode_id == episode_id)
            .where(comments_table.c.is_reply.is_(False))
            .order_by(*_ORDER_BY[sort])
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def find_replies_for(
        self, parent_ids: Sequence[CommentId]
    ) -> List[Comment]:
        """Find the replies of several comments in one query."""
        if not parent_ids:
            return []

        stmt = (
            select(comments_table)
            .where(comments_table.c.parent_id.in_(parent_ids))
            .where(comments_table.c.is_reply.is_(True))
            .order_by(comments_table.c.created_at, comments_table.c.id)
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def find_by_author(self, user_name: UserName) -> List[Comment]:
        """Find every comment and reply written under a user name."""
        stmt = (
            select(comments_table)
            .where(comments_table.c.user_name == user_name.root)
            .order_by(desc(comments_table.c.created_at), desc(comments_table.c.id))
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def count_top_level(self, anime_id: AnimeId, episode_id: EpisodeId) -> int:
        """Count an episode's top-level comments (replies excluded)."""
        stmt = (
            select(func.count())
            .select_from(comments_table)
            .where(comments_table.c.anime_id == anime_id)
            .where(comments_table.c.episode_id == episode_id)
            .where(comments_table.c.is_reply.is_(False))
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def save(self, comment: Comment) -> Comment:
        """Insert a new comment."""
        stmt = insert(comments_table).values(**comment_to_dict(comment))
        try:
            async with self.session.begin_nested():
                await self.session.execute(stmt)
        except IntegrityError as e:
            # The only foreign key is the parent; it vanished under us
            if comment.parent_id is not None:
                raise NotFoundError("Comment", str(comment.parent_id)) from e
            raise StorageError(f"Could not insert comment {comment.id}") from e
        except SQLAlchemyError as e:
            raise StorageError(f"Could not insert comment {comment.id}") from e

        return comment

    async def delete_thread(self, comment_id: CommentId) -> int:
        """Delete a comment, its replies and every like on them."""
        try:
            async with self.session.begin_nested():
                reply_ids = (
                    await self.session.execute(
                        select(comments_table.c.id).where(
                            comments_table.c.parent_id == comment_id
                        )
                    )
                ).scalars().all()
                thread_ids = [comment_id, *reply_ids]

                await self.session.execute(
                    delete(comment_likes_table).where(
                        comment_likes_table.c.comment_id.in_(thread_ids)
                    )
                )
                replies = await self.session.execute(
                    delete(comments_table).where(
                        comments_table.c.parent_id == comment_id
                    )
                )
                parent = await self.session.execute(
                    delete(comments_table).where(comments_table.c.id == comment_id)
                )
        except SQLAlchemyError as e:
            raise StorageError(f"Could not delete comment {comment_id}") from e

        return replies.rowcount + parent.rowcount  # type: ignore[attr-defined]
