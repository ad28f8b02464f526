"""In-memory comment repository for testing."""

from typing import Optional, Sequence

from engage.domain.model import Comment
from engage.domain.repository import CommentRepository, CommentSortOrder
from engage.domain.value import AnimeId, CommentId, EpisodeId, UserName
from engage.persistence.repository.inmemory.store import InMemoryDatabase


def _sort_key(sort: CommentSortOrder):
    # Sorted with reverse=True, so every component is descending
    if sort == CommentSortOrder.LIKES:
        return lambda c: (c.likes, c.timestamp, c.id)
    return lambda c: (c.timestamp, c.id)


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self, db: InMemoryDatabase) -> None:
        self._db = db

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._db.comments.get(comment_id)

    async def find_top_level(
        self,
        anime_id: AnimeId,
        episode_id: EpisodeId,
        sort: CommentSortOrder = CommentSortOrder.RECENT,
        limit: int = 10,
        offset: int = 0,
    ) -> list[Comment]:
        """Find one slice of an episode's top-level comments."""
        comments = [
            c
            for c in self._db.comments.values()
            if c.anime_id == anime_id and c.episode_id == episode_id and not c.is_reply
        ]
        comments.sort(key=_sort_key(sort), reverse=True)
        return comments[offset : offset + limit]

    async def find_replies_for(self, parent_ids: Sequence[CommentId]) -> list[Comment]:
        """Find the replies of several comments."""
        wanted = set(parent_ids)
        replies = [
            c
            for c in self._db.comments.values()
            if c.is_reply and c.parent_id in wanted
        ]
        replies.sort(key=lambda c: (c.timestamp, c.id))
        return replies

    async def find_by_author(self, user_name: UserName) -> list[Comment]:
        """Find every comment and reply written under a user name."""
        comments = [c for c in self._db.comments.values() if c.user_name == user_name]
        comments.sort(key=lambda c: (c.timestamp, c.id), reverse=True)
        return comments

    async def count_top_level(self, anime_id: AnimeId, episode_id: EpisodeId) -> int:
        """Count an episode's top-level comments."""
        return sum(
            1
            for c in self._db.comments.values()
            if c.anime_id == anime_id and c.episode_id == episode_id and not c.is_reply
        )

    async def save(self, comment: Comment) -> Comment:
        """Insert a new comment."""
        self._db.comments[comment.id] = comment
        return comment

    async def delete_thread(self, comment_id: CommentId) -> int:
        """Delete a comment, its replies and every like on them."""
        if comment_id not in self._db.comments:
            return 0

        thread_ids = {comment_id} | {
            c.id for c in self._db.comments.values() if c.parent_id == comment_id
        }
        self._db.likes = [
            like for like in self._db.likes if like.comment_id not in thread_ids
        ]
        for thread_id in thread_ids:
            del self._db.comments[thread_id]

        return len(thread_ids)
