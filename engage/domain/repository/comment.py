"""Comment repository interface."""

from abc import ABC, abstractmethod
from enum import Enum
from typing import List, Optional, Sequence

from engage.domain.model.comment import Comment
from engage.domain.value import AnimeId, CommentId, EpisodeId, UserName


class CommentSortOrder(str, Enum):
    """Sort order for an episode's top-level comments."""

    RECENT = "recent"  # timestamp DESC, id DESC
    LIKES = "likes"  # likes DESC, timestamp DESC, id DESC


class CommentRepository(ABC):
    """Repository for Comment entity.

    Defines the contract for comment persistence operations.
    Implementations live in the persistence layer.

    The like counter is not writable through this interface; see
    ``LikeRepository``.
    """

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_top_level(
        self,
        anime_id: AnimeId,
        episode_id: EpisodeId,
        sort: CommentSortOrder = CommentSortOrder.RECENT,
        limit: int = 10,
        offset: int = 0,
    ) -> List[Comment]:
        """Find one slice of an episode's top-level comments.

        The ordering is total (id breaks remaining ties), so consecutive
        slices over unchanged data never repeat or skip a comment.

        Args:
            anime_id: Anime the episode belongs to
            episode_id: Episode ID
            sort: Sort order
            limit: Maximum number of comments to return
            offset: Number of comments to skip

        Returns:
            Top-level comments in sort order
        """
        pass

    @abstractmethod
    async def find_replies_for(
        self, parent_ids: Sequence[CommentId]
    ) -> List[Comment]:
        """Find the replies of several comments in one query.

        Args:
            parent_ids: Parent comment IDs

        Returns:
            Replies ordered by timestamp ascending
        """
        pass

    @abstractmethod
    async def find_by_author(self, user_name: UserName) -> List[Comment]:
        """Find every comment and reply written under a user name.

        Args:
            user_name: Author name

        Returns:
            Comments across all anime and episodes, newest first
        """
        pass

    @abstractmethod
    async def count_top_level(self, anime_id: AnimeId, episode_id: EpisodeId) -> int:
        """Count an episode's top-level comments (replies excluded).

        Args:
            anime_id: Anime the episode belongs to
            episode_id: Episode ID

        Returns:
            Number of top-level comments
        """
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Insert a new comment.

        Args:
            comment: The comment to insert

        Returns:
            The stored comment

        Raises:
            StorageError: If the row could not be written
        """
        pass

    @abstractmethod
    async def delete_thread(self, comment_id: CommentId) -> int:
        """Delete a comment together with everything hanging off it.

        Removes, as one all-or-nothing unit:
        - every reply whose parent is the comment
        - every like of the comment and of those replies
        - the comment itself

        Args:
            comment_id: The comment ID to delete

        Returns:
            Number of comment rows removed (0 if the comment didn't exist)
        """
        pass
