"""Comment domain service."""

from collections import defaultdict
from datetime import datetime, timezone
from uuid import uuid4

import logfire

from engage.domain.error import NotFoundError, ValidationError
from engage.domain.model import Comment, CommentPage, ThreadedComment
from engage.domain.repository import CommentRepository, CommentSortOrder
from engage.domain.value import (
    AnimeId,
    Avatar,
    CommentId,
    CommentText,
    EpisodeId,
    UserName,
)

from .base import Service


class CommentService(Service):
    """Domain service for comment operations."""

    def __init__(self, comment_repository: CommentRepository) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
        """
        self.comment_repository = comment_repository

    def _build(
        self,
        anime_id: AnimeId,
        episode_id: EpisodeId,
        user_name: str,
        user_avatar: str | None,
        text: str,
        parent_id: CommentId | None = None,
    ) -> Comment:
        return self._parse(
            Comment,
            id=CommentId(uuid4()),
            anime_id=anime_id,
            episode_id=episode_id,
            user_name=self._parse(UserName, user_name),
            user_avatar=self._parse(Avatar, user_avatar or Avatar.default()),
            text=self._parse(CommentText, text).root,
            timestamp=datetime.now(timezone.utc),
            likes=0,
            parent_id=parent_id,
            is_reply=parent_id is not None,
        )

    async def add_comment(
        self,
        anime_id: AnimeId,
        episode_id: EpisodeId,
        user_name: str,
        user_avatar: str | None,
        text: str,
    ) -> Comment:
        """Create a top-level comment on an episode.

        Args:
            anime_id: Anime ID
            episode_id: Episode ID
            user_name: Author name
            user_avatar: Avatar identifier (None for the default)
            text: Comment text, sanitized before validation

        Returns:
            Created comment

        Raises:
            ValidationError: If the name, avatar or text is malformed
        """
        with logfire.span(
            "comment_service.add_comment",
            anime_id=anime_id,
            episode_id=episode_id,
            user_name=user_name,
        ):
            comment = self._build(anime_id, episode_id, user_name, user_avatar, text)
            saved = await self.comment_repository.save(comment)
            logfire.info(
                "Comment created",
                comment_id=str(saved.id),
                anime_id=anime_id,
                episode_id=episode_id,
            )
            return saved

    async def add_reply(
        self,
        parent_id: CommentId,
        anime_id: AnimeId,
        episode_id: EpisodeId,
        user_name: str,
        user_avatar: str | None,
        text: str,
    ) -> Comment:
        """Reply to a top-level comment.

        Args:
            parent_id: Comment being replied to
            anime_id: Anime ID
            episode_id: Episode ID
            user_name: Author name
            user_avatar: Avatar identifier (None for the default)
            text: Reply text

        Returns:
            Created reply

        Raises:
            NotFoundError: If the parent doesn't exist
            ValidationError: If the parent is itself a reply or input is malformed
        """
        with logfire.span(
            "comment_service.add_reply",
            parent_id=str(parent_id),
            user_name=user_name,
        ):
            parent = await self.comment_repository.find_by_id(parent_id)
            if not parent:
                logfire.warn("Reply to non-existent comment", parent_id=str(parent_id))
                raise NotFoundError("Comment", str(parent_id))
            if parent.is_reply:
                logfire.warn("Reply to a reply rejected", parent_id=str(parent_id))
                raise ValidationError("Replies cannot be replied to")

            reply = self._build(
                anime_id, episode_id, user_name, user_avatar, text, parent_id=parent_id
            )
            saved = await self.comment_repository.save(reply)
            logfire.info(
                "Reply created", comment_id=str(saved.id), parent_id=str(parent_id)
            )
            return saved

    async def get_comment_by_id(self, comment_id: CommentId) -> Comment | None:
        """Get a comment by ID.

        Args:
            comment_id: Comment ID

        Returns:
            Comment if found, None otherwise
        """
        with logfire.span(
            "comment_service.get_comment_by_id", comment_id=str(comment_id)
        ):
            return await self.comment_repository.find_by_id(comment_id)

    async def delete_comment(self, comment_id: CommentId) -> int:
        """Delete a comment with its replies and their likes.

        Args:
            comment_id: Comment ID

        Returns:
            Number of comments removed (the comment plus its replies)

        Raises:
            NotFoundError: If the comment doesn't exist
        """
        with logfire.span("comment_service.delete_comment", comment_id=str(comment_id)):
            removed = await self.comment_repository.delete_thread(comment_id)
            if removed == 0:
                raise NotFoundError("Comment", str(comment_id))

            logfire.info("Comment deleted", comment_id=str(comment_id), removed=removed)
            return removed

    async def get_comments_by_user(self, user_name: str) -> list[Comment]:
        """Get every comment and reply by an author, newest first.

        Raises:
            ValidationError: If the name is malformed
        """
        with logfire.span("comment_service.get_comments_by_user", user_name=user_name):
            name = self._parse(UserName, user_name)
            return await self.comment_repository.find_by_author(name)

    async def get_replies_for_comment(self, comment_id: CommentId) -> list[Comment]:
        """Get the replies of one comment, oldest first."""
        with logfire.span(
            "comment_service.get_replies_for_comment", comment_id=str(comment_id)
        ):
            return await self.comment_repository.find_replies_for([comment_id])

    async def get_comments_by_episode(
        self,
        anime_id: AnimeId,
        episode_id: EpisodeId,
        page: int = 1,
        limit: int = 10,
        sort_order: CommentSortOrder = CommentSortOrder.RECENT,
    ) -> CommentPage:
        """Get one page of an episode's top-level comments with their replies.

        Replies of the whole page are fetched in a single query and grouped
        by parent.

        Args:
            anime_id: Anime ID
            episode_id: Episode ID
            page: 1-based page number
            limit: Page size
            sort_order: Ordering of the top-level comments

        Returns:
            The page, with pagination info
        """
        with logfire.span(
            "comment_service.get_comments_by_episode",
            anime_id=anime_id,
            episode_id=episode_id,
            page=page,
            limit=limit,
            sort_order=sort_order.value,
        ):
            offset = (page - 1) * limit
            top_level = await self.comment_repository.find_top_level(
                anime_id, episode_id, sort=sort_order, limit=limit, offset=offset
            )
            total = await self.comment_repository.count_top_level(anime_id, episode_id)

            replies_by_parent: dict[CommentId, list[Comment]] = defaultdict(list)
            if top_level:
                replies = await self.comment_repository.find_replies_for(
                    [c.id for c in top_level]
                )
                for reply in replies:
                    if reply.parent_id is not None:
                        replies_by_parent[reply.parent_id].append(reply)

            threaded = [
                ThreadedComment(**c.model_dump(), replies=replies_by_parent[c.id])
                for c in top_level
            ]
            return CommentPage(
                comments=threaded, total_count=total, page=page, limit=limit
            )

    async def get_total_comments_count(
        self, anime_id: AnimeId, episode_id: EpisodeId
    ) -> int:
        """Count an episode's top-level comments."""
        return await self.comment_repository.count_top_level(anime_id, episode_id)
