"""Comment entity.

Comments belong to an episode of an anime. A comment is either top-level
or a reply to a top-level comment; replies are never nested deeper.
"""

from datetime import datetime, timezone
from math import ceil
from typing import Optional

from pydantic import Field, model_validator

from engage.domain.model.common import DomainModel
from engage.domain.value import (
    COMMENT_TEXT_MAX_LENGTH,
    AnimeId,
    Avatar,
    CommentId,
    EpisodeId,
    UserName,
)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Comment(DomainModel):
    """Comment entity.

    Threading is managed through:
    - parent_id: Top-level comment being replied to (None for top-level)
    - is_reply: True exactly when parent_id is set

    ``likes`` is a denormalized copy of the like ledger's row count for
    this comment. Only the like ledger changes it.
    """

    id: CommentId
    anime_id: AnimeId
    episode_id: EpisodeId
    user_name: UserName
    user_avatar: Avatar = Avatar.ICON_01
    text: str = Field(min_length=1, max_length=COMMENT_TEXT_MAX_LENGTH)
    timestamp: datetime = Field(default_factory=_utcnow)
    likes: int = Field(default=0, ge=0)
    parent_id: Optional[CommentId] = None
    is_reply: bool = False

    @model_validator(mode="after")
    def check_reply_shape(self) -> "Comment":
        """A comment is a reply exactly when it has a parent."""
        if self.is_reply != (self.parent_id is not None):
            raise ValueError("is_reply must be set exactly when parent_id is set")
        return self


class ThreadedComment(Comment):
    """Top-level comment with its replies attached (oldest first)."""

    replies: list[Comment] = Field(default_factory=list)


class CommentPage(DomainModel):
    """One page of top-level comments for an episode."""

    comments: list[ThreadedComment]
    total_count: int = Field(ge=0)
    page: int = Field(ge=1)
    limit: int = Field(ge=1)

    @property
    def total_pages(self) -> int:
        """Number of pages at this page size."""
        return ceil(self.total_count / self.limit)

    @property
    def has_more(self) -> bool:
        """Whether a page after this one has comments."""
        return self.page * self.limit < self.total_count
