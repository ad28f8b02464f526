"""Domain value objects for the engagement store."""

from engage.domain.value.identifiers import (
    AnimeId,
    CommentId,
    EpisodeId,
    LikeId,
    WeeklyViewId,
)
from engage.domain.value.types import (
    COMMENT_TEXT_MAX_LENGTH,
    Avatar,
    CommentText,
    LikerId,
    UserName,
)
from engage.domain.value.week import week_start_for

__all__ = [
    # Identifiers
    "AnimeId",
    "CommentId",
    "EpisodeId",
    "LikeId",
    "WeeklyViewId",
    # Types
    "Avatar",
    "COMMENT_TEXT_MAX_LENGTH",
    "CommentText",
    "LikerId",
    "UserName",
    # Week window
    "week_start_for",
]
