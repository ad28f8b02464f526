"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping. Column names that
differ from field names (created_at/timestamp) are translated here and
nowhere else.
"""

from typing import Any, Dict
from uuid import UUID

from engage.domain.model import Comment, CommentLike, WeeklyView
from engage.domain.value import (
    AnimeId,
    Avatar,
    CommentId,
    EpisodeId,
    UserName,
    WeeklyViewId,
)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model.

    Args:
        row: Database row as dict

    Returns:
        Comment domain model
    """
    return Comment(
        id=CommentId(_uuid(row["id"])),
        anime_id=AnimeId(row["anime_id"]),
        episode_id=EpisodeId(row["episode_id"]),
        user_name=UserName(row["user_name"]),
        user_avatar=Avatar(row["user_avatar"]),
        text=row["text"],
        timestamp=row["created_at"],
        likes=row["likes"],
        parent_id=CommentId(_uuid(row["parent_id"])) if row.get("parent_id") else None,
        is_reply=bool(row["is_reply"]),
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict.

    Args:
        comment: Comment domain model

    Returns:
        Dict suitable for database insertion
    """
    return {
        "id": comment.id,
        "anime_id": comment.anime_id,
        "episode_id": comment.episode_id,
        "user_name": comment.user_name.root,
        "user_avatar": comment.user_avatar.value,
        "text": comment.text,
        "created_at": comment.timestamp,
        "likes": comment.likes,
        "parent_id": comment.parent_id,
        "is_reply": comment.is_reply,
    }


def like_to_dict(like: CommentLike) -> Dict[str, Any]:
    """Convert CommentLike domain model to database dict.

    Args:
        like: CommentLike domain model

    Returns:
        Dict suitable for database insertion
    """
    return {
        "id": like.id,
        "comment_id": like.comment_id,
        "user_id": like.user_id.root,
        "created_at": like.timestamp,
    }


def row_to_weekly_view(row: Dict[str, Any]) -> WeeklyView:
    """Convert database row to WeeklyView domain model.

    Args:
        row: Database row as dict

    Returns:
        WeeklyView domain model
    """
    return WeeklyView(
        id=WeeklyViewId(_uuid(row["id"])),
        anime_id=AnimeId(row["anime_id"]),
        view_count=row["view_count"],
        week_start_date=row["week_start_date"],
        last_updated=row["last_updated"],
    )
