"""Domain services."""

from .analytics_service import AnalyticsService
from .base import Service
from .comment_service import CommentService
from .like_service import LikeService
from .view_cache import ViewCountCache

__all__ = [
    "AnalyticsService",
    "CommentService",
    "LikeService",
    "Service",
    "ViewCountCache",
]
