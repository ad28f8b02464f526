"""Domain model entities for the engagement store."""

from engage.domain.model.anime import Anime, Episode, PopularAnime, ViewCounts
from engage.domain.model.comment import Comment, CommentPage, ThreadedComment
from engage.domain.model.like import CommentLike
from engage.domain.model.weekly_view import WeeklyView

__all__ = [
    "Anime",
    "Comment",
    "CommentLike",
    "CommentPage",
    "Episode",
    "PopularAnime",
    "ThreadedComment",
    "ViewCounts",
    "WeeklyView",
]
