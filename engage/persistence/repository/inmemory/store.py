"""Shared backing store for the in-memory repositories.

The like ledger touches comment rows and comment deletion touches ledger
rows, so every in-memory repository of one container works on the same
``InMemoryDatabase`` instance.
"""

from dataclasses import dataclass, field
from datetime import date, datetime

from engage.domain.model import Comment, CommentLike, WeeklyView
from engage.domain.value import AnimeId, CommentId


@dataclass
class AnimeTotal:
    """All-time counter row."""

    view_count: int
    last_updated: datetime


@dataclass
class InMemoryDatabase:
    """Tables kept as plain Python containers."""

    comments: dict[CommentId, Comment] = field(default_factory=dict)
    likes: list[CommentLike] = field(default_factory=list)
    anime_views: dict[AnimeId, AnimeTotal] = field(default_factory=dict)
    weekly_views: dict[tuple[AnimeId, date], WeeklyView] = field(default_factory=dict)
