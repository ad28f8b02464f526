"""Strongly typed identifiers for engagement entities.

Using NewType for strong typing prevents mixing up different entity IDs
and makes the code more self-documenting.
"""

from typing import NewType
from uuid import UUID

# Store-owned identifiers
CommentId = NewType("CommentId", UUID)
LikeId = NewType("LikeId", UUID)
WeeklyViewId = NewType("WeeklyViewId", UUID)

# Catalog identifiers (owned by the anime catalog)
AnimeId = NewType("AnimeId", int)
EpisodeId = NewType("EpisodeId", int)
