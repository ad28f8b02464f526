"""Repository interfaces for the engagement store.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from engage.domain.repository.anime import AnimeRepository
from engage.domain.repository.comment import CommentRepository, CommentSortOrder
from engage.domain.repository.like import LikeRepository
from engage.domain.repository.view import ViewRepository

__all__ = [
    "AnimeRepository",
    "CommentRepository",
    "CommentSortOrder",
    "LikeRepository",
    "ViewRepository",
]
