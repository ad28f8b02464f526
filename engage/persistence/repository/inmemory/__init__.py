"""In-memory repository implementations for testing."""

from .anime import InMemoryAnimeRepository
from .comment import InMemoryCommentRepository
from .like import InMemoryLikeRepository
from .store import InMemoryDatabase
from .view import InMemoryViewRepository

__all__ = [
    "InMemoryAnimeRepository",
    "InMemoryCommentRepository",
    "InMemoryDatabase",
    "InMemoryLikeRepository",
    "InMemoryViewRepository",
]
