"""PostgreSQL repository implementations."""

from engage.persistence.repository.anime import JsonAnimeRepository
from engage.persistence.repository.comment import PostgresCommentRepository
from engage.persistence.repository.like import PostgresLikeRepository
from engage.persistence.repository.view import PostgresViewRepository

__all__ = [
    "JsonAnimeRepository",
    "PostgresCommentRepository",
    "PostgresLikeRepository",
    "PostgresViewRepository",
]
