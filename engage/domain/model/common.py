"""Shared base for engagement records."""

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Immutable record. Changes go through ``model_copy(update=...)``."""

    # Value objects such as CommentText are pydantic models themselves, but
    # plain enums and dates still need arbitrary types.
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)
