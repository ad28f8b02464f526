"""Anime catalog entities.

The catalog itself is owned elsewhere and preloaded read-only; this module
only models what the engagement store needs to rank and label entries.
"""

from pydantic import Field

from engage.domain.model.common import DomainModel
from engage.domain.value import AnimeId, EpisodeId


class Episode(DomainModel):
    """Catalog episode."""

    id: EpisodeId
    episode_number: int
    title: str
    video_url: str
    thumbnail: str
    duration: int


class Anime(DomainModel):
    """Catalog anime entry."""

    id: AnimeId
    anime_name: str
    coverpage: str
    episode_count: int
    genres: list[str] = Field(default_factory=list)
    description: str = ""
    episodes: list[Episode] = Field(default_factory=list)

    def find_episode(self, episode_id: EpisodeId) -> Episode | None:
        """Look up one of this anime's episodes."""
        return next((ep for ep in self.episodes if ep.id == episode_id), None)


class ViewCounts(DomainModel):
    """All-time and current-week view counts of one anime."""

    anime_id: AnimeId
    total: int = Field(default=0, ge=0)
    weekly: int = Field(default=0, ge=0)


class PopularAnime(DomainModel):
    """Catalog entry with the view counts it was ranked by."""

    anime: Anime
    view_count: int = Field(ge=0)
    weekly_views: int = Field(ge=0)
