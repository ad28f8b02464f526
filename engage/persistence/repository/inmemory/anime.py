"""In-memory anime catalog for testing."""

from typing import Iterable, Optional

from engage.domain.model import Anime
from engage.domain.repository import AnimeRepository
from engage.domain.value import AnimeId


class InMemoryAnimeRepository(AnimeRepository):
    """Catalog seeded directly from Anime models."""

    def __init__(self, animes: Iterable[Anime] = ()) -> None:
        self._animes: dict[AnimeId, Anime] = {a.id: a for a in animes}

    def add(self, anime: Anime) -> None:
        """Seed one catalog entry."""
        self._animes[anime.id] = anime

    async def find_by_id(self, anime_id: AnimeId) -> Optional[Anime]:
        """Find a catalog entry by ID."""
        return self._animes.get(anime_id)

    async def find_all(self) -> list[Anime]:
        """List the whole catalog, ordered by ID."""
        return sorted(self._animes.values(), key=lambda a: a.id)
