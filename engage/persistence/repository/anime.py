"""JSON-file implementation of the anime catalog."""

from pathlib import Path
from typing import List, Optional

import logfire
from pydantic import TypeAdapter

from engage.domain.model import Anime
from engage.domain.repository import AnimeRepository
from engage.domain.value import AnimeId

_CATALOG = TypeAdapter(list[Anime])


class JsonAnimeRepository(AnimeRepository):
    """Catalog preloaded from a JSON array of anime objects.

    The file is read once, on construction. The catalog is owned by another
    system, so a missing file degrades to an empty catalog instead of
    failing startup.
    """

    def __init__(self, data_path: Path) -> None:
        self._animes: dict[AnimeId, Anime] = {}

        if not data_path.exists():
            logfire.warn("Catalog file not found", data_path=str(data_path))
            return

        animes = _CATALOG.validate_json(data_path.read_bytes())
        self._animes = {anime.id: anime for anime in animes}
        logfire.info("Catalog loaded", data_path=str(data_path), count=len(animes))

    async def find_by_id(self, anime_id: AnimeId) -> Optional[Anime]:
        """Find a catalog entry by ID."""
        return self._animes.get(anime_id)

    async def find_all(self) -> List[Anime]:
        """List the whole catalog, ordered by ID."""
        return sorted(self._animes.values(), key=lambda a: a.id)
