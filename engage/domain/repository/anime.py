"""Anime catalog repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from engage.domain.model.anime import Anime
from engage.domain.value import AnimeId


class AnimeRepository(ABC):
    """Read-only access to the preloaded anime catalog."""

    @abstractmethod
    async def find_by_id(self, anime_id: AnimeId) -> Optional[Anime]:
        """Find a catalog entry by ID.

        Args:
            anime_id: The anime's identifier

        Returns:
            The anime if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(self) -> List[Anime]:
        """List the whole catalog.

        Returns:
            Every anime, ordered by ID
        """
        pass
