"""View counter repository interface."""

from abc import ABC, abstractmethod
from datetime import date, datetime
from typing import Dict, List, Sequence

from engage.domain.model.anime import ViewCounts
from engage.domain.model.weekly_view import WeeklyView
from engage.domain.value import AnimeId


class ViewRepository(ABC):
    """Repository for all-time and weekly anime view counters."""

    @abstractmethod
    async def record_view(
        self, anime_id: AnimeId, week_start: date, now: datetime
    ) -> ViewCounts:
        """Count one view of an anime.

        Increments the all-time total and upserts the weekly row for
        ``week_start`` (created with a count of 1, incremented otherwise)
        in a single transaction.

        Args:
            anime_id: Anime that was viewed
            week_start: Week key for the weekly row
            now: Timestamp stored as the rows' last update

        Returns:
            The totals after the increment
        """
        pass

    @abstractmethod
    async def get_counts(self, anime_id: AnimeId, week_start: date) -> ViewCounts:
        """Get the all-time and weekly count of one anime.

        Args:
            anime_id: Anime ID
            week_start: Week key for the weekly count

        Returns:
            Counts, zero where no row exists
        """
        pass

    @abstractmethod
    async def get_totals(self, anime_ids: Sequence[AnimeId]) -> Dict[AnimeId, int]:
        """Get all-time totals for several anime (batch query).

        Args:
            anime_ids: Anime IDs

        Returns:
            Mapping of anime ID to total; anime never viewed are omitted
        """
        pass

    @abstractmethod
    async def find_weekly_by_anime(self, anime_id: AnimeId) -> List[WeeklyView]:
        """Find every weekly row of an anime, newest week first.

        Args:
            anime_id: Anime ID

        Returns:
            Weekly rows across all retained weeks
        """
        pass

    @abstractmethod
    async def top_for_week(
        self, week_start: date, limit: int, anime_ids: Sequence[AnimeId]
    ) -> List[WeeklyView]:
        """Rank one week's rows by view count.

        Args:
            week_start: Week key
            limit: Maximum number of rows
            anime_ids: Only rows of these anime are ranked

        Returns:
            Rows ordered by view_count DESC, anime_id ASC
        """
        pass

    @abstractmethod
    async def count_for_week(self, week_start: date) -> int:
        """Count the weekly rows recorded for one week.

        Args:
            week_start: Week key

        Returns:
            Number of anime viewed during that week
        """
        pass

    @abstractmethod
    async def delete_weeks_except(self, week_start: date) -> int:
        """Delete every weekly row not belonging to one week.

        Args:
            week_start: Week whose rows are kept

        Returns:
            Number of rows deleted
        """
        pass
