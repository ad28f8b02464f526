"""View analytics domain service."""

from datetime import date, datetime, timezone

import logfire

from engage.config import AnalyticsSettings
from engage.domain.error import NotFoundError
from engage.domain.model import Anime, PopularAnime, ViewCounts, WeeklyView
from engage.domain.repository import AnimeRepository, ViewRepository
from engage.domain.value import AnimeId, week_start_for

from .base import Service
from .view_cache import ViewCountCache


class AnalyticsService(Service):
    """Domain service for anime view counting and weekly rankings.

    Every method takes an optional ``now`` so callers (the weekly reset job,
    tests) can pin the moment the week key is computed from.
    """

    def __init__(
        self,
        view_repository: ViewRepository,
        anime_repository: AnimeRepository,
        view_cache: ViewCountCache,
        settings: AnalyticsSettings,
    ) -> None:
        """Initialize analytics service.

        Args:
            view_repository: View counter repository
            anime_repository: Catalog repository
            view_cache: Shared read-through cache of view counts
            settings: Analytics configuration
        """
        self.view_repository = view_repository
        self.anime_repository = anime_repository
        self.view_cache = view_cache
        self.settings = settings

    def current_week_start(self, now: datetime | None = None) -> date:
        """Week key for a moment (defaults to the current time)."""
        return week_start_for(now or datetime.now(timezone.utc), self.settings.zone)

    async def increment_anime_views(
        self, anime_id: AnimeId, now: datetime | None = None
    ) -> ViewCounts:
        """Record one view of an anime.

        Args:
            anime_id: Catalog ID of the viewed anime
            now: Moment of the view

        Returns:
            All-time and current-week counts after the increment

        Raises:
            NotFoundError: If the anime is not in the catalog
        """
        now = now or datetime.now(timezone.utc)
        with logfire.span("analytics_service.increment_anime_views", anime_id=anime_id):
            if not await self.anime_repository.find_by_id(anime_id):
                logfire.warn("View of unknown anime", anime_id=anime_id)
                raise NotFoundError("Anime", str(anime_id))

            week_start = self.current_week_start(now)
            counts = await self.view_repository.record_view(anime_id, week_start, now)
            self.view_cache.put(week_start, counts)

            logfire.info(
                "Anime view recorded",
                anime_id=anime_id,
                week_start=week_start.isoformat(),
                total=counts.total,
                weekly=counts.weekly,
            )
            return counts

    async def get_view_counts(
        self, anime_id: AnimeId, now: datetime | None = None
    ) -> ViewCounts:
        """Get an anime's all-time and current-week counts (cached)."""
        week_start = self.current_week_start(now)
        cached = self.view_cache.get(anime_id, week_start)
        if cached is not None:
            return cached

        with logfire.span("analytics_service.get_view_counts", anime_id=anime_id):
            counts = await self.view_repository.get_counts(anime_id, week_start)
            self.view_cache.put(week_start, counts)
            return counts

    async def get_weekly_history(self, anime_id: AnimeId) -> list[WeeklyView]:
        """Get the retained weekly counters of an anime, newest week first."""
        with logfire.span("analytics_service.get_weekly_history", anime_id=anime_id):
            return await self.view_repository.find_weekly_by_anime(anime_id)

    async def get_weekly_popular(
        self, limit: int, now: datetime | None = None
    ) -> list[PopularAnime]:
        """Rank anime by this week's views.

        Only anime still in the catalog are ranked. Falls back to ranking
        the whole catalog by all-time views when none of them has been
        viewed yet this week.

        Args:
            limit: Maximum number of entries
            now: Moment whose week is ranked

        Returns:
            Popular anime, most viewed first
        """
        week_start = self.current_week_start(now)
        with logfire.span(
            "analytics_service.get_weekly_popular",
            limit=limit,
            week_start=week_start.isoformat(),
        ):
            catalog = {a.id: a for a in await self.anime_repository.find_all()}
            weekly_rows = await self.view_repository.top_for_week(
                week_start, limit, list(catalog)
            )
            if not weekly_rows:
                return await self._rank_by_total(list(catalog.values()), limit)

            totals = await self.view_repository.get_totals(
                [row.anime_id for row in weekly_rows]
            )
            return [
                PopularAnime(
                    anime=catalog[row.anime_id],
                    view_count=totals.get(row.anime_id, 0),
                    weekly_views=row.view_count,
                )
                for row in weekly_rows
            ]

    async def _rank_by_total(self, catalog: list[Anime], limit: int) -> list[PopularAnime]:
        logfire.info("No views this week, ranking by all-time views")
        totals = await self.view_repository.get_totals([a.id for a in catalog])

        ranked = sorted(catalog, key=lambda a: (-totals.get(a.id, 0), a.id))
        return [
            PopularAnime(anime=a, view_count=totals.get(a.id, 0), weekly_views=0)
            for a in ranked[:limit]
        ]

    async def reset_weekly_views(self, now: datetime | None = None) -> int:
        """Purge weekly rows of every week but the current one.

        Returns:
            Number of rows deleted
        """
        week_start = self.current_week_start(now)
        with logfire.span(
            "analytics_service.reset_weekly_views", week_start=week_start.isoformat()
        ):
            deleted = await self.view_repository.delete_weeks_except(week_start)
            self.view_cache.clear()
            kept = await self.view_repository.count_for_week(week_start)
            logfire.info(
                "Weekly views reset",
                week_start=week_start.isoformat(),
                deleted=deleted,
                kept=kept,
            )
            return deleted
