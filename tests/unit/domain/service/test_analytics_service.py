"""Unit tests for AnalyticsService."""

from datetime import date, timedelta

import pytest

from engage.domain.error import NotFoundError
from engage.domain.repository import ViewRepository
from engage.domain.service import AnalyticsService, ViewCountCache
from engage.domain.value import AnimeId
from tests.conftest import WEDNESDAY
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no database needed
unit_env = create_env_fixture()

LAST_WEEK = WEDNESDAY - timedelta(days=7)
NEXT_WEEK = WEDNESDAY + timedelta(days=7)


async def view(service: AnalyticsService, anime_id: int, times: int = 1, now=WEDNESDAY):
    for _ in range(times):
        await service.increment_anime_views(AnimeId(anime_id), now=now)


class TestIncrementAnimeViews:
    """Tests for increment_anime_views."""

    @pytest.mark.asyncio
    async def test_counts_every_view(self, unit_env):
        # Arrange
        service = await unit_env.get(AnalyticsService)

        # Act
        await view(service, 1, times=4)
        counts = await service.increment_anime_views(AnimeId(1), now=WEDNESDAY)

        # Assert
        assert counts.total == 5
        assert counts.weekly == 5

    @pytest.mark.asyncio
    async def test_weekly_rows_sum_to_total(self, unit_env):
        """Before any reset, weekly counts add up to the all-time count."""
        service = await unit_env.get(AnalyticsService)
        view_repo = await unit_env.get(ViewRepository)

        await view(service, 2, times=3, now=LAST_WEEK)
        await view(service, 2, times=2, now=WEDNESDAY)
        await view(service, 2, times=4, now=NEXT_WEEK)

        rows = await view_repo.find_weekly_by_anime(AnimeId(2))
        totals = await view_repo.get_totals([AnimeId(2)])
        assert sum(r.view_count for r in rows) == totals[AnimeId(2)] == 9
        assert [r.week_start_date for r in rows] == [
            date(2026, 10, 18),
            date(2026, 10, 11),
            date(2026, 10, 4),
        ]

    @pytest.mark.asyncio
    async def test_new_week_starts_from_one(self, unit_env):
        service = await unit_env.get(AnalyticsService)
        await view(service, 1, times=3, now=WEDNESDAY)

        counts = await service.increment_anime_views(AnimeId(1), now=NEXT_WEEK)

        assert counts.total == 4
        assert counts.weekly == 1

    @pytest.mark.asyncio
    async def test_unknown_anime_raises_not_found(self, unit_env):
        service = await unit_env.get(AnalyticsService)

        with pytest.raises(NotFoundError):
            await service.increment_anime_views(AnimeId(999), now=WEDNESDAY)

        counts = await service.get_view_counts(AnimeId(999), now=WEDNESDAY)
        assert counts.total == 0


class TestGetViewCounts:
    """Tests for the cached counter read."""

    @pytest.mark.asyncio
    async def test_never_viewed_is_zero(self, unit_env):
        service = await unit_env.get(AnalyticsService)

        counts = await service.get_view_counts(AnimeId(3), now=WEDNESDAY)

        assert (counts.total, counts.weekly) == (0, 0)

    @pytest.mark.asyncio
    async def test_increment_refreshes_cached_counts(self, unit_env):
        service = await unit_env.get(AnalyticsService)
        cache = await unit_env.get(ViewCountCache)
        await view(service, 1)
        await service.get_view_counts(AnimeId(1), now=WEDNESDAY)
        assert len(cache) == 1

        await view(service, 1)
        counts = await service.get_view_counts(AnimeId(1), now=WEDNESDAY)

        assert counts.total == 2

    @pytest.mark.asyncio
    async def test_stale_read_does_not_overwrite_recorded_view(self, unit_env):
        """Counts read before an increment committed are not cached over it."""
        service = await unit_env.get(AnalyticsService)
        cache = await unit_env.get(ViewCountCache)
        await view(service, 1)
        before = await service.get_view_counts(AnimeId(1), now=WEDNESDAY)
        cache.clear()

        await view(service, 1)
        # A concurrent reader finishing late stores what it saw earlier
        cache.put(service.current_week_start(WEDNESDAY), before)

        counts = await service.get_view_counts(AnimeId(1), now=WEDNESDAY)
        assert (counts.total, counts.weekly) == (2, 2)


class TestGetWeeklyHistory:
    """Tests for get_weekly_history."""

    @pytest.mark.asyncio
    async def test_newest_week_first(self, unit_env):
        service = await unit_env.get(AnalyticsService)
        await view(service, 2, now=LAST_WEEK)
        await view(service, 2, times=3, now=WEDNESDAY)

        history = await service.get_weekly_history(AnimeId(2))

        assert [(w.week_start_date, w.view_count) for w in history] == [
            (date(2026, 10, 11), 3),
            (date(2026, 10, 4), 1),
        ]


class TestGetWeeklyPopular:
    """Tests for the weekly ranking."""

    @pytest.mark.asyncio
    async def test_ranks_by_this_weeks_views(self, unit_env):
        service = await unit_env.get(AnalyticsService)
        # Anime 3 leads all-time but not this week
        await view(service, 3, times=10, now=LAST_WEEK)
        await view(service, 1, times=2)
        await view(service, 2, times=5)
        await view(service, 3, times=1)

        popular = await service.get_weekly_popular(limit=10, now=WEDNESDAY)

        assert [(p.anime.id, p.weekly_views, p.view_count) for p in popular] == [
            (2, 5, 5),
            (1, 2, 2),
            (3, 1, 11),
        ]

    @pytest.mark.asyncio
    async def test_limit_applies(self, unit_env):
        service = await unit_env.get(AnalyticsService)
        await view(service, 1, times=2)
        await view(service, 2, times=1)

        popular = await service.get_weekly_popular(limit=1, now=WEDNESDAY)

        assert [p.anime.id for p in popular] == [1]

    @pytest.mark.asyncio
    async def test_cold_start_falls_back_to_all_time_views(self, unit_env):
        """A week without views ranks the whole catalog by total views."""
        service = await unit_env.get(AnalyticsService)
        await view(service, 3, times=4, now=LAST_WEEK)
        await view(service, 1, times=1, now=LAST_WEEK)

        popular = await service.get_weekly_popular(limit=10, now=WEDNESDAY)

        assert [(p.anime.id, p.view_count, p.weekly_views) for p in popular] == [
            (3, 4, 0),
            (1, 1, 0),
            (2, 0, 0),
        ]

    @pytest.mark.asyncio
    async def test_cold_start_with_no_views_at_all(self, unit_env):
        service = await unit_env.get(AnalyticsService)

        popular = await service.get_weekly_popular(limit=2, now=WEDNESDAY)

        assert [p.anime.id for p in popular] == [1, 2]
        assert all(p.view_count == 0 for p in popular)

    @pytest.mark.asyncio
    async def test_anime_removed_from_catalog_does_not_take_a_slot(self, unit_env):
        """Rows of uncatalogued anime are skipped before the limit applies."""
        service = await unit_env.get(AnalyticsService)
        view_repo = await unit_env.get(ViewRepository)
        for _ in range(5):
            await view_repo.record_view(
                AnimeId(99), service.current_week_start(WEDNESDAY), WEDNESDAY
            )
        await view(service, 1, times=2)
        await view(service, 2, times=1)

        popular = await service.get_weekly_popular(limit=2, now=WEDNESDAY)

        assert [(p.anime.id, p.weekly_views) for p in popular] == [(1, 2), (2, 1)]

    @pytest.mark.asyncio
    async def test_only_uncatalogued_views_falls_back_to_all_time(self, unit_env):
        service = await unit_env.get(AnalyticsService)
        view_repo = await unit_env.get(ViewRepository)
        await view_repo.record_view(
            AnimeId(99), service.current_week_start(WEDNESDAY), WEDNESDAY
        )
        await view(service, 3, times=2, now=LAST_WEEK)

        popular = await service.get_weekly_popular(limit=10, now=WEDNESDAY)

        assert [(p.anime.id, p.view_count, p.weekly_views) for p in popular] == [
            (3, 2, 0),
            (1, 0, 0),
            (2, 0, 0),
        ]


class TestResetWeeklyViews:
    """Tests for the weekly purge."""

    @pytest.mark.asyncio
    async def test_removes_only_past_weeks(self, unit_env):
        # Arrange
        service = await unit_env.get(AnalyticsService)
        view_repo = await unit_env.get(ViewRepository)
        await view(service, 1, now=LAST_WEEK - timedelta(days=7))
        await view(service, 1, now=LAST_WEEK)
        await view(service, 2, now=LAST_WEEK)
        await view(service, 1, times=2, now=WEDNESDAY)

        # Act
        deleted = await service.reset_weekly_views(now=WEDNESDAY)

        # Assert
        assert deleted == 3
        rows = await view_repo.find_weekly_by_anime(AnimeId(1))
        assert [(r.week_start_date, r.view_count) for r in rows] == [
            (date(2026, 10, 11), 2)
        ]
        # All-time totals survive the purge
        assert (await view_repo.get_totals([AnimeId(1)]))[AnimeId(1)] == 4

    @pytest.mark.asyncio
    async def test_is_idempotent(self, unit_env):
        service = await unit_env.get(AnalyticsService)
        await view(service, 1, now=LAST_WEEK)

        assert await service.reset_weekly_views(now=WEDNESDAY) == 1
        assert await service.reset_weekly_views(now=WEDNESDAY) == 0

    @pytest.mark.asyncio
    async def test_clears_the_cache(self, unit_env):
        service = await unit_env.get(AnalyticsService)
        cache = await unit_env.get(ViewCountCache)
        await view(service, 2)
        await service.get_view_counts(AnimeId(2), now=WEDNESDAY)

        await service.reset_weekly_views(now=WEDNESDAY)

        assert len(cache) == 0
