"""Integration tests for the PostgreSQL view counters."""

import random
from datetime import date, datetime, timezone

import pytest

from engage.domain.repository import ViewRepository
from engage.domain.value import AnimeId
from tests.harness import create_env_fixture

# Integration test fixture
integration_env = create_env_fixture(unmock={"persistence"})

NOW = datetime.now(timezone.utc)
THIS_WEEK = date(2026, 10, 11)
LAST_WEEK = date(2026, 10, 4)


@pytest.fixture
def anime_id() -> AnimeId:
    return AnimeId(random.randint(1_000_000, 2_000_000_000))


class TestPostgresViewRepository:
    @pytest.mark.asyncio
    async def test_record_view_upserts_both_counters(self, integration_env, anime_id):
        # Arrange
        view_repo = await integration_env.get(ViewRepository)

        # Act
        await view_repo.record_view(anime_id, LAST_WEEK, NOW)
        await view_repo.record_view(anime_id, THIS_WEEK, NOW)
        counts = await view_repo.record_view(anime_id, THIS_WEEK, NOW)

        # Assert
        assert (counts.total, counts.weekly) == (3, 2)
        rows = await view_repo.find_weekly_by_anime(anime_id)
        assert [(r.week_start_date, r.view_count) for r in rows] == [
            (THIS_WEEK, 2),
            (LAST_WEEK, 1),
        ]
        assert await view_repo.get_totals([anime_id]) == {anime_id: 3}

    @pytest.mark.asyncio
    async def test_unviewed_anime_counts_zero(self, integration_env, anime_id):
        view_repo = await integration_env.get(ViewRepository)

        counts = await view_repo.get_counts(anime_id, THIS_WEEK)

        assert (counts.total, counts.weekly) == (0, 0)

    @pytest.mark.asyncio
    async def test_delete_weeks_except_keeps_one_week(self, integration_env, anime_id):
        view_repo = await integration_env.get(ViewRepository)
        await view_repo.record_view(anime_id, LAST_WEEK, NOW)
        await view_repo.record_view(anime_id, THIS_WEEK, NOW)

        deleted = await view_repo.delete_weeks_except(THIS_WEEK)

        assert deleted >= 1
        rows = await view_repo.find_weekly_by_anime(anime_id)
        assert [r.week_start_date for r in rows] == [THIS_WEEK]
        assert await view_repo.count_for_week(LAST_WEEK) == 0
