"""Unit tests for the view analytics use cases."""

from datetime import datetime, timedelta, timezone

import pytest

from engage.application.usecase.view import (
    GetAnimeViewsRequest,
    GetAnimeViewsUseCase,
    GetWeeklyPopularRequest,
    GetWeeklyPopularUseCase,
    RecordViewRequest,
    RecordViewUseCase,
    ResetWeeklyViewsUseCase,
)
from engage.domain.error import NotFoundError
from engage.domain.service import AnalyticsService
from engage.domain.value import AnimeId
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no database needed
unit_env = create_env_fixture()


class TestRecordViewUseCase:
    @pytest.mark.asyncio
    async def test_returns_updated_counts(self, unit_env):
        use_case = await unit_env.get(RecordViewUseCase)

        await use_case.execute(RecordViewRequest(anime_id=2))
        response = await use_case.execute(RecordViewRequest(anime_id=2))

        assert response.model_dump() == {"id": 2, "view_count": 2, "weekly_views": 2}

    @pytest.mark.asyncio
    async def test_unknown_anime(self, unit_env):
        use_case = await unit_env.get(RecordViewUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(RecordViewRequest(anime_id=404))


class TestGetWeeklyPopularUseCase:
    @pytest.mark.asyncio
    async def test_items_carry_catalog_fields_and_counts(self, unit_env):
        record = await unit_env.get(RecordViewUseCase)
        use_case = await unit_env.get(GetWeeklyPopularUseCase)
        for _ in range(3):
            await record.execute(RecordViewRequest(anime_id=3))
        await record.execute(RecordViewRequest(anime_id=1))

        items = await use_case.execute(GetWeeklyPopularRequest(limit=5))

        assert [(i.id, i.anime_name, i.weekly_views) for i in items] == [
            (3, "Mushishi", 3),
            (1, "Frieren", 1),
        ]
        assert len(items[0].episodes) == 2


class TestResetWeeklyViewsUseCase:
    @pytest.mark.asyncio
    async def test_purges_previous_weeks(self, unit_env):
        analytics = await unit_env.get(AnalyticsService)
        use_case = await unit_env.get(ResetWeeklyViewsUseCase)
        two_weeks_ago = datetime.now(timezone.utc) - timedelta(days=14)
        await analytics.increment_anime_views(AnimeId(1), now=two_weeks_ago)

        response = await use_case.execute()

        assert response.deleted == 1
        assert response.week_start == analytics.current_week_start().isoformat()

    @pytest.mark.asyncio
    async def test_nothing_to_purge(self, unit_env):
        use_case = await unit_env.get(ResetWeeklyViewsUseCase)

        response = await use_case.execute()

        assert response.deleted == 0



class TestGetAnimeViewsUseCase:
    @pytest.mark.asyncio
    async def test_counts_and_history(self, unit_env):
        analytics = await unit_env.get(AnalyticsService)
        use_case = await unit_env.get(GetAnimeViewsUseCase)
        now = datetime.now(timezone.utc)
        await analytics.increment_anime_views(AnimeId(1), now=now - timedelta(days=7))
        await analytics.increment_anime_views(AnimeId(1), now=now)
        await analytics.increment_anime_views(AnimeId(1), now=now)

        response = await use_case.execute(GetAnimeViewsRequest(anime_id=1))

        assert (response.view_count, response.weekly_views) == (3, 2)
        assert [w.view_count for w in response.history] == [2, 1]
        assert response.history[0].week_start_date == analytics.current_week_start(now)

    @pytest.mark.asyncio
    async def test_unknown_anime(self, unit_env):
        use_case = await unit_env.get(GetAnimeViewsUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(GetAnimeViewsRequest(anime_id=404))
