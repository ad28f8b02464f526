"""In-memory view counters for testing."""

from datetime import date, datetime
from typing import Sequence
from uuid import uuid4

from engage.domain.model import ViewCounts, WeeklyView
from engage.domain.repository import ViewRepository
from engage.domain.value import AnimeId, WeeklyViewId
from engage.persistence.repository.inmemory.store import AnimeTotal, InMemoryDatabase


class InMemoryViewRepository(ViewRepository):
    """In-memory implementation of ViewRepository for testing."""

    def __init__(self, db: InMemoryDatabase) -> None:
        self._db = db

    async def record_view(
        self, anime_id: AnimeId, week_start: date, now: datetime
    ) -> ViewCounts:
        """Count one view in the all-time and weekly counters."""
        total = self._db.anime_views.get(anime_id)
        if total is None:
            total = AnimeTotal(view_count=0, last_updated=now)
            self._db.anime_views[anime_id] = total
        total.view_count += 1
        total.last_updated = now

        key = (anime_id, week_start)
        weekly = self._db.weekly_views.get(key)
        if weekly is None:
            weekly = WeeklyView(
                id=WeeklyViewId(uuid4()),
                anime_id=anime_id,
                view_count=1,
                week_start_date=week_start,
                last_updated=now,
            )
        else:
            weekly = weekly.model_copy(
                update={"view_count": weekly.view_count + 1, "last_updated": now}
            )
        self._db.weekly_views[key] = weekly

        return ViewCounts(
            anime_id=anime_id, total=total.view_count, weekly=weekly.view_count
        )

    async def get_counts(self, anime_id: AnimeId, week_start: date) -> ViewCounts:
        """Get the all-time and weekly count of one anime."""
        total = self._db.anime_views.get(anime_id)
        weekly = self._db.weekly_views.get((anime_id, week_start))
        return ViewCounts(
            anime_id=anime_id,
            total=total.view_count if total else 0,
            weekly=weekly.view_count if weekly else 0,
        )

    async def get_totals(self, anime_ids: Sequence[AnimeId]) -> dict[AnimeId, int]:
        """Get all-time totals for several anime."""
        return {
            anime_id: self._db.anime_views[anime_id].view_count
            for anime_id in anime_ids
            if anime_id in self._db.anime_views
        }

    async def find_weekly_by_anime(self, anime_id: AnimeId) -> list[WeeklyView]:
        """Find every weekly row of an anime, newest week first."""
        rows = [w for w in self._db.weekly_views.values() if w.anime_id == anime_id]
        rows.sort(key=lambda w: w.week_start_date, reverse=True)
        return rows

    async def top_for_week(
        self, week_start: date, limit: int, anime_ids: Sequence[AnimeId]
    ) -> list[WeeklyView]:
        """Rank one week's rows of the given anime by view count."""
        wanted = set(anime_ids)
        rows = [
            w
            for w in self._db.weekly_views.values()
            if w.week_start_date == week_start and w.anime_id in wanted
        ]
        rows.sort(key=lambda w: (-w.view_count, w.anime_id))
        return rows[:limit]

    async def count_for_week(self, week_start: date) -> int:
        """Count the weekly rows recorded for one week."""
        return sum(
            1 for w in self._db.weekly_views.values() if w.week_start_date == week_start
        )

    async def delete_weeks_except(self, week_start: date) -> int:
        """Delete every weekly row not belonging to one week."""
        stale = [key for key in self._db.weekly_views if key[1] != week_start]
        for key in stale:
            del self._db.weekly_views[key]
        return len(stale)
