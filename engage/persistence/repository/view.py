"""PostgreSQL implementation of the view counters."""

from datetime import date, datetime
from typing import Dict, List, Sequence
from uuid import uuid4

from sqlalchemy import delete, desc, func, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from engage.domain.error import StorageError
from engage.domain.model import ViewCounts, WeeklyView
from engage.domain.repository import ViewRepository
from engage.domain.value import AnimeId
from engage.persistence.mappers import row_to_weekly_view
from engage.persistence.tables import anime_views_table, weekly_views_table


class PostgresViewRepository(ViewRepository):
    """PostgreSQL implementation of ViewRepository.

    Both counters are bumped with ``INSERT ... ON CONFLICT DO UPDATE`` so
    concurrent first views of an anime (or of a week) converge on a single
    row instead of racing to create it.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def record_view(
        self, anime_id: AnimeId, week_start: date, now: datetime
    ) -> ViewCounts:
        """Count one view in the all-time and weekly counters atomically."""
        total_stmt = insert(anime_views_table).values(
            anime_id=anime_id, view_count=1, last_updated=now
        )
        total_stmt = total_stmt.on_conflict_do_update(
            index_elements=[anime_views_table.c.anime_id],
            set_={
                "view_count": anime_views_table.c.view_count + 1,
                "last_updated": now,
            },
        ).returning(anime_views_table.c.view_count)

        weekly_stmt = insert(weekly_views_table).values(
            id=uuid4(),
            anime_id=anime_id,
            view_count=1,
            week_start_date=week_start,
            last_updated=now,
        )
        weekly_stmt = weekly_stmt.on_conflict_do_update(
            constraint="uq_weekly_view",
            set_={
                "view_count": weekly_views_table.c.view_count + 1,
                "last_updated": now,
            },
        ).returning(weekly_views_table.c.view_count)

        try:
            async with self.session.begin_nested():
                total = (await self.session.execute(total_stmt)).scalar_one()
                weekly = (await self.session.execute(weekly_stmt)).scalar_one()
        except SQLAlchemyError as e:
            raise StorageError(f"Could not record view of anime {anime_id}") from e

        return ViewCounts(anime_id=anime_id, total=total, weekly=weekly)

    async def get_counts(self, anime_id: AnimeId, week_start: date) -> ViewCounts:
        """Get the all-time and weekly count of one anime."""
        total = await self.session.scalar(
            select(anime_views_table.c.view_count).where(
                anime_views_table.c.anime_id == anime_id
            )
        )
        weekly = await self.session.scalar(
            select(weekly_views_table.c.view_count)
            .where(weekly_views_table.c.anime_id == anime_id)
            .where(weekly_views_table.c.week_start_date == week_start)
        )
        return ViewCounts(anime_id=anime_id, total=total or 0, weekly=weekly or 0)

    async def get_totals(self, anime_ids: Sequence[AnimeId]) -> Dict[AnimeId, int]:
        """Get all-time totals for several anime (batch query)."""
        if not anime_ids:
            return {}

        stmt = select(
            anime_views_table.c.anime_id, anime_views_table.c.view_count
        ).where(anime_views_table.c.anime_id.in_(anime_ids))
        result = await self.session.execute(stmt)
        return {AnimeId(row.anime_id): row.view_count for row in result.fetchall()}

    async def find_weekly_by_anime(self, anime_id: AnimeId) -> List[WeeklyView]:
        """Find every weekly row of an anime, newest week first."""
        stmt = (
            select(weekly_views_table)
            .where(weekly_views_table.c.anime_id == anime_id)
            .order_by(desc(weekly_views_table.c.week_start_date))
        )
        result = await self.session.execute(stmt)
        return [row_to_weekly_view(row._asdict()) for row in result.fetchall()]

    async def top_for_week(
        self, week_start: date, limit: int, anime_ids: Sequence[AnimeId]
    ) -> List[WeeklyView]:
        """Rank one week's rows of the given anime by view count."""
        if not anime_ids:
            return []
        stmt = (
            select(weekly_views_table)
            .where(
                weekly_views_table.c.week_start_date == week_start,
                weekly_views_table.c.anime_id.in_(anime_ids),
            )
            .order_by(
                desc(weekly_views_table.c.view_count), weekly_views_table.c.anime_id
            )
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return [row_to_weekly_view(row._asdict()) for row in result.fetchall()]

    async def count_for_week(self, week_start: date) -> int:
        """Count the weekly rows recorded for one week."""
        stmt = (
            select(func.count())
            .select_from(weekly_views_table)
            .where(weekly_views_table.c.week_start_date == week_start)
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def delete_weeks_except(self, week_start: date) -> int:
        """Delete every weekly row not belonging to one week."""
        stmt = delete(weekly_views_table).where(
            weekly_views_table.c.week_start_date != week_start
        )
        try:
            async with self.session.begin_nested():
                result = await self.session.execute(stmt)
        except SQLAlchemyError as e:
            raise StorageError("Could not reset weekly views") from e

        return result.rowcount  # type: ignore[attr-defined]
