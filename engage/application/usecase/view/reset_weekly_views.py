"""Reset weekly views use case."""

from datetime import datetime, timezone

from pydantic import BaseModel

from engage.domain.service import AnalyticsService


class ResetWeeklyViewsResponse(BaseModel):
    """Reset weekly views response."""

    deleted: int
    week_start: str


class ResetWeeklyViewsUseCase:
    """Use case for purging weekly counters of past weeks.

    Triggered by an external scheduler; safe to run any number of times.
    """

    def __init__(self, analytics_service: AnalyticsService) -> None:
        self.analytics_service = analytics_service

    async def execute(self) -> ResetWeeklyViewsResponse:
        """Execute weekly reset."""
        now = datetime.now(timezone.utc)
        deleted = await self.analytics_service.reset_weekly_views(now)
        week_start = self.analytics_service.current_week_start(now)
        return ResetWeeklyViewsResponse(
            deleted=deleted, week_start=week_start.isoformat()
        )
