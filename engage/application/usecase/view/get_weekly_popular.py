"""Get weekly popular use case."""

from pydantic import BaseModel

from engage.domain.model import Anime
from engage.domain.service import AnalyticsService


class PopularAnimeItem(Anime):
    """Catalog entry with its view counts."""

    view_count: int
    weekly_views: int


class GetWeeklyPopularRequest(BaseModel):
    """Get weekly popular request.

    ``limit`` is expected to be normalized already.
    """

    limit: int = 10


class GetWeeklyPopularUseCase:
    """Use case for this week's most viewed anime."""

    def __init__(self, analytics_service: AnalyticsService) -> None:
        """Initialize get weekly popular use case.

        Args:
            analytics_service: Analytics domain service
        """
        self.analytics_service = analytics_service

    async def execute(self, request: GetWeeklyPopularRequest) -> list[PopularAnimeItem]:
        """Execute weekly popular flow."""
        popular = await self.analytics_service.get_weekly_popular(request.limit)
        return [
            PopularAnimeItem(
                **p.anime.model_dump(),
                view_count=p.view_count,
                weekly_views=p.weekly_views,
            )
            for p in popular
        ]
