"""Get anime views use case."""

from datetime import date

from pydantic import BaseModel

from engage.domain.error import NotFoundError
from engage.domain.repository import AnimeRepository
from engage.domain.service import AnalyticsService
from engage.domain.value import AnimeId


class WeeklyViewItem(BaseModel):
    """View count of one retained week."""

    week_start_date: date
    view_count: int


class GetAnimeViewsRequest(BaseModel):
    """Get anime views request."""

    anime_id: int


class GetAnimeViewsResponse(BaseModel):
    """Get anime views response."""

    id: int
    view_count: int
    weekly_views: int
    history: list[WeeklyViewItem]


class GetAnimeViewsUseCase:
    """Use case for reading an anime's view counters."""

    def __init__(
        self,
        analytics_service: AnalyticsService,
        anime_repository: AnimeRepository,
    ) -> None:
        """Initialize get anime views use case.

        Args:
            analytics_service: Analytics domain service
            anime_repository: Catalog, to reject unknown anime
        """
        self.analytics_service = analytics_service
        self.anime_repository = anime_repository

    async def execute(self, request: GetAnimeViewsRequest) -> GetAnimeViewsResponse:
        """Execute get anime views flow.

        Raises:
            NotFoundError: If the anime is not in the catalog
        """
        anime_id = AnimeId(request.anime_id)
        if not await self.anime_repository.find_by_id(anime_id):
            raise NotFoundError("Anime", str(anime_id))

        counts = await self.analytics_service.get_view_counts(anime_id)
        history = await self.analytics_service.get_weekly_history(anime_id)
        return GetAnimeViewsResponse(
            id=anime_id,
            view_count=counts.total,
            weekly_views=counts.weekly,
            history=[
                WeeklyViewItem(week_start_date=w.week_start_date, view_count=w.view_count)
                for w in history
            ],
        )
