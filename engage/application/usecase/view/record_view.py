"""Record view use case."""

from pydantic import BaseModel

from engage.domain.service import AnalyticsService
from engage.domain.value import AnimeId


class RecordViewRequest(BaseModel):
    """Record view request."""

    anime_id: int


class RecordViewResponse(BaseModel):
    """Record view response."""

    id: int
    view_count: int
    weekly_views: int


class RecordViewUseCase:
    """Use case for counting one view of an anime."""

    def __init__(self, analytics_service: AnalyticsService) -> None:
        """Initialize record view use case.

        Args:
            analytics_service: Analytics domain service
        """
        self.analytics_service = analytics_service

    async def execute(self, request: RecordViewRequest) -> RecordViewResponse:
        """Execute record view flow.

        Raises:
            NotFoundError: If the anime is not in the catalog
        """
        counts = await self.analytics_service.increment_anime_views(
            AnimeId(request.anime_id)
        )
        return RecordViewResponse(
            id=counts.anime_id, view_count=counts.total, weekly_views=counts.weekly
        )
