"""View analytics use cases."""

from .get_anime_views import (
    GetAnimeViewsRequest,
    GetAnimeViewsResponse,
    GetAnimeViewsUseCase,
    WeeklyViewItem,
)
from .get_weekly_popular import (
    GetWeeklyPopularRequest,
    GetWeeklyPopularUseCase,
    PopularAnimeItem,
)
from .record_view import RecordViewRequest, RecordViewResponse, RecordViewUseCase
from .reset_weekly_views import ResetWeeklyViewsResponse, ResetWeeklyViewsUseCase

__all__ = [
    "GetAnimeViewsRequest",
    "GetAnimeViewsResponse",
    "GetAnimeViewsUseCase",
    "GetWeeklyPopularRequest",
    "GetWeeklyPopularUseCase",
    "PopularAnimeItem",
    "RecordViewRequest",
    "RecordViewResponse",
    "RecordViewUseCase",
    "ResetWeeklyViewsResponse",
    "ResetWeeklyViewsUseCase",
    "WeeklyViewItem",
]
