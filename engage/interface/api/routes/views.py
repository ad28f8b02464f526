"""Anime view analytics routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter

from engage.application.usecase.view import (
    GetAnimeViewsRequest,
    GetAnimeViewsResponse,
    GetAnimeViewsUseCase,
    GetWeeklyPopularRequest,
    GetWeeklyPopularUseCase,
    PopularAnimeItem,
    RecordViewRequest,
    RecordViewResponse,
    RecordViewUseCase,
    ResetWeeklyViewsResponse,
    ResetWeeklyViewsUseCase,
)
from engage.config import AnalyticsSettings
from engage.domain.error import DomainError
from engage.interface.api.routes.params import positive_int
from engage.interface.error import http_error

router = APIRouter(prefix="/api/animes", tags=["views"], route_class=DishkaRoute)


@router.post("/{anime_id:int}/view", response_model=RecordViewResponse)
async def record_view(
    anime_id: int,
    record_view_use_case: FromDishka[RecordViewUseCase],
) -> RecordViewResponse:
    """Count one view of an anime.

    Args:
        anime_id: Catalog ID
        record_view_use_case: Record view use case from DI

    Returns:
        The anime's all-time and current-week counts after the view

    Raises:
        HTTPException: 404 if the anime is not in the catalog
    """
    try:
        return await record_view_use_case.execute(RecordViewRequest(anime_id=anime_id))
    except DomainError as e:
        raise http_error(e, "Failed to increment view count")


@router.get("/{anime_id:int}/views", response_model=GetAnimeViewsResponse)
async def get_anime_views(
    anime_id: int,
    get_anime_views_use_case: FromDishka[GetAnimeViewsUseCase],
) -> GetAnimeViewsResponse:
    """Get an anime's all-time and weekly view counts with its retained weeks."""
    try:
        return await get_anime_views_use_case.execute(
            GetAnimeViewsRequest(anime_id=anime_id)
        )
    except DomainError as e:
        raise http_error(e, "Failed to fetch view counts")


@router.get("/weekly/popular", response_model=list[PopularAnimeItem])
async def get_weekly_popular(
    get_weekly_popular_use_case: FromDishka[GetWeeklyPopularUseCase],
    settings: FromDishka[AnalyticsSettings],
    limit: str | None = None,
) -> list[PopularAnimeItem]:
    """Get this week's most viewed anime.

    Before anything is viewed in a week, the catalog is ranked by all-time
    views instead.
    """
    request = GetWeeklyPopularRequest(
        limit=positive_int(
            limit, settings.default_popular_limit, settings.max_popular_limit
        )
    )
    try:
        return await get_weekly_popular_use_case.execute(request)
    except DomainError as e:
        raise http_error(e, "Failed to fetch weekly popular animes")


@router.post("/weekly/reset", response_model=ResetWeeklyViewsResponse)
async def reset_weekly_views(
    reset_weekly_views_use_case: FromDishka[ResetWeeklyViewsUseCase],
) -> ResetWeeklyViewsResponse:
    """Purge weekly counters of past weeks (called by the scheduler)."""
    try:
        return await reset_weekly_views_use_case.execute()
    except DomainError as e:
        raise http_error(e, "Failed to reset weekly views")
