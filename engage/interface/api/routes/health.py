"""Liveness endpoint."""

from datetime import date, datetime, timezone

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter
from pydantic import BaseModel

from engage.config import Settings
from engage.domain.repository import AnimeRepository
from engage.domain.value.week import week_start_for


router = APIRouter(tags=["health"], route_class=DishkaRoute)


class HealthResponse(BaseModel):
    status: str
    timestamp: datetime
    git_sha: str
    catalog_size: int
    week_start: date


@router.get("/health", response_model=HealthResponse)
async def health_check(
    settings: FromDishka[Settings],
    anime_repository: FromDishka[AnimeRepository],
) -> HealthResponse:
    """Report that the process is up, with the catalog size and current week.

    Does not touch the database, so it stays green while Postgres is down.
    """
    now = datetime.now(timezone.utc)
    catalog = await anime_repository.find_all()
    return HealthResponse(
        status="healthy",
        timestamp=now,
        git_sha=settings.git_sha,
        catalog_size=len(catalog),
        week_start=week_start_for(now, settings.analytics.zone),
    )
