"""Weekly view counter entity."""

from datetime import date, datetime, timezone

from pydantic import Field

from engage.domain.model.common import DomainModel
from engage.domain.value import AnimeId, WeeklyViewId


class WeeklyView(DomainModel):
    """View count of one anime within one calendar week.

    At most one row exists per (anime_id, week_start_date). Rows are created
    on the first view of the week and purged once their week is over and
    the weekly reset runs.
    """

    id: WeeklyViewId
    anime_id: AnimeId
    view_count: int = Field(default=1, ge=0)
    week_start_date: date
    last_updated: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
