"""Unit tests for the week key."""

from datetime import date, datetime, timezone
from zoneinfo import ZoneInfo

from engage.domain.value import week_start_for

UTC = timezone.utc


class TestWeekStartFor:
    """Tests for week_start_for."""

    def test_sunday_is_its_own_week_start(self):
        sunday = datetime(2026, 10, 18, 0, 0, tzinfo=UTC)
        assert week_start_for(sunday, UTC) == date(2026, 10, 18)

    def test_saturday_belongs_to_previous_sunday(self):
        saturday = datetime(2026, 10, 17, 23, 59, 59, tzinfo=UTC)
        assert week_start_for(saturday, UTC) == date(2026, 10, 11)

    def test_every_day_of_a_week_shares_the_key(self):
        keys = {
            week_start_for(datetime(2026, 10, day, 12, tzinfo=UTC), UTC)
            for day in range(11, 18)
        }
        assert keys == {date(2026, 10, 11)}

    def test_uses_reference_timezone(self):
        """Saturday evening UTC is already Sunday in Tokyo."""
        moment = datetime(2026, 10, 17, 20, 0, tzinfo=UTC)
        assert week_start_for(moment, UTC) == date(2026, 10, 11)
        assert week_start_for(moment, ZoneInfo("Asia/Tokyo")) == date(2026, 10, 18)

    def test_naive_datetime_is_taken_as_local(self):
        assert week_start_for(datetime(2026, 10, 14, 8, 0), UTC) == date(2026, 10, 11)

    def test_week_spanning_a_month_boundary(self):
        wednesday = datetime(2026, 11, 4, 9, 0, tzinfo=UTC)
        assert week_start_for(wednesday, UTC) == date(2026, 11, 1)
        tuesday = datetime(2026, 9, 1, 9, 0, tzinfo=UTC)
        assert week_start_for(tuesday, UTC) == date(2026, 8, 30)
