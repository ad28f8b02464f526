"""Calendar-week window used as the weekly analytics key."""

from datetime import date, datetime, timedelta, tzinfo


def week_start_for(moment: datetime, zone: tzinfo) -> date:
    """Return the most recent Sunday (inclusive) for a moment.

    The moment is converted to the reference timezone first, so every
    instance computing the key on the same calendar day agrees on it.
    Naive datetimes are taken to already be in the reference timezone.

    Args:
        moment: Point in time
        zone: Reference timezone

    Returns:
        Date of the Sunday that starts the week containing ``moment``
    """
    local = moment.astimezone(zone) if moment.tzinfo else moment
    # Monday is 0 in Python, Sunday 6; Sunday-based offset is (weekday + 1) % 7
    days_since_sunday = (local.weekday() + 1) % 7
    return local.date() - timedelta(days=days_since_sunday)
