"""Unit tests for ViewCountCache."""

from datetime import date

from engage.domain.model import ViewCounts
from engage.domain.service import ViewCountCache
from engage.domain.value import AnimeId

WEEK = date(2026, 10, 11)
LAST_WEEK = date(2026, 10, 4)


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self) -> None:
        self.now = 100.0

    def __call__(self) -> float:
        return self.now


def counts(anime_id: int, total: int = 5, weekly: int = 2) -> ViewCounts:
    return ViewCounts(anime_id=AnimeId(anime_id), total=total, weekly=weekly)


class TestViewCountCache:
    def test_miss_returns_none(self):
        cache = ViewCountCache(ttl_seconds=30)

        assert cache.get(AnimeId(1), WEEK) is None

    def test_hit_within_ttl(self):
        clock = FakeClock()
        cache = ViewCountCache(ttl_seconds=30, clock=clock)
        cache.put(WEEK, counts(1))

        clock.now += 29.9

        assert cache.get(AnimeId(1), WEEK) == counts(1)

    def test_entry_expires(self):
        clock = FakeClock()
        cache = ViewCountCache(ttl_seconds=30, clock=clock)
        cache.put(WEEK, counts(1))

        clock.now += 30

        assert cache.get(AnimeId(1), WEEK) is None
        assert len(cache) == 0

    def test_weeks_are_cached_separately(self):
        cache = ViewCountCache(ttl_seconds=30)
        cache.put(WEEK, counts(1, weekly=2))
        cache.put(LAST_WEEK, counts(1, weekly=7))

        assert cache.get(AnimeId(1), WEEK).weekly == 2
        assert cache.get(AnimeId(1), LAST_WEEK).weekly == 7

    def test_older_counts_do_not_replace_fresher_entry(self):
        """A read that started before an increment landed cannot roll back."""
        cache = ViewCountCache(ttl_seconds=30)
        cache.put(WEEK, counts(1, total=6, weekly=3))

        cache.put(WEEK, counts(1, total=5, weekly=2))

        assert cache.get(AnimeId(1), WEEK) == counts(1, total=6, weekly=3)

    def test_newer_counts_replace_entry_and_restart_ttl(self):
        clock = FakeClock()
        cache = ViewCountCache(ttl_seconds=30, clock=clock)
        cache.put(WEEK, counts(1, total=5, weekly=2))

        clock.now += 20
        cache.put(WEEK, counts(1, total=6, weekly=3))
        clock.now += 20

        assert cache.get(AnimeId(1), WEEK) == counts(1, total=6, weekly=3)

    def test_expired_entry_does_not_block_older_counts(self):
        clock = FakeClock()
        cache = ViewCountCache(ttl_seconds=30, clock=clock)
        cache.put(WEEK, counts(1, total=6, weekly=3))

        clock.now += 30
        cache.put(WEEK, counts(1, total=5, weekly=2))

        assert cache.get(AnimeId(1), WEEK) == counts(1, total=5, weekly=2)

    def test_clear(self):
        cache = ViewCountCache(ttl_seconds=30)
        cache.put(WEEK, counts(1))
        cache.put(WEEK, counts(2))

        cache.clear()

        assert len(cache) == 0
