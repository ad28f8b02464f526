"""Read-through cache for view counters."""

import time
from datetime import date
from typing import Callable, Dict, Optional, Tuple

from engage.domain.model import ViewCounts
from engage.domain.value import AnimeId

CacheKey = Tuple[AnimeId, date]


class ViewCountCache:
    """Process-local TTL cache of (anime, week) view counts.

    One instance lives for the whole application and is shared by every
    request. Writers store the counts their increment returned instead of
    dropping the entry, and within one week both counters only grow, so
    ``put`` keeps whichever entry is further ahead. A read that began
    before a concurrent increment committed therefore cannot roll the
    entry back to the older value. An entry can run ahead of the database
    only if the increment's transaction later fails to commit; it then
    expires after the TTL.
    """

    def __init__(
        self,
        ttl_seconds: float,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._entries: Dict[CacheKey, Tuple[float, ViewCounts]] = {}

    def get(self, anime_id: AnimeId, week_start: date) -> Optional[ViewCounts]:
        """Return cached counts, or None on a miss or an expired entry."""
        key = (anime_id, week_start)
        entry = self._entries.get(key)
        if entry is None:
            return None

        expires_at, counts = entry
        if self._clock() >= expires_at:
            del self._entries[key]
            return None
        return counts

    def put(self, week_start: date, counts: ViewCounts) -> None:
        """Store counts for one week unless a fresher entry is cached."""
        key = (counts.anime_id, week_start)
        current = self.get(counts.anime_id, week_start)
        if current is not None and _behind(counts, current):
            return
        self._entries[key] = (self._clock() + self.ttl_seconds, counts)

    def clear(self) -> None:
        """Drop everything."""
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)


def _behind(candidate: ViewCounts, cached: ViewCounts) -> bool:
    return (candidate.total, candidate.weekly) < (cached.total, cached.weekly)
