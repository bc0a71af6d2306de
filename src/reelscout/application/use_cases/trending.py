"""Trending use case: most-searched terms from the counter store."""

from __future__ import annotations

import structlog

from reelscout.domain.entities.trending import TrendingEntry
from reelscout.domain.ports.counter_store import SearchCounterStorePort

log = structlog.get_logger(__name__)


class TrendingUseCase:
    """Ranks search terms by hit count.

    Ordering is the counter store's; entries are numbered in the order
    they arrive.
    """

    def __init__(self, counter_store: SearchCounterStorePort, limit: int = 5) -> None:
        self._counter_store = counter_store
        self._limit = limit

    async def load_trending(self) -> list[TrendingEntry]:
        """Fetch the trending list.

        Returns:
            Ranked entries (empty on any error).
        """
        try:
            records = await self._counter_store.top_searches(self._limit)
        except Exception:
            log.warning("trending_load_failed", limit=self._limit, exc_info=True)
            return []

        return [
            TrendingEntry.from_record(rank, record)
            for rank, record in enumerate(records, start=1)
        ]
