"""Search Counter Store Port - Interface for search-term popularity tracking."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from reelscout.domain.entities.media import MediaItem
from reelscout.domain.entities.trending import SearchTermRecord


@runtime_checkable
class SearchCounterStorePort(Protocol):
    """Port for the per-search-term hit counter.

    Implementations:
      - AppwriteSearchCounterStore (hosted document store via REST)
      - InMemorySearchCounterStore (process-local, for dev/tests)

    Failures raise ``CounterStoreError``.
    """

    async def record_search(self, search_term: str, item: MediaItem) -> SearchTermRecord:
        """Increment the counter for ``search_term``, creating it on first use.

        ``item`` is stored as the representative entry only on creation.
        """
        ...

    async def top_searches(self, limit: int) -> list[SearchTermRecord]:
        """Records ordered by count, highest first."""
        ...
