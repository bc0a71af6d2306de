"""Process-local search counter store.

Used when no Appwrite project is configured. Counts are lost on restart.
"""

from __future__ import annotations

import uuid
from dataclasses import replace

from reelscout.domain.entities.media import MediaItem, poster_url_for
from reelscout.domain.entities.trending import SearchTermRecord


class InMemorySearchCounterStore:
    """Implements ``SearchCounterStorePort`` with a plain dict."""

    def __init__(self) -> None:
        self._records: dict[str, SearchTermRecord] = {}

    async def record_search(self, search_term: str, item: MediaItem) -> SearchTermRecord:
        existing = self._records.get(search_term)
        if existing is None:
            record = SearchTermRecord(
                id=uuid.uuid4().hex,
                search_term=search_term,
                count=1,
                movie_id=item.id,
                poster_url=poster_url_for(item.poster_path),
                title=item.title,
            )
        else:
            record = replace(existing, count=existing.count + 1)
        self._records[search_term] = record
        return record

    async def top_searches(self, limit: int) -> list[SearchTermRecord]:
        # sorted() is stable: ties keep first-recorded order
        ranked = sorted(self._records.values(), key=lambda r: r.count, reverse=True)
        return ranked[:limit]
