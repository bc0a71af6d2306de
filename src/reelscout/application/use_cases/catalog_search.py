"""Catalog search use case: combined movie and series fetch."""

from __future__ import annotations

import asyncio

import structlog

from reelscout.domain.entities.media import (
    CatalogError,
    CatalogPage,
    CatalogResult,
    MediaItem,
)
from reelscout.domain.exceptions import CatalogTransportError
from reelscout.domain.ports.catalog import CatalogClientPort
from reelscout.domain.ports.counter_store import SearchCounterStorePort

log = structlog.get_logger(__name__)


class CatalogSearchUseCase:
    """Fetches movies and series side by side and merges them.

    An empty query browses current listings (now playing / on the air);
    anything else searches both catalogs by title. A successful non-empty
    search bumps the counter for that exact query in the background.

    The use case holds no per-search state; callers decide which result
    is current.
    """

    def __init__(
        self,
        catalog: CatalogClientPort,
        counter_store: SearchCounterStorePort,
    ) -> None:
        self._catalog = catalog
        self._counter_store = counter_store
        self._background: set[asyncio.Task[None]] = set()

    async def fetch_catalog(self, query: str) -> CatalogResult:
        """Fetch and merge both catalogs for ``query``.

        Args:
            query: Free-text title search; only the empty string browses listings.

        Returns:
            CatalogResult with movies first, then series, or an error kind.
        """
        browsing = not query

        try:
            if browsing:
                movie_page, tv_page = await asyncio.gather(
                    self._catalog.now_playing_movies(),
                    self._catalog.on_the_air_tv(),
                )
            else:
                movie_page, tv_page = await asyncio.gather(
                    self._catalog.search_movies(query),
                    self._catalog.search_tv(query),
                )
            if not movie_page.ok and not tv_page.ok:
                log.warning(
                    "catalog_fetch_rejected",
                    query=query,
                    movie_status=movie_page.status_code,
                    tv_status=tv_page.status_code,
                )
                return CatalogResult(error=CatalogError.FETCH_FAILURE)

            items = _tag_results(movie_page, tv_page)
        except (CatalogTransportError, KeyError, TypeError, ValueError):
            log.warning("catalog_fetch_failed", query=query, exc_info=True)
            return CatalogResult(error=CatalogError.TRANSPORT_ERROR)

        if not items:
            log.info("catalog_fetch_empty", query=query)
            return CatalogResult(error=CatalogError.EMPTY_RESULT)

        if not browsing:
            self._spawn_count_update(query, items[0])

        log.debug("catalog_fetch_complete", query=query, items=len(items))
        return CatalogResult(items=items)

    async def drain(self) -> None:
        """Wait for pending counter updates (shutdown, tests)."""
        if self._background:
            await asyncio.gather(*self._background, return_exceptions=True)

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------

    def _spawn_count_update(self, query: str, item: MediaItem) -> None:
        task = asyncio.create_task(
            self._record_search(query, item), name=f"search-count:{query}"
        )
        self._background.add(task)
        task.add_done_callback(self._background.discard)

    async def _record_search(self, query: str, item: MediaItem) -> None:
        try:
            record = await self._counter_store.record_search(query, item)
        except Exception:
            log.warning(
                "search_count_update_failed",
                search_term=query,
                movie_id=item.id,
                exc_info=True,
            )
            return
        log.debug("search_count_updated", search_term=query, count=record.count)


def _tag_results(movie_page: CatalogPage, tv_page: CatalogPage) -> list[MediaItem]:
    movies = [MediaItem.from_movie(raw) for raw in movie_page.results]
    series = [MediaItem.from_tv(raw) for raw in tv_page.results]
    return movies + series
