"""Live search session: debounced input driving catalog searches."""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable
from contextlib import suppress

import structlog

from reelscout.application.debounce import Debouncer, Scheduler
from reelscout.application.use_cases.catalog_search import CatalogSearchUseCase
from reelscout.application.use_cases.trending import TrendingUseCase
from reelscout.domain.entities.view import ViewState

log = structlog.get_logger(__name__)

OnChange = Callable[[ViewState], Awaitable[None]]


async def _noop(_: ViewState) -> None:
    return None


class SearchSession:
    """Owns the view state of one connected page.

    Keystrokes go through ``input()``; settled values start a search.
    Searches may overlap, so each run takes a sequence number and only
    the newest run may write its result into the state.
    """

    def __init__(
        self,
        *,
        search_uc: CatalogSearchUseCase,
        trending_uc: TrendingUseCase,
        on_change: OnChange | None = None,
        debounce_seconds: float = 0.8,
        scheduler: Scheduler | None = None,
    ) -> None:
        self.state = ViewState()
        self._search_uc = search_uc
        self._trending_uc = trending_uc
        self._on_change = on_change or _noop
        self._debouncer: Debouncer[str] = Debouncer(
            debounce_seconds, self._on_settled, scheduler=scheduler
        )
        self._sequence = 0
        self._tasks: set[asyncio.Task[None]] = set()

    async def start(self, query: str = "") -> None:
        """Load trending and the first result list concurrently."""
        self.state.search_term = query
        self.state.debounced_term = query
        await asyncio.gather(self.load_trending(), self.search(query))

    async def load_trending(self) -> None:
        self.state.trending = await self._trending_uc.load_trending()

    def input(self, value: str) -> None:
        """Record a keystroke; the search starts once typing pauses."""
        self.state.search_term = value
        self._debouncer.push(value)

    async def search(self, term: str) -> None:
        self._sequence += 1
        sequence = self._sequence

        self.state.begin_search()
        await self._on_change(self.state)

        result = await self._search_uc.fetch_catalog(term)

        if sequence != self._sequence:
            log.debug(
                "stale_search_discarded",
                query=term,
                sequence=sequence,
                current=self._sequence,
            )
            return

        self.state.apply(result)
        await self._on_change(self.state)

    async def close(self) -> None:
        self._debouncer.cancel()
        for task in list(self._tasks):
            task.cancel()
        for task in list(self._tasks):
            with suppress(asyncio.CancelledError):
                await task

    def _on_settled(self, value: str) -> None:
        self.state.debounced_term = value
        task = asyncio.create_task(self._run_search(value))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)

    async def _run_search(self, term: str) -> None:
        try:
            await self.search(term)
        except asyncio.CancelledError:
            raise
        except Exception:
            # on_change failures (e.g. a closed socket) must not kill the loop
            log.warning("search_session_render_failed", query=term, exc_info=True)
