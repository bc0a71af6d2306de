"""Transient UI state of one browsing session."""

from __future__ import annotations

from dataclasses import dataclass, field

from .media import CatalogError, CatalogResult, MediaItem
from .trending import TrendingEntry


@dataclass
class ViewState:
    """In-memory state behind the rendered page.

    Loading and error are never shown together: starting a search clears
    the error, applying a result clears the loading flag.
    """

    search_term: str = ""
    debounced_term: str = ""
    items: list[MediaItem] = field(default_factory=list)
    is_loading: bool = False
    error: CatalogError | None = None
    trending: list[TrendingEntry] = field(default_factory=list)

    def begin_search(self) -> None:
        self.is_loading = True
        self.error = None

    def apply(self, result: CatalogResult) -> None:
        self.is_loading = False
        self.error = result.error
        if result.error is None:
            self.items = list(result.items)
        elif result.error is CatalogError.EMPTY_RESULT:
            self.items = []
        # FETCH_FAILURE / TRANSPORT_ERROR keep whatever was shown before
