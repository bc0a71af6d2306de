"""Catalog page presenter.

Turns a ViewState into the view model the templates render. No I/O.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from reelscout.domain.entities.media import MediaItem, MediaType
from reelscout.domain.entities.trending import TrendingEntry
from reelscout.domain.entities.view import ViewState


@dataclass(frozen=True)
class MediaCard:
    """One poster card in a result grid."""

    key: str  # "movie-603", "tv-1396"
    media_type: MediaType
    title: str
    rating: str
    language: str
    year: str
    poster_url: str
    detail_url: str

    @classmethod
    def from_item(cls, item: MediaItem) -> MediaCard:
        return cls(
            key=f"{item.media_type}-{item.id}",
            media_type=item.media_type,
            title=item.title,
            rating=item.rating_label,
            language=item.original_language,
            year=item.year,
            poster_url=item.poster_url,
            detail_url=item.detail_url,
        )


@dataclass(frozen=True)
class CatalogView:
    """What the page shows for a given state.

    Exactly one of spinner, error message or result grids is visible.
    """

    show_spinner: bool = False
    error_message: str | None = None
    movies: list[MediaCard] = field(default_factory=list)
    series: list[MediaCard] = field(default_factory=list)
    trending: list[TrendingEntry] = field(default_factory=list)
    search_term: str = ""

    @property
    def show_results(self) -> bool:
        return not self.show_spinner and self.error_message is None

    @property
    def show_trending(self) -> bool:
        return bool(self.trending)


def _cards(items: list[MediaItem], media_type: MediaType) -> list[MediaCard]:
    return [
        MediaCard.from_item(item)
        for item in items
        if item.media_type == media_type and item.has_poster
    ]


def present(state: ViewState) -> CatalogView:
    """Build the view model for ``state``."""
    if state.is_loading:
        return CatalogView(
            show_spinner=True,
            trending=list(state.trending),
            search_term=state.search_term,
        )

    if state.error is not None:
        return CatalogView(
            error_message=state.error.message,
            trending=list(state.trending),
            search_term=state.search_term,
        )

    return CatalogView(
        movies=_cards(state.items, "movie"),
        series=_cards(state.items, "tv"),
        trending=list(state.trending),
        search_term=state.search_term,
    )
