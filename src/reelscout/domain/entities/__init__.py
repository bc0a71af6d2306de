from .media import (
    NO_POSTER_URL,
    POSTER_BASE_URL,
    CatalogError,
    CatalogPage,
    CatalogResult,
    MediaItem,
    MediaType,
    poster_url_for,
)
from .trending import SearchTermRecord, TrendingEntry
from .view import ViewState

__all__ = [
    "NO_POSTER_URL",
    "POSTER_BASE_URL",
    "CatalogError",
    "CatalogPage",
    "CatalogResult",
    "MediaItem",
    "MediaType",
    "SearchTermRecord",
    "TrendingEntry",
    "ViewState",
    "poster_url_for",
]
