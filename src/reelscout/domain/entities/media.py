"""Domain entities for catalog entries.

Pure value objects without framework dependencies or I/O.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Literal, Mapping

MediaType = Literal["movie", "tv"]

POSTER_BASE_URL = "https://image.tmdb.org/t/p/w500"
NO_POSTER_URL = "/static/no-movie.svg"
_DETAIL_BASE_URL = "https://www.themoviedb.org"


def poster_url_for(poster_path: str | None) -> str:
    """Full w500 image URL for a TMDB poster path ("" when missing)."""
    if not poster_path:
        return ""
    return f"{POSTER_BASE_URL}{poster_path}"


def _optional_str(value: Any) -> str | None:
    if value is None or value == "":
        return None
    return str(value)


def _optional_float(value: Any) -> float | None:
    if value is None or value == "":
        return None
    return float(value)


@dataclass(frozen=True)
class MediaItem:
    """A catalog entry tagged as movie or TV series.

    Movies and series arrive from TMDB with different field names
    (``title``/``release_date`` vs. ``name``/``first_air_date``).
    The ``from_movie``/``from_tv`` factories fold both into one shape
    with ``media_type`` as the discriminator.
    """

    id: int
    media_type: MediaType
    title: str
    poster_path: str | None = None
    release_date: str | None = None  # release_date (movie) / first_air_date (tv)
    original_language: str = ""
    vote_average: float | None = None
    popularity: float = 0.0

    @classmethod
    def from_movie(cls, raw: Mapping[str, Any]) -> MediaItem:
        return cls(
            id=int(raw["id"]),
            media_type="movie",
            title=raw.get("title") or raw.get("original_title") or "",
            poster_path=_optional_str(raw.get("poster_path")),
            release_date=_optional_str(raw.get("release_date")),
            original_language=raw.get("original_language") or "",
            vote_average=_optional_float(raw.get("vote_average")),
            popularity=float(raw.get("popularity") or 0.0),
        )

    @classmethod
    def from_tv(cls, raw: Mapping[str, Any]) -> MediaItem:
        return cls(
            id=int(raw["id"]),
            media_type="tv",
            title=raw.get("name") or raw.get("original_name") or "",
            poster_path=_optional_str(raw.get("poster_path")),
            release_date=_optional_str(raw.get("first_air_date")),
            original_language=raw.get("original_language") or "",
            vote_average=_optional_float(raw.get("vote_average")),
            popularity=float(raw.get("popularity") or 0.0),
        )

    @property
    def has_poster(self) -> bool:
        return bool(self.poster_path)

    @property
    def year(self) -> str:
        if not self.release_date:
            return "N/A"
        return self.release_date.split("-")[0]

    @property
    def rating_label(self) -> str:
        if not self.vote_average:
            return "N/A"
        return f"{self.vote_average:.1f}"

    @property
    def poster_url(self) -> str:
        return poster_url_for(self.poster_path) or NO_POSTER_URL

    @property
    def detail_url(self) -> str:
        """Public TMDB page for this item."""
        return f"{_DETAIL_BASE_URL}/{self.media_type}/{self.id}"

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "media_type": self.media_type,
            "title": self.title,
            "poster_path": self.poster_path,
            "release_date": self.release_date,
            "original_language": self.original_language,
            "vote_average": self.vote_average,
            "popularity": self.popularity,
            "detail_url": self.detail_url,
        }


@dataclass(frozen=True)
class CatalogPage:
    """One raw catalog listing response (a single media type)."""

    ok: bool
    status_code: int = 200
    results: list[dict[str, Any]] = field(default_factory=list)


class CatalogError(Enum):
    """Why a catalog fetch produced no displayable list."""

    FETCH_FAILURE = "fetch_failure"
    EMPTY_RESULT = "empty_result"
    TRANSPORT_ERROR = "transport_error"

    @property
    def message(self) -> str:
        return _ERROR_MESSAGES[self]


_ERROR_MESSAGES: dict[CatalogError, str] = {
    CatalogError.FETCH_FAILURE: "Failed to fetch movies and series",
    CatalogError.EMPTY_RESULT: "No movies or series found!",
    CatalogError.TRANSPORT_ERROR: (
        "Error fetching movies and series. Please try again later."
    ),
}


@dataclass(frozen=True)
class CatalogResult:
    """Outcome of one combined movie + series fetch."""

    items: list[MediaItem] = field(default_factory=list)
    error: CatalogError | None = None
