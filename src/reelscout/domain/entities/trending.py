"""Domain entities for search-term popularity."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SearchTermRecord:
    """A counter record as kept by the external counter store."""

    id: str  # opaque document id
    search_term: str
    count: int
    movie_id: int | None = None
    poster_url: str = ""
    title: str = ""


@dataclass(frozen=True)
class TrendingEntry:
    """One ranked row of the trending list."""

    rank: int  # 1-based
    id: str
    title: str
    poster_url: str

    @classmethod
    def from_record(cls, rank: int, record: SearchTermRecord) -> TrendingEntry:
        return cls(
            rank=rank,
            id=record.id,
            title=record.title or record.search_term,
            poster_url=record.poster_url,
        )

    def to_dict(self) -> dict[str, object]:
        return {
            "rank": self.rank,
            "id": self.id,
            "title": self.title,
            "poster_url": self.poster_url,
        }
