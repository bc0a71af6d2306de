"""Shared test fixtures for ReelScout test suite."""

from __future__ import annotations

from typing import Any
from unittest.mock import AsyncMock

import pytest

from reelscout.domain.entities import CatalogPage, MediaItem, SearchTermRecord
from reelscout.infrastructure.config import AppConfig

# ---------------------------------------------------------------------------
# Raw TMDB payloads
# ---------------------------------------------------------------------------

MOVIE_RESULTS: list[dict[str, Any]] = [
    {
        "id": 603,
        "title": "The Matrix",
        "poster_path": "/f89U3ADr1oiB1s9GkdPOEpXUk5H.jpg",
        "release_date": "1999-03-31",
        "vote_average": 8.2,
        "original_language": "en",
        "popularity": 81.3,
    },
    {
        "id": 604,
        "title": "The Matrix Reloaded",
        "poster_path": "/9TGHDvWrqKBzwDxDodHYXEmOE6J.jpg",
        "release_date": "2003-05-15",
        "vote_average": 7.0,
        "original_language": "en",
        "popularity": 40.1,
    },
]

TV_RESULTS: list[dict[str, Any]] = [
    {
        "id": 1396,
        "name": "Breaking Bad",
        "poster_path": "/ggFHVNu6YYI5L9pCfOacjizRGt.jpg",
        "first_air_date": "2008-01-20",
        "vote_average": 8.9,
        "original_language": "en",
        "popularity": 300.5,
    },
    {
        "id": 94997,
        "name": "La casa de papel",
        "poster_path": None,
        "first_air_date": "2017-05-02",
        "vote_average": 8.3,
        "original_language": "es",
        "popularity": 55.0,
    },
]


# ---------------------------------------------------------------------------
# Domain entity fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def matrix() -> MediaItem:
    return MediaItem.from_movie(MOVIE_RESULTS[0])


@pytest.fixture()
def breaking_bad() -> MediaItem:
    return MediaItem.from_tv(TV_RESULTS[0])


@pytest.fixture()
def search_record() -> SearchTermRecord:
    return SearchTermRecord(
        id="doc-1",
        search_term="matrix",
        count=3,
        movie_id=603,
        poster_url="https://image.tmdb.org/t/p/w500/f89U3ADr1oiB1s9GkdPOEpXUk5H.jpg",
        title="The Matrix",
    )


# ---------------------------------------------------------------------------
# Mock port fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def mock_catalog() -> AsyncMock:
    """Mock CatalogClientPort returning two movies and two series everywhere."""
    catalog = AsyncMock()
    catalog.now_playing_movies = AsyncMock(
        return_value=CatalogPage(ok=True, results=list(MOVIE_RESULTS))
    )
    catalog.on_the_air_tv = AsyncMock(
        return_value=CatalogPage(ok=True, results=list(TV_RESULTS))
    )
    catalog.search_movies = AsyncMock(
        return_value=CatalogPage(ok=True, results=list(MOVIE_RESULTS))
    )
    catalog.search_tv = AsyncMock(
        return_value=CatalogPage(ok=True, results=list(TV_RESULTS))
    )
    return catalog


@pytest.fixture()
def mock_counter_store(search_record: SearchTermRecord) -> AsyncMock:
    """Mock SearchCounterStorePort."""
    store = AsyncMock()
    store.record_search = AsyncMock(return_value=search_record)
    store.top_searches = AsyncMock(return_value=[search_record])
    return store


# ---------------------------------------------------------------------------
# Config fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def app_config() -> AppConfig:
    """Valid config for app tests (in-memory counter store, fast debounce)."""
    return AppConfig.model_validate(
        {
            "environment": "test",
            "tmdb": {"api_key": "test-token"},
            "search": {"debounce_ms": 10, "trending_limit": 5},
        }
    )
