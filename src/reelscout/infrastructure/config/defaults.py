"""Built-in configuration values (lowest-precedence layer)."""

from __future__ import annotations

from typing import Any

DEFAULT_CONFIG: dict[str, Any] = {
    "app_name": "reelscout",
    "environment": "dev",
    "tmdb": {
        "api_key": None,  # required, supplied via REELSCOUT_TMDB_API_KEY
        "base_url": "https://api.themoviedb.org/3",
    },
    "http": {
        "timeout_seconds": 30.0,
        "user_agent": "ReelScout/0.1.0",
    },
    "logging": {
        "level": "INFO",
        "format": None,  # Derived from environment in schema.py
    },
    "appwrite": {
        "endpoint": "https://cloud.appwrite.io/v1",
        "project_id": None,
        "database_id": None,
        "collection_id": None,
        "api_key": None,
    },
    "search": {
        "debounce_ms": 800,
        "trending_limit": 5,
    },
}
