"""Typed ``app.state`` for ReelScout."""

from __future__ import annotations

from typing import TYPE_CHECKING

import httpx
from starlette.datastructures import State

from reelscout.infrastructure.config import AppConfig

if TYPE_CHECKING:
    from reelscout.application.use_cases import CatalogSearchUseCase, TrendingUseCase
    from reelscout.domain.ports import CatalogClientPort, SearchCounterStorePort


class AppState(State):
    """Everything the routers read from ``request.app.state``.

    ``config`` is set by ``create_app``; the rest exists only between
    startup and shutdown of ``composition.lifespan``.
    """

    config: AppConfig

    # one pooled client for TMDB and Appwrite
    http_client: httpx.AsyncClient

    catalog_client: CatalogClientPort
    counter_store: SearchCounterStorePort

    catalog_search_uc: CatalogSearchUseCase
    trending_uc: TrendingUseCase
