"""Composition root: dependency injection via FastAPI lifespan."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator, cast

import httpx
import structlog
from fastapi import FastAPI

from reelscout.application.use_cases import CatalogSearchUseCase, TrendingUseCase
from reelscout.domain.ports import SearchCounterStorePort
from reelscout.infrastructure.appwrite.counter_store import AppwriteSearchCounterStore
from reelscout.infrastructure.appwrite.memory_store import InMemorySearchCounterStore
from reelscout.infrastructure.config.schema import AppConfig
from reelscout.infrastructure.tmdb.client import HttpxTmdbClient
from reelscout.interfaces.app_state import AppState

log = structlog.get_logger(__name__)


def _create_counter_store(
    config: AppConfig, http_client: httpx.AsyncClient
) -> SearchCounterStorePort:
    """Appwrite when configured, otherwise a process-local fallback."""
    appwrite = config.appwrite
    if appwrite.enabled:
        log.info(
            "counter_store_initialized",
            backend="appwrite",
            endpoint=appwrite.endpoint,
            collection_id=appwrite.collection_id,
        )
        return AppwriteSearchCounterStore(
            http_client=http_client,
            endpoint=appwrite.endpoint,
            project_id=cast(str, appwrite.project_id),
            database_id=cast(str, appwrite.database_id),
            collection_id=cast(str, appwrite.collection_id),
            api_key=appwrite.api_key,
        )

    log.warning(
        "counter_store_fallback",
        backend="memory",
        reason="appwrite project/database/collection not configured",
    )
    return InMemorySearchCounterStore()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Build the object graph on startup and release it on shutdown.

    The single ``httpx.AsyncClient`` is created first because both the TMDB
    client and the Appwrite store send through it. On shutdown, pending
    search-counter writes are awaited before that client closes.
    """
    state = cast(AppState, app.state)
    config = state.config

    # 1) HTTP client
    state.http_client = httpx.AsyncClient(
        timeout=httpx.Timeout(config.http_timeout_seconds),
        headers={"User-Agent": config.http_user_agent},
    )
    log.info("http_client_initialized", timeout=config.http_timeout_seconds)

    # 2) TMDB client (token presence is checked by create_app)
    state.catalog_client = HttpxTmdbClient(
        api_key=cast(str, config.tmdb_api_key),
        http_client=state.http_client,
        base_url=config.tmdb_base_url,
    )
    log.info("tmdb_client_initialized", base_url=config.tmdb_base_url)

    # 3) Counter store
    state.counter_store = _create_counter_store(config, state.http_client)

    # 4) Use cases
    state.catalog_search_uc = CatalogSearchUseCase(
        catalog=state.catalog_client,
        counter_store=state.counter_store,
    )
    state.trending_uc = TrendingUseCase(
        counter_store=state.counter_store,
        limit=config.search.trending_limit,
    )

    log.info("app_startup_complete")

    try:
        yield
    finally:
        await state.catalog_search_uc.drain()
        log.info("search_counters_drained")

        await state.http_client.aclose()
        log.info("http_client_closed")

        log.info("app_shutdown_complete")
