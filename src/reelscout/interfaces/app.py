"""FastAPI application factory (create_app)."""

from __future__ import annotations

import time
from collections.abc import Awaitable, Callable

import structlog
from fastapi import FastAPI, Request
from fastapi.staticfiles import StaticFiles
from starlette.responses import Response

from reelscout.domain.exceptions import ConfigurationError
from reelscout.infrastructure.config import AppConfig
from reelscout.interfaces.app_state import AppState
from reelscout.interfaces.composition import lifespan
from reelscout.interfaces.web.rendering import STATIC_DIR

log = structlog.get_logger(__name__)


def _require_tmdb_api_key(config: AppConfig) -> None:
    if not config.tmdb_api_key:
        raise ConfigurationError(
            "TMDB API key missing: set REELSCOUT_TMDB_API_KEY "
            "(or tmdb.api_key in the config file)"
        )


def create_app(config: AppConfig) -> FastAPI:
    """Create the FastAPI app. Configuration only, no resource initialization.

    Resources (HTTP client, catalog client, counter store) are created in
    lifespan(). Raises ConfigurationError when the TMDB key is missing so
    the process never serves unauthenticated catalog requests.
    """
    _require_tmdb_api_key(config)

    app = FastAPI(
        title="ReelScout",
        description="Browse and search current movies and TV series",
        version="0.1.0",
        lifespan=lifespan,
    )

    app.state = AppState()
    app.state.config = config

    from reelscout.interfaces.api.catalog.router import router as catalog_router
    from reelscout.interfaces.web.router import router as web_router

    app.include_router(catalog_router, prefix="/api/v1")
    app.include_router(web_router)
    app.mount("/static", StaticFiles(directory=STATIC_DIR), name="static")

    @app.get("/api/v1/healthz")
    async def healthz() -> dict[str, str]:
        """Liveness probe: 200 as long as the process is running."""
        return {"status": "ok"}

    app.middleware("http")(_log_request)

    return app


async def _log_request(
    request: Request, call_next: Callable[[Request], Awaitable[Response]]
) -> Response:
    """One ``http_request`` line per request; 500 if the handler raised."""
    started = time.perf_counter()
    status_code = 500
    try:
        response = await call_next(request)
        status_code = response.status_code
        return response
    finally:
        log.info(
            "http_request",
            method=request.method,
            path=request.url.path,
            status_code=status_code,
            duration_ms=round((time.perf_counter() - started) * 1000.0, 2),
        )
