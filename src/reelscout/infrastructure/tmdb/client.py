"""Async TMDB API client (httpx, bearer-token auth)."""

from __future__ import annotations

from typing import Any

import httpx
import structlog

from reelscout.domain.entities.media import CatalogPage
from reelscout.domain.exceptions import CatalogTransportError

log = structlog.get_logger(__name__)

DEFAULT_BASE_URL = "https://api.themoviedb.org/3"


class HttpxTmdbClient:
    """Async TMDB client using httpx.

    Implements ``CatalogClientPort`` from domain.ports.catalog.
    """

    def __init__(
        self,
        *,
        api_key: str,
        http_client: httpx.AsyncClient,
        base_url: str = DEFAULT_BASE_URL,
    ) -> None:
        self._http = http_client
        self._base_url = base_url.rstrip("/")
        self._headers = {
            "accept": "application/json",
            "Authorization": f"Bearer {api_key}",
        }

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------

    async def _get(self, path: str, **params: Any) -> CatalogPage:
        """GET a listing endpoint.

        Non-2xx responses return ``CatalogPage(ok=False)``. Transport
        failures and non-JSON bodies raise ``CatalogTransportError``.
        """
        url = f"{self._base_url}{path}"
        try:
            resp = await self._http.get(
                url, params=params or None, headers=self._headers
            )
        except httpx.HTTPError as exc:
            log.warning("tmdb_network_error", path=path, exc_info=True)
            raise CatalogTransportError(f"TMDB request failed: {path}") from exc

        if resp.status_code == 401:
            log.error("tmdb_api_key_invalid", status=401)
        if not resp.is_success:
            log.warning("tmdb_http_error", path=path, status=resp.status_code)
            return CatalogPage(ok=False, status_code=resp.status_code)

        try:
            data = resp.json()
        except ValueError as exc:
            log.warning("tmdb_invalid_json", path=path)
            raise CatalogTransportError(f"TMDB returned invalid JSON: {path}") from exc

        results = data.get("results") if isinstance(data, dict) else None
        return CatalogPage(
            ok=True,
            status_code=resp.status_code,
            results=list(results or []),
        )

    # ------------------------------------------------------------------
    # Public API (CatalogClientPort)
    # ------------------------------------------------------------------

    async def now_playing_movies(self) -> CatalogPage:
        return await self._get("/movie/now_playing")

    async def on_the_air_tv(self) -> CatalogPage:
        return await self._get("/tv/on_the_air")

    async def search_movies(self, query: str) -> CatalogPage:
        return await self._get("/search/movie", query=query)

    async def search_tv(self, query: str) -> CatalogPage:
        return await self._get("/search/tv", query=query)
