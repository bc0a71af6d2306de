"""Appwrite-backed search counter store (REST via httpx)."""

from __future__ import annotations

import json
from typing import Any

import httpx
import structlog

from reelscout.domain.entities.media import MediaItem, poster_url_for
from reelscout.domain.entities.trending import SearchTermRecord
from reelscout.domain.exceptions import CounterStoreError

log = structlog.get_logger(__name__)

DEFAULT_ENDPOINT = "https://cloud.appwrite.io/v1"


def _query(method: str, attribute: str | None = None, values: list[Any] | None = None) -> str:
    """Serialize one Appwrite query (JSON query syntax, Appwrite >= 1.5)."""
    payload: dict[str, Any] = {"method": method}
    if attribute is not None:
        payload["attribute"] = attribute
    if values is not None:
        payload["values"] = values
    return json.dumps(payload, separators=(",", ":"))


def _to_record(doc: dict[str, Any]) -> SearchTermRecord:
    movie_id = doc.get("movie_id")
    return SearchTermRecord(
        id=str(doc["$id"]),
        search_term=doc.get("searchTerm", ""),
        count=int(doc.get("count") or 0),
        movie_id=int(movie_id) if movie_id is not None else None,
        poster_url=doc.get("poster_url") or "",
        title=doc.get("title") or "",
    )


class AppwriteSearchCounterStore:
    """Search counters kept as documents in an Appwrite collection.

    Implements ``SearchCounterStorePort`` from domain.ports.counter_store.

    Document shape::

        {"searchTerm": str, "count": int, "movie_id": int,
         "poster_url": str, "title": str}
    """

    def __init__(
        self,
        *,
        http_client: httpx.AsyncClient,
        project_id: str,
        database_id: str,
        collection_id: str,
        api_key: str | None = None,
        endpoint: str = DEFAULT_ENDPOINT,
    ) -> None:
        self._http = http_client
        self._documents_url = (
            f"{endpoint.rstrip('/')}/databases/{database_id}"
            f"/collections/{collection_id}/documents"
        )
        self._headers = {"X-Appwrite-Project": project_id}
        if api_key:
            self._headers["X-Appwrite-Key"] = api_key

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------

    async def _request(self, method: str, url: str, **kwargs: Any) -> dict[str, Any]:
        try:
            resp = await self._http.request(method, url, headers=self._headers, **kwargs)
            resp.raise_for_status()
            return resp.json()
        except httpx.HTTPStatusError as exc:
            raise CounterStoreError(
                f"Appwrite {method} failed with {exc.response.status_code}"
            ) from exc
        except httpx.HTTPError as exc:
            raise CounterStoreError(f"Appwrite {method} request failed") from exc
        except ValueError as exc:
            raise CounterStoreError(f"Appwrite {method} returned invalid JSON") from exc

    async def _list(self, queries: list[str]) -> list[dict[str, Any]]:
        data = await self._request(
            "GET", self._documents_url, params={"queries[]": queries}
        )
        return list(data.get("documents") or [])

    # ------------------------------------------------------------------
    # Public API (SearchCounterStorePort)
    # ------------------------------------------------------------------

    async def record_search(self, search_term: str, item: MediaItem) -> SearchTermRecord:
        documents = await self._list([_query("equal", "searchTerm", [search_term])])

        if documents:
            doc = documents[0]
            new_count = int(doc.get("count") or 0) + 1
            updated = await self._request(
                "PATCH",
                f"{self._documents_url}/{doc['$id']}",
                json={"data": {"count": new_count}},
            )
            log.debug("search_count_incremented", search_term=search_term, count=new_count)
            return _to_record(updated)

        created = await self._request(
            "POST",
            self._documents_url,
            json={
                "documentId": "unique()",
                "data": {
                    "searchTerm": search_term,
                    "count": 1,
                    "movie_id": item.id,
                    "poster_url": poster_url_for(item.poster_path),
                    "title": item.title,
                },
            },
        )
        log.debug("search_count_created", search_term=search_term, movie_id=item.id)
        return _to_record(created)

    async def top_searches(self, limit: int) -> list[SearchTermRecord]:
        documents = await self._list(
            [_query("limit", values=[limit]), _query("orderDesc", "count")]
        )
        return [_to_record(doc) for doc in documents]
