"""Catalog JSON API endpoints (search/listings, trending)."""

from __future__ import annotations

from typing import cast

import structlog
from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from reelscout.domain.entities.media import CatalogError
from reelscout.interfaces.app_state import AppState

log = structlog.get_logger(__name__)

router = APIRouter(tags=["catalog"])

_STATUS_BY_ERROR: dict[CatalogError, int] = {
    CatalogError.FETCH_FAILURE: 502,
    CatalogError.TRANSPORT_ERROR: 502,
    CatalogError.EMPTY_RESULT: 200,
}


@router.get("/catalog")
async def catalog(request: Request, q: str = "") -> JSONResponse:
    """Current listings (empty ``q``) or title search across movies and series."""
    state = cast(AppState, request.app.state)
    result = await state.catalog_search_uc.fetch_catalog(q)

    if result.error is not None:
        return JSONResponse(
            content={
                "query": q,
                "results": [],
                "error": result.error.value,
                "message": result.error.message,
            },
            status_code=_STATUS_BY_ERROR[result.error],
        )

    return JSONResponse(
        content={
            "query": q,
            "results": [item.to_dict() for item in result.items],
            "error": None,
            "message": None,
        }
    )


@router.get("/trending")
async def trending(request: Request) -> JSONResponse:
    """Most-searched terms, highest count first."""
    state = cast(AppState, request.app.state)
    entries = await state.trending_uc.load_trending()
    return JSONResponse(content={"results": [e.to_dict() for e in entries]})
