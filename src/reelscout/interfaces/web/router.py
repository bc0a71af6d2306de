"""Catalog page and live search socket."""

from __future__ import annotations

import json
from typing import cast

import structlog
from fastapi import APIRouter, Request, WebSocket, WebSocketDisconnect
from fastapi.responses import HTMLResponse

from reelscout.application.search_session import OnChange, SearchSession
from reelscout.domain.entities.view import ViewState
from reelscout.interfaces.app_state import AppState
from reelscout.interfaces.web.presenter import present
from reelscout.interfaces.web.rendering import render_results, templates

log = structlog.get_logger(__name__)

router = APIRouter(tags=["web"])


def _new_session(state: AppState, on_change: OnChange | None = None) -> SearchSession:
    return SearchSession(
        search_uc=state.catalog_search_uc,
        trending_uc=state.trending_uc,
        on_change=on_change,
        debounce_seconds=state.config.search.debounce_seconds,
    )


@router.get("/", response_class=HTMLResponse)
async def index(request: Request, q: str = "") -> HTMLResponse:
    """Full page: trending list plus listings (or results for ``?q=``)."""
    state = cast(AppState, request.app.state)

    session = _new_session(state)
    await session.start(q)

    return templates.TemplateResponse(
        request,
        "index.html",
        {"view": present(session.state)},
    )


@router.websocket("/ws/search")
async def live_search(websocket: WebSocket) -> None:
    """Debounced search-as-you-type.

    Client → server: ``{"type": "input", "value": "<text>"}``
    Server → client: ``{"type": "results", "html": "<rendered section>"}``
    """
    await websocket.accept()
    state = cast(AppState, websocket.app.state)

    async def push(view_state: ViewState) -> None:
        html = render_results(present(view_state))
        await websocket.send_json({"type": "results", "html": html})

    session = _new_session(state, on_change=push)
    log.debug("live_search_connected")

    try:
        while True:
            raw = await websocket.receive_text()
            try:
                message = json.loads(raw)
            except ValueError:
                log.debug("live_search_invalid_message", raw=raw[:200])
                continue

            if isinstance(message, dict) and message.get("type") == "input":
                session.input(str(message.get("value") or ""))
            else:
                log.debug("live_search_unknown_message", message=message)
    except WebSocketDisconnect:
        log.debug("live_search_disconnected")
    finally:
        await session.close()
