"""Jinja2 template environment for the catalog page."""

from __future__ import annotations

from pathlib import Path

from fastapi.templating import Jinja2Templates

from reelscout.interfaces.web.presenter import CatalogView

_WEB_DIR = Path(__file__).resolve().parent
TEMPLATE_DIR = _WEB_DIR / "templates"
STATIC_DIR = _WEB_DIR / "static"

templates = Jinja2Templates(directory=str(TEMPLATE_DIR))


def render_results(view: CatalogView) -> str:
    """Render the results section alone (pushed over the live search socket)."""
    return templates.get_template("_results.html").render(view=view)
