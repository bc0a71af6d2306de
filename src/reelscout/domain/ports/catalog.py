"""Port for catalog API operations."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from reelscout.domain.entities.media import CatalogPage


@runtime_checkable
class CatalogClientPort(Protocol):
    """Async interface for movie/TV listings and title search.

    Non-2xx responses come back as ``CatalogPage(ok=False)``.
    Network and parse failures raise ``CatalogTransportError``.
    """

    async def now_playing_movies(self) -> CatalogPage:
        """Movies currently in theaters."""
        ...

    async def on_the_air_tv(self) -> CatalogPage:
        """Series with an episode airing soon."""
        ...

    async def search_movies(self, query: str) -> CatalogPage:
        """Search movies by title."""
        ...

    async def search_tv(self, query: str) -> CatalogPage:
        """Search series by name."""
        ...
