"""ReelScout exceptions."""

from __future__ import annotations


class ReelScoutError(Exception):
    """Base class for all ReelScout errors."""


class ConfigurationError(ReelScoutError):
    """Raised when required configuration is missing or invalid."""


class CatalogTransportError(ReelScoutError):
    """Raised when the catalog API cannot be reached or returns unparsable data."""


class CounterStoreError(ReelScoutError):
    """Raised when the search counter store rejects or fails a request."""
