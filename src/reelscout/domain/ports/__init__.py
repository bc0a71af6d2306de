from .catalog import CatalogClientPort
from .counter_store import SearchCounterStorePort

__all__ = [
    "CatalogClientPort",
    "SearchCounterStorePort",
]
