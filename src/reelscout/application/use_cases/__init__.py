from .catalog_search import CatalogSearchUseCase
from .trending import TrendingUseCase

__all__ = ["CatalogSearchUseCase", "TrendingUseCase"]
