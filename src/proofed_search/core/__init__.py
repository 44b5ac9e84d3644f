"""
Core модуль - модели, интерфейсы, конфигурация
"""
from .models import (
    ProductRecord,
    ProductIndex,
    ScoredProduct,
)

from .interfaces import (
    ICatalogSource,
    IProductSearch,
)

from .config import Config, CatalogConfig, SearchConfig, ApiConfig, config

__all__ = [
    # Models
    "ProductRecord",
    "ProductIndex",
    "ScoredProduct",

    # Interfaces
    "ICatalogSource",
    "IProductSearch",

    # Config
    "Config",
    "CatalogConfig",
    "SearchConfig",
    "ApiConfig",
    "config",
]
