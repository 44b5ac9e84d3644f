"""
Feed модуль - загрузка и парсинг каталога продуктов
"""
from .errors import (
    CatalogError,
    CatalogNotFoundError,
    CatalogParseError,
    CatalogDownloadError,
    CatalogTooLargeError,
)
from .parser import CatalogItem, CatalogParser
from .loader import (
    StaticCatalogSource,
    PayloadCatalogSource,
    FileCatalogSource,
    download_catalog,
)

__all__ = [
    "CatalogError",
    "CatalogNotFoundError",
    "CatalogParseError",
    "CatalogDownloadError",
    "CatalogTooLargeError",
    "CatalogItem",
    "CatalogParser",
    "StaticCatalogSource",
    "PayloadCatalogSource",
    "FileCatalogSource",
    "download_catalog",
]
