"""
Proofed product search - in-memory поиск продуктов по каталогу
"""
__version__ = "1.0.0"

from .core.models import ProductRecord, ProductIndex
from .search.engine import ProductSearchEngine
from .search.indexer import Indexer

__all__ = [
    "__version__",
    "ProductRecord",
    "ProductIndex",
    "ProductSearchEngine",
    "Indexer",
]
