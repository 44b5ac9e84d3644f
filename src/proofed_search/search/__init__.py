"""
Search модуль - индекс и поисковый движок
"""
from .query_processor import QueryProcessor, PrefixGenerator
from .indexer import Indexer
from .engine import ProductSearchEngine

__all__ = [
    "QueryProcessor",
    "PrefixGenerator",
    "Indexer",
    "ProductSearchEngine",
]
