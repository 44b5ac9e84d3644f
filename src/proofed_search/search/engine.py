"""
Поисковый движок по каталогу продуктов
In-memory индекс, AND-семантика по терминам, префиксный fallback
"""
import logging
import threading
from typing import List, Optional, Sequence, FrozenSet

from ..core.config import SearchConfig
from ..core.interfaces import ICatalogSource, IProductSearch
from ..core.models import ProductRecord, ProductIndex, ScoredProduct
from ..feed.errors import CatalogError
from ..feed.loader import StaticCatalogSource
from .indexer import Indexer
from .query_processor import QueryProcessor

logger = logging.getLogger(__name__)


class ProductSearchEngine(IProductSearch):
    """
    Поисковый движок

    Индекс строится лениво при первом обращении (или через warm_up),
    ровно один раз: повторная сборка защищена блокировкой.
    После сборки индекс неизменяем, чтение идёт без блокировок.
    """

    def __init__(
        self,
        source: ICatalogSource,
        config: Optional[SearchConfig] = None,
        indexer: Optional[Indexer] = None,
    ):
        self.source = source
        self.config = config or SearchConfig()
        self.query_processor = QueryProcessor(min_token_length=self.config.min_token_length)
        self.indexer = indexer or Indexer(self.query_processor)

        self._index: Optional[ProductIndex] = None
        self._lock = threading.Lock()

    @classmethod
    def from_records(
        cls,
        records: Sequence[ProductRecord],
        config: Optional[SearchConfig] = None,
    ) -> "ProductSearchEngine":
        """Движок поверх готового списка продуктов"""
        return cls(StaticCatalogSource(records), config=config)

    @property
    def index(self) -> ProductIndex:
        index = self._index
        if index is None:
            with self._lock:
                if self._index is None:
                    self._index = self._build_index()
                index = self._index
        return index

    def warm_up(self) -> int:
        """Принудительно построить индекс, вернуть количество продуктов"""
        return len(self.index)

    def search(self, query: str, limit: Optional[int] = None) -> List[ProductRecord]:
        """Выполнить поиск продуктов"""
        if limit is None:
            limit = self.config.default_limit

        if not query or len(query.strip()) < self.config.min_query_length:
            return []
        if limit < 1:
            return []

        index = self.index
        if index.is_empty:
            return []

        terms = self.query_processor.process(query)
        if not terms:
            return []

        positions = self._match_terms(index, terms)
        if not positions:
            logger.debug(f"[SEARCH] Query: '{query}' -> tokens: {terms} -> no matches")
            return []

        # Обход в порядке каталога + стабильная сортировка:
        # при равном скоре выше продукт с меньшей позицией
        scored = [
            ScoredProduct(position, index.records[position], self.score(index.records[position], terms))
            for position in sorted(positions)
        ]
        scored.sort(key=lambda item: item.score, reverse=True)

        logger.debug(f"[SEARCH] Query: '{query}' -> tokens: {terms} -> {len(scored)} matches")

        return [item.record for item in scored[:limit]]

    def get_by_barcode(self, barcode: str) -> Optional[ProductRecord]:
        """Получить продукт по штрихкоду (точное, регистрозависимое совпадение)"""
        if not barcode:
            return None

        barcode = barcode.strip()
        if not barcode:
            return None

        for record in self.index.records:
            if record.barcode == barcode:
                return record

        return None

    def score(self, record: ProductRecord, terms: List[str]) -> int:
        """Скор релевантности продукта"""
        text = record.search_text
        score = 0

        for term in terms:
            if term in text:
                score += self.config.substring_weight
                # Совпадение с начала слова
                if text.startswith(term) or f" {term}" in text:
                    score += self.config.word_start_weight

        # Продукты с картинкой
        if record.image_url:
            score += self.config.image_weight

        # Продукты с брендом
        if record.brand:
            score += self.config.brand_weight

        return score

    # ==================== Приватные методы ====================

    def _build_index(self) -> ProductIndex:
        try:
            records = self.source.load()
        except CatalogError as e:
            logger.error(f"[SEARCH] Failed to load catalog, serving empty index: {e}")
            records = []

        return self.indexer.build(records)

    def _match_terms(self, index: ProductIndex, terms: List[str]) -> FrozenSet[int]:
        """Пересечение кандидатов по всем терминам"""
        matching: Optional[FrozenSet[int]] = None

        for term in terms:
            candidates = index.lookup(term)
            if not candidates:
                # Нет точного ключа - пробуем префиксное совпадение
                candidates = index.lookup_prefix(term)
                if not candidates:
                    return frozenset()

            matching = candidates if matching is None else matching & candidates
            if not matching:
                return frozenset()

        return matching or frozenset()
