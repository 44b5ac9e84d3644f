"""
Индексатор каталога продуктов
"""
import logging
from typing import Sequence
from collections import defaultdict

from ..core.models import ProductRecord, ProductIndex
from .query_processor import QueryProcessor, PrefixGenerator

logger = logging.getLogger(__name__)


class Indexer:
    """
    Индексатор продуктов

    Строит инвертированный индекс: каждый префикс (>= 2 символов) каждого
    слова из "бренд + название" -> позиции продуктов в каталоге.
    Индекс строится целиком, инкрементальных обновлений нет.
    """

    def __init__(self, query_processor: QueryProcessor = None, prefix_gen: PrefixGenerator = None):
        self.query_processor = query_processor or QueryProcessor()
        self.prefix_gen = prefix_gen or PrefixGenerator(self.query_processor.min_token_length)

    def build(self, records: Sequence[ProductRecord]) -> ProductIndex:
        """Полная индексация каталога"""
        records = tuple(records)
        term_index = defaultdict(set)

        for position, record in enumerate(records):
            for word in self.query_processor.tokenize(record.search_text):
                for prefix in self.prefix_gen.generate(word):
                    term_index[prefix].add(position)

        logger.info(f"[Indexer] Indexed {len(records)} products, {len(term_index)} terms")

        return ProductIndex(
            records=records,
            term_index={term: frozenset(positions) for term, positions in term_index.items()},
        )
