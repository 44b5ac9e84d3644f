"""
Модели данных поиска продуктов
"""
from dataclasses import dataclass, field
from typing import Dict, FrozenSet, Tuple


@dataclass(frozen=True)
class ProductRecord:
    """Продукт из каталога (неизменяемый)"""
    barcode: str
    brand: str = ""
    product_name: str = ""
    quantity: str = ""
    image_url: str = ""

    @property
    def search_text(self) -> str:
        """Текст для индексации и ранжирования: бренд + название"""
        return f"{self.brand} {self.product_name}".lower()

    def to_dict(self) -> Dict[str, str]:
        return {
            "barcode": self.barcode,
            "brand": self.brand,
            "product_name": self.product_name,
            "quantity": self.quantity,
            "image_url": self.image_url,
        }


@dataclass(frozen=True)
class ProductIndex:
    """
    Инвертированный индекс каталога

    records    - продукты в порядке каталога, позиция = внутренний ID
    term_index - префикс слова (>= 2 символов) -> позиции продуктов
    """
    records: Tuple[ProductRecord, ...] = ()
    term_index: Dict[str, FrozenSet[int]] = field(default_factory=dict)

    def __len__(self) -> int:
        return len(self.records)

    @property
    def is_empty(self) -> bool:
        return not self.records

    def lookup(self, term: str) -> FrozenSet[int]:
        """Точное совпадение по ключу индекса"""
        return self.term_index.get(term, frozenset())

    def lookup_prefix(self, term: str) -> FrozenSet[int]:
        """Объединение позиций всех ключей, начинающихся с term"""
        matches = set()
        for key, positions in self.term_index.items():
            if key.startswith(term):
                matches.update(positions)
        return frozenset(matches)


@dataclass
class ScoredProduct:
    """Кандидат в выдаче со скором"""
    position: int
    record: ProductRecord
    score: int = 0

