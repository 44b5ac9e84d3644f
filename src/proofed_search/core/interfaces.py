"""
Интерфейсы (абстрактные классы) поиска продуктов
"""
from abc import ABC, abstractmethod
from typing import List, Optional

from .models import ProductRecord


class ICatalogSource(ABC):
    """Интерфейс источника каталога"""

    @abstractmethod
    def load(self) -> List[ProductRecord]:
        """
        Загрузить каталог целиком

        Returns:
            Список продуктов в порядке каталога

        Raises:
            CatalogError: источник недоступен или не парсится
        """
        pass


class IProductSearch(ABC):
    """Интерфейс поиска продуктов"""

    @abstractmethod
    def search(self, query: str, limit: Optional[int] = None) -> List[ProductRecord]:
        """
        Полнотекстовый поиск по бренду и названию

        Args:
            query: Поисковый запрос
            limit: Максимум результатов (None - значение из конфига)

        Returns:
            Продукты, отсортированные по релевантности
        """
        pass

    @abstractmethod
    def get_by_barcode(self, barcode: str) -> Optional[ProductRecord]:
        """Получить продукт по точному штрихкоду"""
        pass
