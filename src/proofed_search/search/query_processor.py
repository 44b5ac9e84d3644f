"""
Обработчик запросов
Нормализация и токенизация без стемминга
"""
from typing import List


class QueryProcessor:
    """
    Обработчик текста запросов и продуктов

    Выполняет:
    1. Нормализацию (lowercase)
    2. Токенизацию по пробельным символам
    3. Отсев коротких токенов
    """

    def __init__(self, min_token_length: int = 2):
        self.min_token_length = min_token_length

    def normalize(self, text: str) -> str:
        """Нормализация: только lowercase, спецсимволы остаются частью слова"""
        return text.lower()

    def tokenize(self, text: str) -> List[str]:
        """Разбиение на токены с отсевом коротких"""
        return [t for t in text.split() if len(t) >= self.min_token_length]

    def process(self, query: str) -> List[str]:
        """Полная обработка запроса -> список терминов (с сохранением порядка)"""
        return self.tokenize(self.normalize(query))


class PrefixGenerator:
    """Генератор префиксов слова для префиксного поиска"""

    def __init__(self, min_length: int = 2):
        self.min_length = min_length

    def generate(self, word: str) -> List[str]:
        """Все префиксы длиной от min_length до len(word) включительно"""
        return [word[:k] for k in range(self.min_length, len(word) + 1)]
