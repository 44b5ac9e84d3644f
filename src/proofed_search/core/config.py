"""
Конфигурация сервиса
"""
from dataclasses import dataclass, field
from typing import Optional
import os


@dataclass
class CatalogConfig:
    """Настройки каталога продуктов"""
    # Локальный файл (поставляется вместе с сервисом)
    path: str = "data/products.json"

    # URL каталога, приоритетнее файла
    url: Optional[str] = None

    download_timeout: int = 60  # секунды
    max_size: int = 50 * 1024 * 1024  # 50 MB


@dataclass
class SearchConfig:
    """Настройки поиска"""
    # Минимальная длина запроса (после trim)
    min_query_length: int = 2

    # Минимальная длина слова/термина
    min_token_length: int = 2

    # Результаты
    default_limit: int = 10
    max_limit: int = 50

    # Ранжирование
    substring_weight: int = 10
    word_start_weight: int = 5
    image_weight: int = 2
    brand_weight: int = 1


@dataclass
class ApiConfig:
    """Настройки API"""
    host: str = "0.0.0.0"
    port: int = 8000

    # CORS
    cors_origins: list = field(default_factory=lambda: ["*"])


@dataclass
class Config:
    """Главная конфигурация"""
    env: str = "development"
    debug: bool = True
    log_level: str = "INFO"

    catalog: CatalogConfig = field(default_factory=CatalogConfig)
    search: SearchConfig = field(default_factory=SearchConfig)
    api: ApiConfig = field(default_factory=ApiConfig)

    @classmethod
    def from_env(cls) -> "Config":
        """Загрузить конфигурацию из переменных окружения"""
        return cls(
            env=os.getenv("ENV", "development"),
            debug=os.getenv("DEBUG", "true").lower() == "true",
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),

            catalog=CatalogConfig(
                path=os.getenv("CATALOG_PATH", "data/products.json"),
                url=os.getenv("CATALOG_URL") or None,
                download_timeout=int(os.getenv("CATALOG_DOWNLOAD_TIMEOUT", "60")),
            ),

            search=SearchConfig(
                default_limit=int(os.getenv("SEARCH_DEFAULT_LIMIT", "10")),
                max_limit=int(os.getenv("SEARCH_MAX_LIMIT", "50")),
            ),

            api=ApiConfig(
                host=os.getenv("API_HOST", "0.0.0.0"),
                port=int(os.getenv("API_PORT", "8000")),
                cors_origins=[
                    origin.strip()
                    for origin in os.getenv("CORS_ORIGINS", "*").split(",")
                    if origin.strip()
                ],
            ),
        )


# Глобальный экземпляр конфигурации
config = Config.from_env()
