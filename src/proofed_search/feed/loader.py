"""
Источники каталога продуктов
"""
import asyncio
import logging
from pathlib import Path
from typing import List, Sequence, Union

import aiohttp

from ..core.interfaces import ICatalogSource
from ..core.models import ProductRecord
from .errors import CatalogDownloadError, CatalogNotFoundError, CatalogTooLargeError
from .parser import CatalogParser

logger = logging.getLogger(__name__)


class StaticCatalogSource(ICatalogSource):
    """Каталог из готового списка продуктов"""

    def __init__(self, records: Sequence[ProductRecord]):
        self.records = list(records)

    def load(self) -> List[ProductRecord]:
        return list(self.records)


class PayloadCatalogSource(ICatalogSource):
    """Каталог из JSON в памяти (например, скачанного при старте)"""

    def __init__(self, payload: Union[bytes, str]):
        self.payload = payload

    def load(self) -> List[ProductRecord]:
        records = CatalogParser.parse(self.payload)
        logger.info(f"[Catalog] Loaded {len(records)} products from payload")
        return records


class FileCatalogSource(ICatalogSource):
    """Каталог из локального JSON файла"""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def load(self) -> List[ProductRecord]:
        try:
            content = self.path.read_bytes()
        except OSError as e:
            raise CatalogNotFoundError(f"Cannot read catalog {self.path}: {e}") from e

        records = CatalogParser.parse(content)
        logger.info(f"[Catalog] Loaded {len(records)} products from {self.path}")
        return records


async def download_catalog(
    url: str,
    timeout: int = 60,
    max_size: int = 50 * 1024 * 1024,
) -> bytes:
    """
    Загрузка каталога по URL

    Raises:
        CatalogDownloadError: сеть, таймаут или статус != 200
        CatalogTooLargeError: превышен max_size
    """
    client_timeout = aiohttp.ClientTimeout(total=timeout)

    try:
        async with aiohttp.ClientSession(timeout=client_timeout) as session:
            async with session.get(url) as response:
                if response.status != 200:
                    raise CatalogDownloadError(
                        f"Failed to download catalog: HTTP {response.status}"
                    )

                # Проверяем размер
                content_length = response.headers.get("Content-Length")
                if content_length and int(content_length) > max_size:
                    raise CatalogTooLargeError(
                        f"Catalog too large: {content_length} bytes"
                    )

                chunks = []
                total_size = 0

                async for chunk in response.content.iter_chunked(1024 * 1024):
                    chunks.append(chunk)
                    total_size += len(chunk)

                    if total_size > max_size:
                        raise CatalogTooLargeError(
                            f"Catalog too large: {total_size} bytes"
                        )

                logger.info(f"[Catalog] Downloaded {total_size} bytes from {url}")
                return b"".join(chunks)

    except (aiohttp.ClientError, asyncio.TimeoutError) as e:
        raise CatalogDownloadError(
            f"Failed to download catalog: {e.__class__.__name__}: {e}"
        ) from e
