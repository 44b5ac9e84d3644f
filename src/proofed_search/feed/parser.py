"""
Парсер каталога продуктов (JSON)
Поддерживает snake_case и camelCase имена полей
"""
import json
import logging
from typing import Any, Dict, List, Tuple, Union

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationError, field_validator

from ..core.models import ProductRecord
from .errors import CatalogParseError

logger = logging.getLogger(__name__)


class CatalogItem(BaseModel):
    """Сырая запись каталога"""
    model_config = ConfigDict(extra="ignore")

    barcode: str = ""
    brand: str = ""
    product_name: str = Field("", validation_alias=AliasChoices("product_name", "productName"))
    quantity: str = ""
    image_url: str = Field("", validation_alias=AliasChoices("image_url", "imageUrl"))

    @field_validator("*", mode="before")
    @classmethod
    def _coerce_text(cls, value: Any) -> Any:
        # null -> "", штрихкоды часто приходят числами
        if value is None:
            return ""
        if isinstance(value, bool):
            return value
        if isinstance(value, float) and value.is_integer():
            return str(int(value))
        if isinstance(value, (int, float)):
            return str(value)
        return value

    def to_record(self) -> ProductRecord:
        return ProductRecord(
            barcode=self.barcode,
            brand=self.brand,
            product_name=self.product_name,
            quantity=self.quantity,
            image_url=self.image_url,
        )


class CatalogParser:
    """Парсер каталога продуктов"""

    # Ключи, под которыми может лежать массив продуктов
    COLLECTION_KEYS = ("products", "items", "data")

    @staticmethod
    def parse(content: Union[bytes, str]) -> List[ProductRecord]:
        """
        Парсинг каталога в список продуктов

        Raises:
            CatalogParseError: не JSON или неизвестная структура
        """
        if isinstance(content, bytes):
            try:
                content = content.decode("utf-8-sig")
            except UnicodeDecodeError as e:
                raise CatalogParseError(f"Catalog is not valid UTF-8: {e}") from e

        try:
            data = json.loads(content)
        except (json.JSONDecodeError, RecursionError) as e:
            raise CatalogParseError(f"Invalid catalog JSON: {e.__class__.__name__}: {e}") from e

        entries = CatalogParser._extract_entries(data)
        records, errors = CatalogParser.validate_entries(entries)

        if errors:
            logger.warning(f"[Catalog] Skipped {len(errors)} invalid entries of {len(entries)}")

        return records

    @staticmethod
    def validate_entries(entries: List[Any]) -> Tuple[List[ProductRecord], List[Dict[str, Any]]]:
        """
        Валидация записей каталога

        Returns:
            (валидные продукты, ошибки по позициям)
        """
        records = []
        errors = []

        for position, entry in enumerate(entries):
            try:
                records.append(CatalogItem.model_validate(entry).to_record())
            except ValidationError as e:
                errors.append({
                    "position": position,
                    "errors": [err["msg"] for err in e.errors()],
                })

        return records, errors

    @staticmethod
    def _extract_entries(data: Any) -> List[Any]:
        if isinstance(data, list):
            return data

        if isinstance(data, dict):
            for key in CatalogParser.COLLECTION_KEYS:
                if isinstance(data.get(key), list):
                    return data[key]

        raise CatalogParseError(
            f"Unexpected catalog structure: {type(data).__name__}"
        )
