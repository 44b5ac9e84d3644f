import pytest

from proofed_search.core.models import ProductRecord
from proofed_search.search.engine import ProductSearchEngine


@pytest.fixture
def sample_records():
    return [
        ProductRecord(barcode="001", brand="Acme", product_name="Choco Bar", quantity="100g", image_url="x"),
        ProductRecord(barcode="002", brand="", product_name="Plain Bar", quantity="50g", image_url=""),
    ]


@pytest.fixture
def engine(sample_records):
    return ProductSearchEngine.from_records(sample_records)
