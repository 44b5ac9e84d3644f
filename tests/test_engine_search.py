import pytest

from proofed_search.core.models import ProductIndex, ProductRecord
from proofed_search.feed.loader import StaticCatalogSource
from proofed_search.search.engine import ProductSearchEngine
from proofed_search.search.indexer import Indexer


def _barcodes(products):
    return [p.barcode for p in products]


def test_search_prefix_of_name(engine):
    assert _barcodes(engine.search("cho")) == ["001"]


def test_search_brand_and_name(engine):
    assert _barcodes(engine.search("acme cho")) == ["001"]


def test_search_is_case_insensitive(engine):
    assert _barcodes(engine.search("ACME")) == ["001"]


def test_search_no_match(engine):
    assert engine.search("xyz") == []


def test_search_ranks_brand_and_image_higher(engine):
    assert _barcodes(engine.search("bar")) == ["001", "002"]


def test_search_returns_full_records(engine, sample_records):
    assert engine.search("plain") == [sample_records[1]]


@pytest.mark.parametrize("query", ["", " ", "a", "  a  ", "a b"])
def test_search_short_queries_return_empty(engine, query):
    assert engine.search(query) == []


def test_search_requires_every_term():
    engine = ProductSearchEngine.from_records([
        ProductRecord(barcode="1", product_name="Alpha Flour"),
        ProductRecord(barcode="2", product_name="Beta Sugar"),
    ])

    assert engine.search("alpha beta") == []
    assert _barcodes(engine.search("alpha flour")) == ["1"]


def test_search_unmatched_term_vetoes_query(engine):
    assert engine.search("bar zzz") == []


def test_search_limit():
    records = [
        ProductRecord(barcode=str(i), product_name=f"Bar {i}0") for i in range(6)
    ]
    engine = ProductSearchEngine.from_records(records)

    assert len(engine.search("bar", limit=3)) == 3
    assert len(engine.search("bar")) == 6
    assert engine.search("bar", limit=0) == []


def test_search_default_limit_is_ten():
    records = [
        ProductRecord(barcode=str(i), product_name=f"Bar {i}0") for i in range(15)
    ]
    engine = ProductSearchEngine.from_records(records)

    assert len(engine.search("bar")) == 10


def test_search_equal_scores_keep_catalog_order():
    engine = ProductSearchEngine.from_records([
        ProductRecord(barcode="a", product_name="Plain Flour"),
        ProductRecord(barcode="b", product_name="Plain Sugar"),
        ProductRecord(barcode="c", product_name="Plain Butter"),
        ProductRecord(barcode="d", brand="Acme", product_name="Plain Yeast", image_url="img"),
    ])

    assert _barcodes(engine.search("plain")) == ["d", "a", "b", "c"]


def test_search_is_idempotent(engine):
    first = engine.search("bar")

    for _ in range(5):
        assert engine.search("bar") == first


def test_score_word_start_beats_mid_word(engine):
    word_start = ProductRecord(barcode="1", product_name="Bar Snack")
    mid_word = ProductRecord(barcode="2", product_name="Crowbar Snack")

    assert engine.score(word_start, ["bar"]) == 15
    assert engine.score(mid_word, ["bar"]) == 10


def test_score_bonuses(engine, sample_records):
    assert engine.score(sample_records[0], ["bar"]) == 18
    assert engine.score(sample_records[1], ["bar"]) == 15


class WholeWordIndexer(Indexer):
    """Индекс только по целым словам - проверка префиксного fallback"""

    def build(self, records):
        records = tuple(records)
        term_index = {}
        for position, record in enumerate(records):
            for word in self.query_processor.tokenize(record.search_text):
                term_index.setdefault(word, set()).add(position)
        return ProductIndex(
            records=records,
            term_index={t: frozenset(p) for t, p in term_index.items()},
        )


def test_search_falls_back_to_prefix_scan(sample_records):
    engine = ProductSearchEngine(
        StaticCatalogSource(sample_records), indexer=WholeWordIndexer()
    )

    assert "cho" not in engine.index.term_index
    assert _barcodes(engine.search("cho")) == ["001"]
    assert _barcodes(engine.search("pla ba")) == ["002"]
    assert engine.search("hoc") == []


def test_empty_index_returns_nothing():
    engine = ProductSearchEngine.from_records([])

    assert engine.search("bar") == []
    assert engine.get_by_barcode("001") is None
