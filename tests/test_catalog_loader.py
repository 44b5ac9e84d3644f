import asyncio
import json

import pytest
from aiohttp import web

from proofed_search.core.models import ProductRecord
from proofed_search.feed.errors import (
    CatalogDownloadError,
    CatalogError,
    CatalogNotFoundError,
    CatalogTooLargeError,
)
from proofed_search.feed.loader import (
    FileCatalogSource,
    PayloadCatalogSource,
    StaticCatalogSource,
    download_catalog,
)

CATALOG = [
    {"barcode": "001", "brand": "Acme", "product_name": "Choco Bar", "quantity": "100g", "image_url": "x"},
]


def test_file_source_loads_records(tmp_path):
    path = tmp_path / "products.json"
    path.write_text(json.dumps(CATALOG), encoding="utf-8")

    records = FileCatalogSource(path).load()

    assert [r.barcode for r in records] == ["001"]


def test_file_source_missing_file(tmp_path):
    with pytest.raises(CatalogNotFoundError):
        FileCatalogSource(tmp_path / "missing.json").load()


def test_payload_source():
    records = PayloadCatalogSource(json.dumps(CATALOG)).load()

    assert records[0].product_name == "Choco Bar"


def test_static_source_returns_copy():
    record = ProductRecord(barcode="1")
    source = StaticCatalogSource([record])

    loaded = source.load()
    loaded.clear()

    assert source.load() == [record]


def test_catalog_errors_share_base_class():
    for error in (CatalogNotFoundError, CatalogDownloadError, CatalogTooLargeError):
        assert issubclass(error, CatalogError)


async def _serve_and_download(handler, **kwargs):
    app = web.Application()
    app.router.add_get("/products.json", handler)

    runner = web.AppRunner(app)
    await runner.setup()
    site = web.TCPSite(runner, "127.0.0.1", 0)
    await site.start()

    try:
        host, port = runner.addresses[0][:2]
        return await download_catalog(f"http://{host}:{port}/products.json", **kwargs)
    finally:
        await runner.cleanup()


def test_download_catalog():
    async def handler(request):
        return web.json_response(CATALOG)

    payload = asyncio.run(_serve_and_download(handler))

    assert json.loads(payload) == CATALOG


def test_download_catalog_http_error():
    async def handler(request):
        return web.Response(status=404)

    with pytest.raises(CatalogDownloadError):
        asyncio.run(_serve_and_download(handler))


def test_download_catalog_too_large():
    async def handler(request):
        return web.json_response(CATALOG)

    with pytest.raises(CatalogTooLargeError):
        asyncio.run(_serve_and_download(handler, max_size=10))
