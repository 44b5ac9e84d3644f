"""
FastAPI приложение - поиск продуктов по каталогу и штрихкоду
"""
from fastapi import APIRouter, Depends, FastAPI, HTTPException, Query, Request
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
from typing import Optional
import logging
import time

from .. import __version__
from ..core.config import Config, SearchConfig, config
from ..feed.errors import CatalogError
from ..feed.loader import FileCatalogSource, PayloadCatalogSource, download_catalog
from ..search.engine import ProductSearchEngine

logging.basicConfig(
    level=getattr(logging, config.log_level, logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


async def build_engine(app_config: Config) -> ProductSearchEngine:
    """
    Движок из конфигурации

    URL каталога приоритетнее, при ошибке загрузки - локальный файл
    """
    catalog = app_config.catalog
    source = FileCatalogSource(catalog.path)

    if catalog.url:
        try:
            payload = await download_catalog(
                catalog.url,
                timeout=catalog.download_timeout,
                max_size=catalog.max_size,
            )
            source = PayloadCatalogSource(payload)
        except CatalogError as e:
            logger.error(f"[API] Catalog download failed, using {catalog.path}: {e}")

    return ProductSearchEngine(source, config=app_config.search)


def get_engine(request: Request) -> ProductSearchEngine:
    """Движок, созданный при старте приложения"""
    return request.app.state.engine


def get_search_config(request: Request) -> SearchConfig:
    """Параметры поиска приложения (лимиты)"""
    return request.app.state.search_config


router = APIRouter()


# ============ SEARCH ENDPOINTS ============

@router.get("/products/search")
def search_products(
    q: str = Query(..., description="Поисковый запрос"),
    limit: Optional[int] = Query(None, ge=1),
    engine: ProductSearchEngine = Depends(get_engine),
    search_config: SearchConfig = Depends(get_search_config),
):
    """
    Поиск продуктов по бренду и названию

    Короткий запрос (< 2 символов) - пустой результат, не ошибка
    """
    if limit is None:
        limit = search_config.default_limit
    elif limit > search_config.max_limit:
        raise HTTPException(
            status_code=422,
            detail=f"limit must be less than or equal to {search_config.max_limit}",
        )

    start_time = time.time()

    products = engine.search(q, limit=limit)

    took_ms = (time.time() - start_time) * 1000

    return {
        "products": [p.to_dict() for p in products],
        "total": len(products),
        "query": q,
        "meta": {
            "took_ms": round(took_ms, 2),
        },
    }


@router.get("/products/barcode/{barcode}")
def get_product_by_barcode(
    barcode: str,
    engine: ProductSearchEngine = Depends(get_engine),
):
    """Продукт по штрихкоду"""
    product = engine.get_by_barcode(barcode)
    if product is None:
        raise HTTPException(status_code=404, detail="Product not found")
    return {"product": product.to_dict()}


# ============ HEALTH CHECK ============

@router.get("/health")
def health(engine: ProductSearchEngine = Depends(get_engine)):
    """Health check"""
    return {"status": "healthy", "products": len(engine.index)}


@router.get("/")
def root():
    """Root endpoint"""
    return {
        "service": "Proofed Product Search API",
        "version": __version__,
        "docs": "/docs",
    }


def create_app(
    engine: Optional[ProductSearchEngine] = None,
    app_config: Optional[Config] = None,
) -> FastAPI:
    """
    Создание приложения

    Если движок не передан, он строится из конфигурации при старте
    """
    app_config = app_config or config

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Инициализация индекса"""
        if app.state.engine is None:
            app.state.engine = await build_engine(app_config)

        products_count = app.state.engine.warm_up()
        logger.info(f"[API] Product search initialized: {products_count} products")

        yield

    app = FastAPI(
        title="Proofed Product Search API",
        description="Поиск продуктов для ингредиентов рецептов",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.engine = engine
    app.state.search_config = app_config.search

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_config.api.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(router)
    return app


app = create_app()


def run() -> None:
    """Запуск сервера (uvicorn)"""
    import uvicorn

    uvicorn.run(
        "proofed_search.api.main:app",
        host=config.api.host,
        port=config.api.port,
        reload=config.debug and config.env == "development",
    )
