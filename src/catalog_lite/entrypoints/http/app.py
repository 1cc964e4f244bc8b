from __future__ import annotations

from fastapi import FastAPI

from catalog_lite.adapters.json_file_item_store import JsonFileItemStore
from catalog_lite.adapters.ttl_response_cache import TtlResponseCache
from catalog_lite.entrypoints.http.exception_handlers import register_exception_handlers
from catalog_lite.entrypoints.http.routes.health import router as health_router
from catalog_lite.entrypoints.http.routes.items import router as items_router
from catalog_lite.entrypoints.http.routes.stats import router as stats_router
from catalog_lite.infra import config
from catalog_lite.infra.logging_config import configure_logging
from catalog_lite.ports.item_store import ItemStore
from catalog_lite.use_cases.create_item import CreateItem
from catalog_lite.use_cases.get_item_stats import GetItemStats


def build_app(
    item_store: ItemStore | None = None,
    cache_ttl_seconds: float | None = None,
) -> FastAPI:
    """
    Build the application and the components it owns.

    Args:
        item_store: Store to serve; defaults to the JSON file at CATALOG_DATA_PATH
        cache_ttl_seconds: Response cache TTL; defaults to CATALOG_CACHE_TTL_SECONDS
    """
    configure_logging()

    app = FastAPI(
        title="Catalog Lite API",
        description="""
        Catalog browsing API backed by a single JSON file.

        ## Features
        - List items with search, sort and pagination
        - Get item details
        - Create items
        - Catalog statistics

        ## Authentication
        No authentication.

        ## Error Handling
        All errors return JSON bodies with `error`, `code`, `status` and `path`.
        See the error response schemas in the API documentation.
        """,
        version="0.1.0",
        docs_url="/docs",  # Swagger UI
        redoc_url="/redoc",  # ReDoc alternative
        openapi_url="/openapi.json",  # OpenAPI schema
    )

    store = item_store if item_store is not None else JsonFileItemStore(config.data_path())
    ttl = cache_ttl_seconds if cache_ttl_seconds is not None else config.cache_ttl_seconds()
    cache = TtlResponseCache(ttl_seconds=ttl)

    # Every successful write clears the list cache
    store.add_write_listener(cache.invalidate_all)

    app.state.item_store = store
    app.state.response_cache = cache
    app.state.create_item = CreateItem(item_store=store)
    app.state.get_item_stats = GetItemStats(item_store=store)

    # Register global exception handlers
    register_exception_handlers(app)

    # Register routers
    app.include_router(health_router)
    app.include_router(items_router, prefix="/api")
    app.include_router(stats_router, prefix="/api")

    return app


app = build_app()
