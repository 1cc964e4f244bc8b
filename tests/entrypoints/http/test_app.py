"""
Unit tests for FastAPI application setup and configuration.

This test suite verifies the application structure and wiring:
- build_app() creates properly configured FastAPI instance
- Application metadata (title, version, docs URLs)
- Router registration (health at the root, items and stats under /api)
- Stateful components live on app.state and are wired together
- OpenAPI schema generation
"""

from __future__ import annotations

from pathlib import Path

from fastapi import FastAPI
from fastapi.testclient import TestClient

from catalog_lite.adapters.in_memory_item_store import InMemoryItemStore
from catalog_lite.adapters.json_file_item_store import JsonFileItemStore
from catalog_lite.adapters.ttl_response_cache import TtlResponseCache
from catalog_lite.domain.item import Item, ItemPage, Pagination
from catalog_lite.entrypoints.http.app import build_app
from catalog_lite.use_cases.create_item import CreateItem
from catalog_lite.use_cases.get_item_stats import GetItemStats


# ==============================================================================
# Application Creation
# ==============================================================================


def test_build_app_returns_fastapi_instance() -> None:
    app = build_app(item_store=InMemoryItemStore())
    assert isinstance(app, FastAPI)


def test_build_app_creates_new_instance_each_call() -> None:
    """Each app owns its own cache; nothing is shared at module level."""
    app1 = build_app(item_store=InMemoryItemStore())
    app2 = build_app(item_store=InMemoryItemStore())

    assert app1 is not app2
    assert app1.state.response_cache is not app2.state.response_cache


# ==============================================================================
# Application Metadata
# ==============================================================================


def test_app_metadata() -> None:
    app = build_app(item_store=InMemoryItemStore())

    assert app.title == "Catalog Lite API"
    assert app.version == "0.1.0"
    assert "Catalog browsing API" in app.description
    assert app.docs_url == "/docs"
    assert app.redoc_url == "/redoc"
    assert app.openapi_url == "/openapi.json"


def test_app_documentation_endpoints_are_accessible() -> None:
    client = TestClient(build_app(item_store=InMemoryItemStore()))

    assert client.get("/docs").status_code == 200
    assert client.get("/redoc").status_code == 200

    response = client.get("/openapi.json")
    assert response.status_code == 200
    assert response.headers["content-type"] == "application/json"


# ==============================================================================
# Application State
# ==============================================================================


def test_build_app_defaults_to_json_file_store(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setenv("CATALOG_DATA_PATH", str(tmp_path / "items.json"))

    app = build_app()

    assert isinstance(app.state.item_store, JsonFileItemStore)
    assert app.state.item_store.path == tmp_path / "items.json"


def test_build_app_reads_ttl_from_environment(monkeypatch) -> None:
    monkeypatch.setenv("CATALOG_CACHE_TTL_SECONDS", "12")

    app = build_app(item_store=InMemoryItemStore())

    assert app.state.response_cache.ttl == 12


def test_build_app_explicit_ttl_wins(monkeypatch) -> None:
    monkeypatch.setenv("CATALOG_CACHE_TTL_SECONDS", "12")

    app = build_app(item_store=InMemoryItemStore(), cache_ttl_seconds=1)

    assert app.state.response_cache.ttl == 1


def test_build_app_wires_application_scoped_components() -> None:
    store = InMemoryItemStore()
    app = build_app(item_store=store)

    assert app.state.item_store is store
    assert isinstance(app.state.response_cache, TtlResponseCache)
    assert isinstance(app.state.create_item, CreateItem)
    assert isinstance(app.state.get_item_stats, GetItemStats)


def test_store_writes_invalidate_response_cache() -> None:
    store = InMemoryItemStore()
    app = build_app(item_store=store)
    cache: TtlResponseCache = app.state.response_cache
    cache.store("_1_10_default", ItemPage(items=[], pagination=Pagination.build(1, 10, 0)))

    store.write_all([Item(id=1, name="Lamp", category="Home", price=20)])

    assert len(cache) == 0


# ==============================================================================
# Router Registration
# ==============================================================================


def test_app_includes_health_router() -> None:
    client = TestClient(build_app(item_store=InMemoryItemStore()))

    assert client.get("/health").status_code == 200


def test_app_registers_routes_under_api_prefix() -> None:
    paths = build_app(item_store=InMemoryItemStore()).openapi()["paths"]

    assert "/health" in paths
    assert "/api/items" in paths
    assert "/api/items/{item_id}" in paths
    assert "/api/stats" in paths

    # Not at the root
    assert "/items" not in paths


def test_app_openapi_schema_documents_items_endpoints() -> None:
    schema = build_app(item_store=InMemoryItemStore()).openapi()

    items_path = schema["paths"]["/api/items"]
    assert "get" in items_path
    assert "post" in items_path
    assert "Items" in items_path["get"]["tags"]
    assert items_path["get"]["summary"] == "List catalog items"

    assert schema["info"]["title"] == "Catalog Lite API"


def test_app_unknown_route_returns_json_404() -> None:
    client = TestClient(build_app(item_store=InMemoryItemStore()))

    response = client.get("/api/unknown")

    assert response.status_code == 404
    assert response.json()["error"] == "Route Not Found"
