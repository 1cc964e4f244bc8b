from __future__ import annotations

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from catalog_lite.entrypoints.http.routes.health import router


@pytest.fixture
def client() -> TestClient:
    """Test client for an app with only the health router."""
    test_app = FastAPI()
    test_app.include_router(router)
    return TestClient(test_app, raise_server_exceptions=False)


def test_health_endpoint(client: TestClient) -> None:
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_health_is_not_under_api_prefix(client: TestClient) -> None:
    assert client.get("/api/health").status_code == 404
