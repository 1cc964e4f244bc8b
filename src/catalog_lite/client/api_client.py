"""Async HTTP client for the catalog API."""

from __future__ import annotations

import logging
from typing import Any

import httpx
import pydantic

from catalog_lite.client.models import ItemListPayload, RemoteItem

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "http://localhost:3001/api"


class ApiError(Exception):
    """A request failed: non-success status, transport failure or bad payload.

    status_code is None when no HTTP response was received.
    """

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class CatalogApiClient:
    """Thin async wrapper over httpx.AsyncClient for the /items and /stats routes.

    No retries: every failure is raised once as ApiError and the caller
    decides whether to try again.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=timeout,
            transport=transport,
            headers={"Accept": "application/json"},
        )

    async def list_items(
        self,
        q: str = "",
        page: int = 1,
        limit: int = 10,
        sort: str = "default",
    ) -> ItemListPayload:
        params = {"q": q, "page": str(page), "limit": str(limit), "sort": sort}
        data = await self._request("GET", "/items", params=params)
        return self._parse(ItemListPayload, data)

    async def get_item(self, item_id: int | str) -> RemoteItem:
        data = await self._request("GET", f"/items/{item_id}")
        return self._parse(RemoteItem, data)

    async def create_item(self, name: str, category: str, price: float) -> RemoteItem:
        payload = {"name": name, "category": category, "price": price}
        data = await self._request("POST", "/items", json=payload)
        return self._parse(RemoteItem, data)

    async def get_stats(self) -> dict[str, Any]:
        return await self._request("GET", "/stats")

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> CatalogApiClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def _request(self, method: str, path: str, **kwargs: Any) -> Any:
        try:
            response = await self._client.request(method, path, **kwargs)
        except httpx.HTTPError as exc:
            logger.warning(
                "Request failed",
                extra={"method": method, "path": path, "error_type": type(exc).__name__},
            )
            raise ApiError(f"Request failed: {exc}") from exc

        if not response.is_success:
            logger.debug(
                "Non-success status",
                extra={"method": method, "path": path, "status_code": response.status_code},
            )
            raise ApiError(
                f"HTTP error! status: {response.status_code}",
                status_code=response.status_code,
            )

        try:
            return response.json()
        except ValueError as exc:
            raise ApiError("Response is not valid JSON", response.status_code) from exc

    @staticmethod
    def _parse(model: type[pydantic.BaseModel], data: Any) -> Any:
        try:
            return model.model_validate(data)
        except pydantic.ValidationError as exc:
            raise ApiError(f"Unexpected response payload: {exc.error_count()} error(s)") from exc
