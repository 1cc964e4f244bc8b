"""
Client-side fetch state for the item list.

FetchController owns the item collection shown by the UI, plus loading,
error and pagination state, and applies the append-vs-replace rule to
each response:

  replace  new search, new sort, first page: the collection is discarded
  append   page > 1 continuation: only unseen ids are added, at the end

Every request gets a generation number; a response that arrives after a
newer request was started is dropped without touching state.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field, replace
from typing import Callable, Sequence

from catalog_lite.client.api_client import ApiError, CatalogApiClient
from catalog_lite.client.models import RemoteItem, RemotePagination

logger = logging.getLogger(__name__)

DEFAULT_LIMIT = 10
LOAD_MORE_LIMIT = 20

StateListener = Callable[["FetchState"], None]


@dataclass(frozen=True)
class FetchState:
    items: list[RemoteItem] = field(default_factory=list)
    loading: bool = False
    error: str | None = None
    pagination: RemotePagination | None = None


def merge_items(existing: Sequence[RemoteItem], incoming: Sequence[RemoteItem]) -> list[RemoteItem]:
    """Keep ``existing`` as-is and append the incoming items whose id is new."""
    seen = {item.id for item in existing}
    merged = list(existing)
    for item in incoming:
        if item.id not in seen:
            seen.add(item.id)
            merged.append(item)
    return merged


class FetchController:
    """Issues list requests and folds the responses into FetchState."""

    def __init__(self, api: CatalogApiClient) -> None:
        self._api = api
        self._state = FetchState()
        self._listeners: list[StateListener] = []
        self._generation = 0

    @property
    def state(self) -> FetchState:
        return self._state

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """Call *listener* with the new state after every change; returns an unsubscribe."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    async def fetch_items(
        self,
        q: str = "",
        page: int = 1,
        limit: int = DEFAULT_LIMIT,
        sort: str = "default",
        append: bool = False,
    ) -> None:
        self._generation += 1
        generation = self._generation
        self._set(loading=True, error=None)

        try:
            payload = await self._api.list_items(q=q, page=page, limit=limit, sort=sort)
        except ApiError as exc:
            if generation != self._generation:
                return
            logger.warning("Error fetching items", extra={"error_message": exc.message})
            self._set(error=exc.message, loading=False)
            return
        except asyncio.CancelledError:
            if generation == self._generation:
                self._set(loading=False)
            raise

        if generation != self._generation:
            logger.debug("Dropped stale response", extra={"page": page, "q": q, "sort": sort})
            return

        if append and page > 1:
            items = merge_items(self._state.items, payload.items)
        else:
            items = list(payload.items)

        self._set(items=items, pagination=payload.pagination, loading=False)

    async def search_items(self, query: str, sort: str = "default", limit: int = DEFAULT_LIMIT) -> None:
        await self.fetch_items(q=query, page=1, limit=limit, sort=sort, append=False)

    async def load_page(self, page: int, sort: str = "default", limit: int = DEFAULT_LIMIT) -> None:
        await self.fetch_items(page=page, limit=limit, sort=sort, append=page > 1)

    async def sort_items(self, sort: str, query: str = "", limit: int = DEFAULT_LIMIT) -> None:
        # a new order always starts again from page 1
        await self.fetch_items(q=query, page=1, limit=limit, sort=sort, append=False)

    async def load_more_items(
        self,
        page: int,
        sort: str = "default",
        search_query: str = "",
        limit: int = LOAD_MORE_LIMIT,
    ) -> None:
        await self.fetch_items(q=search_query, page=page, limit=limit, sort=sort, append=True)

    def _set(self, **changes: object) -> None:
        self._state = replace(self._state, **changes)
        for listener in list(self._listeners):
            listener(self._state)
