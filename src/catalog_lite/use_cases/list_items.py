from __future__ import annotations

import logging
from dataclasses import dataclass

from catalog_lite.domain import item_query
from catalog_lite.domain.item import ItemPage, ItemQuery
from catalog_lite.ports.item_store import ItemStore
from catalog_lite.ports.response_cache import ResponseCache

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ListItemsRequest:
    query: ItemQuery


@dataclass(frozen=True, slots=True)
class ListItemsResponse:
    page: ItemPage
    cache_hit: bool = False


class ListItems:
    """
    List items with search, sort and pagination, served through the response cache.

    On a cache hit the stored page is returned as-is (same object). On a miss
    the full collection is read from the store, run through
    filter -> sort -> paginate, and the result is cached under the query
    signature before being returned.

    Storage errors propagate unchanged; nothing is cached for a failed read.
    """

    def __init__(self, item_store: ItemStore, response_cache: ResponseCache) -> None:
        self._store = item_store
        self._cache = response_cache

    def execute(self, request: ListItemsRequest) -> ListItemsResponse:
        """
        Execute the list query.

        Args:
            request: Normalized query (see item_query.parse_list_query)

        Returns:
            Response with the requested page and whether it came from the cache

        Raises:
            StorageError: If the item data cannot be read
            DataParseError: If the item data is malformed
        """
        signature = ResponseCache.signature_for(request.query)

        cached = self._cache.lookup(signature)
        if cached is not None:
            logger.debug("List cache hit", extra={"signature": signature})
            return ListItemsResponse(page=cached, cache_hit=True)

        logger.debug("List cache miss", extra={"signature": signature})
        page = item_query.execute(self._store.read_all(), request.query)
        self._cache.store(signature, page)

        return ListItemsResponse(page=page, cache_hit=False)
