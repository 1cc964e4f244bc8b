from __future__ import annotations

import logging
import threading
import time
from dataclasses import dataclass
from typing import Callable

from catalog_lite.domain.item import Item, ItemDraft
from catalog_lite.ports.item_store import ItemStore

logger = logging.getLogger(__name__)


def epoch_millis() -> int:
    return time.time_ns() // 1_000_000


@dataclass(frozen=True, slots=True)
class CreateItemRequest:
    draft: ItemDraft


@dataclass(frozen=True, slots=True)
class CreateItemResponse:
    item: Item


class CreateItem:
    """
    Validate a new item, append it to the collection and persist it.

    The id is the creation time in epoch milliseconds. When that value is
    not greater than every existing id (two creates in the same millisecond,
    or a clock step backwards) it is bumped to max(existing) + 1.

    The read-modify-write cycle runs under a lock, so concurrent creates in
    one process never overwrite each other. Cache invalidation happens
    through the store's write listeners.
    """

    def __init__(
        self,
        item_store: ItemStore,
        clock_ms: Callable[[], int] = epoch_millis,
    ) -> None:
        self._store = item_store
        self._clock_ms = clock_ms
        self._write_lock = threading.Lock()

    def execute(self, request: CreateItemRequest) -> CreateItemResponse:
        """
        Execute item creation.

        Args:
            request: Unvalidated draft from the client

        Returns:
            Response containing the stored item with its assigned id

        Raises:
            ValidationError: If name, category or price is invalid
            StorageError: If the item data cannot be read or written
        """
        draft = request.draft
        draft.validate()

        with self._write_lock:
            items = self._store.read_all()
            item = Item(
                id=self._next_id(items),
                name=draft.name,
                category=draft.category,
                price=draft.price,
            )
            items.append(item)
            self._store.write_all(items)

        logger.info("Item created", extra={"item_id": item.id, "total_items": len(items)})
        return CreateItemResponse(item=item)

    def _next_id(self, items: list[Item]) -> int:
        candidate = self._clock_ms()
        highest = max((item.id for item in items), default=None)
        if highest is not None and candidate <= highest:
            return highest + 1
        return candidate
