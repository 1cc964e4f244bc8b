from __future__ import annotations

from catalog_lite.domain.item import Item
from catalog_lite.ports.item_store import ItemStore


class InMemoryItemStore(ItemStore):
    """
    Canonical contract implementation for tests.

    - Stores items in insertion order
    - read_all() returns a copy, so callers cannot mutate the stored list
    - write_all() replaces the collection and notifies write listeners
    - last_modified() is a version counter bumped on every write
    """

    def __init__(self, items: list[Item] | None = None) -> None:
        super().__init__()
        self._items = list(items or [])
        self._version = 0

    def read_all(self) -> list[Item]:
        return list(self._items)

    def write_all(self, items: list[Item]) -> None:
        self._items = list(items)
        self._version += 1
        self._notify_written()

    def last_modified(self) -> int | None:
        return self._version
