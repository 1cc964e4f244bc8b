from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable

from catalog_lite.domain.item import Item

WriteListener = Callable[[], None]


class ItemStore(ABC):
    """
    Port for the item collection.

    The whole collection is read and written at once; there are no
    per-record operations.

    Contract:
        - read_all() returns the records in stored order, or raises
          StorageError / DataParseError; no partial results
        - write_all() replaces the whole collection (last write wins) and,
          only when it succeeds, notifies every registered write listener
    """

    def __init__(self) -> None:
        self._write_listeners: list[WriteListener] = []

    @abstractmethod
    def read_all(self) -> list[Item]:
        """
        Read the full item collection.

        Raises:
            StorageError: If the backing data cannot be read
            DataParseError: If the backing data is malformed
        """
        ...

    @abstractmethod
    def write_all(self, items: list[Item]) -> None:
        """
        Replace the full item collection.

        Raises:
            StorageError: If the backing data cannot be written
        """
        ...

    def last_modified(self) -> int | None:
        """Modification marker of the backing data, or None if unknown."""
        return None

    def add_write_listener(self, listener: WriteListener) -> None:
        """Register a callback invoked after every successful write_all()."""
        self._write_listeners.append(listener)

    def _notify_written(self) -> None:
        for listener in self._write_listeners:
            listener()
