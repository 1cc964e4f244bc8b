from __future__ import annotations

from abc import ABC, abstractmethod

from catalog_lite.domain.item import ItemPage, ItemQuery


class ResponseCache(ABC):
    """
    Port for caching list-query results.

    Contract:
        - callers build signatures with signature_for() from a normalized
          ItemQuery, so equivalent queries share one entry
        - lookup() returns the stored object itself (no copy) while it is valid
        - invalidate_all() drops every entry
    """

    @staticmethod
    def signature_for(query: ItemQuery) -> str:
        """Join the normalized query fields into a single key."""
        return f"{query.q}_{query.page}_{query.limit}_{query.sort.value}"

    @abstractmethod
    def lookup(self, signature: str) -> ItemPage | None: ...

    @abstractmethod
    def store(self, signature: str, result: ItemPage) -> None: ...

    @abstractmethod
    def invalidate_all(self) -> None: ...
