from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Callable

from catalog_lite.domain.item import ItemPage
from catalog_lite.ports.response_cache import ResponseCache

logger = logging.getLogger(__name__)

DEFAULT_TTL_SECONDS = 5 * 60


@dataclass(frozen=True, slots=True)
class _CacheEntry:
    result: ItemPage
    created_at: float


class TtlResponseCache(ResponseCache):
    """In-process cache with a fixed time-to-live per entry.

    Entries expire lazily: an entry older than the TTL is dropped the next
    time it is looked up, there is no background sweep. A write to the item
    store clears everything; entries carry no finer dependency tracking.

    One instance is owned by the application and injected where needed.
    """

    def __init__(
        self,
        ttl_seconds: float = DEFAULT_TTL_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.ttl = ttl_seconds
        self._clock = clock
        self._entries: dict[str, _CacheEntry] = {}

    def lookup(self, signature: str) -> ItemPage | None:
        entry = self._entries.get(signature)
        if entry is None:
            return None
        if self._clock() - entry.created_at >= self.ttl:
            # expired
            self._entries.pop(signature, None)
            return None
        return entry.result

    def store(self, signature: str, result: ItemPage) -> None:
        self._entries[signature] = _CacheEntry(result=result, created_at=self._clock())

    def invalidate_all(self) -> None:
        dropped = len(self._entries)
        self._entries.clear()
        logger.debug("Response cache invalidated", extra={"dropped_entries": dropped})

    def __len__(self) -> int:
        return len(self._entries)
