from __future__ import annotations

import logging
from dataclasses import dataclass

from catalog_lite.domain.item_stats import ItemStats, calculate_stats
from catalog_lite.ports.item_store import ItemStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class GetItemStatsResponse:
    stats: ItemStats
    cache_hit: bool = False


class GetItemStats:
    """
    Aggregate statistics over the whole item collection.

    The computed stats are kept together with the store's last_modified()
    marker at computation time and reused until that marker changes, so
    edits made directly to the backing file are picked up too. A store that
    reports no marker is never cached.
    """

    def __init__(self, item_store: ItemStore) -> None:
        self._store = item_store
        self._cached: ItemStats | None = None
        self._cached_marker: int | None = None

    def execute(self) -> GetItemStatsResponse:
        """
        Raises:
            StorageError: If the item data cannot be read
            DataParseError: If the item data is malformed
        """
        marker = self._store.last_modified()
        if self._cached is not None and marker is not None and marker == self._cached_marker:
            return GetItemStatsResponse(stats=self._cached, cache_hit=True)

        stats = calculate_stats(self._store.read_all())
        self._cached = stats
        self._cached_marker = marker
        logger.debug("Item stats recomputed", extra={"total": stats.total})

        return GetItemStatsResponse(stats=stats, cache_hit=False)

    def clear(self) -> None:
        self._cached = None
        self._cached_marker = None
