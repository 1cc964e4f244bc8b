from __future__ import annotations

from catalog_lite.client.api_client import ApiError, CatalogApiClient
from catalog_lite.client.models import RemoteItem


class ItemDetailViewModel:
    """
    State for a single-item page.

    Attributes
    ──────────
    item     : the loaded item, or None
    loading  : True while a request is in flight
    error    : readable message of the last failure, or None
    """

    def __init__(self, api: CatalogApiClient) -> None:
        self._api = api
        self.item: RemoteItem | None = None
        self.loading = False
        self.error: str | None = None
        self._requested_id: int | str | None = None

    async def load(self, item_id: int | str) -> None:
        """Fetch *item_id*; a response for an id that is no longer requested is ignored."""
        self._requested_id = item_id
        self.loading = True
        self.error = None

        try:
            item = await self._api.get_item(item_id)
        except ApiError as exc:
            if self._requested_id != item_id:
                return
            self.item = None
            self.error = "Item not found" if exc.status_code == 404 else exc.message
        else:
            if self._requested_id != item_id:
                return
            self.item = item
        self.loading = False
