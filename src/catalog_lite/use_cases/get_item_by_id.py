"""Get item by ID use case."""

from __future__ import annotations

from dataclasses import dataclass

from catalog_lite.domain.errors import NotFoundError, ValidationError
from catalog_lite.domain.item import Item
from catalog_lite.domain.item_query import parse_leading_int
from catalog_lite.ports.item_store import ItemStore


@dataclass(frozen=True, slots=True)
class GetItemByIdRequest:
    """Request to get an item by its raw (wire) ID."""

    item_id: str


@dataclass(frozen=True, slots=True)
class GetItemByIdResponse:
    """Response containing the requested item."""

    item: Item


class GetItemById:
    """
    Use case for retrieving a single item by ID.

    Responsibilities:
    - Parse the item_id as an integer (leading digits, like the list query params)
    - Read the collection from the store and find the matching item
    - Raise NotFoundError if no item has that ID
    """

    def __init__(self, item_store: ItemStore) -> None:
        """
        Initialize use case with dependencies.

        Args:
            item_store: Store holding the item collection
        """
        self._store = item_store

    def execute(self, request: GetItemByIdRequest) -> GetItemByIdResponse:
        """
        Execute the get item by ID use case.

        Args:
            request: Request containing the raw item_id

        Returns:
            GetItemByIdResponse with the item

        Raises:
            ValidationError: If item_id is not numeric
            NotFoundError: If no item has the given ID
            StorageError: If the item data cannot be read
        """
        item_id = parse_leading_int(request.item_id)
        if item_id is None:
            raise ValidationError(
                message="Invalid ID parameter",
                errors=[
                    {
                        "field": "id",
                        "message": "Must be an integer",
                        "code": "INVALID_ID",
                    }
                ],
            )

        item = next((item for item in self._store.read_all() if item.id == item_id), None)

        if item is None:
            raise NotFoundError(resource="Item", item_id=item_id)

        return GetItemByIdResponse(item=item)
