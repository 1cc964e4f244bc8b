"""
Dependency injection for FastAPI routes.

Key principle: stateful components (store, response cache, create lock,
stats cache) are created once by build_app() and kept on app.state; use
cases that hold no state of their own are built fresh per request.
"""

from __future__ import annotations

from fastapi import Depends, Request

from catalog_lite.ports.item_store import ItemStore
from catalog_lite.ports.response_cache import ResponseCache
from catalog_lite.use_cases.create_item import CreateItem
from catalog_lite.use_cases.get_item_by_id import GetItemById
from catalog_lite.use_cases.get_item_stats import GetItemStats
from catalog_lite.use_cases.list_items import ListItems


def get_item_store(request: Request) -> ItemStore:
    """Returns the application's item store."""
    return request.app.state.item_store


def get_response_cache(request: Request) -> ResponseCache:
    """Returns the application's list-query response cache."""
    return request.app.state.response_cache


def get_list_items_use_case(
    store: ItemStore = Depends(get_item_store),
    cache: ResponseCache = Depends(get_response_cache),
) -> ListItems:
    """
    Factory function that returns a configured ListItems use case.

    Args:
        store: Item store (injected by FastAPI)
        cache: Response cache shared by every request (injected by FastAPI)

    Returns:
        ListItems: Configured use case instance
    """
    return ListItems(item_store=store, response_cache=cache)


def get_get_item_by_id_use_case(store: ItemStore = Depends(get_item_store)) -> GetItemById:
    return GetItemById(item_store=store)


def get_create_item_use_case(request: Request) -> CreateItem:
    """
    Returns the application-scoped CreateItem use case.

    A single instance is shared so that its write lock serializes every
    create against the same store.
    """
    return request.app.state.create_item


def get_item_stats_use_case(request: Request) -> GetItemStats:
    """Returns the application-scoped stats use case (it holds the stats cache)."""
    return request.app.state.get_item_stats
