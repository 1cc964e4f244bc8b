"""
Tests for IncrementalListPresenter.

Timings are shrunk (debounce 20ms, minimum skeleton 50ms) and every
scenario runs on its own event loop via asyncio.run().
"""

from __future__ import annotations

import asyncio

from catalog_lite.client.fetch_controller import FetchController
from catalog_lite.client.list_presenter import SKELETON_ROWS, IncrementalListPresenter
from catalog_lite.client.models import ItemListPayload, RemoteItem, RemotePagination

DEBOUNCE = 0.02
MIN_LOADING = 0.05
SETTLE = 0.15


class FakeCatalogApi:
    """Serves ``total`` numbered items and records every list request."""

    def __init__(self, total: int = 45, delay: float = 0.0) -> None:
        self.total = total
        self.delay = delay
        self.calls: list[dict] = []

    async def list_items(
        self, q: str = "", page: int = 1, limit: int = 10, sort: str = "default"
    ) -> ItemListPayload:
        self.calls.append({"q": q, "page": page, "limit": limit, "sort": sort})
        if self.delay:
            await asyncio.sleep(self.delay)
        start = (page - 1) * limit
        ids = range(start + 1, min(start + limit, self.total) + 1)
        return ItemListPayload(
            items=[RemoteItem(id=i, name=f"Item {i}", category="Misc", price=i) for i in ids],
            pagination=RemotePagination(
                page=page,
                page_size=limit,
                total=self.total,
                total_pages=-(-self.total // limit),
                has_next=start + limit < self.total,
                has_prev=page > 1,
            ),
        )


def _presenter(api: FakeCatalogApi) -> IncrementalListPresenter:
    return IncrementalListPresenter(
        FetchController(api),  # type: ignore[arg-type]
        page_size=20,
        debounce_seconds=DEBOUNCE,
        min_loading_seconds=MIN_LOADING,
    )


# ==============================================================================
# Mount and skeleton
# ==============================================================================


def test_mount_loads_first_page_with_page_size() -> None:
    api = FakeCatalogApi()
    presenter = _presenter(api)

    async def scenario() -> None:
        await presenter.mount()
        presenter.unmount()

    asyncio.run(scenario())

    assert api.calls == [{"q": "", "page": 1, "limit": 20, "sort": "default"}]
    assert len(presenter.controller.state.items) == 20


def test_skeleton_stays_for_minimum_time() -> None:
    presenter = _presenter(FakeCatalogApi())
    observed: list[bool] = []

    async def scenario() -> None:
        await presenter.mount()
        observed.append(presenter.show_skeleton)
        await asyncio.sleep(SETTLE)
        observed.append(presenter.show_skeleton)
        presenter.unmount()

    asyncio.run(scenario())

    assert observed == [True, False]


def test_slow_response_hides_skeleton_immediately() -> None:
    presenter = _presenter(FakeCatalogApi(delay=MIN_LOADING * 2))

    async def scenario() -> bool:
        await presenter.mount()
        shown = presenter.show_skeleton
        presenter.unmount()
        return shown

    assert asyncio.run(scenario()) is False


def test_skeleton_rows_while_first_load_in_flight() -> None:
    presenter = _presenter(FakeCatalogApi(delay=0.05))

    async def scenario() -> int:
        task = asyncio.ensure_future(presenter.mount())
        await asyncio.sleep(0.01)
        count = presenter.item_count
        await task
        presenter.unmount()
        return count

    assert asyncio.run(scenario()) == SKELETON_ROWS


# ==============================================================================
# Search input
# ==============================================================================


def test_search_input_is_debounced() -> None:
    api = FakeCatalogApi()
    presenter = _presenter(api)

    async def scenario() -> None:
        await presenter.mount()
        api.calls.clear()
        presenter.on_search_input("d")
        presenter.on_search_input("de")
        presenter.on_search_input("desk")
        await asyncio.sleep(SETTLE)
        presenter.unmount()

    asyncio.run(scenario())

    assert api.calls == [{"q": "desk", "page": 1, "limit": 20, "sort": "default"}]


def test_submit_search_cancels_pending_debounce() -> None:
    api = FakeCatalogApi()
    presenter = _presenter(api)

    async def scenario() -> None:
        await presenter.mount()
        api.calls.clear()
        presenter.on_search_input("desk")
        await presenter.submit_search()
        await asyncio.sleep(SETTLE)
        presenter.unmount()

    asyncio.run(scenario())

    assert api.calls == [{"q": "desk", "page": 1, "limit": 20, "sort": "default"}]


def test_change_sort_keeps_query_and_restarts_at_page_one() -> None:
    api = FakeCatalogApi()
    presenter = _presenter(api)

    async def scenario() -> None:
        await presenter.mount()
        presenter.on_search_input("desk")
        await presenter.submit_search()
        await presenter.load_more_items(20, 39)
        api.calls.clear()
        await presenter.change_sort("price-asc")
        presenter.unmount()

    asyncio.run(scenario())

    assert api.calls == [{"q": "desk", "page": 1, "limit": 20, "sort": "price-asc"}]
    assert presenter.sort == "price-asc"
    assert len(presenter.controller.state.items) == 20


def test_retry_reloads_first_page_with_current_state() -> None:
    api = FakeCatalogApi()
    presenter = _presenter(api)

    async def scenario() -> None:
        await presenter.mount()
        await presenter.change_sort("name-desc")
        api.calls.clear()
        await presenter.retry()
        presenter.unmount()

    asyncio.run(scenario())

    assert api.calls == [{"q": "", "page": 1, "limit": 20, "sort": "name-desc"}]


# ==============================================================================
# Infinite scroll
# ==============================================================================


def test_load_more_requests_next_page_until_exhausted() -> None:
    api = FakeCatalogApi(total=45)
    presenter = _presenter(api)

    async def scenario() -> None:
        await presenter.mount()
        await presenter.load_more_items(20, 39)
        await presenter.load_more_items(40, 59)
        await presenter.load_more_items(45, 64)
        presenter.unmount()

    asyncio.run(scenario())

    assert [call["page"] for call in api.calls] == [1, 2, 3]
    assert len(presenter.controller.state.items) == 45
    assert presenter.controller.state.pagination.has_next is False


def test_load_more_ignored_while_loading() -> None:
    api = FakeCatalogApi(delay=0.02)
    presenter = _presenter(api)

    async def scenario() -> None:
        await presenter.mount()
        first = asyncio.ensure_future(presenter.load_more_items(20, 39))
        await asyncio.sleep(0)
        await presenter.load_more_items(20, 39)
        await first
        presenter.unmount()

    asyncio.run(scenario())

    assert [call["page"] for call in api.calls] == [1, 2]


def test_row_state_with_more_pages() -> None:
    presenter = _presenter(FakeCatalogApi(total=45))

    async def scenario() -> None:
        await presenter.mount()
        await asyncio.sleep(SETTLE)
        presenter.unmount()

    asyncio.run(scenario())

    assert presenter.item_count == 21
    assert presenter.is_item_loaded(19) is True
    assert presenter.is_item_loaded(20) is False
    assert presenter.is_loading_more is False


def test_row_state_when_everything_is_loaded() -> None:
    presenter = _presenter(FakeCatalogApi(total=5))

    async def scenario() -> None:
        await presenter.mount()
        await asyncio.sleep(SETTLE)
        presenter.unmount()

    asyncio.run(scenario())

    assert presenter.item_count == 5
    assert presenter.is_item_loaded(100) is True
    assert presenter.is_empty is False


def test_empty_result() -> None:
    presenter = _presenter(FakeCatalogApi(total=0))

    async def scenario() -> None:
        await presenter.mount()
        await asyncio.sleep(SETTLE)
        presenter.unmount()

    asyncio.run(scenario())

    assert presenter.is_empty is True
    assert presenter.item_count == 0


# ==============================================================================
# Unmount
# ==============================================================================


def test_unmount_cancels_pending_search() -> None:
    api = FakeCatalogApi()
    presenter = _presenter(api)

    async def scenario() -> None:
        await presenter.mount()
        api.calls.clear()
        presenter.on_search_input("desk")
        presenter.unmount()
        await asyncio.sleep(SETTLE)

    asyncio.run(scenario())

    assert api.calls == []
    assert presenter.mounted is False


def test_unmount_freezes_skeleton_state() -> None:
    presenter = _presenter(FakeCatalogApi())

    async def scenario() -> None:
        await presenter.mount()
        presenter.unmount()
        await asyncio.sleep(SETTLE)

    asyncio.run(scenario())

    # the hide timer was cancelled, so the flag never changed after unmount
    assert presenter.show_skeleton is True


def test_search_input_before_mount_only_records_query() -> None:
    api = FakeCatalogApi()
    presenter = _presenter(api)

    presenter.on_search_input("desk")

    assert presenter.search_query == "desk"
    assert api.calls == []
