"""
Incremental list presenter: what to fetch and when, for a virtualized list.

Timing rules
────────────
debounce          search input restarts a quiet-period timer; only the last
                  input of a burst triggers a search
minimum skeleton  once a fetch is triggered the skeleton stays up for at
                  least min_loading_seconds; a slower response clears it
                  as soon as it arrives
infinite scroll   next page = first unloaded index // page_size + 1, only
                  while nothing is loading and the server reported hasNext

All timers and background tasks belong to the presenter; unmount() cancels
them and no presenter state changes afterwards.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Awaitable, Callable

from catalog_lite.client.fetch_controller import FetchController

logger = logging.getLogger(__name__)

PAGE_SIZE = 20
DEBOUNCE_SECONDS = 0.3
MIN_LOADING_SECONDS = 0.5
SKELETON_ROWS = 10

SORT_OPTIONS: list[tuple[str, str]] = [
    ("default", "Default"),
    ("name-asc", "Name (A-Z)"),
    ("name-desc", "Name (Z-A)"),
    ("price-asc", "Price (Low to High)"),
    ("price-desc", "Price (High to Low)"),
]


class IncrementalListPresenter:
    def __init__(
        self,
        controller: FetchController,
        page_size: int = PAGE_SIZE,
        debounce_seconds: float = DEBOUNCE_SECONDS,
        min_loading_seconds: float = MIN_LOADING_SECONDS,
    ) -> None:
        self.controller = controller
        self.page_size = page_size
        self.debounce_seconds = debounce_seconds
        self.min_loading_seconds = min_loading_seconds

        self.search_query = ""
        self.sort = "default"
        self.show_skeleton = False

        self._mounted = False
        self._debounce_timer: asyncio.TimerHandle | None = None
        self._skeleton_timer: asyncio.TimerHandle | None = None
        self._skeleton_trigger = 0
        self._tasks: set[asyncio.Task[None]] = set()

    # ── lifecycle ──────────────────────────────────────────────────────────

    @property
    def mounted(self) -> bool:
        return self._mounted

    async def mount(self) -> None:
        """Show the skeleton and load the first page."""
        self._mounted = True
        await self._fetch_with_skeleton(
            lambda: self.controller.fetch_items(page=1, limit=self.page_size, sort=self.sort)
        )

    def unmount(self) -> None:
        self._mounted = False
        self._cancel_debounce()
        self._cancel_skeleton_timer()
        for task in list(self._tasks):
            task.cancel()
        self._tasks.clear()

    # ── user actions ───────────────────────────────────────────────────────

    def on_search_input(self, text: str) -> None:
        """Record the new query and (re)start the debounce timer."""
        self.search_query = text
        self._cancel_debounce()
        if not self._mounted:
            return
        loop = asyncio.get_running_loop()
        self._debounce_timer = loop.call_later(self.debounce_seconds, self._debounce_fired, text)

    async def submit_search(self) -> None:
        """Search right away (Enter key or search button); a pending debounce is dropped."""
        self._cancel_debounce()
        query = self.search_query
        await self._fetch_with_skeleton(
            lambda: self.controller.search_items(query, self.sort, limit=self.page_size)
        )

    async def change_sort(self, sort: str) -> None:
        """Apply a new sort order and reload from page 1, keeping the current query."""
        self.sort = sort
        await self._fetch_with_skeleton(
            lambda: self.controller.sort_items(sort, query=self.search_query, limit=self.page_size)
        )

    async def retry(self) -> None:
        """Reload page 1 after an error."""
        await self.controller.fetch_items(
            q=self.search_query, page=1, limit=self.page_size, sort=self.sort
        )

    async def load_more_items(self, start_index: int, stop_index: int) -> None:
        """Infinite-scroll callback for the range [start_index, stop_index]."""
        state = self.controller.state
        if state.loading or state.pagination is None or not state.pagination.has_next:
            return
        next_page = start_index // self.page_size + 1
        await self.controller.load_more_items(
            next_page, self.sort, self.search_query, limit=self.page_size
        )

    # ── derived view state ─────────────────────────────────────────────────

    def is_item_loaded(self, index: int) -> bool:
        state = self.controller.state
        has_next = state.pagination is not None and state.pagination.has_next
        return not has_next or index < len(state.items)

    @property
    def item_count(self) -> int:
        """Rows the virtual list should render, one extra placeholder while more data exists."""
        state = self.controller.state
        if self.show_skeleton and not state.items:
            return SKELETON_ROWS
        if state.pagination is not None and state.pagination.has_next:
            return len(state.items) + 1
        return len(state.items)

    @property
    def is_empty(self) -> bool:
        state = self.controller.state
        return not state.items and not state.loading and not self.show_skeleton

    @property
    def is_loading_more(self) -> bool:
        state = self.controller.state
        return state.loading and bool(state.items)

    # ── internals ──────────────────────────────────────────────────────────

    def _debounce_fired(self, query: str) -> None:
        self._debounce_timer = None
        if not self._mounted:
            return
        self._spawn(
            self._fetch_with_skeleton(
                lambda: self.controller.search_items(query, self.sort, limit=self.page_size)
            )
        )

    async def _fetch_with_skeleton(self, fetch: Callable[[], Awaitable[None]]) -> None:
        if not self._mounted:
            return

        self._cancel_skeleton_timer()
        self._skeleton_trigger += 1
        trigger = self._skeleton_trigger
        self.show_skeleton = True

        loop = asyncio.get_running_loop()
        started = loop.time()

        await fetch()

        # a newer trigger owns the skeleton now
        if not self._mounted or trigger != self._skeleton_trigger:
            return

        remaining = self.min_loading_seconds - (loop.time() - started)
        if remaining > 0:
            self._skeleton_timer = loop.call_later(remaining, self._hide_skeleton)
        else:
            self.show_skeleton = False

    def _hide_skeleton(self) -> None:
        self._skeleton_timer = None
        if self._mounted:
            self.show_skeleton = False

    def _spawn(self, coro: Awaitable[None]) -> None:
        task: asyncio.Task[None] = asyncio.ensure_future(coro)
        self._tasks.add(task)
        task.add_done_callback(self._task_done)

    def _task_done(self, task: asyncio.Task[None]) -> None:
        self._tasks.discard(task)
        if not task.cancelled() and task.exception() is not None:
            logger.error("Background fetch failed", exc_info=task.exception())

    def _cancel_debounce(self) -> None:
        if self._debounce_timer is not None:
            self._debounce_timer.cancel()
            self._debounce_timer = None

    def _cancel_skeleton_timer(self) -> None:
        if self._skeleton_timer is not None:
            self._skeleton_timer.cancel()
            self._skeleton_timer = None
