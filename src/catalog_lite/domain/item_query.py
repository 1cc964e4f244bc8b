"""Filter, sort and paginate a snapshot of the item collection.

Pure functions over in-memory data: the list-query pipeline runs as
filter -> sort -> paginate, and never touches storage or the cache.
"""

from __future__ import annotations

import re
import unicodedata
from typing import Callable, Sequence

from catalog_lite.domain.item import (
    DEFAULT_LIMIT,
    DEFAULT_PAGE,
    Item,
    ItemPage,
    ItemQuery,
    Pagination,
    SortOrder,
)

_LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")


def parse_leading_int(raw: str) -> int | None:
    """Parse the leading integer of a wire value ("2", " 3", "4px"), else None."""
    match = _LEADING_INT.match(raw)
    if match is None:
        return None
    return int(match.group(1))


def parse_int(raw: str | int | None, default: int) -> int:
    """Absent or non-numeric values fall back to ``default``."""
    if raw is None:
        return default
    if isinstance(raw, int):
        return raw
    parsed = parse_leading_int(raw)
    return default if parsed is None else parsed


def parse_list_query(
    q: str | None = None,
    page: str | int | None = None,
    limit: str | int | None = None,
    sort: str | None = None,
) -> ItemQuery:
    """
    Build a normalized ItemQuery from raw query-string values.

    Missing optional fields are replaced by their defaults, so equivalent
    requests produce equal queries (and equal cache signatures).
    A non-positive limit falls back to the default page size; page is
    passed through unvalidated.
    """
    page_size = parse_int(limit, DEFAULT_LIMIT)
    if page_size <= 0:
        page_size = DEFAULT_LIMIT

    return ItemQuery(
        q=q or "",
        page=parse_int(page, DEFAULT_PAGE),
        limit=page_size,
        sort=SortOrder.parse(sort),
    )


def filter_items(items: Sequence[Item], q: str) -> list[Item]:
    """Keep items whose name or category contains ``q`` (case-insensitive)."""
    if not q:
        return list(items)
    needle = q.lower()
    return [
        item for item in items if needle in item.name.lower() or needle in item.category.lower()
    ]


def collation_key(value: str) -> tuple[str, str]:
    """
    Locale-style sort key: accents and case are ignored first, then
    lowercase sorts before uppercase for otherwise equal strings.
    """
    decomposed = unicodedata.normalize("NFKD", value)
    base = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return (base.casefold(), value.swapcase())


_SORT_KEYS: dict[SortOrder, tuple[Callable[[Item], object], bool]] = {
    SortOrder.NAME_ASC: (lambda item: collation_key(item.name), False),
    SortOrder.NAME_DESC: (lambda item: collation_key(item.name), True),
    SortOrder.PRICE_ASC: (lambda item: item.price, False),
    SortOrder.PRICE_DESC: (lambda item: item.price, True),
}


def sort_items(items: Sequence[Item], sort: SortOrder) -> list[Item]:
    """Stable sort; DEFAULT keeps the incoming order."""
    if sort not in _SORT_KEYS:
        return list(items)
    key, reverse = _SORT_KEYS[sort]
    # sorted() stays stable with reverse=True
    return sorted(items, key=key, reverse=reverse)


def paginate(items: Sequence[Item], page: int, limit: int) -> ItemPage:
    start = (page - 1) * limit
    end = start + limit
    return ItemPage(
        items=list(items[start:end]),
        pagination=Pagination.build(page=page, page_size=limit, total=len(items)),
    )


def execute(all_items: Sequence[Item], query: ItemQuery) -> ItemPage:
    """Run the full pipeline: filter -> sort -> paginate."""
    matches = filter_items(all_items, query.q)
    ordered = sort_items(matches, query.sort)
    return paginate(ordered, page=query.page, limit=query.limit)
