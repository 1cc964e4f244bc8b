from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import Sequence

from catalog_lite.domain.item import Item


@dataclass(frozen=True, slots=True)
class ItemStats:
    total: int
    average_price: float
    categories: dict[str, int]
    price_min: float
    price_max: float


def calculate_stats(items: Sequence[Item]) -> ItemStats:
    """Aggregate counts and prices; an empty collection yields zeros."""
    if not items:
        return ItemStats(total=0, average_price=0, categories={}, price_min=0, price_max=0)

    prices = [item.price for item in items]
    return ItemStats(
        total=len(items),
        average_price=sum(prices) / len(items),
        categories=dict(Counter(item.category for item in items)),
        price_min=min(prices),
        price_max=max(prices),
    )
