"""Tests for catalog statistics."""

from catalog_lite.domain.item import Item
from catalog_lite.domain.item_stats import ItemStats, calculate_stats


def test_stats_for_empty_collection() -> None:
    assert calculate_stats([]) == ItemStats(
        total=0, average_price=0, categories={}, price_min=0, price_max=0
    )


def test_stats_aggregates_prices_and_categories() -> None:
    items = [
        Item(id=1, name="Laptop Pro", category="Electronics", price=2499),
        Item(id=2, name="Headphones", category="Electronics", price=401),
        Item(id=3, name="Ergonomic Chair", category="Furniture", price=800),
    ]

    stats = calculate_stats(items)

    assert stats.total == 3
    assert stats.average_price == 1233.3333333333333
    assert stats.categories == {"Electronics": 2, "Furniture": 1}
    assert stats.price_min == 401
    assert stats.price_max == 2499


def test_stats_single_item() -> None:
    stats = calculate_stats([Item(id=1, name="Lamp", category="Home", price=19.5)])

    assert stats.average_price == 19.5
    assert stats.price_min == stats.price_max == 19.5
