#!/usr/bin/env python3
"""
Seed the catalog JSON file with deterministic random items.

Features:
- Deterministic: fixed seed → same dataset every run
- Idempotent: the file is replaced, never appended to
- Realism-lite: price bands per category

Usage:
    python scripts/seed_items.py            # writes CATALOG_DATA_PATH (default data/items.json)
    python scripts/seed_items.py 500        # number of items
"""

from __future__ import annotations

import random
import sys
from pathlib import Path

# Add src to path so we can import our modules
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from catalog_lite.adapters.json_file_item_store import JsonFileItemStore
from catalog_lite.domain.item import Item
from catalog_lite.infra import config


# ==============================================================================
# Configuration
# ==============================================================================

RANDOM_SEED = 42  # Fixed seed for deterministic results
NUM_ITEMS = 200  # Number of items to generate


# ==============================================================================
# Catalog Data
# ==============================================================================

# Hand-picked items kept at the top of the file with ids 1-5
BASE_ITEMS = [
    Item(id=1, name="Laptop Pro", category="Electronics", price=2499),
    Item(id=2, name="Noise Cancelling Headphones", category="Electronics", price=399),
    Item(id=3, name="Ultra-Wide Monitor", category="Electronics", price=999),
    Item(id=4, name="Ergonomic Chair", category="Furniture", price=799),
    Item(id=5, name="Standing Desk", category="Furniture", price=1199),
]

# Product nouns and price band (min, max) per category
CATEGORIES = {
    "Electronics": {
        "nouns": ["Tablet", "Smartwatch", "Speaker", "Webcam", "Keyboard", "Mouse", "Router"],
        "price_min": 29,
        "price_max": 1499,
    },
    "Furniture": {
        "nouns": ["Bookshelf", "Desk Lamp", "Filing Cabinet", "Footrest", "Side Table"],
        "price_min": 49,
        "price_max": 899,
    },
    "Kitchen": {
        "nouns": ["Blender", "Coffee Maker", "Kettle", "Toaster", "Knife Set"],
        "price_min": 19,
        "price_max": 399,
    },
    "Outdoors": {
        "nouns": ["Tent", "Backpack", "Sleeping Bag", "Camp Stove", "Headlamp"],
        "price_min": 15,
        "price_max": 599,
    },
}

ADJECTIVES = ["Compact", "Wireless", "Premium", "Portable", "Classic", "Smart", "Deluxe"]


# ==============================================================================
# Seed Generation
# ==============================================================================


def generate_item(item_id: int) -> Item:
    """Generate a single random item in a random category."""
    category = random.choice(list(CATEGORIES.keys()))
    band = CATEGORIES[category]

    name = f"{random.choice(ADJECTIVES)} {random.choice(band['nouns'])}"

    # Whole prices, with the occasional .99 ending
    price: float = random.randint(band["price_min"], band["price_max"])
    if random.random() < 0.3:
        price = price - 0.01

    return Item(id=item_id, name=name, category=category, price=price)


def seed_items(
    path: Path | None = None,
    num_items: int = NUM_ITEMS,
    seed: int = RANDOM_SEED,
) -> list[Item]:
    """
    Replace the catalog file with BASE_ITEMS plus generated items.

    Args:
        path: Target JSON file (defaults to CATALOG_DATA_PATH)
        num_items: Total number of items, base items included
        seed: Random seed for deterministic results
    """
    random.seed(seed)
    store = JsonFileItemStore(path or config.data_path())

    print(f"🌱 Seeding {store.path} with {num_items} items (seed={seed})...")

    items = list(BASE_ITEMS[:num_items])
    next_id = len(items) + 1
    while len(items) < num_items:
        items.append(generate_item(next_id))
        next_id += 1

    store.write_all(items)

    print(f"✅ Successfully seeded {len(items)} items!")
    return items


# ==============================================================================
# Main
# ==============================================================================


if __name__ == "__main__":
    try:
        count = int(sys.argv[1]) if len(sys.argv) > 1 else NUM_ITEMS
        seed_items(num_items=count)
    except Exception as e:
        print(f"❌ Error seeding items: {e}", file=sys.stderr)
        sys.exit(1)
