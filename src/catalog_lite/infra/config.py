from __future__ import annotations

import os
from pathlib import Path

DEFAULT_DATA_PATH = "data/items.json"
DEFAULT_CACHE_TTL_SECONDS = 300.0
DEFAULT_LOG_LEVEL = "INFO"


def data_path() -> Path:
    return Path(os.getenv("CATALOG_DATA_PATH") or DEFAULT_DATA_PATH)


def cache_ttl_seconds() -> float:
    raw = os.getenv("CATALOG_CACHE_TTL_SECONDS")

    if not raw:
        return DEFAULT_CACHE_TTL_SECONDS

    try:
        ttl = float(raw)
    except ValueError:
        raise RuntimeError(f"CATALOG_CACHE_TTL_SECONDS must be a number, got {raw!r}")

    if ttl < 0:
        raise RuntimeError("CATALOG_CACHE_TTL_SECONDS must be >= 0")

    return ttl


def log_level() -> str:
    return (os.getenv("CATALOG_LOG_LEVEL") or DEFAULT_LOG_LEVEL).upper()
