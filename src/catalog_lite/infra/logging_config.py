from __future__ import annotations

import logging

from catalog_lite.infra.config import log_level

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str | None = None) -> None:
    """
    Configure the root logger once per process.

    Handlers already installed (e.g., by uvicorn or pytest) are left alone;
    only the level of the catalog_lite logger tree is set.
    """
    resolved = (level or log_level()).upper()

    # no-op when the root logger already has handlers
    logging.basicConfig(format=LOG_FORMAT)
    logging.getLogger("catalog_lite").setLevel(resolved)
