"""JSON file implementation of ItemStore."""

from __future__ import annotations

import json
import logging
import os
import tempfile
from dataclasses import asdict
from pathlib import Path
from typing import Any

from catalog_lite.domain.errors import DataParseError, StorageError
from catalog_lite.domain.item import Item
from catalog_lite.ports.item_store import ItemStore

logger = logging.getLogger(__name__)


class JsonFileItemStore(ItemStore):
    """
    ItemStore backed by a single JSON file holding an array of item records.

    - read_all() parses the whole file on every call (no in-process copy)
    - write_all() writes a sibling temp file and renames it over the existing one,
      so readers see either the old or the new collection, never a partial one
    - last_modified() is the file mtime in nanoseconds
    """

    def __init__(self, path: str | Path) -> None:
        """
        Initialize the store.

        Args:
            path: Location of the JSON file (need not exist until first read)
        """
        super().__init__()
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def read_all(self) -> list[Item]:
        try:
            raw = self._path.read_text(encoding="utf-8")
        except OSError as exc:
            logger.error(
                "Failed to read item data",
                extra={"path": str(self._path), "error": str(exc)},
            )
            raise StorageError(
                f"Failed to read item data: {exc.strerror or exc}", path=str(self._path)
            ) from exc
        except UnicodeDecodeError as exc:
            raise DataParseError(
                f"Item data is not valid UTF-8: {exc.reason}", path=str(self._path)
            ) from exc

        try:
            records = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise DataParseError(
                f"Item data is not valid JSON: {exc.msg}", path=str(self._path)
            ) from exc

        if not isinstance(records, list):
            raise DataParseError("Item data must be a JSON array", path=str(self._path))

        return [self._to_domain(record) for record in records]

    def write_all(self, items: list[Item]) -> None:
        payload = json.dumps([asdict(item) for item in items], indent=2)

        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                dir=self._path.parent, prefix=f".{self._path.name}.", suffix=".tmp"
            )
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as tmp:
                    tmp.write(payload)
                os.replace(tmp_name, self._path)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as exc:
            logger.error(
                "Failed to write item data",
                extra={"path": str(self._path), "error": str(exc)},
            )
            raise StorageError(
                f"Failed to write item data: {exc.strerror or exc}", path=str(self._path)
            ) from exc

        logger.debug("Item data written", extra={"path": str(self._path), "count": len(items)})
        self._notify_written()

    def last_modified(self) -> int | None:
        try:
            return self._path.stat().st_mtime_ns
        except OSError:
            return None

    def _to_domain(self, record: Any) -> Item:
        """
        Convert one JSON record to an Item.

        Raises:
            DataParseError: If the record is not an object with the item fields
        """
        if not isinstance(record, dict) or not all(
            _is_field_type(record.get(name), types) for name, types in _RECORD_FIELDS.items()
        ):
            raise DataParseError(f"Malformed item record: {record!r}", path=str(self._path))

        return Item(
            id=record["id"],
            name=record["name"],
            category=record["category"],
            price=record["price"],
        )


_RECORD_FIELDS: dict[str, tuple[type, ...]] = {
    "id": (int,),
    "name": (str,),
    "category": (str,),
    "price": (int, float),
}


def _is_field_type(value: Any, types: tuple[type, ...]) -> bool:
    # JSON true/false load as bool, which is an int subclass
    return isinstance(value, types) and not isinstance(value, bool)
