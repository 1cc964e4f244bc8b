from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Any

from catalog_lite.domain.errors import ValidationError


INVALID_ITEM_MESSAGE = "Invalid item data. Name, category, and positive price are required."

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10


@dataclass(frozen=True)
class Item:
    id: int
    name: str
    category: str
    price: float


class SortOrder(str, Enum):
    DEFAULT = "default"
    NAME_ASC = "name-asc"
    NAME_DESC = "name-desc"
    PRICE_ASC = "price-asc"
    PRICE_DESC = "price-desc"

    @classmethod
    def parse(cls, raw: str | None) -> SortOrder:
        """Unknown or missing sort values behave as DEFAULT."""
        if not raw:
            return cls.DEFAULT
        try:
            return cls(raw)
        except ValueError:
            return cls.DEFAULT


@dataclass(frozen=True, slots=True)
class ItemQuery:
    q: str = ""
    page: int = DEFAULT_PAGE
    limit: int = DEFAULT_LIMIT
    sort: SortOrder = SortOrder.DEFAULT


@dataclass(frozen=True, slots=True)
class Pagination:
    page: int
    page_size: int
    total: int
    total_pages: int
    has_next: bool
    has_prev: bool

    @classmethod
    def build(cls, page: int, page_size: int, total: int) -> Pagination:
        end = (page - 1) * page_size + page_size
        return cls(
            page=page,
            page_size=page_size,
            total=total,
            total_pages=math.ceil(total / page_size),
            has_next=end < total,
            has_prev=page > 1,
        )


@dataclass(frozen=True, slots=True)
class ItemPage:
    items: list[Item]
    pagination: Pagination


@dataclass(frozen=True, slots=True)
class ItemDraft:
    """Unvalidated payload for a new item, exactly as the client sent it."""

    name: Any = None
    category: Any = None
    price: Any = None

    def validate(self) -> None:
        """
        Validate the draft in field order, stopping at the first failure.

        Raises:
            ValidationError: If name, category or price is invalid
        """
        if not self.name:
            raise _invalid_item("name", "Name is required", "REQUIRED")
        if not isinstance(self.name, str):
            raise _invalid_item("name", "Name must be a string", "INVALID_TYPE")
        if not self.category:
            raise _invalid_item("category", "Category is required", "REQUIRED")
        if not isinstance(self.category, str):
            raise _invalid_item("category", "Category must be a string", "INVALID_TYPE")
        # bool is an int subclass but not a price
        if isinstance(self.price, bool) or not isinstance(self.price, (int, float)):
            raise _invalid_item("price", "Price must be a number", "INVALID_TYPE")
        if not self.price >= 0:
            raise _invalid_item("price", "Price must be >= 0", "INVALID_VALUE")


def _invalid_item(field: str, message: str, code: str) -> ValidationError:
    return ValidationError(
        message=INVALID_ITEM_MESSAGE,
        errors=[{"field": field, "message": message, "code": code}],
    )
