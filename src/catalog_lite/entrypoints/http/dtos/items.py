from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ItemResponseDTO(BaseModel):
    id: int
    name: str
    category: str
    price: int | float


class PaginationDTO(BaseModel):
    """Pagination block; serialized with camelCase keys (pageSize, hasNext, ...)."""

    page: int
    page_size: int
    total: int
    total_pages: int
    has_next: bool
    has_prev: bool

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ItemListResponseDTO(BaseModel):
    items: list[ItemResponseDTO]
    pagination: PaginationDTO


class ItemsListQueryDTO(BaseModel):
    """Query parameters for listing items.

    page and limit are taken as raw strings: the leading integer is used and
    anything non-numeric falls back to the default instead of failing.
    """

    q: str | None = Field(
        default=None,
        description="Case-insensitive substring matched against name or category",
        examples=["desk"],
    )
    page: str | None = Field(
        default=None,
        description="1-based page number (default 1)",
        examples=["1"],
    )
    limit: str | None = Field(
        default=None,
        description="Page size (default 10)",
        examples=["10"],
    )
    sort: str | None = Field(
        default=None,
        description="default, name-asc, name-desc, price-asc or price-desc; unknown values act as default",
        examples=["price-asc"],
    )


class CreateItemRequestDTO(BaseModel):
    """Payload for creating an item.

    Fields are accepted as sent; type and range checks happen in the domain
    so that every invalid payload is reported the same way (400).
    """

    name: Any = None
    category: Any = None
    price: Any = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "Standing Desk",
                "category": "Furniture",
                "price": 1199,
            }
        }
    )


class PriceRangeDTO(BaseModel):
    min: int | float
    max: int | float


class ItemStatsResponseDTO(BaseModel):
    total: int
    average_price: int | float
    categories: dict[str, int]
    price_range: PriceRangeDTO

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
