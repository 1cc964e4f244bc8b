"""Response models for the catalog API, as seen by the client."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class RemoteItem(BaseModel):
    id: int
    name: str
    category: str
    price: int | float

    model_config = ConfigDict(frozen=True)


class RemotePagination(BaseModel):
    page: int
    page_size: int
    total: int
    total_pages: int
    has_next: bool
    has_prev: bool

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class ItemListPayload(BaseModel):
    items: list[RemoteItem]
    pagination: RemotePagination
