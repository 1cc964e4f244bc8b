from __future__ import annotations

from catalog_lite.domain.item import Item, ItemDraft, ItemPage, Pagination
from catalog_lite.domain.item_query import parse_list_query
from catalog_lite.domain.item_stats import ItemStats
from catalog_lite.entrypoints.http.dtos.items import (
    CreateItemRequestDTO,
    ItemListResponseDTO,
    ItemResponseDTO,
    ItemsListQueryDTO,
    ItemStatsResponseDTO,
    PaginationDTO,
    PriceRangeDTO,
)
from catalog_lite.use_cases.create_item import CreateItemRequest
from catalog_lite.use_cases.list_items import ListItemsRequest


class ItemMapper:
    """Maps between REST DTOs and domain models for items."""

    @staticmethod
    def to_domain_request(dto: ItemsListQueryDTO) -> ListItemsRequest:
        """
        Builds a normalized list request from raw query parameters.

        Missing or non-numeric page/limit fall back to their defaults and
        unknown sort values become the default order.

        Args:
            dto: The raw query parameters

        Returns:
            ListItemsRequest: Domain request with a normalized ItemQuery
        """
        return ListItemsRequest(
            query=parse_list_query(q=dto.q, page=dto.page, limit=dto.limit, sort=dto.sort)
        )

    @staticmethod
    def to_create_request(dto: CreateItemRequestDTO) -> CreateItemRequest:
        """Passes the payload through unvalidated; CreateItem validates the draft."""
        return CreateItemRequest(
            draft=ItemDraft(name=dto.name, category=dto.category, price=dto.price)
        )

    @staticmethod
    def to_item_response(item: Item) -> ItemResponseDTO:
        return ItemResponseDTO(
            id=item.id,
            name=item.name,
            category=item.category,
            price=item.price,
        )

    @staticmethod
    def to_pagination_response(pagination: Pagination) -> PaginationDTO:
        return PaginationDTO(
            page=pagination.page,
            page_size=pagination.page_size,
            total=pagination.total,
            total_pages=pagination.total_pages,
            has_next=pagination.has_next,
            has_prev=pagination.has_prev,
        )

    @staticmethod
    def to_list_response(page: ItemPage) -> ItemListResponseDTO:
        """
        Converts a domain page to the REST response with pagination metadata.

        Args:
            page: Domain page result (possibly served from the cache)

        Returns:
            ItemListResponseDTO: Items plus the pagination block
        """
        return ItemListResponseDTO(
            items=[ItemMapper.to_item_response(item) for item in page.items],
            pagination=ItemMapper.to_pagination_response(page.pagination),
        )

    @staticmethod
    def to_stats_response(stats: ItemStats) -> ItemStatsResponseDTO:
        return ItemStatsResponseDTO(
            total=stats.total,
            average_price=stats.average_price,
            categories=stats.categories,
            price_range=PriceRangeDTO(min=stats.price_min, max=stats.price_max),
        )
