from fastapi import APIRouter, Depends, status

from catalog_lite.entrypoints.http.dependencies import (
    get_create_item_use_case,
    get_get_item_by_id_use_case,
    get_list_items_use_case,
)
from catalog_lite.entrypoints.http.dtos.items import (
    CreateItemRequestDTO,
    ItemListResponseDTO,
    ItemResponseDTO,
    ItemsListQueryDTO,
)
from catalog_lite.entrypoints.http.error_responses import ErrorResponse
from catalog_lite.entrypoints.http.mappers.item_mapper import ItemMapper
from catalog_lite.use_cases.create_item import CreateItem
from catalog_lite.use_cases.get_item_by_id import GetItemById, GetItemByIdRequest
from catalog_lite.use_cases.list_items import ListItems


router = APIRouter(tags=["Items"])


@router.get(
    "/items",
    response_model=ItemListResponseDTO,
    summary="List catalog items",
    description="""
    List items with optional search, sort and pagination.

    ## Search
    - `q` matches name or category, case-insensitive substring

    ## Sort
    - `default` (stored order), `name-asc`, `name-desc`, `price-asc`, `price-desc`
    - Unknown values behave as `default`

    ## Pagination
    - Default limit: 10, default page: 1
    - Pages past the end return no items with valid pagination metadata

    Results are cached for five minutes per distinct query; creating an item
    clears the cache.

    ## Example
    ```
    GET /api/items?q=desk&sort=price-asc&limit=2&page=1
    ```
    """,
    responses={
        200: {
            "description": "Successful response",
            "content": {
                "application/json": {
                    "example": {
                        "items": [
                            {"id": 4, "name": "Ergonomic Chair", "category": "Furniture", "price": 799},
                            {"id": 5, "name": "Standing Desk", "category": "Furniture", "price": 1199},
                        ],
                        "pagination": {
                            "page": 1,
                            "pageSize": 2,
                            "total": 2,
                            "totalPages": 1,
                            "hasNext": False,
                            "hasPrev": False,
                        },
                    }
                }
            },
        },
        500: {"model": ErrorResponse, "description": "Item data could not be read"},
    },
)
def list_items(
    query: ItemsListQueryDTO = Depends(),
    use_case: ListItems = Depends(get_list_items_use_case),
) -> ItemListResponseDTO:
    """List items endpoint following parse → execute → map → return pattern."""
    # 1. Map to domain request
    request = ItemMapper.to_domain_request(query)

    # 2. Execute use case
    result = use_case.execute(request)

    # 3. Map to response
    return ItemMapper.to_list_response(result.page)


@router.get(
    "/items/{item_id}",
    response_model=ItemResponseDTO,
    summary="Get item by ID",
    responses={
        400: {"model": ErrorResponse, "description": "ID is not numeric"},
        404: {"model": ErrorResponse, "description": "Item not found"},
    },
)
def get_item(
    item_id: str,
    use_case: GetItemById = Depends(get_get_item_by_id_use_case),
) -> ItemResponseDTO:
    """The raw path value goes to the use case, which owns the numeric check."""
    result = use_case.execute(GetItemByIdRequest(item_id=item_id))
    return ItemMapper.to_item_response(result.item)


@router.post(
    "/items",
    response_model=ItemResponseDTO,
    status_code=status.HTTP_201_CREATED,
    summary="Create item",
    description="""
    Create an item and append it to the catalog file.

    ## Validation (first failure wins)
    - `name` is required and non-empty
    - `category` is required and non-empty
    - `price` must be a JSON number >= 0

    The new item's `id` is assigned by the server.
    """,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid item data"},
        500: {"model": ErrorResponse, "description": "Item data could not be written"},
    },
)
def create_item(
    payload: CreateItemRequestDTO,
    use_case: CreateItem = Depends(get_create_item_use_case),
) -> ItemResponseDTO:
    # 1. Map to domain request (no validation yet)
    request = ItemMapper.to_create_request(payload)

    # 2. Execute use case (validates, persists, invalidates the cache)
    result = use_case.execute(request)

    # 3. Map to response
    return ItemMapper.to_item_response(result.item)
