from fastapi import APIRouter, Depends

from catalog_lite.entrypoints.http.dependencies import get_item_stats_use_case
from catalog_lite.entrypoints.http.dtos.items import ItemStatsResponseDTO
from catalog_lite.entrypoints.http.error_responses import ErrorResponse
from catalog_lite.entrypoints.http.mappers.item_mapper import ItemMapper
from catalog_lite.use_cases.get_item_stats import GetItemStats


router = APIRouter(tags=["Stats"])


@router.get(
    "/stats",
    response_model=ItemStatsResponseDTO,
    summary="Catalog statistics",
    description="""
    Item count, average price, per-category counts and price range.

    Recomputed only when the catalog file's modification time changes.
    """,
    responses={
        500: {"model": ErrorResponse, "description": "Item data could not be read"},
    },
)
def get_stats(
    use_case: GetItemStats = Depends(get_item_stats_use_case),
) -> ItemStatsResponseDTO:
    result = use_case.execute()
    return ItemMapper.to_stats_response(result.stats)
