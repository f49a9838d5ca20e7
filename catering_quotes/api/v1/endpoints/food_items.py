"""
Food item endpoints.
CRUD operations for the food catalogue.
"""

from fastapi import APIRouter, Query, Response, status

from catering_quotes.api.deps import DbSession, PageParams
from catering_quotes.schemas.food_item import (
    FoodItemCreate,
    FoodItemUpdate,
    FoodItemResponse,
    FoodItemListResponse,
)
from catering_quotes.services.food_item import FoodItemService


router = APIRouter()


@router.get(
    "",
    response_model=FoodItemListResponse,
    summary="List food items",
)
async def list_food_items(
    db: DbSession,
    pagination: PageParams,
    active_only: bool = Query(False, alias="activeOnly", description="Only active items"),
) -> FoodItemListResponse:
    """List food items ordered by name."""
    service = FoodItemService(db)
    food_items, total = await service.list(
        skip=pagination.offset,
        limit=pagination.page_size,
        active_only=active_only,
    )
    return FoodItemListResponse.create(
        items=[FoodItemResponse.model_validate(f) for f in food_items],
        total=total,
        page=pagination.page,
        page_size=pagination.page_size,
    )


@router.get(
    "/{food_item_id}",
    response_model=FoodItemResponse,
    summary="Get a food item",
)
async def get_food_item(
    food_item_id: int,
    db: DbSession,
) -> FoodItemResponse:
    service = FoodItemService(db)
    food_item = await service.get_or_404(food_item_id)
    return FoodItemResponse.model_validate(food_item)


@router.post(
    "",
    response_model=FoodItemResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a food item",
)
async def create_food_item(
    data: FoodItemCreate,
    db: DbSession,
) -> FoodItemResponse:
    service = FoodItemService(db)
    food_item = await service.create(data)
    return FoodItemResponse.model_validate(food_item)


@router.put(
    "/{food_item_id}",
    response_model=FoodItemResponse,
    summary="Update a food item",
)
async def update_food_item(
    food_item_id: int,
    data: FoodItemUpdate,
    db: DbSession,
) -> FoodItemResponse:
    service = FoodItemService(db)
    food_item = await service.get_or_404(food_item_id)
    food_item = await service.update(food_item, data)
    return FoodItemResponse.model_validate(food_item)


@router.delete(
    "/{food_item_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a food item",
    description="Refused while quote lines reference the item",
)
async def delete_food_item(
    food_item_id: int,
    db: DbSession,
) -> Response:
    service = FoodItemService(db)
    food_item = await service.get_or_404(food_item_id)
    await service.delete(food_item)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
