"""
Food item schemas for request/response validation.
"""

from decimal import Decimal
from pydantic import Field, model_validator

from catering_quotes.schemas.base import (
    BaseSchema,
    PaginatedResponse,
    TimestampSchema,
    reject_explicit_nulls,
)


class FoodItemBase(BaseSchema):
    """Base food item schema."""
    
    name: str = Field(..., min_length=1, max_length=200)
    description: str = Field(default="", max_length=500)
    cost_price: Decimal = Field(..., gt=0, max_digits=12, decimal_places=4)
    allergens: int | None = Field(None, ge=0, description="Allergen bitmask")
    dietary_tags: int | None = Field(None, ge=0, description="Dietary tag bitmask")


class FoodItemCreate(FoodItemBase):
    """Schema for creating a food item."""
    pass


class FoodItemUpdate(BaseSchema):
    """Schema for updating a food item."""
    
    name: str | None = Field(None, min_length=1, max_length=200)
    description: str | None = Field(None, max_length=500)
    cost_price: Decimal | None = Field(None, gt=0, max_digits=12, decimal_places=4)
    allergens: int | None = Field(None, ge=0)
    dietary_tags: int | None = Field(None, ge=0)
    is_active: bool | None = None
    
    @model_validator(mode="after")
    def _required_fields_not_null(self):
        reject_explicit_nulls(self, "name", "description", "cost_price", "is_active")
        return self


class FoodItemResponse(FoodItemBase, TimestampSchema):
    """Food item response schema."""
    
    id: int
    is_active: bool


class FoodItemListResponse(PaginatedResponse):
    """Paginated food item list response."""
    
    items: list[FoodItemResponse]
