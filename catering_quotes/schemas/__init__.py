"""
Pydantic schemas for request/response validation.
"""

from catering_quotes.schemas.customer import (
    CustomerCreate,
    CustomerUpdate,
    CustomerResponse,
    CustomerListResponse,
)
from catering_quotes.schemas.food_item import (
    FoodItemCreate,
    FoodItemUpdate,
    FoodItemResponse,
    FoodItemListResponse,
)
from catering_quotes.schemas.quote import (
    QuoteCreate,
    QuoteUpdate,
    QuoteResponse,
    QuoteListResponse,
    QuoteLineItemCreate,
    QuoteLineItemResponse,
    PricingPreviewRequest,
    PricingPreviewResponse,
)
from catering_quotes.schemas.app_settings import (
    AppSettingsResponse,
    AppSettingsUpdate,
)
from catering_quotes.schemas.reference_data import (
    AllergenResponse,
    DietaryTagResponse,
)

__all__ = [
    # Customer
    "CustomerCreate",
    "CustomerUpdate",
    "CustomerResponse",
    "CustomerListResponse",
    # Food item
    "FoodItemCreate",
    "FoodItemUpdate",
    "FoodItemResponse",
    "FoodItemListResponse",
    # Quote
    "QuoteCreate",
    "QuoteUpdate",
    "QuoteResponse",
    "QuoteListResponse",
    "QuoteLineItemCreate",
    "QuoteLineItemResponse",
    "PricingPreviewRequest",
    "PricingPreviewResponse",
    # Settings
    "AppSettingsResponse",
    "AppSettingsUpdate",
    # Reference data
    "AllergenResponse",
    "DietaryTagResponse",
]
