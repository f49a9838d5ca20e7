"""
Quote schemas for request/response validation.
"""

from datetime import datetime
from decimal import Decimal
from pydantic import Field, model_validator

from catering_quotes.models.quote import QuoteStatus
from catering_quotes.schemas.base import (
    BaseSchema,
    PaginatedResponse,
    TimestampSchema,
    reject_explicit_nulls,
)
from catering_quotes.schemas.customer import CustomerSummary
from catering_quotes.services.pricing import MarginStatus


class QuoteLineItemCreate(BaseSchema):
    """
    Schema for a quote line.
    
    description and unit_cost default to the food item's name and cost
    price; display_order defaults to the line's position.
    """
    
    food_item_id: int = Field(..., gt=0)
    description: str | None = Field(None, min_length=1, max_length=500)
    quantity: int = Field(..., gt=0)
    unit_cost: Decimal | None = Field(None, ge=0, max_digits=12, decimal_places=4)
    display_order: int | None = Field(None, ge=0)


class QuoteLineItemResponse(BaseSchema):
    """Quote line item response schema."""
    
    id: int
    quote_id: int
    food_item_id: int
    description: str
    quantity: int
    unit_cost: Decimal
    unit_price: Decimal
    line_total: Decimal
    display_order: int


class QuoteCreate(BaseSchema):
    """Schema for creating a quote. Omitted rates fall back to the settings defaults."""
    
    customer_id: int = Field(..., gt=0)
    event_date: datetime | None = None
    vat_rate: Decimal | None = Field(None, ge=0, le=1, decimal_places=4)
    markup_percentage: Decimal | None = Field(None, ge=0, max_digits=7, decimal_places=4)
    notes: str | None = Field(None, max_length=1000)
    line_items: list[QuoteLineItemCreate] = Field(..., min_length=1)


class QuoteUpdate(BaseSchema):
    """
    Schema for updating a draft quote.
    
    Only fields present in the payload are applied. Sending line_items
    replaces every line.
    """
    
    event_date: datetime | None = None
    vat_rate: Decimal | None = Field(None, ge=0, le=1, decimal_places=4)
    markup_percentage: Decimal | None = Field(None, ge=0, max_digits=7, decimal_places=4)
    notes: str | None = Field(None, max_length=1000)
    line_items: list[QuoteLineItemCreate] | None = Field(None, min_length=1)
    
    @model_validator(mode="after")
    def _required_fields_not_null(self):
        reject_explicit_nulls(self, "vat_rate", "markup_percentage", "line_items")
        return self


class QuoteResponse(TimestampSchema):
    """Quote response schema."""
    
    id: int
    customer_id: int
    customer: CustomerSummary | None = None
    quote_number: str
    quote_date: datetime
    event_date: datetime | None
    status: QuoteStatus
    vat_rate: Decimal
    markup_percentage: Decimal
    total_cost: Decimal
    total_price: Decimal
    margin: Decimal
    margin_status: MarginStatus
    notes: str | None
    sent_at: datetime | None
    line_items: list[QuoteLineItemResponse]


class QuoteListResponse(PaginatedResponse):
    """Paginated quote list response."""
    
    items: list[QuoteResponse]


class PricingLineInput(BaseSchema):
    """One line of a pricing preview."""
    
    unit_cost: Decimal = Field(..., ge=0, max_digits=12, decimal_places=4)
    quantity: int = Field(..., gt=0)


class PricingPreviewRequest(BaseSchema):
    """Price a set of lines without saving a quote."""
    
    line_items: list[PricingLineInput] = Field(..., min_length=1)
    vat_rate: Decimal | None = Field(None, ge=0, le=1, decimal_places=4)
    markup_percentage: Decimal | None = Field(None, ge=0, max_digits=7, decimal_places=4)


class PricingPreviewResponse(BaseSchema):
    """Result of a pricing preview."""
    
    vat_rate: Decimal
    markup_percentage: Decimal
    line_totals: list[Decimal]
    total_cost: Decimal
    price_before_vat: Decimal
    vat_amount: Decimal
    total_price: Decimal
    margin: Decimal
    margin_status: MarginStatus
