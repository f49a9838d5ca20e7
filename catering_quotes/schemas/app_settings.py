"""
Application settings schemas.
"""

from decimal import Decimal
from pydantic import Field, model_validator

from catering_quotes.schemas.base import BaseSchema, TimestampSchema, reject_explicit_nulls


class AppSettingsResponse(TimestampSchema):
    """Settings response schema."""
    
    id: int
    default_vat_rate: Decimal
    default_markup_percentage: Decimal
    margin_green_threshold_pct: Decimal
    margin_amber_threshold_pct: Decimal


class AppSettingsUpdate(BaseSchema):
    """
    Schema for updating settings.
    
    Threshold ordering is checked against the stored values in
    SettingsService, since either threshold may be omitted.
    """
    
    default_vat_rate: Decimal | None = Field(None, ge=0, le=1, decimal_places=4)
    default_markup_percentage: Decimal | None = Field(None, ge=0, max_digits=7, decimal_places=4)
    margin_green_threshold_pct: Decimal | None = Field(None, ge=0, le=1, decimal_places=4)
    margin_amber_threshold_pct: Decimal | None = Field(None, ge=0, le=1, decimal_places=4)
    
    @model_validator(mode="after")
    def _fields_not_null(self):
        reject_explicit_nulls(
            self,
            "default_vat_rate",
            "default_markup_percentage",
            "margin_green_threshold_pct",
            "margin_amber_threshold_pct",
        )
        return self
