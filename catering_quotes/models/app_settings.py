"""
Tenant-wide pricing settings.
The table holds a single row with id 1.
"""

from decimal import Decimal
from sqlalchemy import Numeric
from sqlalchemy.orm import Mapped, mapped_column

from catering_quotes.models.base import BaseModel


SETTINGS_ROW_ID = 1


class AppSettings(BaseModel):
    """
    Application settings.
    
    Attributes:
        default_vat_rate: VAT applied when a quote does not specify one
        default_markup_percentage: Markup applied when a quote does not specify one
        margin_green_threshold_pct: Minimum margin for a healthy quote
        margin_amber_threshold_pct: Minimum margin for a borderline quote
    """
    
    __tablename__ = "app_settings"
    
    default_vat_rate: Mapped[Decimal] = mapped_column(
        Numeric(precision=7, scale=4),
        default=Decimal("0.20"),
        nullable=False,
    )
    default_markup_percentage: Mapped[Decimal] = mapped_column(
        Numeric(precision=7, scale=4),
        default=Decimal("0.70"),
        nullable=False,
    )
    margin_green_threshold_pct: Mapped[Decimal] = mapped_column(
        Numeric(precision=7, scale=4),
        default=Decimal("0.70"),
        nullable=False,
    )
    margin_amber_threshold_pct: Mapped[Decimal] = mapped_column(
        Numeric(precision=7, scale=4),
        default=Decimal("0.60"),
        nullable=False,
    )
    
    def __repr__(self) -> str:
        return (
            f"<AppSettings(vat={self.default_vat_rate}, "
            f"markup={self.default_markup_percentage})>"
        )
