"""
Food item model.
Catalogue entries that quote line items reference.
"""

from typing import Optional
from decimal import Decimal
from sqlalchemy import String, Integer, Numeric, Boolean
from sqlalchemy.orm import Mapped, mapped_column

from catering_quotes.models.base import BaseModel


class FoodItem(BaseModel):
    """
    Food item model.
    
    Attributes:
        name: Display name
        description: Free-text description
        cost_price: Cost of one unit to the caterer
        allergens: Bitmask of allergens
        dietary_tags: Bitmask of dietary tags
        is_active: Whether the item can be offered on new quotes
    """
    
    __tablename__ = "food_items"
    
    name: Mapped[str] = mapped_column(
        String(200),
        nullable=False,
        index=True,
    )
    description: Mapped[str] = mapped_column(
        String(500),
        default="",
        nullable=False,
    )
    cost_price: Mapped[Decimal] = mapped_column(
        Numeric(precision=12, scale=4),
        nullable=False,
    )
    allergens: Mapped[Optional[int]] = mapped_column(
        Integer,
        nullable=True,
    )
    dietary_tags: Mapped[Optional[int]] = mapped_column(
        Integer,
        nullable=True,
    )
    is_active: Mapped[bool] = mapped_column(
        Boolean,
        default=True,
        nullable=False,
    )
    
    def __repr__(self) -> str:
        return f"<FoodItem(id={self.id}, name='{self.name}', cost_price={self.cost_price})>"
