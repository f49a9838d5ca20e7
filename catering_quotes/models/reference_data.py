"""
Reference data lookups: allergens and dietary tags.
"""

from sqlalchemy import String, Boolean
from sqlalchemy.orm import Mapped, mapped_column

from catering_quotes.core.database import Base
from catering_quotes.models.base import IdMixin


class ReferenceDataMixin(IdMixin):
    """Columns shared by the lookup tables."""
    
    code: Mapped[str] = mapped_column(
        String(50),
        unique=True,
        nullable=False,
    )
    name: Mapped[str] = mapped_column(
        String(200),
        nullable=False,
    )
    description: Mapped[str] = mapped_column(
        String(500),
        default="",
        nullable=False,
    )
    is_active: Mapped[bool] = mapped_column(
        Boolean,
        default=True,
        nullable=False,
    )
    
    def __str__(self) -> str:
        return f"{self.code} - {self.name}"


class Allergen(ReferenceDataMixin, Base):
    """Allergen lookup (e.g. CELERY, PEANUTS)."""
    
    __tablename__ = "allergens"


class DietaryTag(ReferenceDataMixin, Base):
    """Dietary tag lookup (e.g. VEGAN, GLUTEN_FREE)."""
    
    __tablename__ = "dietary_tags"
