"""
Reference data service.
Read-only access to allergens and dietary tags.
"""

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select

from catering_quotes.models.reference_data import Allergen, DietaryTag


class ReferenceDataService:
    """Service for lookup tables."""
    
    def __init__(self, db: AsyncSession):
        self.db = db
    
    async def list_allergens(self) -> list[Allergen]:
        """Active allergens ordered by name."""
        result = await self.db.execute(
            select(Allergen).where(Allergen.is_active.is_(True)).order_by(Allergen.name)
        )
        return list(result.scalars().all())
    
    async def list_dietary_tags(self) -> list[DietaryTag]:
        """Active dietary tags ordered by name."""
        result = await self.db.execute(
            select(DietaryTag).where(DietaryTag.is_active.is_(True)).order_by(DietaryTag.name)
        )
        return list(result.scalars().all())
