"""
Food item service.
Handles the food item catalogue.
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, func

from catering_quotes.core.exceptions import DomainRuleViolation, NotFoundError
from catering_quotes.models.food_item import FoodItem
from catering_quotes.models.quote import QuoteLineItem
from catering_quotes.schemas.food_item import FoodItemCreate, FoodItemUpdate


logger = logging.getLogger(__name__)


class FoodItemService:
    """Service for food item operations."""
    
    def __init__(self, db: AsyncSession):
        self.db = db
    
    async def create(self, data: FoodItemCreate) -> FoodItem:
        food_item = FoodItem(**data.model_dump())
        
        self.db.add(food_item)
        await self.db.flush()
        await self.db.refresh(food_item)
        
        logger.info(f"Food item created: {food_item.id} - {food_item.name}")
        return food_item
    
    async def get_by_id(self, food_item_id: int) -> FoodItem | None:
        result = await self.db.execute(
            select(FoodItem).where(FoodItem.id == food_item_id)
        )
        return result.scalar_one_or_none()
    
    async def get_or_404(self, food_item_id: int) -> FoodItem:
        """Get food item by ID or raise NotFoundError."""
        food_item = await self.get_by_id(food_item_id)
        if not food_item:
            raise NotFoundError(f"Food item with ID {food_item_id} not found")
        return food_item
    
    async def list(
        self,
        skip: int = 0,
        limit: int = 20,
        active_only: bool = False,
    ) -> tuple[list[FoodItem], int]:
        """List food items ordered by name."""
        query = select(FoodItem)
        count_query = select(func.count(FoodItem.id))
        
        if active_only:
            query = query.where(FoodItem.is_active.is_(True))
            count_query = count_query.where(FoodItem.is_active.is_(True))
        
        total_result = await self.db.execute(count_query)
        total = total_result.scalar() or 0
        
        query = query.order_by(FoodItem.name, FoodItem.id).offset(skip).limit(limit)
        result = await self.db.execute(query)
        food_items = list(result.scalars().all())
        
        return food_items, total
    
    async def update(self, food_item: FoodItem, data: FoodItemUpdate) -> FoodItem:
        update_data = data.model_dump(exclude_unset=True)
        
        for field, value in update_data.items():
            setattr(food_item, field, value)
        
        await self.db.flush()
        await self.db.refresh(food_item)
        
        logger.info(f"Food item updated: {food_item.id}")
        return food_item
    
    async def delete(self, food_item: FoodItem) -> None:
        """
        Delete food item.
        
        Raises:
            DomainRuleViolation: If quote lines still reference the item
        """
        result = await self.db.execute(
            select(func.count(QuoteLineItem.id)).where(
                QuoteLineItem.food_item_id == food_item.id,
            )
        )
        if result.scalar():
            raise DomainRuleViolation(
                f"Food item {food_item.id} is used on existing quotes and cannot be deleted. "
                "Mark it inactive instead."
            )
        
        food_item_id = food_item.id
        await self.db.delete(food_item)
        await self.db.flush()
        
        logger.info(f"Food item deleted: {food_item_id}")
