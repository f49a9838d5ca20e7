"""
Customer service.
Handles customer CRUD operations.
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, func

from catering_quotes.core.exceptions import NotFoundError, ValidationError
from catering_quotes.models.customer import Customer
from catering_quotes.schemas.customer import CustomerCreate, CustomerUpdate


logger = logging.getLogger(__name__)


class CustomerService:
    """Service for customer operations."""
    
    def __init__(self, db: AsyncSession):
        self.db = db
    
    async def _ensure_email_unique(self, email: str, exclude_id: int | None = None) -> None:
        query = select(func.count(Customer.id)).where(Customer.email == email)
        if exclude_id is not None:
            query = query.where(Customer.id != exclude_id)
        
        result = await self.db.execute(query)
        if result.scalar():
            raise ValidationError(
                "A customer with this email already exists",
                errors={"email": ["Email already in use"]},
            )
    
    async def create(self, data: CustomerCreate) -> Customer:
        """
        Create a new customer.
        
        Raises:
            ValidationError: If the email is already used
        """
        await self._ensure_email_unique(data.email)
        
        customer = Customer(**data.model_dump())
        
        self.db.add(customer)
        await self.db.flush()
        await self.db.refresh(customer)
        
        logger.info(f"Customer created: {customer.id} - {customer.name}")
        return customer
    
    async def get_by_id(self, customer_id: int) -> Customer | None:
        result = await self.db.execute(
            select(Customer).where(Customer.id == customer_id)
        )
        return result.scalar_one_or_none()
    
    async def get_or_404(self, customer_id: int) -> Customer:
        """
        Get customer by ID.
        
        Raises:
            NotFoundError: If customer not found
        """
        customer = await self.get_by_id(customer_id)
        if not customer:
            raise NotFoundError(f"Customer with ID {customer_id} not found")
        return customer
    
    async def list(
        self,
        skip: int = 0,
        limit: int = 20,
        search: str | None = None,
    ) -> tuple[list[Customer], int]:
        """
        List customers with pagination and search.
        
        Args:
            skip: Number of records to skip
            limit: Maximum records to return
            search: Search term for name/email
            
        Returns:
            Tuple of (customers list, total count)
        """
        query = select(Customer)
        count_query = select(func.count(Customer.id))
        
        if search:
            condition = (
                Customer.name.icontains(search, autoescape=True)
                | Customer.email.icontains(search, autoescape=True)
            )
            query = query.where(condition)
            count_query = count_query.where(condition)
        
        total_result = await self.db.execute(count_query)
        total = total_result.scalar() or 0
        
        query = query.order_by(Customer.name, Customer.id).offset(skip).limit(limit)
        result = await self.db.execute(query)
        customers = list(result.scalars().all())
        
        return customers, total
    
    async def update(self, customer: Customer, data: CustomerUpdate) -> Customer:
        """
        Update customer. Only fields present in the payload are applied.
        
        Raises:
            ValidationError: If the new email is already used
        """
        update_data = data.model_dump(exclude_unset=True)
        
        if "email" in update_data and update_data["email"] != customer.email:
            await self._ensure_email_unique(update_data["email"], exclude_id=customer.id)
        
        for field, value in update_data.items():
            setattr(customer, field, value)
        
        await self.db.flush()
        await self.db.refresh(customer)
        
        logger.info(f"Customer updated: {customer.id}")
        return customer
    
    async def delete(self, customer: Customer) -> None:
        """
        Delete customer.
        
        Note:
            The customer's quotes are removed with it (ON DELETE CASCADE)
        """
        customer_id = customer.id
        await self.db.delete(customer)
        await self.db.flush()
        
        logger.info(f"Customer deleted: {customer_id}")
