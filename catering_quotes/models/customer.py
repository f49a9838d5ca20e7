"""
Customer model.
Customers request catering quotes.
"""

from typing import Optional, List, TYPE_CHECKING
from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from catering_quotes.models.base import BaseModel

if TYPE_CHECKING:
    from catering_quotes.models.quote import Quote


class Customer(BaseModel):
    """
    Customer model.
    
    Attributes:
        name: Contact or organisation name
        email: Unique contact email
        phone: Optional phone number
        company: Optional company name
    """
    
    __tablename__ = "customers"
    
    name: Mapped[str] = mapped_column(
        String(200),
        nullable=False,
    )
    email: Mapped[str] = mapped_column(
        String(255),
        unique=True,
        index=True,
        nullable=False,
    )
    phone: Mapped[Optional[str]] = mapped_column(
        String(20),
        nullable=True,
    )
    company: Mapped[Optional[str]] = mapped_column(
        String(200),
        nullable=True,
    )
    
    # Deleting a customer removes their quotes
    quotes: Mapped[List["Quote"]] = relationship(
        "Quote",
        back_populates="customer",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
    
    def __repr__(self) -> str:
        return f"<Customer(id={self.id}, name='{self.name}', email='{self.email}')>"
