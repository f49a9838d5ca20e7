"""
Quote model for catering estimates.
A quote carries its line items and the pricing computed from them.
"""

from typing import Optional, List, TYPE_CHECKING
from decimal import Decimal
from datetime import datetime
from enum import Enum
from sqlalchemy import String, ForeignKey, Integer, Numeric, DateTime, Enum as SQLEnum
from sqlalchemy.orm import Mapped, mapped_column, relationship

from catering_quotes.models.base import BaseModel, utc_now
from catering_quotes.services.pricing import MarginStatus

if TYPE_CHECKING:
    from catering_quotes.models.customer import Customer


class QuoteStatus(str, Enum):
    """Quote status enumeration."""
    DRAFT = "Draft"
    SENT = "Sent"
    ACCEPTED = "Accepted"
    REJECTED = "Rejected"
    COMPLETED = "Completed"


class Quote(BaseModel):
    """
    Quote model.
    
    Attributes:
        customer_id: Foreign key to the customer
        quote_number: Unique quote number (QT-<year>-<seq>)
        status: Current quote status
        quote_date: When the quote was raised
        event_date: Date of the catered event
        vat_rate: VAT ratio applied to the marked-up price
        markup_percentage: Markup ratio applied to cost
        total_cost: Sum of line costs, before markup
        total_price: Cost with markup and VAT
        margin: (total_price - total_cost) / total_price
        margin_status: Margin health against the thresholds in force when
            the quote was last priced
        notes: Free-text notes
        sent_at: When the quote was sent to the customer
    """
    
    __tablename__ = "quotes"
    
    customer_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("customers.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    
    quote_number: Mapped[str] = mapped_column(
        String(50),
        unique=True,
        index=True,
        nullable=False,
    )
    status: Mapped[QuoteStatus] = mapped_column(
        SQLEnum(QuoteStatus, name="quote_status"),
        default=QuoteStatus.DRAFT,
        nullable=False,
        index=True,
    )
    
    # Dates
    quote_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utc_now,
        nullable=False,
    )
    event_date: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
    )
    sent_at: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
    )
    
    # Rates
    vat_rate: Mapped[Decimal] = mapped_column(
        Numeric(precision=7, scale=4),
        default=Decimal("0.20"),
        nullable=False,
    )
    markup_percentage: Mapped[Decimal] = mapped_column(
        Numeric(precision=7, scale=4),
        nullable=False,
    )
    
    # Pricing (computed from line items)
    total_cost: Mapped[Decimal] = mapped_column(
        Numeric(precision=14, scale=4),
        default=Decimal("0"),
        nullable=False,
    )
    total_price: Mapped[Decimal] = mapped_column(
        Numeric(precision=14, scale=4),
        default=Decimal("0"),
        nullable=False,
    )
    margin: Mapped[Decimal] = mapped_column(
        Numeric(precision=9, scale=6),
        default=Decimal("0"),
        nullable=False,
    )
    margin_status: Mapped[MarginStatus] = mapped_column(
        SQLEnum(MarginStatus, name="margin_status"),
        default=MarginStatus.RED,
        nullable=False,
    )
    
    notes: Mapped[Optional[str]] = mapped_column(
        String(1000),
        nullable=True,
    )
    
    # Relationships
    customer: Mapped["Customer"] = relationship(
        "Customer",
        back_populates="quotes",
        lazy="selectin",
    )
    line_items: Mapped[List["QuoteLineItem"]] = relationship(
        "QuoteLineItem",
        back_populates="quote",
        cascade="all, delete-orphan",
        order_by="QuoteLineItem.display_order",
        lazy="selectin",
    )
    
    @property
    def is_draft(self) -> bool:
        """Only draft quotes may be changed or deleted."""
        return self.status == QuoteStatus.DRAFT
    
    def __repr__(self) -> str:
        return f"<Quote(id={self.id}, number='{self.quote_number}', status={self.status.value})>"


class QuoteLineItem(BaseModel):
    """
    Quote line item model.
    
    Attributes:
        quote_id: Foreign key to the quote
        food_item_id: Foreign key to the food item
        description: Line description
        quantity: Number of units
        unit_cost: Cost per unit
        unit_price: Cost per unit with markup
        line_total: unit_cost * quantity * (1 + markup)
        display_order: Presentation order within the quote
    """
    
    __tablename__ = "quote_line_items"
    
    quote_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("quotes.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    food_item_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("food_items.id", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    )
    
    description: Mapped[str] = mapped_column(
        String(500),
        nullable=False,
    )
    quantity: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
    )
    unit_cost: Mapped[Decimal] = mapped_column(
        Numeric(precision=12, scale=4),
        nullable=False,
    )
    unit_price: Mapped[Decimal] = mapped_column(
        Numeric(precision=12, scale=4),
        nullable=False,
    )
    line_total: Mapped[Decimal] = mapped_column(
        Numeric(precision=14, scale=4),
        nullable=False,
    )
    display_order: Mapped[int] = mapped_column(
        Integer,
        default=0,
        nullable=False,
    )
    
    quote: Mapped["Quote"] = relationship(
        "Quote",
        back_populates="line_items",
    )
    
    def __repr__(self) -> str:
        return f"<QuoteLineItem(id={self.id}, description='{self.description[:30]}', total={self.line_total})>"
