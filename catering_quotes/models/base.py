"""
Declarative building blocks shared by the catering models.
"""

from datetime import datetime, timezone
from sqlalchemy import DateTime, func
from sqlalchemy.orm import Mapped, mapped_column

from catering_quotes.core.database import Base


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class IdMixin:
    """Surrogate integer primary key."""
    
    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)


class TimestampMixin:
    """
    Audit timestamps.
    
    Set in UTC by the application on insert and update; the server
    default only covers rows written outside the ORM (migrations, seeds).
    """
    
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utc_now,
        server_default=func.now(),
        nullable=False,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utc_now,
        onupdate=utc_now,
        server_default=func.now(),
        nullable=False,
    )


class BaseModel(IdMixin, TimestampMixin, Base):
    """Abstract base for customers, food items, quotes and settings."""
    
    __abstract__ = True
