"""
Base schema configuration and common schemas.
"""

from datetime import datetime
from pydantic import BaseModel, ConfigDict


class BaseSchema(BaseModel):
    """Base schema with common configuration."""
    
    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
        str_strip_whitespace=True,
    )


class TimestampSchema(BaseSchema):
    """Schema with timestamp fields."""
    
    created_at: datetime
    updated_at: datetime


class PaginationParams(BaseSchema):
    """Pagination parameters."""
    
    page: int = 1
    page_size: int = 20
    
    @property
    def offset(self) -> int:
        return (self.page - 1) * self.page_size


class PaginatedResponse(BaseSchema):
    """Paginated response wrapper. Subclasses add a typed `items` field."""
    
    total: int
    page: int
    page_size: int
    total_pages: int
    has_next_page: bool
    has_previous_page: bool
    
    @classmethod
    def create(cls, items: list, total: int, page: int, page_size: int):
        total_pages = (total + page_size - 1) // page_size if page_size > 0 else 0
        return cls(
            items=items,
            total=total,
            page=page,
            page_size=page_size,
            total_pages=total_pages,
            has_next_page=page < total_pages,
            has_previous_page=page > 1,
        )


def reject_explicit_nulls(data: BaseModel, *fields: str) -> None:
    """
    Fail when a non-nullable field is sent as null.
    
    Omitted fields are left alone; only fields present in the payload
    with a null value are refused.
    """
    nulled = [f for f in fields if f in data.model_fields_set and getattr(data, f) is None]
    if nulled:
        raise ValueError(f"Fields cannot be null: {', '.join(nulled)}")
