"""
Customer schemas for request/response validation.
"""

from pydantic import EmailStr, Field, model_validator

from catering_quotes.schemas.base import (
    BaseSchema,
    PaginatedResponse,
    TimestampSchema,
    reject_explicit_nulls,
)


class CustomerBase(BaseSchema):
    """Base customer schema with common fields."""
    
    name: str = Field(..., min_length=1, max_length=200)
    email: EmailStr
    phone: str | None = Field(None, max_length=20)
    company: str | None = Field(None, max_length=200)


class CustomerCreate(CustomerBase):
    """Schema for creating a new customer."""
    pass


class CustomerUpdate(BaseSchema):
    """Schema for updating a customer. Omitted fields are unchanged."""
    
    name: str | None = Field(None, min_length=1, max_length=200)
    email: EmailStr | None = None
    phone: str | None = Field(None, max_length=20)
    company: str | None = Field(None, max_length=200)
    
    @model_validator(mode="after")
    def _required_fields_not_null(self):
        reject_explicit_nulls(self, "name", "email")
        return self


class CustomerResponse(CustomerBase, TimestampSchema):
    """Customer response schema."""
    
    id: int


class CustomerSummary(BaseSchema):
    """Customer fields embedded in quote responses."""
    
    id: int
    name: str
    email: str
    company: str | None = None


class CustomerListResponse(PaginatedResponse):
    """Paginated customer list response."""
    
    items: list[CustomerResponse]
