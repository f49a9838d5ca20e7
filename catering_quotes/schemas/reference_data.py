"""
Reference data schemas.
"""

from catering_quotes.schemas.base import BaseSchema


class ReferenceDataResponse(BaseSchema):
    """Common shape of lookup rows."""
    
    id: int
    code: str
    name: str
    description: str
    is_active: bool


class AllergenResponse(ReferenceDataResponse):
    """Allergen response schema."""
    pass


class DietaryTagResponse(ReferenceDataResponse):
    """Dietary tag response schema."""
    pass
