"""
Reference data endpoints (allergens, dietary tags).
"""

from fastapi import APIRouter

from catering_quotes.api.deps import DbSession
from catering_quotes.schemas.reference_data import AllergenResponse, DietaryTagResponse
from catering_quotes.services.reference_data import ReferenceDataService


router = APIRouter()


@router.get(
    "/allergens",
    response_model=list[AllergenResponse],
    summary="List allergens",
)
async def list_allergens(db: DbSession) -> list[AllergenResponse]:
    service = ReferenceDataService(db)
    return [AllergenResponse.model_validate(a) for a in await service.list_allergens()]


@router.get(
    "/dietary-tags",
    response_model=list[DietaryTagResponse],
    summary="List dietary tags",
)
async def list_dietary_tags(db: DbSession) -> list[DietaryTagResponse]:
    service = ReferenceDataService(db)
    return [DietaryTagResponse.model_validate(t) for t in await service.list_dietary_tags()]
