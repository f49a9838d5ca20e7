"""
Settings endpoints.
Tenant-wide pricing defaults and margin thresholds.
"""

from fastapi import APIRouter

from catering_quotes.api.deps import DbSession
from catering_quotes.schemas.app_settings import AppSettingsResponse, AppSettingsUpdate
from catering_quotes.services.app_settings import SettingsService


router = APIRouter()


@router.get(
    "",
    response_model=AppSettingsResponse,
    summary="Get settings",
)
async def get_settings(db: DbSession) -> AppSettingsResponse:
    service = SettingsService(db)
    app_settings = await service.get()
    return AppSettingsResponse.model_validate(app_settings)


@router.put(
    "",
    response_model=AppSettingsResponse,
    summary="Update settings",
    description="Green threshold must stay above the amber threshold",
)
async def update_settings(
    data: AppSettingsUpdate,
    db: DbSession,
) -> AppSettingsResponse:
    service = SettingsService(db)
    app_settings = await service.update(data)
    return AppSettingsResponse.model_validate(app_settings)
