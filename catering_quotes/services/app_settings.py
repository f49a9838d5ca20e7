"""
Settings service.
Reads and updates the single tenant-wide settings row.
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select

from catering_quotes.core.config import settings as config
from catering_quotes.core.exceptions import ValidationError
from catering_quotes.models.app_settings import AppSettings, SETTINGS_ROW_ID
from catering_quotes.schemas.app_settings import AppSettingsUpdate
from catering_quotes.services.pricing import MarginThresholds


logger = logging.getLogger(__name__)


class SettingsService:
    """Service for application settings."""
    
    def __init__(self, db: AsyncSession):
        self.db = db
    
    async def get(self) -> AppSettings:
        """Return the settings row, creating it from the configured defaults if missing."""
        result = await self.db.execute(
            select(AppSettings).where(AppSettings.id == SETTINGS_ROW_ID)
        )
        app_settings = result.scalar_one_or_none()
        
        if app_settings is None:
            app_settings = AppSettings(
                id=SETTINGS_ROW_ID,
                default_vat_rate=config.DEFAULT_VAT_RATE,
                default_markup_percentage=config.DEFAULT_MARKUP_PERCENTAGE,
                margin_green_threshold_pct=config.DEFAULT_MARGIN_GREEN_THRESHOLD,
                margin_amber_threshold_pct=config.DEFAULT_MARGIN_AMBER_THRESHOLD,
            )
            self.db.add(app_settings)
            await self.db.flush()
            logger.info("Settings row created from defaults")
        
        return app_settings
    
    async def get_thresholds(self) -> MarginThresholds:
        app_settings = await self.get()
        return MarginThresholds(
            green=app_settings.margin_green_threshold_pct,
            amber=app_settings.margin_amber_threshold_pct,
        )
    
    async def update(self, data: AppSettingsUpdate) -> AppSettings:
        """
        Update settings.
        
        The green threshold must stay strictly above the amber threshold,
        otherwise the amber tier could never be reached.
        
        Raises:
            ValidationError: If the resulting thresholds are out of order
        """
        app_settings = await self.get()
        update_data = data.model_dump(exclude_unset=True)
        
        green = update_data.get("margin_green_threshold_pct", app_settings.margin_green_threshold_pct)
        amber = update_data.get("margin_amber_threshold_pct", app_settings.margin_amber_threshold_pct)
        if green <= amber:
            raise ValidationError(
                "Margin thresholds are out of order",
                errors={
                    "margin_green_threshold_pct": [
                        "Green threshold must be greater than the amber threshold"
                    ],
                },
            )
        
        for field, value in update_data.items():
            setattr(app_settings, field, value)
        
        await self.db.flush()
        await self.db.refresh(app_settings)
        
        logger.info(f"Settings updated: {', '.join(update_data) or 'no changes'}")
        return app_settings
