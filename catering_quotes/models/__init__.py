"""
Database models module.
All SQLAlchemy models are exported from here for easy imports.
"""

from catering_quotes.models.customer import Customer
from catering_quotes.models.food_item import FoodItem
from catering_quotes.models.quote import Quote, QuoteLineItem, QuoteStatus
from catering_quotes.models.reference_data import Allergen, DietaryTag
from catering_quotes.models.app_settings import AppSettings


__all__ = [
    "Customer",
    "FoodItem",
    "Quote",
    "QuoteLineItem",
    "QuoteStatus",
    "Allergen",
    "DietaryTag",
    "AppSettings",
]
