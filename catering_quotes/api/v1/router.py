"""
API v1 router - aggregates all endpoint routers.
"""

from fastapi import APIRouter

from catering_quotes.api.v1.endpoints import (
    customers,
    food_items,
    quotes,
    app_settings,
    reference_data,
)

api_router = APIRouter()

# Include all endpoint routers
api_router.include_router(
    customers.router,
    prefix="/customers",
    tags=["Customers"],
)

api_router.include_router(
    food_items.router,
    prefix="/food-items",
    tags=["Food items"],
)

api_router.include_router(
    quotes.router,
    prefix="/quotes",
    tags=["Quotes"],
)

api_router.include_router(
    app_settings.router,
    prefix="/settings",
    tags=["Settings"],
)

api_router.include_router(
    reference_data.router,
    tags=["Reference data"],
)
