"""
Settings endpoint tests.
"""

from decimal import Decimal

import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_get_settings_creates_defaults(client: AsyncClient):
    response = await client.get("/api/v1/settings")
    
    assert response.status_code == 200
    data = response.json()
    assert data["id"] == 1
    assert Decimal(data["default_vat_rate"]) == Decimal("0.20")
    assert Decimal(data["default_markup_percentage"]) == Decimal("0.70")
    assert Decimal(data["margin_green_threshold_pct"]) == Decimal("0.70")
    assert Decimal(data["margin_amber_threshold_pct"]) == Decimal("0.60")


@pytest.mark.asyncio
async def test_update_settings_partial(client: AsyncClient):
    response = await client.put(
        "/api/v1/settings",
        json={"default_markup_percentage": "0.45"},
    )
    
    assert response.status_code == 200
    data = response.json()
    assert Decimal(data["default_markup_percentage"]) == Decimal("0.45")
    assert Decimal(data["default_vat_rate"]) == Decimal("0.20")
    
    response = await client.get("/api/v1/settings")
    assert Decimal(response.json()["default_markup_percentage"]) == Decimal("0.45")


@pytest.mark.asyncio
async def test_update_settings_thresholds(client: AsyncClient):
    response = await client.put(
        "/api/v1/settings",
        json={"margin_green_threshold_pct": "0.40", "margin_amber_threshold_pct": "0.20"},
    )
    
    assert response.status_code == 200
    data = response.json()
    assert Decimal(data["margin_green_threshold_pct"]) == Decimal("0.40")
    assert Decimal(data["margin_amber_threshold_pct"]) == Decimal("0.20")


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "payload",
    [
        {"margin_green_threshold_pct": "0.50", "margin_amber_threshold_pct": "0.50"},
        {"margin_green_threshold_pct": "0.30", "margin_amber_threshold_pct": "0.50"},
        # checked against the stored amber threshold (0.60)
        {"margin_green_threshold_pct": "0.55"},
    ],
)
async def test_update_settings_rejects_unordered_thresholds(client: AsyncClient, payload):
    response = await client.put("/api/v1/settings", json=payload)
    
    assert response.status_code == 400
    data = response.json()
    assert data["detail"] == "Margin thresholds are out of order"
    assert "margin_green_threshold_pct" in data["errors"]
    
    response = await client.get("/api/v1/settings")
    assert Decimal(response.json()["margin_green_threshold_pct"]) == Decimal("0.70")


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "payload",
    [
        {"default_vat_rate": "1.5"},
        {"default_vat_rate": "-0.1"},
        {"default_markup_percentage": "-1"},
        {"default_vat_rate": None},
    ],
)
async def test_update_settings_rejects_invalid_values(client: AsyncClient, payload):
    response = await client.put("/api/v1/settings", json=payload)
    
    assert response.status_code == 400
