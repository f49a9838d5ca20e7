"""
Reference data endpoint tests.
"""

import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_list_allergens(client: AsyncClient, reference_data):
    response = await client.get("/api/v1/allergens")
    
    assert response.status_code == 200
    data = response.json()
    assert [a["code"] for a in data] == ["CELERY", "PEANUTS"]


@pytest.mark.asyncio
async def test_list_dietary_tags(client: AsyncClient, reference_data):
    response = await client.get("/api/v1/dietary-tags")
    
    assert response.status_code == 200
    data = response.json()
    assert [t["name"] for t in data] == ["Halal", "Vegan"]


@pytest.mark.asyncio
async def test_reference_data_empty(client: AsyncClient):
    response = await client.get("/api/v1/allergens")
    
    assert response.status_code == 200
    assert response.json() == []


@pytest.mark.asyncio
async def test_health(client: AsyncClient):
    response = await client.get("/health")
    
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"
