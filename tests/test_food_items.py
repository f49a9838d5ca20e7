"""
Food item endpoint tests.
"""

from decimal import Decimal

import pytest
from httpx import AsyncClient

from catering_quotes.models import Customer, FoodItem


@pytest.mark.asyncio
async def test_create_food_item(client: AsyncClient):
    response = await client.post(
        "/api/v1/food-items",
        json={
            "name": "Beef Wellington",
            "description": "Individual portions",
            "cost_price": "12.75",
            "allergens": 3,
        },
    )
    
    assert response.status_code == 201
    data = response.json()
    assert data["name"] == "Beef Wellington"
    assert Decimal(data["cost_price"]) == Decimal("12.75")
    assert data["allergens"] == 3
    assert data["dietary_tags"] is None
    assert data["is_active"] is True


@pytest.mark.asyncio
async def test_create_food_item_requires_positive_cost(client: AsyncClient):
    response = await client.post(
        "/api/v1/food-items",
        json={"name": "Free Bread", "cost_price": "0"},
    )
    
    assert response.status_code == 400
    assert "cost_price" in response.json()["errors"]


@pytest.mark.asyncio
async def test_get_food_item_not_found(client: AsyncClient):
    response = await client.get("/api/v1/food-items/9999")
    
    assert response.status_code == 404
    assert response.json()["detail"] == "Food item with ID 9999 not found"


@pytest.mark.asyncio
async def test_list_food_items(client: AsyncClient, food_items: list[FoodItem]):
    response = await client.get("/api/v1/food-items")
    
    assert response.status_code == 200
    data = response.json()
    assert data["total"] == 3
    assert [f["name"] for f in data["items"]] == [
        "Caesar Salad",
        "Fruit Platter",
        "Grilled Chicken",
    ]


@pytest.mark.asyncio
async def test_list_food_items_active_only(client: AsyncClient, food_items: list[FoodItem]):
    response = await client.get("/api/v1/food-items", params={"activeOnly": "true"})
    
    data = response.json()
    assert data["total"] == 2
    assert "Fruit Platter" not in [f["name"] for f in data["items"]]


@pytest.mark.asyncio
async def test_update_food_item(client: AsyncClient, food_items: list[FoodItem]):
    response = await client.put(
        f"/api/v1/food-items/{food_items[0].id}",
        json={"cost_price": "3.95", "is_active": False},
    )
    
    assert response.status_code == 200
    data = response.json()
    assert Decimal(data["cost_price"]) == Decimal("3.95")
    assert data["is_active"] is False
    assert data["name"] == "Caesar Salad"


@pytest.mark.asyncio
async def test_update_food_item_rejects_null_cost(client: AsyncClient, food_items: list[FoodItem]):
    response = await client.put(
        f"/api/v1/food-items/{food_items[0].id}",
        json={"cost_price": None},
    )
    
    assert response.status_code == 400


@pytest.mark.asyncio
async def test_delete_unused_food_item(client: AsyncClient, food_items: list[FoodItem]):
    response = await client.delete(f"/api/v1/food-items/{food_items[2].id}")
    assert response.status_code == 204
    
    response = await client.get(f"/api/v1/food-items/{food_items[2].id}")
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_delete_food_item_used_on_quote(
    client: AsyncClient,
    customer: Customer,
    food_items: list[FoodItem],
):
    await client.post(
        "/api/v1/quotes",
        json={
            "customer_id": customer.id,
            "line_items": [{"food_item_id": food_items[0].id, "quantity": 4}],
        },
    )
    
    response = await client.delete(f"/api/v1/food-items/{food_items[0].id}")
    
    assert response.status_code == 400
    assert "cannot be deleted" in response.json()["detail"]
    
    response = await client.get(f"/api/v1/food-items/{food_items[0].id}")
    assert response.status_code == 200
