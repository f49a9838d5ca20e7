"""
Pytest configuration and fixtures.
"""

import os

# Must be set before the application modules read their settings
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("DEBUG", "false")

from decimal import Decimal
from typing import AsyncGenerator
import pytest
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from sqlalchemy.pool import StaticPool

from catering_quotes.core.database import Base, create_engine_from_url, get_db
from catering_quotes.main import app
from catering_quotes.models import Allergen, Customer, DietaryTag, FoodItem


# In-memory SQLite, one shared connection per test engine
TEST_DATABASE_URL = "sqlite+aiosqlite://"


@pytest.fixture
async def test_engine():
    """Create a fresh test database."""
    engine = create_engine_from_url(
        TEST_DATABASE_URL,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    
    yield engine
    
    await engine.dispose()


@pytest.fixture
async def db_session(test_engine) -> AsyncGenerator[AsyncSession, None]:
    """Create test database session."""
    async_session = async_sessionmaker(
        test_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )
    
    async with async_session() as session:
        yield session
        await session.rollback()


@pytest.fixture
async def client(db_session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """Create test client with database session override."""
    
    async def override_get_db():
        yield db_session
    
    app.dependency_overrides[get_db] = override_get_db
    
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test"
    ) as ac:
        yield ac
    
    app.dependency_overrides.clear()


@pytest.fixture
async def customer(db_session: AsyncSession) -> Customer:
    """Create a test customer."""
    customer = Customer(
        name="Acme Corporation",
        email="contact@acme.com",
        company="Acme Inc.",
    )
    db_session.add(customer)
    await db_session.commit()
    await db_session.refresh(customer)
    return customer


@pytest.fixture
async def food_items(db_session: AsyncSession) -> list[FoodItem]:
    """Create a small food catalogue."""
    items = [
        FoodItem(name="Caesar Salad", description="Romaine, parmesan, croutons", cost_price=Decimal("3.50")),
        FoodItem(name="Grilled Chicken", description="Herb-marinated chicken breast", cost_price=Decimal("5.00")),
        FoodItem(name="Fruit Platter", description="Seasonal fresh fruits", cost_price=Decimal("2.00"), is_active=False),
    ]
    db_session.add_all(items)
    await db_session.commit()
    for item in items:
        await db_session.refresh(item)
    return items


@pytest.fixture
async def reference_data(db_session: AsyncSession) -> None:
    """Seed a few allergens and dietary tags."""
    db_session.add_all([
        Allergen(code="PEANUTS", name="Peanuts"),
        Allergen(code="CELERY", name="Celery"),
        Allergen(code="LUPIN", name="Lupin", is_active=False),
        DietaryTag(code="VEGAN", name="Vegan"),
        DietaryTag(code="HALAL", name="Halal"),
    ])
    await db_session.commit()
