"""Pytest configuration and fixtures for integration tests."""

from typing import AsyncGenerator

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from apps.api.deps import get_uow_factory
from apps.api.main import app
from core.data.models.base import Base
from core.infrastructure.adapters.persistence import InMemoryStorage, InMemoryUnitOfWork


# Use in-memory SQLite for testing
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest_asyncio.fixture(scope="function")
async def test_engine():
    """Create test database engine."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        echo=False,
    )

    # Create all tables
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    # Cleanup
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def test_session_factory(test_engine):
    """Create test session factory."""
    session_factory = async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False
    )
    yield session_factory


@pytest_asyncio.fixture
async def test_session(test_session_factory) -> AsyncGenerator[AsyncSession, None]:
    """Create test database session."""
    async with test_session_factory() as session:
        yield session


@pytest.fixture
def memory_storage() -> InMemoryStorage:
    return InMemoryStorage()


@pytest.fixture
def test_client(memory_storage) -> TestClient:
    """FastAPI test client backed by in-memory storage."""
    app.dependency_overrides[get_uow_factory] = lambda: (lambda: InMemoryUnitOfWork(memory_storage))

    client = TestClient(app)
    yield client

    # Cleanup
    app.dependency_overrides.clear()


@pytest.fixture
def customer_id(test_client) -> str:
    """Customer with 5/ml, 12/m², minimum 20 and a fixed price for 'Corner'."""
    response = test_client.post(
        "/api/v1/customers",
        json={
            "name": "Herrería López",
            "email": "taller@lopez.es",
            "pricing": {
                "price_per_linear_meter": "5",
                "price_per_square_meter": "12",
                "minimum_price": "20",
                "special_prices": [{"name": "Corner", "price": "8"}],
            },
        },
    )
    assert response.status_code == 201, response.text
    return response.json()["id"]
