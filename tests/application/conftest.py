"""Fixtures for application-layer tests (in-memory persistence)."""

import pytest
import pytest_asyncio

from core.application.dtos import CreateCustomerRequest, PricingRatesInput, SpecialPriceDTO
from core.application.services import CustomerApplicationService, DeliveryNoteApplicationService
from core.infrastructure.adapters.persistence import InMemoryStorage, InMemoryUnitOfWork
from core.infrastructure.event_bus import InMemoryEventBus


@pytest.fixture
def storage() -> InMemoryStorage:
    return InMemoryStorage()


@pytest.fixture
def uow_factory(storage):
    return lambda: InMemoryUnitOfWork(storage)


@pytest.fixture
def event_bus() -> InMemoryEventBus:
    return InMemoryEventBus()


@pytest.fixture
def customer_service(uow_factory) -> CustomerApplicationService:
    return CustomerApplicationService(uow_factory)


@pytest.fixture
def note_service(uow_factory, event_bus) -> DeliveryNoteApplicationService:
    return DeliveryNoteApplicationService(uow_factory, number_prefix="ALB", event_bus=event_bus)


@pytest_asyncio.fixture
async def customer(customer_service):
    """Customer with 5/m, 12/m², minimum 20 and a fixed price for 'Corner'."""
    return await customer_service.create_customer(
        CreateCustomerRequest(
            name="Herrería López",
            email="taller@lopez.es",
            pricing=PricingRatesInput(
                price_per_linear_meter="5",
                price_per_square_meter="12",
                minimum_price="20",
                special_prices=[SpecialPriceDTO(name="Corner", price="8")],
            ),
        )
    )
