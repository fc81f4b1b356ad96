"""In-memory persistence adapters."""
from .in_memory_uow import InMemoryStorage, InMemoryUnitOfWork
from .mock_repositories import (
    MockCustomerRepository,
    MockDeliveryNoteRepository,
    MockPricingProfileRepository,
)

__all__ = [
    "InMemoryStorage",
    "InMemoryUnitOfWork",
    "MockCustomerRepository",
    "MockDeliveryNoteRepository",
    "MockPricingProfileRepository",
]
