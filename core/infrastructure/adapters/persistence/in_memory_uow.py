"""In-memory Unit of Work."""
from typing import Any, Dict, Optional
import logging

from core.application.unit_of_work import AbstractUnitOfWork

from .mock_repositories import (
    MockCustomerRepository,
    MockDeliveryNoteRepository,
    MockPricingProfileRepository,
)


logger = logging.getLogger(__name__)


class InMemoryStorage:
    """Committed state shared by every InMemoryUnitOfWork built on it."""

    def __init__(self):
        self.delivery_notes: Dict[str, Dict[str, Any]] = {}
        self.customers: Dict[str, Dict[str, Any]] = {}
        self.pricing_profiles: Dict[str, Dict[str, Any]] = {}

    def clear(self) -> None:
        self.delivery_notes.clear()
        self.customers.clear()
        self.pricing_profiles.clear()


class InMemoryUnitOfWork(AbstractUnitOfWork):
    """
    Unit of Work over InMemoryStorage.

    Repositories work on a private copy of the committed state; ``commit``
    publishes the copy, ``rollback`` discards it.
    """

    def __init__(self, storage: Optional[InMemoryStorage] = None):
        self._storage = storage or InMemoryStorage()
        self.committed = False
        self._begin()

    def _begin(self) -> None:
        self._pending_notes = dict(self._storage.delivery_notes)
        self._pending_customers = dict(self._storage.customers)
        self._pending_profiles = dict(self._storage.pricing_profiles)
        self.delivery_notes = MockDeliveryNoteRepository(self._pending_notes)
        self.customers = MockCustomerRepository(self._pending_customers)
        self.pricing_profiles = MockPricingProfileRepository(self._pending_profiles)

    async def __aenter__(self) -> "InMemoryUnitOfWork":
        self._begin()
        return self

    async def commit(self) -> None:
        for committed, pending in (
            (self._storage.delivery_notes, self._pending_notes),
            (self._storage.customers, self._pending_customers),
            (self._storage.pricing_profiles, self._pending_profiles),
        ):
            committed.clear()
            committed.update(pending)
        self.committed = True
        logger.debug("In-memory unit of work committed")

    async def rollback(self) -> None:
        self._begin()
        logger.debug("In-memory unit of work rolled back")
