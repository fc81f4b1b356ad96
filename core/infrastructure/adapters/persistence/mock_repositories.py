"""
In-memory repository implementations.

Used by the application tests and by the API when no database is wired.
Aggregates are stored as ``to_dict()`` snapshots and rebuilt on every read,
so callers never share a live object with the store.
"""
from typing import Any, Dict, List, Optional
from uuid import uuid4
import logging

from core.domain.entities import Customer, DeliveryNote, PricingProfile
from core.domain.enums import DeliveryNoteStatus
from core.domain.repositories import (
    CustomerRepository,
    DeliveryNoteRepository,
    PricingProfileRepository,
)
from core.domain.value_objects import DeliveryNoteNumber


logger = logging.getLogger(__name__)

Snapshot = Dict[str, Any]


class MockDeliveryNoteRepository(DeliveryNoteRepository):
    """In-memory implementation of DeliveryNoteRepository."""

    def __init__(self, storage: Optional[Dict[str, Snapshot]] = None):
        self._storage: Dict[str, Snapshot] = storage if storage is not None else {}

    async def save(self, note: DeliveryNote) -> None:
        self._storage[note.id] = note.to_dict()
        logger.info(f"Delivery note saved: {note.number} (status: {note.status.value})")

    async def find_by_id(self, note_id: str) -> Optional[DeliveryNote]:
        snapshot = self._storage.get(note_id)
        if snapshot is None:
            logger.debug(f"Delivery note not found: {note_id}")
            return None
        return DeliveryNote.from_dict(snapshot)

    async def find_all(self, limit: int = 100) -> List[DeliveryNote]:
        notes = [DeliveryNote.from_dict(s) for s in self._storage.values()]
        notes.sort(key=lambda note: note.date, reverse=True)
        return notes[:limit]

    async def find_by_customer_id(self, customer_id: str) -> List[DeliveryNote]:
        return [
            DeliveryNote.from_dict(s)
            for s in self._storage.values()
            if s['customer_id'] == customer_id
        ]

    async def find_by_status(self, status: DeliveryNoteStatus) -> List[DeliveryNote]:
        status = DeliveryNoteStatus(status)
        return [
            DeliveryNote.from_dict(s)
            for s in self._storage.values()
            if s['status'] == status.value
        ]

    async def exists(self, note_id: str) -> bool:
        return note_id in self._storage

    async def delete(self, note_id: str) -> None:
        if self._storage.pop(note_id, None) is not None:
            logger.info(f"Delivery note deleted: {note_id}")
        else:
            logger.warning(f"Delivery note not found for deletion: {note_id}")

    async def next_identity(self) -> str:
        return str(uuid4())

    async def next_number(self, prefix: str, year: int) -> str:
        return DeliveryNoteNumber.next_in_sequence(
            prefix, year, (s['number'] for s in self._storage.values())
        )

    def clear(self) -> None:
        self._storage.clear()


class MockCustomerRepository(CustomerRepository):
    """In-memory implementation of CustomerRepository."""

    def __init__(self, storage: Optional[Dict[str, Snapshot]] = None):
        self._storage: Dict[str, Snapshot] = storage if storage is not None else {}

    async def save(self, customer: Customer) -> None:
        self._storage[customer.id] = customer.to_dict()
        logger.info(f"Customer saved: {customer.name} ({customer.id})")

    async def find_by_id(self, customer_id: str) -> Optional[Customer]:
        snapshot = self._storage.get(customer_id)
        return Customer.from_dict(snapshot) if snapshot is not None else None

    async def find_all(self, limit: int = 100) -> List[Customer]:
        customers = [Customer.from_dict(s) for s in self._storage.values()]
        customers.sort(key=lambda customer: customer.name.casefold())
        return customers[:limit]

    async def delete(self, customer_id: str) -> None:
        if self._storage.pop(customer_id, None) is not None:
            logger.info(f"Customer deleted: {customer_id}")
        else:
            logger.warning(f"Customer not found for deletion: {customer_id}")


class MockPricingProfileRepository(PricingProfileRepository):
    """In-memory implementation of PricingProfileRepository."""

    def __init__(self, storage: Optional[Dict[str, Snapshot]] = None):
        self._storage: Dict[str, Snapshot] = storage if storage is not None else {}

    async def save(self, profile: PricingProfile) -> None:
        self._storage[profile.id] = profile.to_dict()
        logger.info(f"Pricing profile saved for customer {profile.customer_id}")

    async def find_by_id(self, profile_id: str) -> Optional[PricingProfile]:
        snapshot = self._storage.get(profile_id)
        return PricingProfile.from_dict(snapshot) if snapshot is not None else None

    async def find_by_customer_id(self, customer_id: str) -> Optional[PricingProfile]:
        for snapshot in self._storage.values():
            if snapshot['customer_id'] == customer_id:
                return PricingProfile.from_dict(snapshot)
        return None

    async def find_all(self, limit: int = 100) -> List[PricingProfile]:
        return [PricingProfile.from_dict(s) for s in self._storage.values()][:limit]

    async def delete(self, profile_id: str) -> None:
        if self._storage.pop(profile_id, None) is not None:
            logger.info(f"Pricing profile deleted: {profile_id}")
        else:
            logger.warning(f"Pricing profile not found for deletion: {profile_id}")
