"""Unit of Work interface used by the application layer."""

from abc import ABC, abstractmethod

from core.domain.repositories import (
    CustomerRepository,
    DeliveryNoteRepository,
    PricingProfileRepository,
)


class AbstractUnitOfWork(ABC):
    """
    Transaction scope over the three repositories.

    Usage:
        async with uow:
            note = await uow.delivery_notes.find_by_id(note_id)
            ...
            await uow.commit()

    Leaving the block without ``commit()`` discards the changes; leaving it
    with an exception rolls back.
    """

    delivery_notes: DeliveryNoteRepository
    customers: CustomerRepository
    pricing_profiles: PricingProfileRepository

    async def __aenter__(self) -> "AbstractUnitOfWork":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        if exc_type is not None:
            await self.rollback()

    @abstractmethod
    async def commit(self) -> None:
        pass

    @abstractmethod
    async def rollback(self) -> None:
        pass
