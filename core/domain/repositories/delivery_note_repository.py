"""Repository interface for the DeliveryNote aggregate."""

from abc import ABC, abstractmethod
from typing import List, Optional

from ..entities.delivery_note import DeliveryNote
from ..enums.delivery_note_status import DeliveryNoteStatus


class DeliveryNoteRepository(ABC):
    """Abstract repository for DeliveryNote aggregate persistence."""

    @abstractmethod
    async def save(self, note: DeliveryNote) -> None:
        """Insert or update the aggregate together with its items.

        Args:
            note: DeliveryNote aggregate to persist
        """
        pass

    @abstractmethod
    async def find_by_id(self, note_id: str) -> Optional[DeliveryNote]:
        """Retrieve a delivery note by identifier.

        Returns:
            DeliveryNote if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(self, limit: int = 100) -> List[DeliveryNote]:
        """List delivery notes, most recent date first.

        Args:
            limit: Maximum number of notes to return
        """
        pass

    @abstractmethod
    async def find_by_customer_id(self, customer_id: str) -> List[DeliveryNote]:
        pass

    @abstractmethod
    async def find_by_status(self, status: DeliveryNoteStatus) -> List[DeliveryNote]:
        pass

    @abstractmethod
    async def exists(self, note_id: str) -> bool:
        pass

    @abstractmethod
    async def delete(self, note_id: str) -> None:
        pass

    @abstractmethod
    async def next_identity(self) -> str:
        """Generate a new unique delivery note id."""
        pass

    @abstractmethod
    async def next_number(self, prefix: str, year: int) -> str:
        """Highest sequence already issued for prefix and year, plus one.

        Returns:
            Formatted number, e.g. ``ALB-2026-007``
        """
        pass
