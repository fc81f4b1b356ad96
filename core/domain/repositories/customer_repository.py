"""Repository interface for customers."""

from abc import ABC, abstractmethod
from typing import List, Optional

from ..entities.customer import Customer


class CustomerRepository(ABC):

    @abstractmethod
    async def save(self, customer: Customer) -> None:
        pass

    @abstractmethod
    async def find_by_id(self, customer_id: str) -> Optional[Customer]:
        pass

    @abstractmethod
    async def find_all(self, limit: int = 100) -> List[Customer]:
        """Customers ordered by name."""
        pass

    @abstractmethod
    async def delete(self, customer_id: str) -> None:
        pass
