"""Repository interface for pricing profiles."""

from abc import ABC, abstractmethod
from typing import List, Optional

from ..entities.pricing_profile import PricingProfile


class PricingProfileRepository(ABC):

    @abstractmethod
    async def save(self, profile: PricingProfile) -> None:
        pass

    @abstractmethod
    async def find_by_id(self, profile_id: str) -> Optional[PricingProfile]:
        pass

    @abstractmethod
    async def find_by_customer_id(self, customer_id: str) -> Optional[PricingProfile]:
        """A customer has at most one pricing profile."""
        pass

    @abstractmethod
    async def find_all(self, limit: int = 100) -> List[PricingProfile]:
        pass

    @abstractmethod
    async def delete(self, profile_id: str) -> None:
        pass
