"""SQLAlchemy implementations of CustomerRepository and PricingProfileRepository."""

from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from core.domain.entities import Customer, PricingProfile
from core.domain.repositories import CustomerRepository, PricingProfileRepository

from ..mappers import CustomerMapper, PricingProfileMapper
from ..models import CustomerModel, PricingProfileModel


class SqlAlchemyCustomerRepository(CustomerRepository):

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def save(self, customer: Customer) -> None:
        existing = await self._session.get(CustomerModel, customer.id)
        model = CustomerMapper.to_persistence(customer, existing)
        if existing is None:
            self._session.add(model)
        await self._session.flush()

    async def find_by_id(self, customer_id: str) -> Optional[Customer]:
        model = await self._session.get(CustomerModel, customer_id)
        return CustomerMapper.to_domain(model) if model else None

    async def find_all(self, limit: int = 100) -> List[Customer]:
        result = await self._session.execute(
            select(CustomerModel).order_by(CustomerModel.name).limit(limit)
        )
        return [CustomerMapper.to_domain(model) for model in result.scalars().all()]

    async def delete(self, customer_id: str) -> None:
        model = await self._session.get(CustomerModel, customer_id)
        if model is not None:
            await self._session.delete(model)
            await self._session.flush()


class SqlAlchemyPricingProfileRepository(PricingProfileRepository):

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def save(self, profile: PricingProfile) -> None:
        existing = await self._session.get(PricingProfileModel, profile.id)
        model = PricingProfileMapper.to_persistence(profile, existing)
        if existing is None:
            self._session.add(model)
        await self._session.flush()

    async def find_by_id(self, profile_id: str) -> Optional[PricingProfile]:
        model = await self._session.get(PricingProfileModel, profile_id)
        return PricingProfileMapper.to_domain(model) if model else None

    async def find_by_customer_id(self, customer_id: str) -> Optional[PricingProfile]:
        result = await self._session.execute(
            select(PricingProfileModel).where(PricingProfileModel.customer_id == customer_id)
        )
        model = result.scalar_one_or_none()
        return PricingProfileMapper.to_domain(model) if model else None

    async def find_all(self, limit: int = 100) -> List[PricingProfile]:
        result = await self._session.execute(select(PricingProfileModel).limit(limit))
        return [PricingProfileMapper.to_domain(model) for model in result.scalars().all()]

    async def delete(self, profile_id: str) -> None:
        model = await self._session.get(PricingProfileModel, profile_id)
        if model is not None:
            await self._session.delete(model)
            await self._session.flush()
