"""Application service for customers and their pricing profiles."""

from typing import Callable
import logging

from core.application.dtos.customer_dto import (
    CreateCustomerRequest,
    CustomerDTO,
    CustomerListDTO,
    PricingProfileDTO,
    PricingRatesInput,
    UpdateCustomerRequest,
)
from core.application.unit_of_work import AbstractUnitOfWork
from core.domain.entities import Customer, PricingProfile
from core.domain.exceptions import CustomerNotFound, PricingProfileNotFound


logger = logging.getLogger(__name__)


class CustomerApplicationService:
    """
    Customer onboarding and pricing maintenance.

    Every customer gets exactly one pricing profile, created with the
    customer and deleted with it.
    """

    def __init__(self, uow_factory: Callable[[], AbstractUnitOfWork]) -> None:
        self._uow_factory = uow_factory

    async def create_customer(self, request: CreateCustomerRequest) -> CustomerDTO:
        customer = Customer.create(name=request.name, email=request.email, phone=request.phone)
        rates = request.pricing or PricingRatesInput()
        profile = PricingProfile.create(
            customer_id=customer.id,
            price_per_linear_meter=rates.price_per_linear_meter,
            price_per_square_meter=rates.price_per_square_meter,
            minimum_price=rates.minimum_price,
        )
        if rates.special_prices:
            profile.replace_overrides(s.model_dump() for s in rates.special_prices)

        async with self._uow_factory() as uow:
            await uow.customers.save(customer)
            await uow.pricing_profiles.save(profile)
            await uow.commit()

        logger.info(f"Customer created: {customer.name} ({customer.id})")
        return self._customer_to_dto(customer)

    async def get_customer(self, customer_id: str) -> CustomerDTO:
        async with self._uow_factory() as uow:
            customer = await self._require_customer(uow, customer_id)
        return self._customer_to_dto(customer)

    async def list_customers(self, limit: int = 100) -> CustomerListDTO:
        async with self._uow_factory() as uow:
            customers = await uow.customers.find_all(limit=limit)
        return CustomerListDTO(
            customers=[self._customer_to_dto(c) for c in customers],
            total=len(customers),
        )

    async def update_customer(self, customer_id: str, request: UpdateCustomerRequest) -> CustomerDTO:
        async with self._uow_factory() as uow:
            customer = await self._require_customer(uow, customer_id)
            if request.name is not None:
                customer.change_name(request.name)
            if request.email is not None or request.phone is not None:
                customer.change_contact_info(email=request.email, phone=request.phone)

            await uow.customers.save(customer)
            await uow.commit()

        return self._customer_to_dto(customer)

    async def delete_customer(self, customer_id: str) -> None:
        async with self._uow_factory() as uow:
            await self._require_customer(uow, customer_id)
            profile = await uow.pricing_profiles.find_by_customer_id(customer_id)
            if profile is not None:
                await uow.pricing_profiles.delete(profile.id)
            await uow.customers.delete(customer_id)
            await uow.commit()

        logger.info(f"Customer deleted: {customer_id}")

    # =========================================================================
    # PRICING PROFILE
    # =========================================================================

    async def get_pricing_profile(self, customer_id: str) -> PricingProfileDTO:
        async with self._uow_factory() as uow:
            await self._require_customer(uow, customer_id)
            profile = await uow.pricing_profiles.find_by_customer_id(customer_id)
        if profile is None:
            raise PricingProfileNotFound(customer_id)
        return self._profile_to_dto(profile)

    async def update_pricing_profile(self, customer_id: str, request: PricingRatesInput) -> PricingProfileDTO:
        """Replace the rates (and the special prices when given). Creates the profile if missing."""
        async with self._uow_factory() as uow:
            await self._require_customer(uow, customer_id)
            profile = await uow.pricing_profiles.find_by_customer_id(customer_id)
            if profile is None:
                profile = PricingProfile.create(customer_id=customer_id)

            profile.update_rates(
                request.price_per_linear_meter,
                request.price_per_square_meter,
                request.minimum_price,
            )
            if request.special_prices is not None:
                profile.replace_overrides(s.model_dump() for s in request.special_prices)

            await uow.pricing_profiles.save(profile)
            await uow.commit()

        logger.info(f"Pricing profile updated for customer {customer_id}")
        return self._profile_to_dto(profile)

    # =========================================================================
    # HELPERS
    # =========================================================================

    @staticmethod
    async def _require_customer(uow: AbstractUnitOfWork, customer_id: str) -> Customer:
        customer = await uow.customers.find_by_id(customer_id)
        if customer is None:
            raise CustomerNotFound(customer_id)
        return customer

    @staticmethod
    def _customer_to_dto(customer: Customer) -> CustomerDTO:
        return CustomerDTO.model_validate(customer.to_dict())

    @staticmethod
    def _profile_to_dto(profile: PricingProfile) -> PricingProfileDTO:
        return PricingProfileDTO.model_validate(profile.to_dict())
