"""Tests for CustomerApplicationService."""

from decimal import Decimal

import pytest

from core.application.dtos import (
    CreateCustomerRequest,
    PricingRatesInput,
    SpecialPriceDTO,
    UpdateCustomerRequest,
)
from core.domain.exceptions import CustomerNotFound, InvalidName, NegativePrice


@pytest.mark.asyncio
async def test_create_customer_creates_pricing_profile(customer_service, customer):
    profile = await customer_service.get_pricing_profile(customer.id)

    assert profile.customer_id == customer.id
    assert profile.price_per_linear_meter == Decimal("5")
    assert profile.minimum_price == Decimal("20")
    assert [s.name for s in profile.special_prices] == ["Corner"]


@pytest.mark.asyncio
async def test_create_customer_without_pricing_gets_zero_rates(customer_service):
    customer = await customer_service.create_customer(CreateCustomerRequest(name="Cerrajería Sur"))

    profile = await customer_service.get_pricing_profile(customer.id)
    assert profile.minimum_price == Decimal("0")
    assert profile.special_prices == []


@pytest.mark.asyncio
async def test_invalid_name_is_rejected(customer_service, storage):
    with pytest.raises(InvalidName):
        await customer_service.create_customer(CreateCustomerRequest(name="X"))
    assert storage.customers == {}


@pytest.mark.asyncio
async def test_update_customer(customer_service, customer):
    updated = await customer_service.update_customer(
        customer.id, UpdateCustomerRequest(name="López e Hijos", phone="600123123")
    )

    assert updated.name == "López e Hijos"
    assert updated.email == "taller@lopez.es"
    assert updated.phone == "600123123"


@pytest.mark.asyncio
async def test_update_pricing_profile(customer_service, customer):
    profile = await customer_service.update_pricing_profile(
        customer.id,
        PricingRatesInput(
            price_per_linear_meter=Decimal("6"),
            price_per_square_meter=Decimal("11"),
            minimum_price=Decimal("15"),
            special_prices=[SpecialPriceDTO(name="Hinge", price=Decimal("3"))],
        ),
    )

    assert profile.price_per_linear_meter == Decimal("6")
    assert [(s.name, s.price) for s in profile.special_prices] == [("Hinge", Decimal("3"))]


@pytest.mark.asyncio
async def test_update_pricing_without_special_prices_keeps_them(customer_service, customer):
    profile = await customer_service.update_pricing_profile(
        customer.id, PricingRatesInput(price_per_linear_meter=Decimal("6"))
    )
    assert [s.name for s in profile.special_prices] == ["Corner"]


@pytest.mark.asyncio
async def test_negative_rate_is_rejected(customer_service, customer):
    with pytest.raises(NegativePrice):
        await customer_service.update_pricing_profile(
            customer.id, PricingRatesInput(minimum_price=Decimal("-1"))
        )

    profile = await customer_service.get_pricing_profile(customer.id)
    assert profile.minimum_price == Decimal("20")


@pytest.mark.asyncio
async def test_delete_customer_removes_profile(customer_service, customer, storage):
    await customer_service.delete_customer(customer.id)

    assert storage.customers == {}
    assert storage.pricing_profiles == {}
    with pytest.raises(CustomerNotFound):
        await customer_service.get_customer(customer.id)


@pytest.mark.asyncio
async def test_list_customers_sorted_by_name(customer_service, customer):
    await customer_service.create_customer(CreateCustomerRequest(name="Aluminios Norte"))

    result = await customer_service.list_customers()
    assert [c.name for c in result.customers] == ["Aluminios Norte", "Herrería López"]
