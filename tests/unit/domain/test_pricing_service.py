"""Unit tests for surcharges applied by PricingService."""

from decimal import Decimal
from types import SimpleNamespace

import pytest

from core.domain.entities import PricingProfile
from core.domain.services import (
    HighThicknessSurcharge,
    PricingService,
    PrimerSurcharge,
    build_adjustments,
)
from core.domain.value_objects import Measurements, Money


@pytest.fixture
def profile():
    return PricingProfile.create(customer_id="c-1", price_per_linear_meter=10, minimum_price=5)


class TestPricingService:

    def test_no_adjustments_returns_base_price(self, profile, make_item):
        item = make_item(measurements=Measurements.with_linear_meters(2), has_primer=True)
        assert PricingService().price_for(profile, item) == Money(20)

    def test_primer_doubles_price(self, profile, make_item):
        item = make_item(measurements=Measurements.with_linear_meters(2), has_primer=True)
        assert PricingService([PrimerSurcharge()]).price_for(profile, item) == Money(40)

    def test_surcharge_only_applies_to_flagged_items(self, profile, make_item):
        item = make_item(measurements=Measurements.with_linear_meters(2))
        service = PricingService([PrimerSurcharge(), HighThicknessSurcharge()])
        assert service.price_for(profile, item) == Money(20)

    def test_surcharges_stack(self, profile, make_item):
        item = make_item(
            measurements=Measurements.with_linear_meters(2),
            has_primer=True,
            is_high_thickness=True,
        )
        service = PricingService([PrimerSurcharge(), HighThicknessSurcharge()])
        assert service.price_for(profile, item) == Money(68)

    def test_price_items_assigns_prices(self, profile, make_item):
        items = [make_item(measurements=Measurements.with_linear_meters(1)), make_item()]
        PricingService().price_items(profile, items)
        assert [item.price for item in items] == [Money(10), Money(20)]


class TestBuildAdjustments:

    def test_disabled_by_default(self):
        settings = SimpleNamespace(
            apply_primer_surcharge=False,
            primer_factor=Decimal("2"),
            apply_high_thickness_surcharge=False,
            high_thickness_factor=Decimal("1.7"),
        )
        assert build_adjustments(settings) == []

    def test_enabled_adjustments_use_configured_factors(self):
        settings = SimpleNamespace(
            apply_primer_surcharge=True,
            primer_factor=Decimal("1.5"),
            apply_high_thickness_surcharge=True,
            high_thickness_factor=Decimal("1.7"),
        )
        primer, thickness = build_adjustments(settings)
        assert isinstance(primer, PrimerSurcharge)
        assert primer.factor == Decimal("1.5")
        assert thickness.factor == Decimal("1.7")
