"""Unit tests for PricingProfile price resolution."""

import pytest

from core.domain.entities import PricingProfile
from core.domain.exceptions import InvalidName, NegativePrice, WithoutCustomer
from core.domain.value_objects import Measurements, Money, SpecialPrice


@pytest.fixture
def profile():
    return PricingProfile.create(
        customer_id="customer-1",
        price_per_linear_meter=5,
        price_per_square_meter=12,
        minimum_price=20,
        special_prices=[SpecialPrice("Corner", Money(8))],
    )


class TestResolvePrice:
    """Special piece first, then linear + area rates, floored at the minimum."""

    def test_linear_meters(self, profile):
        assert profile.resolve_price(Measurements.with_linear_meters(10)) == Money(50)

    def test_square_meters(self, profile):
        assert profile.resolve_price(Measurements.with_square_meters(2.5)) == Money(30)

    def test_both_measurements_are_summed(self, profile):
        m = Measurements.from_values(linear_meters=4, square_meters=2)
        assert profile.resolve_price(m) == Money(44)

    def test_floor_to_minimum(self, profile):
        assert profile.resolve_price(Measurements.with_linear_meters(1)) == Money(20)

    def test_unmeasured_piece_costs_the_minimum(self, profile):
        assert profile.resolve_price(Measurements.without_measurements()) == Money(20)

    def test_special_piece_wins_case_insensitively(self, profile):
        price = profile.resolve_price(Measurements.with_linear_meters(100), item_name="  corner ")
        assert price == Money(8)

    def test_special_piece_ignores_the_minimum(self, profile):
        assert profile.resolve_price(Measurements.without_measurements(), "CORNER") == Money(8)

    def test_unknown_name_uses_rates(self, profile):
        assert profile.resolve_price(Measurements.with_linear_meters(10), "Gate") == Money(50)

    def test_thickness_does_not_change_price(self, profile):
        m = Measurements.with_linear_meters(10, thickness=5)
        assert profile.resolve_price(m) == Money(50)


class TestProfileMutations:

    def test_update_rates(self, profile):
        profile.update_rates(6, 10, 15)
        assert profile.price_per_linear_meter == Money(6)
        assert profile.minimum_price == Money(15)

    def test_update_rates_is_all_or_nothing(self, profile):
        with pytest.raises(NegativePrice):
            profile.update_rates(6, 10, -1)
        assert profile.price_per_linear_meter == Money(5)
        assert profile.price_per_square_meter == Money(12)

    def test_replace_overrides_validates_before_replacing(self, profile):
        with pytest.raises(NegativePrice):
            profile.replace_overrides([{"name": "Hinge", "price": "3"}, {"name": "Post", "price": "-1"}])
        with pytest.raises(InvalidName):
            profile.replace_overrides([{"name": " ", "price": "3"}])
        assert [s.name for s in profile.special_prices] == ["Corner"]

    def test_replace_overrides(self, profile):
        profile.replace_overrides([{"name": "Hinge", "price": "3"}])
        assert profile.find_special_price("hinge").price == Money(3)
        assert profile.find_special_price("Corner") is None

    def test_add_special_price(self, profile):
        profile.add_special_price("Post", 4)
        assert profile.resolve_price(Measurements.with_linear_meters(10), "post") == Money(4)

    def test_special_prices_returns_a_copy(self, profile):
        profile.special_prices.clear()
        assert len(profile.special_prices) == 1


class TestProfileConstruction:

    def test_negative_rate_raises(self):
        with pytest.raises(NegativePrice):
            PricingProfile.create(customer_id="c", price_per_linear_meter=-1)

    def test_missing_customer_raises(self):
        with pytest.raises(WithoutCustomer):
            PricingProfile.create(customer_id="")

    def test_round_trip(self, profile):
        restored = PricingProfile.from_dict(profile.to_dict())
        assert restored == profile
        assert restored.minimum_price == Money(20)
        assert restored.special_prices == profile.special_prices
