"""
Pricing domain service.

Resolves the unit price of a line item from the customer's PricingProfile
and then applies the enabled surcharges in order.

Surcharges are optional multipliers kept outside PricingProfile so a
workshop can switch them on or off without touching the profile rules.
"""
from abc import ABC, abstractmethod
from decimal import Decimal
from typing import Any, Iterable, List, Optional, Union

from ..entities.line_item import LineItem
from ..entities.pricing_profile import PricingProfile
from ..exceptions import NegativePrice
from ..value_objects import Money


DEFAULT_PRIMER_FACTOR = Decimal("2")
DEFAULT_HIGH_THICKNESS_FACTOR = Decimal("1.7")


class PriceAdjustment(ABC):
    """A multiplier applied to the base price when it applies to an item."""

    def __init__(self, factor: Union[Decimal, int, float, str]):
        factor = Decimal(str(factor))
        if factor < 0:
            raise NegativePrice(factor)
        self.factor = factor

    @abstractmethod
    def applies_to(self, item: LineItem) -> bool:
        pass

    def apply(self, price: Money) -> Money:
        return price.multiply(self.factor)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(factor={self.factor})"


class PrimerSurcharge(PriceAdjustment):
    """Pieces that receive a primer coat before the epoxy layer."""

    def __init__(self, factor=DEFAULT_PRIMER_FACTOR):
        super().__init__(factor)

    def applies_to(self, item: LineItem) -> bool:
        return item.has_primer


class HighThicknessSurcharge(PriceAdjustment):
    """Pieces coated above the standard film thickness."""

    def __init__(self, factor=DEFAULT_HIGH_THICKNESS_FACTOR):
        super().__init__(factor)

    def applies_to(self, item: LineItem) -> bool:
        return item.is_high_thickness


class PricingService:
    """Prices line items for a customer."""

    def __init__(self, adjustments: Optional[Iterable[PriceAdjustment]] = None):
        self._adjustments: List[PriceAdjustment] = list(adjustments or [])

    @property
    def adjustments(self) -> List[PriceAdjustment]:
        return list(self._adjustments)

    def price_for(self, profile: PricingProfile, item: LineItem) -> Money:
        price = profile.resolve_price(item.measurements, item.name)
        for adjustment in self._adjustments:
            if adjustment.applies_to(item):
                price = adjustment.apply(price)
        return price

    def price_items(self, profile: PricingProfile, items: Iterable[LineItem]) -> None:
        """Assign a resolved price to every item (before it enters a note)."""
        for item in items:
            item.assign_price(self.price_for(profile, item))


def build_adjustments(settings: Any) -> List[PriceAdjustment]:
    """
    Enabled surcharges from a PricingSettings-like object.

    Primer is applied before thickness; both are multiplicative so the order
    does not change the result.
    """
    adjustments: List[PriceAdjustment] = []
    if settings.apply_primer_surcharge:
        adjustments.append(PrimerSurcharge(settings.primer_factor))
    if settings.apply_high_thickness_surcharge:
        adjustments.append(HighThicknessSurcharge(settings.high_thickness_factor))
    return adjustments
