"""
PricingProfile entity.

The customer's pricing agreement: per-linear-meter rate, per-square-meter
rate, minimum charge, and named special-piece overrides.

CRITICAL: This file must contain ZERO imports from:
- sqlalchemy
- pydantic
- fastapi
"""
from datetime import datetime, timezone
from typing import Any, Dict, Iterable, List, Optional, Union
from uuid import uuid4

from ..exceptions import InvalidId, WithoutCustomer
from ..value_objects import Measurements, Money, SpecialPrice


PriceInput = Union[Money, int, float, str]


def _money(value: PriceInput) -> Money:
    """Money rejects negative amounts with NegativePrice."""
    return value if isinstance(value, Money) else Money(value)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class PricingProfile:
    """
    Pricing rules of one customer.

    Rates are re-validated on every change: a failing update leaves the
    profile untouched.
    """

    def __init__(
        self,
        id: str,
        customer_id: str,
        price_per_linear_meter: PriceInput = 0,
        price_per_square_meter: PriceInput = 0,
        minimum_price: PriceInput = 0,
        special_prices: Optional[Iterable[SpecialPrice]] = None,
        created_at: Optional[datetime] = None,
        updated_at: Optional[datetime] = None,
    ):
        if not isinstance(id, str) or not id.strip():
            raise InvalidId("Pricing profile must have an ID")
        if not isinstance(customer_id, str) or not customer_id.strip():
            raise WithoutCustomer()

        self._id = id
        self._customer_id = customer_id
        self._price_per_linear_meter = _money(price_per_linear_meter)
        self._price_per_square_meter = _money(price_per_square_meter)
        self._minimum_price = _money(minimum_price)
        self._special_prices: List[SpecialPrice] = list(special_prices or [])
        self._created_at = created_at or _utcnow()
        self._updated_at = updated_at or self._created_at

    @classmethod
    def create(
        cls,
        customer_id: str,
        price_per_linear_meter: PriceInput = 0,
        price_per_square_meter: PriceInput = 0,
        minimum_price: PriceInput = 0,
        special_prices: Optional[Iterable[SpecialPrice]] = None,
    ) -> 'PricingProfile':
        """Factory used at customer onboarding."""
        return cls(
            id=str(uuid4()),
            customer_id=customer_id,
            price_per_linear_meter=price_per_linear_meter,
            price_per_square_meter=price_per_square_meter,
            minimum_price=minimum_price,
            special_prices=special_prices,
        )

    # Getters
    @property
    def id(self) -> str:
        return self._id

    @property
    def customer_id(self) -> str:
        return self._customer_id

    @property
    def price_per_linear_meter(self) -> Money:
        return self._price_per_linear_meter

    @property
    def price_per_square_meter(self) -> Money:
        return self._price_per_square_meter

    @property
    def minimum_price(self) -> Money:
        return self._minimum_price

    @property
    def special_prices(self) -> List[SpecialPrice]:
        # SpecialPrice is frozen, a shallow copy is enough
        return list(self._special_prices)

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    # =========================================================================
    # PRICE RESOLUTION
    # =========================================================================

    def find_special_price(self, item_name: Optional[str]) -> Optional[SpecialPrice]:
        if not item_name:
            return None
        for special in self._special_prices:
            if special.matches(item_name):
                return special
        return None

    def resolve_price(self, measurements: Measurements, item_name: Optional[str] = None) -> Money:
        """
        Resolve the base unit price of a piece.

        1. Special piece (case-insensitive name match) wins regardless of
           measurements.
        2. Otherwise length x linear rate + area x area rate (absent
           measurement contributes 0).
        3. Never below the minimum price; unmeasured pieces therefore cost
           exactly the minimum.

        Surcharges (primer, thickness) are applied by the caller.
        """
        special = self.find_special_price(item_name)
        if special is not None:
            return special.price

        computed = Money.zero()
        if measurements.linear_meters is not None:
            computed = computed + self._price_per_linear_meter.multiply(measurements.linear_meters)
        if measurements.square_meters is not None:
            computed = computed + self._price_per_square_meter.multiply(measurements.square_meters)

        if computed < self._minimum_price:
            return self._minimum_price
        return computed

    # =========================================================================
    # MUTATIONS
    # =========================================================================

    def update_rates(
        self,
        price_per_linear_meter: PriceInput,
        price_per_square_meter: PriceInput,
        minimum_price: PriceInput,
    ) -> None:
        """Replace the three rates; all are validated before any is assigned."""
        linear = _money(price_per_linear_meter)
        area = _money(price_per_square_meter)
        minimum = _money(minimum_price)

        self._price_per_linear_meter = linear
        self._price_per_square_meter = area
        self._minimum_price = minimum
        self._touch()

    def replace_overrides(self, special_prices: Iterable[Any]) -> None:
        """
        Replace the special-piece list.

        Accepts SpecialPrice objects or ``{"name": ..., "price": ...}``
        mappings. Raises NegativePrice / InvalidName before touching state.
        """
        validated = [
            special if isinstance(special, SpecialPrice) else SpecialPrice.from_dict(special)
            for special in special_prices
        ]
        self._special_prices = validated
        self._touch()

    def add_special_price(self, name: str, price: PriceInput) -> SpecialPrice:
        special = SpecialPrice(name=name, price=_money(price))
        self._special_prices.append(special)
        self._touch()
        return special

    def _touch(self) -> None:
        self._updated_at = _utcnow()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PricingProfile):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    # Serialization
    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self._id,
            'customer_id': self._customer_id,
            'price_per_linear_meter': str(self._price_per_linear_meter.amount),
            'price_per_square_meter': str(self._price_per_square_meter.amount),
            'minimum_price': str(self._minimum_price.amount),
            'special_prices': [special.to_dict() for special in self._special_prices],
            'created_at': self._created_at.isoformat(),
            'updated_at': self._updated_at.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'PricingProfile':
        return cls(
            id=data['id'],
            customer_id=data['customer_id'],
            price_per_linear_meter=data.get('price_per_linear_meter', 0),
            price_per_square_meter=data.get('price_per_square_meter', 0),
            minimum_price=data.get('minimum_price', 0),
            special_prices=[SpecialPrice.from_dict(s) for s in data.get('special_prices', [])],
            created_at=_parse_datetime(data.get('created_at')),
            updated_at=_parse_datetime(data.get('updated_at')),
        )


def _parse_datetime(value: Any) -> Optional[datetime]:
    if value is None or isinstance(value, datetime):
        return value
    return datetime.fromisoformat(value)
