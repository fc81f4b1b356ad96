"""Money value object - pure Python immutable type."""

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Union

from ..exceptions import NegativePrice


Number = Union[int, float, str, Decimal]


def _to_decimal(value: Number) -> Decimal:
    if isinstance(value, bool):
        raise NegativePrice(value)
    if isinstance(value, Decimal):
        return value
    try:
        # float goes through str so 15.5 stays 15.5 and not 15.4999...
        return Decimal(str(value))
    except InvalidOperation:
        raise NegativePrice(value)


@dataclass(frozen=True, order=True)
class Money:
    """
    Immutable non-negative monetary amount.

    Single currency (the workshop bills in euros only).

    CRITICAL: Always use Decimal, never float!
    """
    amount: Decimal

    def __post_init__(self):
        amount = _to_decimal(self.amount)
        if not amount.is_finite() or amount < 0:
            raise NegativePrice(self.amount)
        object.__setattr__(self, 'amount', amount)

    @classmethod
    def zero(cls) -> 'Money':
        return cls(Decimal("0"))

    def __str__(self) -> str:
        return f"{self.amount:.2f}"

    def __add__(self, other: 'Money') -> 'Money':
        """Add two Money objects."""
        if not isinstance(other, Money):
            return NotImplemented
        return Money(self.amount + other.amount)

    def __mul__(self, factor: Number) -> 'Money':
        return self.multiply(factor)

    __rmul__ = __mul__

    def add(self, other: 'Money') -> 'Money':
        return self + other

    def multiply(self, factor: Number) -> 'Money':
        """Scale the amount by a non-negative factor (quantity, surcharge)."""
        factor = _to_decimal(factor)
        if factor < 0:
            raise NegativePrice(factor)
        return Money(self.amount * factor)

    def is_zero(self) -> bool:
        return self.amount == 0

    def to_float(self) -> float:
        return float(self.amount)
