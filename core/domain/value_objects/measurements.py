"""Measurements value object."""
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Optional, Union

from ..exceptions import InvalidMeasurement


Number = Union[int, float, str, Decimal]


def _positive(name: str, value: Optional[Number]) -> Optional[Decimal]:
    if value is None:
        return None
    if isinstance(value, bool):
        raise InvalidMeasurement(f"{name} must be a number")
    try:
        number = value if isinstance(value, Decimal) else Decimal(str(value))
    except InvalidOperation:
        raise InvalidMeasurement(f"{name} must be a number: {value!r}")
    if not number.is_finite() or number <= 0:
        raise InvalidMeasurement(f"{name} must be greater than 0 (got {value!r})")
    return number


def _fmt(value: Decimal) -> str:
    return format(value.normalize(), "f")


@dataclass(frozen=True)
class Measurements:
    """
    Size of a coated piece.

    Linear meters and square meters drive formula pricing; when neither is
    present the piece is priced at the customer's minimum. Thickness (mm)
    is independent of the length/area choice.
    """
    linear_meters: Optional[Decimal] = None
    square_meters: Optional[Decimal] = None
    thickness: Optional[Decimal] = None

    def __post_init__(self):
        object.__setattr__(self, 'linear_meters', _positive("Linear meters", self.linear_meters))
        object.__setattr__(self, 'square_meters', _positive("Square meters", self.square_meters))
        object.__setattr__(self, 'thickness', _positive("Thickness", self.thickness))

    @classmethod
    def with_linear_meters(cls, value: Number, thickness: Optional[Number] = None) -> "Measurements":
        if value is None:
            raise InvalidMeasurement("Linear meters are required")
        return cls(linear_meters=value, thickness=thickness)

    @classmethod
    def with_square_meters(cls, value: Number, thickness: Optional[Number] = None) -> "Measurements":
        if value is None:
            raise InvalidMeasurement("Square meters are required")
        return cls(square_meters=value, thickness=thickness)

    @classmethod
    def without_measurements(cls, thickness: Optional[Number] = None) -> "Measurements":
        return cls(thickness=thickness)

    @classmethod
    def from_values(
        cls,
        linear_meters: Optional[Number] = None,
        square_meters: Optional[Number] = None,
        thickness: Optional[Number] = None,
    ) -> "Measurements":
        """Build from raw optional inputs (forms, storage). Zero means absent."""
        return cls(
            linear_meters=linear_meters or None,
            square_meters=square_meters or None,
            thickness=thickness or None,
        )

    def has_measurements(self) -> bool:
        return self.linear_meters is not None or self.square_meters is not None

    def has_special_thickness(self) -> bool:
        return self.thickness is not None

    def describe(self) -> str:
        parts = []
        if self.linear_meters is not None:
            parts.append(f"{_fmt(self.linear_meters)} ml")
        if self.square_meters is not None:
            parts.append(f"{_fmt(self.square_meters)} m²")
        if not parts:
            parts.append("No measurements")
        if self.thickness is not None:
            parts.append(f"thickness {_fmt(self.thickness)}mm")
        return ", ".join(parts)
