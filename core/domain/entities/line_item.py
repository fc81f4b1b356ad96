"""
LineItem entity.

One coated piece (or batch of identical pieces) within a delivery note.

CRITICAL: This file must contain ZERO imports from:
- sqlalchemy
- pydantic
- fastapi
"""
from typing import Any, Dict, Optional

from ..exceptions import InvalidId, InvalidName, InvalidQuantity
from ..value_objects import ColorClassification, Measurements, Money


def _validate_id(item_id: str) -> str:
    if not isinstance(item_id, str) or not item_id.strip():
        raise InvalidId("Item must have an ID")
    return item_id


def _validate_name(name: str) -> str:
    if not isinstance(name, str) or not name.strip():
        raise InvalidName("Item must have a name")
    return name.strip()


def _validate_quantity(quantity: int) -> int:
    if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity <= 0:
        raise InvalidQuantity(quantity)
    return quantity


class LineItem:
    """
    Line item entity.

    Identity is the ``id``: two items with the same id are the same item
    even if every other field differs. Editability is enforced by the
    owning DeliveryNote, never by the item itself.
    """

    def __init__(
        self,
        id: str,
        name: str,
        color: ColorClassification,
        quantity: int,
        measurements: Optional[Measurements] = None,
        price: Optional[Money] = None,
        has_primer: bool = False,
        is_high_thickness: bool = False,
    ):
        self._id = _validate_id(id)
        self._name = _validate_name(name)
        self._color = color
        self._quantity = _validate_quantity(quantity)
        self._measurements = measurements or Measurements.without_measurements()
        self._price = price
        self._has_primer = bool(has_primer)
        self._is_high_thickness = bool(is_high_thickness)

    # Getters
    @property
    def id(self) -> str:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def color(self) -> ColorClassification:
        return self._color

    @property
    def quantity(self) -> int:
        return self._quantity

    @property
    def measurements(self) -> Measurements:
        return self._measurements

    @property
    def price(self) -> Optional[Money]:
        return self._price

    @property
    def has_primer(self) -> bool:
        return self._has_primer

    @property
    def is_high_thickness(self) -> bool:
        return self._is_high_thickness

    # Mutators (same validation as the constructor)
    def change_name(self, name: str) -> None:
        self._name = _validate_name(name)

    def change_color(self, color: ColorClassification) -> None:
        self._color = color

    def change_quantity(self, quantity: int) -> None:
        self._quantity = _validate_quantity(quantity)

    def change_measurements(self, measurements: Measurements) -> None:
        self._measurements = measurements

    def change_surcharge_flags(
        self, has_primer: Optional[bool] = None, is_high_thickness: Optional[bool] = None
    ) -> None:
        if has_primer is not None:
            self._has_primer = bool(has_primer)
        if is_high_thickness is not None:
            self._is_high_thickness = bool(is_high_thickness)

    def assign_price(self, price: Money) -> None:
        self._price = price

    def remove_price(self) -> None:
        self._price = None

    # Business questions
    def has_price(self) -> bool:
        return self._price is not None

    def has_special_color(self) -> bool:
        return self._color.is_special()

    def has_measurements(self) -> bool:
        return self._measurements.has_measurements()

    def requires_minimum_rate(self) -> bool:
        return not self._measurements.has_measurements()

    def has_special_thickness(self) -> bool:
        return self._measurements.has_special_thickness()

    def calculate_total_price(self) -> Optional[Money]:
        """Unit price x quantity, or None while the item is unpriced."""
        if self._price is None:
            return None
        return self._price.multiply(self._quantity)

    # Identity
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LineItem):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return (
            f"LineItem(id={self._id!r}, name={self._name!r}, "
            f"quantity={self._quantity}, price={self._price})"
        )

    # Serialization
    def to_dict(self) -> Dict[str, Any]:
        total = self.calculate_total_price()
        m = self._measurements
        return {
            'id': self._id,
            'name': self._name,
            'color': self._color.display(),
            'color_code': self._color.code(),
            'color_is_standard': self._color.is_standard(),
            'quantity': self._quantity,
            'measurements': m.describe(),
            'linear_meters': str(m.linear_meters) if m.linear_meters is not None else None,
            'square_meters': str(m.square_meters) if m.square_meters is not None else None,
            'thickness': str(m.thickness) if m.thickness is not None else None,
            'has_primer': self._has_primer,
            'is_high_thickness': self._is_high_thickness,
            'price': str(self._price.amount) if self._price is not None else None,
            'total_price': str(total.amount) if total is not None else None,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'LineItem':
        """Restore an item from ``to_dict()`` output."""
        if data.get('color_is_standard'):
            color = ColorClassification.standard(data['color_code'])
        else:
            color = ColorClassification.special(data.get('color_code') or data['color'])

        price = data.get('price')
        return cls(
            id=data['id'],
            name=data['name'],
            color=color,
            quantity=data['quantity'],
            measurements=Measurements(
                linear_meters=data.get('linear_meters'),
                square_meters=data.get('square_meters'),
                thickness=data.get('thickness'),
            ),
            price=Money(price) if price is not None else None,
            has_primer=data.get('has_primer', False),
            is_high_thickness=data.get('is_high_thickness', False),
        )
