"""Domain value objects."""

from .money import Money
from .color import ColorClassification, ColorKind
from .measurements import Measurements
from .special_price import SpecialPrice
from .delivery_note_number import DeliveryNoteNumber

__all__ = [
    "Money",
    "ColorClassification",
    "ColorKind",
    "Measurements",
    "SpecialPrice",
    "DeliveryNoteNumber",
]
