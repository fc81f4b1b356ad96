"""Domain layer - pure domain models and interfaces."""

from .entities import Customer, DeliveryNote, LineItem, PricingProfile
from .enums import DeliveryNoteStatus
from .repositories import CustomerRepository, DeliveryNoteRepository, PricingProfileRepository
from .value_objects import ColorClassification, DeliveryNoteNumber, Measurements, Money, SpecialPrice

__all__ = [
    "ColorClassification",
    "Customer",
    "CustomerRepository",
    "DeliveryNote",
    "DeliveryNoteNumber",
    "DeliveryNoteRepository",
    "DeliveryNoteStatus",
    "LineItem",
    "Measurements",
    "Money",
    "PricingProfile",
    "PricingProfileRepository",
    "SpecialPrice",
]
