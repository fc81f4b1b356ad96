"""Database models."""

from .base import Base
from .customer_model import CustomerModel, PricingProfileModel
from .delivery_note_model import DeliveryNoteItemModel, DeliveryNoteModel

__all__ = [
    "Base",
    "CustomerModel",
    "DeliveryNoteItemModel",
    "DeliveryNoteModel",
    "PricingProfileModel",
]
