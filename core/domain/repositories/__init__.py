"""Repository interfaces (implemented in the data and infrastructure layers)."""
from .customer_repository import CustomerRepository
from .delivery_note_repository import DeliveryNoteRepository
from .pricing_profile_repository import PricingProfileRepository

__all__ = ["CustomerRepository", "DeliveryNoteRepository", "PricingProfileRepository"]
