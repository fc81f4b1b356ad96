"""Domain entities and the DeliveryNote aggregate root."""
from .customer import Customer
from .delivery_note import DeliveryNote
from .line_item import LineItem
from .pricing_profile import PricingProfile

__all__ = ["Customer", "DeliveryNote", "LineItem", "PricingProfile"]
