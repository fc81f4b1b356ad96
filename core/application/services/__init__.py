"""Application services."""
from .customer_service import CustomerApplicationService
from .delivery_note_service import DeliveryNoteApplicationService

__all__ = ["CustomerApplicationService", "DeliveryNoteApplicationService"]
