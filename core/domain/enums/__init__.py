"""Domain enums."""
from .delivery_note_status import DeliveryNoteStatus

__all__ = ["DeliveryNoteStatus"]
