"""Application use cases."""
from .create_delivery_note import CreateDeliveryNoteUseCase
from .delete_delivery_note import DeleteDeliveryNoteUseCase
from .update_delivery_note import UpdateDeliveryNoteUseCase

__all__ = [
    "CreateDeliveryNoteUseCase",
    "DeleteDeliveryNoteUseCase",
    "UpdateDeliveryNoteUseCase",
]
