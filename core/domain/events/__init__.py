"""Domain events for the delivery note aggregate."""
from .base import DomainEvent
from .delivery_note_events import (
    DeliveryNoteEvent,
    DeliveryNoteCreatedEvent,
    DeliveryNoteItemAddedEvent,
    DeliveryNoteItemRemovedEvent,
    DeliveryNoteItemUpdatedEvent,
    DeliveryNoteItemPriceChangedEvent,
    DeliveryNoteStatusChangedEvent,
)

__all__ = [
    "DomainEvent",
    "DeliveryNoteEvent",
    "DeliveryNoteCreatedEvent",
    "DeliveryNoteItemAddedEvent",
    "DeliveryNoteItemRemovedEvent",
    "DeliveryNoteItemUpdatedEvent",
    "DeliveryNoteItemPriceChangedEvent",
    "DeliveryNoteStatusChangedEvent",
]
