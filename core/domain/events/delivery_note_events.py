"""
Delivery Note Domain Events.

Events recorded by the DeliveryNote aggregate during its lifecycle.
"""
from dataclasses import dataclass
from typing import Optional

from .base import DomainEvent


@dataclass
class DeliveryNoteEvent(DomainEvent):
    """Common base: every event carries the note id and number."""

    delivery_note_id: str = ""
    number: str = ""

    def __post_init__(self):
        """Set aggregate_id to delivery_note_id."""
        if not self.aggregate_id and self.delivery_note_id:
            object.__setattr__(self, 'aggregate_id', self.delivery_note_id)
        super().__post_init__()

    def _get_aggregate_type(self) -> str:
        return "DeliveryNote"


@dataclass
class DeliveryNoteCreatedEvent(DeliveryNoteEvent):
    """A draft delivery note was opened for a customer."""

    customer_id: str = ""
    customer_name: str = ""


@dataclass
class DeliveryNoteItemAddedEvent(DeliveryNoteEvent):
    item_id: str = ""
    item_name: str = ""
    quantity: int = 0


@dataclass
class DeliveryNoteItemRemovedEvent(DeliveryNoteEvent):
    item_id: str = ""


@dataclass
class DeliveryNoteItemUpdatedEvent(DeliveryNoteEvent):
    item_id: str = ""
    updated_fields: tuple = ()


@dataclass
class DeliveryNoteItemPriceChangedEvent(DeliveryNoteEvent):
    """
    Unit price of an item changed.

    previous_price / new_price are decimal strings; None means unpriced.
    """

    item_id: str = ""
    previous_price: Optional[str] = None
    new_price: Optional[str] = None


@dataclass
class DeliveryNoteStatusChangedEvent(DeliveryNoteEvent):
    """
    Status transition (draft -> validated -> finalized, or reopen).

    Critical for auditing who locked a note and when.
    """

    previous_status: str = ""
    new_status: str = ""
    total_amount: Optional[str] = None
