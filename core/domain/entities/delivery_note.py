"""
DeliveryNote aggregate root.

A delivery note lists the pieces coated for one customer. It is the unit of
consistency: items are only ever changed through the note, and every
operation either completes or raises before any field changes.

Status flow: draft -> validated -> finalized
- draft: fully editable
- validated: locked except prices; may be reopened to draft
- finalized: terminal

CRITICAL: This file must contain ZERO imports from:
- sqlalchemy
- pydantic
- fastapi
"""
import copy
from datetime import datetime, timezone
from typing import Any, Dict, Iterable, List, Optional, Tuple, Union

from ..enums.delivery_note_status import DeliveryNoteStatus
from ..events.base import DomainEvent
from ..events.delivery_note_events import (
    DeliveryNoteCreatedEvent,
    DeliveryNoteItemAddedEvent,
    DeliveryNoteItemPriceChangedEvent,
    DeliveryNoteItemRemovedEvent,
    DeliveryNoteItemUpdatedEvent,
    DeliveryNoteStatusChangedEvent,
)
from ..exceptions import (
    AlreadyFinalized,
    InvalidId,
    InvalidNumber,
    InvalidStatus,
    ItemNotFound,
    ItemsWithoutPrice,
    NotEditable,
    WithoutCustomer,
    WithoutItems,
)
from ..value_objects import ColorClassification, Measurements, Money
from .line_item import LineItem


UNKNOWN_CUSTOMER = "Unknown Customer"

_UNSET = object()


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _coerce_status(status: Union[str, DeliveryNoteStatus]) -> DeliveryNoteStatus:
    try:
        return DeliveryNoteStatus(status)
    except ValueError:
        raise InvalidStatus(str(status), "one of draft/validated/finalized")


def _parse_datetime(value: Union[str, datetime, None]) -> Optional[datetime]:
    if value is None or isinstance(value, datetime):
        return value
    return datetime.fromisoformat(value)


class DeliveryNote:
    """
    Delivery note aggregate root.

    Callers never receive a live reference to a contained item: ``items``
    and ``get_item`` return copies, and item attributes change through
    ``edit_item`` / ``update_item_price``.
    """

    def __init__(
        self,
        id: str,
        number: str,
        customer_id: str,
        customer_name: str,
        date: datetime,
        status: Union[str, DeliveryNoteStatus] = DeliveryNoteStatus.DRAFT,
        items: Optional[Iterable[LineItem]] = None,
        notes: Optional[str] = None,
        created_at: Optional[datetime] = None,
    ):
        if not isinstance(id, str) or not id.strip():
            raise InvalidId("DeliveryNote must have an ID")
        if not isinstance(number, str) or not number.strip():
            raise InvalidNumber("DeliveryNote must have a number")
        if not isinstance(customer_id, str) or not customer_id.strip():
            raise WithoutCustomer()

        items = [copy.copy(item) for item in (items or [])]
        _ensure_unique_ids(items)

        self._id = id
        self._number = number
        self._customer_id = customer_id
        self._customer_name = customer_name or UNKNOWN_CUSTOMER
        self._date = date or _utcnow()
        self._status = _coerce_status(status)
        self._items: List[LineItem] = items
        self._notes = notes
        self._created_at = created_at or _utcnow()

        self._domain_events: List[DomainEvent] = []

    # =========================================================================
    # FACTORIES
    # =========================================================================

    @classmethod
    def create_draft(
        cls,
        id: str,
        number: str,
        customer_id: str,
        customer_name: str,
        notes: Optional[str] = None,
        date: Optional[datetime] = None,
    ) -> 'DeliveryNote':
        """Open an empty draft dated today."""
        now = _utcnow()
        note = cls(
            id=id,
            number=number,
            customer_id=customer_id,
            customer_name=customer_name,
            date=date or now,
            status=DeliveryNoteStatus.DRAFT,
            items=[],
            notes=notes,
            created_at=now,
        )
        note._record_event(
            DeliveryNoteCreatedEvent(
                delivery_note_id=note.id,
                number=note.number,
                customer_id=note.customer_id,
                customer_name=note.customer_name,
            )
        )
        return note

    @classmethod
    def reconstruct(
        cls,
        id: str,
        number: str,
        customer_id: str,
        customer_name: str,
        date: datetime,
        status: Union[str, DeliveryNoteStatus],
        items: Iterable[LineItem],
        notes: Optional[str] = None,
        created_at: Optional[datetime] = None,
    ) -> 'DeliveryNote':
        """Rebuild a stored note with its explicit status (records no events)."""
        return cls(
            id=id,
            number=number,
            customer_id=customer_id,
            customer_name=customer_name,
            date=date,
            status=status,
            items=items,
            notes=notes,
            created_at=created_at,
        )

    # =========================================================================
    # GETTERS
    # =========================================================================

    @property
    def id(self) -> str:
        return self._id

    @property
    def number(self) -> str:
        return self._number

    @property
    def customer_id(self) -> str:
        return self._customer_id

    @property
    def customer_name(self) -> str:
        return self._customer_name

    @property
    def date(self) -> datetime:
        return self._date

    @property
    def status(self) -> DeliveryNoteStatus:
        return self._status

    @property
    def notes(self) -> Optional[str]:
        return self._notes

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def items(self) -> Tuple[LineItem, ...]:
        return tuple(copy.copy(item) for item in self._items)

    # =========================================================================
    # ITEM MANAGEMENT
    # =========================================================================

    def add_item(self, item: LineItem) -> None:
        self._ensure_editable()
        if self._find(item.id) is not None:
            raise InvalidId(f"Item {item.id} is already in the delivery note")

        self._items.append(copy.copy(item))
        self._record_event(
            DeliveryNoteItemAddedEvent(
                delivery_note_id=self._id,
                number=self._number,
                item_id=item.id,
                item_name=item.name,
                quantity=item.quantity,
            )
        )

    def remove_item(self, item_id: str) -> None:
        self._ensure_editable()
        item = self._require(item_id)

        self._items.remove(item)
        self._record_event(
            DeliveryNoteItemRemovedEvent(
                delivery_note_id=self._id, number=self._number, item_id=item_id
            )
        )

    def replace_items(self, items: Iterable[LineItem]) -> None:
        """Swap the whole item list (form-style edit of a draft)."""
        self._ensure_editable()
        new_items = [copy.copy(item) for item in items]
        _ensure_unique_ids(new_items)

        old_ids = {item.id for item in self._items}
        new_ids = {item.id for item in new_items}
        self._items = new_items

        for item_id in sorted(old_ids - new_ids):
            self._record_event(
                DeliveryNoteItemRemovedEvent(
                    delivery_note_id=self._id, number=self._number, item_id=item_id
                )
            )
        for item in new_items:
            if item.id in old_ids:
                event = DeliveryNoteItemUpdatedEvent(
                    delivery_note_id=self._id,
                    number=self._number,
                    item_id=item.id,
                    updated_fields=("replaced",),
                )
            else:
                event = DeliveryNoteItemAddedEvent(
                    delivery_note_id=self._id,
                    number=self._number,
                    item_id=item.id,
                    item_name=item.name,
                    quantity=item.quantity,
                )
            self._record_event(event)

    def get_item(self, item_id: str) -> LineItem:
        return copy.copy(self._require(item_id))

    def edit_item(
        self,
        item_id: str,
        name: Optional[str] = None,
        color: Optional[ColorClassification] = None,
        quantity: Optional[int] = None,
        measurements: Optional[Measurements] = None,
        has_primer: Optional[bool] = None,
        is_high_thickness: Optional[bool] = None,
    ) -> None:
        """Change item attributes (draft only). Invalid input leaves the item untouched."""
        self._ensure_editable()
        current = self._require(item_id)

        edited = copy.copy(current)
        changed = []
        if name is not None:
            edited.change_name(name)
            changed.append("name")
        if color is not None:
            edited.change_color(color)
            changed.append("color")
        if quantity is not None:
            edited.change_quantity(quantity)
            changed.append("quantity")
        if measurements is not None:
            edited.change_measurements(measurements)
            changed.append("measurements")
        if has_primer is not None or is_high_thickness is not None:
            edited.change_surcharge_flags(has_primer=has_primer, is_high_thickness=is_high_thickness)
            changed.append("surcharges")

        if not changed:
            return

        self._items[self._items.index(current)] = edited
        self._record_event(
            DeliveryNoteItemUpdatedEvent(
                delivery_note_id=self._id,
                number=self._number,
                item_id=item_id,
                updated_fields=tuple(changed),
            )
        )

    def update_item_price(self, item_id: str, price: Union[Money, int, float, str]) -> None:
        """Prices stay editable while validated; only finalized notes are locked."""
        if self._status == DeliveryNoteStatus.FINALIZED:
            raise AlreadyFinalized()
        item = self._require(item_id)
        new_price = price if isinstance(price, Money) else Money(price)

        previous = item.price
        item.assign_price(new_price)
        self._record_price_change(item_id, previous, new_price)

    def remove_item_price(self, item_id: str) -> None:
        if self._status == DeliveryNoteStatus.FINALIZED:
            raise AlreadyFinalized()
        item = self._require(item_id)

        previous = item.price
        item.remove_price()
        self._record_price_change(item_id, previous, None)

    def change_notes(self, notes: Optional[str]) -> None:
        self._ensure_editable()
        self._notes = notes

    def change_date(self, date: datetime) -> None:
        self._ensure_editable()
        if date is None:
            raise ValueError("Delivery note date cannot be empty")
        self._date = date

    # =========================================================================
    # STATUS TRANSITIONS
    # =========================================================================

    def validate(self) -> None:
        """draft -> validated. Requires at least one item and every item priced."""
        if self._status != DeliveryNoteStatus.DRAFT:
            raise InvalidStatus(self._status.value, DeliveryNoteStatus.VALIDATED.value)
        if not self._items:
            raise WithoutItems()
        if not self.all_items_have_price():
            raise ItemsWithoutPrice(item.name for item in self._unpriced())

        self._change_status(DeliveryNoteStatus.VALIDATED)

    def finalize(self) -> None:
        """validated -> finalized. Missing prices are tolerated (left pending)."""
        if self._status != DeliveryNoteStatus.VALIDATED:
            raise InvalidStatus(self._status.value, DeliveryNoteStatus.FINALIZED.value)

        self._change_status(DeliveryNoteStatus.FINALIZED)

    def reopen(self) -> None:
        """validated -> draft. No-op on a draft; finalized notes stay closed."""
        if self._status == DeliveryNoteStatus.FINALIZED:
            raise AlreadyFinalized()
        if self._status == DeliveryNoteStatus.DRAFT:
            return

        self._change_status(DeliveryNoteStatus.DRAFT)

    def transition_to(self, status: Union[str, DeliveryNoteStatus]) -> None:
        """
        Move to ``status`` through the allowed edges.

        Jumping from draft straight to finalized validates first.
        """
        target = _coerce_status(status)
        if target == self._status:
            return

        if target == DeliveryNoteStatus.VALIDATED:
            self.validate()
        elif target == DeliveryNoteStatus.FINALIZED:
            if self._status == DeliveryNoteStatus.DRAFT:
                # finalize() cannot fail once validate() passed
                self.validate()
            self.finalize()
        else:
            self.reopen()

    # =========================================================================
    # BUSINESS QUESTIONS
    # =========================================================================

    def is_editable(self) -> bool:
        return self._status == DeliveryNoteStatus.DRAFT

    def is_validated(self) -> bool:
        return self._status == DeliveryNoteStatus.VALIDATED

    def is_finalized(self) -> bool:
        return self._status == DeliveryNoteStatus.FINALIZED

    def has_items(self) -> bool:
        return len(self._items) > 0

    def item_count(self) -> int:
        return len(self._items)

    def all_items_have_price(self) -> bool:
        return all(item.has_price() for item in self._items)

    def items_without_price(self) -> List[LineItem]:
        return [copy.copy(item) for item in self._unpriced()]

    def calculate_total_amount(self) -> Optional[Money]:
        """
        Sum of price x quantity over all items.

        None (not zero) while any item is unpriced; an empty note totals 0.
        """
        if not self.all_items_have_price():
            return None

        total = Money.zero()
        for item in self._items:
            total = total + item.calculate_total_price()
        return total

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DeliveryNote):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return (
            f"DeliveryNote(id={self._id!r}, number={self._number!r}, "
            f"status={self._status.value}, items={len(self._items)})"
        )

    # =========================================================================
    # EVENT COLLECTION
    # =========================================================================

    def get_domain_events(self) -> List[DomainEvent]:
        """Events recorded since the last clear (published after commit)."""
        return list(self._domain_events)

    def clear_domain_events(self) -> None:
        self._domain_events.clear()

    def _record_event(self, event: DomainEvent) -> None:
        self._domain_events.append(event)

    def _record_price_change(self, item_id: str, previous: Optional[Money], new: Optional[Money]) -> None:
        self._record_event(
            DeliveryNoteItemPriceChangedEvent(
                delivery_note_id=self._id,
                number=self._number,
                item_id=item_id,
                previous_price=str(previous.amount) if previous is not None else None,
                new_price=str(new.amount) if new is not None else None,
            )
        )

    def _change_status(self, new_status: DeliveryNoteStatus) -> None:
        previous = self._status
        self._status = new_status
        total = self.calculate_total_amount()
        self._record_event(
            DeliveryNoteStatusChangedEvent(
                delivery_note_id=self._id,
                number=self._number,
                previous_status=previous.value,
                new_status=new_status.value,
                total_amount=str(total.amount) if total is not None else None,
            )
        )

    # =========================================================================
    # INTERNALS
    # =========================================================================

    def _ensure_editable(self) -> None:
        if not self.is_editable():
            raise NotEditable(self._status.value)

    def _find(self, item_id: str) -> Optional[LineItem]:
        for item in self._items:
            if item.id == item_id:
                return item
        return None

    def _require(self, item_id: str) -> LineItem:
        item = self._find(item_id)
        if item is None:
            raise ItemNotFound(item_id)
        return item

    def _unpriced(self) -> List[LineItem]:
        return [item for item in self._items if not item.has_price()]

    # =========================================================================
    # SERIALIZATION
    # =========================================================================

    def to_dict(self) -> Dict[str, Any]:
        """Canonical representation used by persistence and the API layer."""
        total = self.calculate_total_amount()
        return {
            'id': self._id,
            'number': self._number,
            'customer_id': self._customer_id,
            'customer_name': self._customer_name,
            'date': self._date.isoformat(),
            'status': self._status.value,
            'items': [item.to_dict() for item in self._items],
            'item_count': self.item_count(),
            'total_amount': str(total.amount) if total is not None else None,
            'notes': self._notes,
            'created_at': self._created_at.isoformat(),
            'all_have_price': self.all_items_have_price(),
            'items_without_price': len(self._unpriced()),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'DeliveryNote':
        """Inverse of ``to_dict()``; derived keys (totals, counts) are ignored."""
        return cls.reconstruct(
            id=data['id'],
            number=data['number'],
            customer_id=data['customer_id'],
            customer_name=data.get('customer_name') or UNKNOWN_CUSTOMER,
            date=_parse_datetime(data['date']),
            status=data.get('status', DeliveryNoteStatus.DRAFT.value),
            items=[LineItem.from_dict(item) for item in data.get('items', [])],
            notes=data.get('notes'),
            created_at=_parse_datetime(data.get('created_at')),
        )


def _ensure_unique_ids(items: List[LineItem]) -> None:
    seen = set()
    for item in items:
        if item.id in seen:
            raise InvalidId(f"Duplicate item id in delivery note: {item.id}")
        seen.add(item.id)
