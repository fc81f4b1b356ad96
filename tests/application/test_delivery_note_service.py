"""Tests for DeliveryNoteApplicationService (in-memory unit of work)."""

from decimal import Decimal

import pytest

from core.application.dtos import (
    CreateDeliveryNoteRequest,
    LineItemInput,
    UpdateDeliveryNoteRequest,
)
from core.domain.enums import DeliveryNoteStatus
from core.domain.events import (
    DeliveryNoteCreatedEvent,
    DeliveryNoteItemAddedEvent,
    DeliveryNoteStatusChangedEvent,
)
from core.domain.exceptions import (
    AlreadyFinalized,
    DeliveryNoteNotFound,
    ItemNotFound,
    NotEditable,
)


def _railing(**overrides) -> LineItemInput:
    data = {"name": "Railing", "color": "9010", "quantity": 1, "linear_meters": Decimal("10")}
    data.update(overrides)
    return LineItemInput(**data)


@pytest.mark.asyncio
async def test_create_returns_dto_and_publishes_events(note_service, customer, event_bus):
    """Creating a note publishes Created + ItemAdded after commit."""
    dto = await note_service.create_delivery_note(
        CreateDeliveryNoteRequest(customer_id=customer.id, items=[_railing()])
    )

    assert dto.status == DeliveryNoteStatus.DRAFT
    assert dto.number.startswith("ALB-")
    assert dto.items[0].price == Decimal("50")
    assert dto.total_amount == Decimal("50")
    assert dto.all_have_price is True
    assert [type(e) for e in event_bus.published] == [DeliveryNoteCreatedEvent, DeliveryNoteItemAddedEvent]


@pytest.mark.asyncio
async def test_special_piece_price(note_service, customer):
    dto = await note_service.create_delivery_note(
        CreateDeliveryNoteRequest(customer_id=customer.id, items=[_railing(name="corner", quantity=3)])
    )

    assert dto.items[0].price == Decimal("8")
    assert dto.total_amount == Decimal("24")


@pytest.mark.asyncio
async def test_full_lifecycle(note_service, customer, event_bus):
    """draft -> validated -> reopen -> validated -> finalized."""
    dto = await note_service.create_delivery_note(
        CreateDeliveryNoteRequest(customer_id=customer.id, items=[_railing()])
    )

    dto = await note_service.validate(dto.id)
    assert dto.status == DeliveryNoteStatus.VALIDATED

    dto = await note_service.reopen(dto.id)
    assert dto.status == DeliveryNoteStatus.DRAFT

    await note_service.validate(dto.id)
    dto = await note_service.finalize(dto.id)
    assert dto.status == DeliveryNoteStatus.FINALIZED

    with pytest.raises(AlreadyFinalized):
        await note_service.reopen(dto.id)

    status_events = [e for e in event_bus.published if isinstance(e, DeliveryNoteStatusChangedEvent)]
    assert [e.new_status for e in status_events] == ["validated", "draft", "validated", "finalized"]


@pytest.mark.asyncio
async def test_item_operations(note_service, customer):
    dto = await note_service.create_delivery_note(CreateDeliveryNoteRequest(customer_id=customer.id))

    dto = await note_service.add_item(dto.id, _railing(square_meters=Decimal("2")))
    item_id = dto.items[0].id
    # 10 ml x 5 + 2 m² x 12
    assert dto.items[0].price == Decimal("74")

    dto = await note_service.update_item_price(dto.id, item_id, Decimal("60"))
    assert dto.total_amount == Decimal("60")

    dto = await note_service.update_item_price(dto.id, item_id, None)
    assert dto.total_amount is None
    assert dto.items_without_price == 1

    dto = await note_service.remove_item(dto.id, item_id)
    assert dto.item_count == 0

    with pytest.raises(ItemNotFound):
        await note_service.remove_item(dto.id, item_id)


@pytest.mark.asyncio
async def test_price_changes_allowed_while_validated(note_service, customer):
    dto = await note_service.create_delivery_note(
        CreateDeliveryNoteRequest(customer_id=customer.id, items=[_railing()])
    )
    await note_service.validate(dto.id)

    dto = await note_service.update_item_price(dto.id, dto.items[0].id, Decimal("45"))
    assert dto.total_amount == Decimal("45")

    with pytest.raises(NotEditable):
        await note_service.add_item(dto.id, _railing())


@pytest.mark.asyncio
async def test_failed_operation_is_not_persisted(note_service, customer):
    dto = await note_service.create_delivery_note(
        CreateDeliveryNoteRequest(customer_id=customer.id, items=[_railing()])
    )
    await note_service.validate(dto.id)

    with pytest.raises(NotEditable):
        await note_service.remove_item(dto.id, dto.items[0].id)

    stored = await note_service.get_delivery_note(dto.id)
    assert stored.item_count == 1
    assert stored.status == DeliveryNoteStatus.VALIDATED


@pytest.mark.asyncio
async def test_list_filters(note_service, customer, customer_service):
    from core.application.dtos import CreateCustomerRequest

    other = await customer_service.create_customer(CreateCustomerRequest(name="Cerrajería Sur"))
    first = await note_service.create_delivery_note(
        CreateDeliveryNoteRequest(customer_id=customer.id, items=[_railing()])
    )
    await note_service.create_delivery_note(CreateDeliveryNoteRequest(customer_id=customer.id))
    await note_service.create_delivery_note(CreateDeliveryNoteRequest(customer_id=other.id))
    await note_service.validate(first.id)

    assert (await note_service.list_delivery_notes()).total == 3
    assert (await note_service.list_delivery_notes(customer_id=other.id)).total == 1

    validated = await note_service.list_delivery_notes(status=DeliveryNoteStatus.VALIDATED)
    assert [n.id for n in validated.delivery_notes] == [first.id]

    drafts = await note_service.list_delivery_notes(customer_id=customer.id, status=DeliveryNoteStatus.DRAFT)
    assert drafts.total == 1


@pytest.mark.asyncio
async def test_update_and_delete(note_service, customer):
    dto = await note_service.create_delivery_note(CreateDeliveryNoteRequest(customer_id=customer.id))

    dto = await note_service.update_delivery_note(dto.id, UpdateDeliveryNoteRequest(notes="Urgent"))
    assert dto.notes == "Urgent"

    dto = await note_service.update_delivery_note(dto.id, UpdateDeliveryNoteRequest(notes=""))
    assert dto.notes is None

    await note_service.delete_delivery_note(dto.id)
    with pytest.raises(DeliveryNoteNotFound):
        await note_service.get_delivery_note(dto.id)
