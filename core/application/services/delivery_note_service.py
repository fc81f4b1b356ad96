"""Application service for delivery note operations."""

from decimal import Decimal
from typing import Callable, List, Optional
import logging

from core.application.dtos.delivery_note_dto import (
    CreateDeliveryNoteRequest,
    DeliveryNoteDTO,
    DeliveryNoteListDTO,
    LineItemInput,
    UpdateDeliveryNoteRequest,
)
from core.application.unit_of_work import AbstractUnitOfWork
from core.application.use_cases import (
    CreateDeliveryNoteUseCase,
    DeleteDeliveryNoteUseCase,
    UpdateDeliveryNoteUseCase,
)
from core.application.use_cases.create_delivery_note import DEFAULT_NUMBER_PREFIX
from core.application.use_cases.line_items import build_line_item
from core.domain.entities import DeliveryNote
from core.domain.enums import DeliveryNoteStatus
from core.domain.event_bus import EventBus
from core.domain.exceptions import DeliveryNoteNotFound
from core.domain.services import PricingService
from core.domain.value_objects import Money


logger = logging.getLogger(__name__)

UnitOfWorkFactory = Callable[[], AbstractUnitOfWork]


class DeliveryNoteApplicationService:
    """
    Application service for orchestrating delivery note operations.

    Responsibilities:
    - One unit of work per call (all-or-nothing)
    - Publish the aggregate's domain events after commit
    - Transform between DTOs and domain entities
    """

    def __init__(
        self,
        uow_factory: UnitOfWorkFactory,
        pricing: Optional[PricingService] = None,
        number_prefix: str = DEFAULT_NUMBER_PREFIX,
        event_bus: Optional[EventBus] = None,
    ) -> None:
        """
        Args:
            uow_factory: Builds a fresh unit of work per operation
            pricing: Pricing service (surcharges); no surcharges by default
            number_prefix: Delivery note number prefix
            event_bus: Receives domain events after commit
        """
        self._uow_factory = uow_factory
        self._pricing = pricing or PricingService()
        self._number_prefix = number_prefix
        self._event_bus = event_bus

    # =========================================================================
    # CRUD
    # =========================================================================

    async def create_delivery_note(self, request: CreateDeliveryNoteRequest) -> DeliveryNoteDTO:
        use_case = CreateDeliveryNoteUseCase(self._uow_factory(), self._pricing, self._number_prefix)
        note = await use_case.execute(request)
        await self._publish_events(note)
        return self._note_to_dto(note)

    async def get_delivery_note(self, note_id: str) -> DeliveryNoteDTO:
        """Raises DeliveryNoteNotFound for unknown ids."""
        async with self._uow_factory() as uow:
            note = await uow.delivery_notes.find_by_id(note_id)
        if note is None:
            raise DeliveryNoteNotFound(note_id)
        return self._note_to_dto(note)

    async def list_delivery_notes(
        self,
        customer_id: Optional[str] = None,
        status: Optional[DeliveryNoteStatus] = None,
        limit: int = 100,
    ) -> DeliveryNoteListDTO:
        """List notes, most recent first, optionally filtered by customer and status."""
        async with self._uow_factory() as uow:
            if customer_id is not None:
                notes = await uow.delivery_notes.find_by_customer_id(customer_id)
            elif status is not None:
                notes = await uow.delivery_notes.find_by_status(status)
            else:
                notes = await uow.delivery_notes.find_all(limit=limit)

        if status is not None:
            notes = [note for note in notes if note.status == DeliveryNoteStatus(status)]
        notes = sorted(notes, key=lambda note: note.date, reverse=True)[:limit]

        return DeliveryNoteListDTO(
            delivery_notes=[self._note_to_dto(note) for note in notes],
            total=len(notes),
        )

    async def update_delivery_note(self, note_id: str, request: UpdateDeliveryNoteRequest) -> DeliveryNoteDTO:
        use_case = UpdateDeliveryNoteUseCase(self._uow_factory(), self._pricing)
        note = await use_case.execute(note_id, request)
        await self._publish_events(note)
        return self._note_to_dto(note)

    async def delete_delivery_note(self, note_id: str) -> None:
        await DeleteDeliveryNoteUseCase(self._uow_factory()).execute(note_id)

    # =========================================================================
    # ITEMS
    # =========================================================================

    async def add_item(self, note_id: str, item: LineItemInput) -> DeliveryNoteDTO:
        async def action(note: DeliveryNote, uow: AbstractUnitOfWork) -> None:
            profile = await uow.pricing_profiles.find_by_customer_id(note.customer_id)
            note.add_item(build_line_item(item, profile, self._pricing))

        return await self._mutate(note_id, action)

    async def remove_item(self, note_id: str, item_id: str) -> DeliveryNoteDTO:
        async def action(note: DeliveryNote, uow: AbstractUnitOfWork) -> None:
            note.remove_item(item_id)

        return await self._mutate(note_id, action)

    async def update_item_price(self, note_id: str, item_id: str, price: Optional[Decimal]) -> DeliveryNoteDTO:
        """Set the unit price of an item; ``None`` removes it."""
        async def action(note: DeliveryNote, uow: AbstractUnitOfWork) -> None:
            if price is None:
                note.remove_item_price(item_id)
            else:
                note.update_item_price(item_id, Money(price))

        return await self._mutate(note_id, action)

    # =========================================================================
    # STATUS
    # =========================================================================

    async def validate(self, note_id: str) -> DeliveryNoteDTO:
        return await self._mutate(note_id, _sync(DeliveryNote.validate))

    async def finalize(self, note_id: str) -> DeliveryNoteDTO:
        return await self._mutate(note_id, _sync(DeliveryNote.finalize))

    async def reopen(self, note_id: str) -> DeliveryNoteDTO:
        return await self._mutate(note_id, _sync(DeliveryNote.reopen))

    # =========================================================================
    # HELPERS
    # =========================================================================

    async def _mutate(self, note_id: str, action) -> DeliveryNoteDTO:
        """Load, apply ``action``, save and commit in one unit of work."""
        async with self._uow_factory() as uow:
            note = await uow.delivery_notes.find_by_id(note_id)
            if note is None:
                raise DeliveryNoteNotFound(note_id)

            await action(note, uow)

            await uow.delivery_notes.save(note)
            await uow.commit()

        await self._publish_events(note)
        return self._note_to_dto(note)

    async def _publish_events(self, note: DeliveryNote) -> None:
        events = note.get_domain_events()
        note.clear_domain_events()
        if self._event_bus is None or not events:
            return
        await self._event_bus.publish_all(events)

    @staticmethod
    def _note_to_dto(note: DeliveryNote) -> DeliveryNoteDTO:
        return DeliveryNoteDTO.model_validate(note.to_dict())


def _sync(method):
    async def action(note: DeliveryNote, uow: AbstractUnitOfWork) -> None:
        method(note)

    return action
