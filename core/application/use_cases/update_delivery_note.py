"""
Update Delivery Note Use Case.

Applies a form-style edit: item list, notes and date first (draft only),
then the requested status transition. Any failure rolls the whole edit back.
"""
from typing import Optional
import logging

from core.application.dtos.delivery_note_dto import UpdateDeliveryNoteRequest
from core.application.unit_of_work import AbstractUnitOfWork
from core.domain.entities import DeliveryNote
from core.domain.exceptions import DeliveryNoteNotFound
from core.domain.services import PricingService

from .line_items import as_utc, build_line_items


logger = logging.getLogger(__name__)


class UpdateDeliveryNoteUseCase:

    def __init__(self, uow: AbstractUnitOfWork, pricing: Optional[PricingService] = None):
        self._uow = uow
        self._pricing = pricing or PricingService()

    async def execute(self, note_id: str, request: UpdateDeliveryNoteRequest) -> DeliveryNote:
        async with self._uow as uow:
            note = await uow.delivery_notes.find_by_id(note_id)
            if note is None:
                raise DeliveryNoteNotFound(note_id)

            if request.items is not None:
                profile = await uow.pricing_profiles.find_by_customer_id(note.customer_id)
                note.replace_items(build_line_items(request.items, profile, self._pricing))

            if request.notes is not None:
                note.change_notes(request.notes or None)

            if request.date is not None:
                date = as_utc(request.date)
                # same day: keep the stored time of day
                if date.date() != note.date.date():
                    note.change_date(date)

            if request.status is not None:
                note.transition_to(request.status)

            await uow.delivery_notes.save(note)
            await uow.commit()

        logger.info(f"Delivery note {note.number} updated (status: {note.status.value})")
        return note
