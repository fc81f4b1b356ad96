"""
Create Delivery Note Use Case.

Flow:
1. Load the customer (must exist) and its pricing profile (optional)
2. Build and price the items
3. Open a draft with the next number of the delivery year
4. Add the items and persist in one transaction
"""
from datetime import datetime, timezone
from typing import Optional
import logging

from core.application.dtos.delivery_note_dto import CreateDeliveryNoteRequest
from core.application.unit_of_work import AbstractUnitOfWork
from core.domain.entities import DeliveryNote
from core.domain.exceptions import CustomerNotFound
from core.domain.services import PricingService

from .line_items import as_utc, build_line_items


logger = logging.getLogger(__name__)

DEFAULT_NUMBER_PREFIX = "ALB"


class CreateDeliveryNoteUseCase:
    """Opens a new draft delivery note for an existing customer."""

    def __init__(
        self,
        uow: AbstractUnitOfWork,
        pricing: Optional[PricingService] = None,
        number_prefix: str = DEFAULT_NUMBER_PREFIX,
    ):
        self._uow = uow
        self._pricing = pricing or PricingService()
        self._number_prefix = number_prefix

    async def execute(self, request: CreateDeliveryNoteRequest) -> DeliveryNote:
        """
        Returns:
            The saved draft, still carrying its domain events

        Raises:
            CustomerNotFound: unknown customer_id
            DomainValidationError: invalid item input (nothing is saved)
        """
        async with self._uow as uow:
            customer = await uow.customers.find_by_id(request.customer_id)
            if customer is None:
                raise CustomerNotFound(request.customer_id)

            profile = await uow.pricing_profiles.find_by_customer_id(customer.id)
            if profile is None:
                logger.warning(f"Customer {customer.id} has no pricing profile, items stay unpriced")

            items = build_line_items(request.items, profile, self._pricing)

            date = as_utc(request.date) or datetime.now(timezone.utc)
            note = DeliveryNote.create_draft(
                id=await uow.delivery_notes.next_identity(),
                number=await uow.delivery_notes.next_number(self._number_prefix, date.year),
                customer_id=customer.id,
                customer_name=customer.name,
                notes=request.notes,
                date=date,
            )
            for item in items:
                note.add_item(item)

            await uow.delivery_notes.save(note)
            await uow.commit()

        logger.info(f"Delivery note {note.number} created for {customer.name} ({note.item_count()} items)")
        return note
