"""Delete Delivery Note Use Case. Only drafts can be deleted."""
import logging

from core.application.unit_of_work import AbstractUnitOfWork
from core.domain.exceptions import DeliveryNoteNotFound, NotEditable


logger = logging.getLogger(__name__)


class DeleteDeliveryNoteUseCase:

    def __init__(self, uow: AbstractUnitOfWork):
        self._uow = uow

    async def execute(self, note_id: str) -> None:
        async with self._uow as uow:
            note = await uow.delivery_notes.find_by_id(note_id)
            if note is None:
                raise DeliveryNoteNotFound(note_id)
            if not note.is_editable():
                raise NotEditable(note.status.value)

            await uow.delivery_notes.delete(note_id)
            await uow.commit()

        logger.info(f"Delivery note {note.number} deleted")
