"""SQLAlchemy implementation of DeliveryNoteRepository."""

from typing import List, Optional
from uuid import uuid4

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from core.domain.entities import DeliveryNote
from core.domain.enums import DeliveryNoteStatus
from core.domain.repositories import DeliveryNoteRepository
from core.domain.value_objects import DeliveryNoteNumber

from ..mappers import DeliveryNoteMapper
from ..models import DeliveryNoteModel


class SqlAlchemyDeliveryNoteRepository(DeliveryNoteRepository):
    """Concrete implementation of DeliveryNoteRepository using SQLAlchemy."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with SQLAlchemy session.

        Args:
            session: SQLAlchemy async session
        """
        self._session = session

    async def save(self, note: DeliveryNote) -> None:
        """Insert or update the note and its items.

        Args:
            note: DeliveryNote domain aggregate
        """
        existing = await self._session.get(DeliveryNoteModel, note.id)

        if existing:
            DeliveryNoteMapper.update_persistence(note, existing)
        else:
            self._session.add(DeliveryNoteMapper.to_persistence(note))

        await self._session.flush()  # Propagate to DB without committing

    async def find_by_id(self, note_id: str) -> Optional[DeliveryNote]:
        result = await self._session.execute(
            select(DeliveryNoteModel).where(DeliveryNoteModel.id == note_id)
        )
        model = result.scalar_one_or_none()

        if not model:
            return None

        return DeliveryNoteMapper.to_domain(model)

    async def find_all(self, limit: int = 100) -> List[DeliveryNote]:
        result = await self._session.execute(
            select(DeliveryNoteModel)
            .order_by(DeliveryNoteModel.date.desc(), DeliveryNoteModel.number.desc())
            .limit(limit)
        )
        return [DeliveryNoteMapper.to_domain(model) for model in result.scalars().all()]

    async def find_by_customer_id(self, customer_id: str) -> List[DeliveryNote]:
        result = await self._session.execute(
            select(DeliveryNoteModel)
            .where(DeliveryNoteModel.customer_id == customer_id)
            .order_by(DeliveryNoteModel.date.desc())
        )
        return [DeliveryNoteMapper.to_domain(model) for model in result.scalars().all()]

    async def find_by_status(self, status: DeliveryNoteStatus) -> List[DeliveryNote]:
        result = await self._session.execute(
            select(DeliveryNoteModel)
            .where(DeliveryNoteModel.status == DeliveryNoteStatus(status).value)
            .order_by(DeliveryNoteModel.date.desc())
        )
        return [DeliveryNoteMapper.to_domain(model) for model in result.scalars().all()]

    async def exists(self, note_id: str) -> bool:
        result = await self._session.execute(
            select(DeliveryNoteModel.id).where(DeliveryNoteModel.id == note_id)
        )
        return result.scalar_one_or_none() is not None

    async def delete(self, note_id: str) -> None:
        model = await self._session.get(DeliveryNoteModel, note_id)
        if model is not None:
            await self._session.delete(model)
            await self._session.flush()

    async def next_identity(self) -> str:
        return str(uuid4())

    async def next_number(self, prefix: str, year: int) -> str:
        # Sequences wider than 3 digits break string order, so the max is taken after parsing
        result = await self._session.execute(
            select(DeliveryNoteModel.number)
            .where(DeliveryNoteModel.number.like(f"{prefix.upper()}-{year:04d}-%"))
            .order_by(DeliveryNoteModel.number)
        )
        return DeliveryNoteNumber.next_in_sequence(prefix, year, result.scalars().all())
