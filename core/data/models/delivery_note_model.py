"""SQLAlchemy ORM models for the DeliveryNote aggregate."""

from datetime import datetime, timezone

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from .base import Base, DecimalString


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class DeliveryNoteModel(Base):
    """SQLAlchemy ORM model for delivery_notes table."""

    __tablename__ = "delivery_notes"

    id = Column(String(36), primary_key=True)
    number = Column(String(50), nullable=False, unique=True, index=True)
    customer_id = Column(String(36), nullable=False, index=True)
    customer_name = Column(String(255), nullable=False)
    date = Column(DateTime(timezone=True), nullable=False, index=True)
    status = Column(String(20), nullable=False, default="draft", index=True)
    notes = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), default=_utcnow)

    # Items are always needed to rebuild the aggregate: load them eagerly
    items = relationship(
        "DeliveryNoteItemModel",
        back_populates="delivery_note",
        cascade="all, delete-orphan",
        order_by="DeliveryNoteItemModel.position",
        lazy="selectin",
    )


class DeliveryNoteItemModel(Base):
    """SQLAlchemy ORM model for delivery_note_items table."""

    __tablename__ = "delivery_note_items"

    pk = Column(Integer, primary_key=True, autoincrement=True)
    delivery_note_id = Column(
        String(36), ForeignKey("delivery_notes.id", ondelete="CASCADE"), nullable=False, index=True
    )
    item_id = Column(String(36), nullable=False)
    position = Column(Integer, nullable=False, default=0)
    name = Column(String(255), nullable=False)
    color_kind = Column(String(10), nullable=False)
    color_value = Column(String(255), nullable=False)
    quantity = Column(Integer, nullable=False)
    linear_meters = Column(DecimalString, nullable=True)
    square_meters = Column(DecimalString, nullable=True)
    thickness = Column(DecimalString, nullable=True)
    has_primer = Column(Boolean, nullable=False, default=False)
    is_high_thickness = Column(Boolean, nullable=False, default=False)
    price_amount = Column(DecimalString, nullable=True)

    delivery_note = relationship("DeliveryNoteModel", back_populates="items")
