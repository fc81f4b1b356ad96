"""Static mappers for domain entities ↔ database models."""

from datetime import datetime, timezone
from typing import List, Optional

from core.domain.entities import Customer, DeliveryNote, LineItem, PricingProfile
from core.domain.value_objects import (
    ColorClassification,
    ColorKind,
    Measurements,
    Money,
    SpecialPrice,
)

from .models import CustomerModel, DeliveryNoteItemModel, DeliveryNoteModel, PricingProfileModel


def _aware(value: Optional[datetime]) -> Optional[datetime]:
    # SQLite drops tzinfo; everything is stored in UTC
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class LineItemMapper:
    """Static mapper for LineItem ↔ DeliveryNoteItemModel transformation."""

    @staticmethod
    def to_domain(model: DeliveryNoteItemModel) -> LineItem:
        """Convert ORM model to domain entity (runs entity validation)."""
        price = model.price_amount
        return LineItem(
            id=model.item_id,
            name=model.name,
            color=ColorClassification(ColorKind(model.color_kind), model.color_value),
            quantity=model.quantity,
            measurements=Measurements(
                linear_meters=model.linear_meters,
                square_meters=model.square_meters,
                thickness=model.thickness,
            ),
            price=Money(price) if price is not None else None,
            has_primer=bool(model.has_primer),
            is_high_thickness=bool(model.is_high_thickness),
        )

    @staticmethod
    def to_persistence(entity: LineItem, delivery_note_id: str, position: int) -> DeliveryNoteItemModel:
        m = entity.measurements
        return DeliveryNoteItemModel(
            delivery_note_id=delivery_note_id,
            item_id=entity.id,
            position=position,
            name=entity.name,
            color_kind=entity.color.kind.value,
            color_value=entity.color.value,
            quantity=entity.quantity,
            linear_meters=m.linear_meters,
            square_meters=m.square_meters,
            thickness=m.thickness,
            has_primer=entity.has_primer,
            is_high_thickness=entity.is_high_thickness,
            price_amount=entity.price.amount if entity.price is not None else None,
        )


class DeliveryNoteMapper:
    """Static mapper for DeliveryNote ↔ DeliveryNoteModel with nested items."""

    @staticmethod
    def to_domain(model: DeliveryNoteModel) -> DeliveryNote:
        items = [LineItemMapper.to_domain(item_model) for item_model in model.items]
        return DeliveryNote.reconstruct(
            id=model.id,
            number=model.number,
            customer_id=model.customer_id,
            customer_name=model.customer_name,
            date=_aware(model.date),
            status=model.status,
            items=items,
            notes=model.notes,
            created_at=_aware(model.created_at),
        )

    @staticmethod
    def _items(entity: DeliveryNote) -> List[DeliveryNoteItemModel]:
        return [
            LineItemMapper.to_persistence(item, entity.id, position)
            for position, item in enumerate(entity.items)
        ]

    @staticmethod
    def to_persistence(entity: DeliveryNote) -> DeliveryNoteModel:
        model = DeliveryNoteModel(
            id=entity.id,
            number=entity.number,
            customer_id=entity.customer_id,
            customer_name=entity.customer_name,
            date=entity.date,
            status=entity.status.value,
            notes=entity.notes,
            created_at=entity.created_at,
        )
        model.items = DeliveryNoteMapper._items(entity)
        return model

    @staticmethod
    def update_persistence(entity: DeliveryNote, model: DeliveryNoteModel) -> DeliveryNoteModel:
        """Update existing ORM model from domain entity; items are rebuilt."""
        model.number = entity.number
        model.customer_id = entity.customer_id
        model.customer_name = entity.customer_name
        model.date = entity.date
        model.status = entity.status.value
        model.notes = entity.notes

        model.items.clear()
        model.items.extend(DeliveryNoteMapper._items(entity))
        return model


class CustomerMapper:

    @staticmethod
    def to_domain(model: CustomerModel) -> Customer:
        return Customer(
            id=model.id,
            name=model.name,
            email=model.email,
            phone=model.phone,
            created_at=_aware(model.created_at),
            updated_at=_aware(model.updated_at),
        )

    @staticmethod
    def to_persistence(entity: Customer, model: Optional[CustomerModel] = None) -> CustomerModel:
        model = model or CustomerModel(id=entity.id)
        model.name = entity.name
        model.email = entity.email
        model.phone = entity.phone
        model.created_at = entity.created_at
        model.updated_at = entity.updated_at
        return model


class PricingProfileMapper:

    @staticmethod
    def to_domain(model: PricingProfileModel) -> PricingProfile:
        return PricingProfile(
            id=model.id,
            customer_id=model.customer_id,
            price_per_linear_meter=model.price_per_linear_meter,
            price_per_square_meter=model.price_per_square_meter,
            minimum_price=model.minimum_price,
            special_prices=[SpecialPrice.from_dict(s) for s in (model.special_prices or [])],
            created_at=_aware(model.created_at),
            updated_at=_aware(model.updated_at),
        )

    @staticmethod
    def to_persistence(entity: PricingProfile, model: Optional[PricingProfileModel] = None) -> PricingProfileModel:
        model = model or PricingProfileModel(id=entity.id)
        model.customer_id = entity.customer_id
        model.price_per_linear_meter = entity.price_per_linear_meter.amount
        model.price_per_square_meter = entity.price_per_square_meter.amount
        model.minimum_price = entity.minimum_price.amount
        # new list object so SQLAlchemy sees the JSON change
        model.special_prices = [s.to_dict() for s in entity.special_prices]
        model.created_at = entity.created_at
        model.updated_at = entity.updated_at
        return model
