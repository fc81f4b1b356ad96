"""Turns form input into priced LineItem entities."""
from datetime import datetime, timezone
from typing import Iterable, List, Optional
from uuid import uuid4

from core.application.dtos.delivery_note_dto import LineItemInput
from core.domain.entities import LineItem, PricingProfile
from core.domain.services import PricingService
from core.domain.value_objects import ColorClassification, Measurements, Money


def build_line_item(
    data: LineItemInput,
    profile: Optional[PricingProfile],
    pricing: PricingService,
) -> LineItem:
    """
    Build one item.

    An explicit price wins; otherwise the customer's profile prices the
    item. Without a profile the item stays unpriced.
    """
    item = LineItem(
        id=data.id or str(uuid4()),
        name=data.name,
        color=ColorClassification.from_text(data.color),
        quantity=data.quantity,
        measurements=Measurements.from_values(
            linear_meters=data.linear_meters,
            square_meters=data.square_meters,
            thickness=data.thickness,
        ),
        has_primer=data.has_primer,
        is_high_thickness=data.is_high_thickness,
    )
    if data.price is not None:
        item.assign_price(Money(data.price))
    elif profile is not None:
        item.assign_price(pricing.price_for(profile, item))
    return item


def build_line_items(
    items: Iterable[LineItemInput],
    profile: Optional[PricingProfile],
    pricing: PricingService,
) -> List[LineItem]:
    return [build_line_item(data, profile, pricing) for data in items]


def as_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Naive datetimes from the API are taken as UTC."""
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value
