"""Shared builders for domain unit tests."""

import pytest

from core.domain.entities import DeliveryNote, LineItem
from core.domain.value_objects import ColorClassification, Measurements, Money


@pytest.fixture
def make_item():
    """Build a LineItem with sensible defaults."""
    counter = {"n": 0}

    def _make(item_id=None, name="Railing", quantity=1, price=None, color="RAL 9010",
              measurements=None, **flags):
        counter["n"] += 1
        return LineItem(
            id=item_id or f"item-{counter['n']}",
            name=name,
            color=ColorClassification.from_text(color),
            quantity=quantity,
            measurements=measurements or Measurements.with_linear_meters(2),
            price=Money(price) if price is not None else None,
            **flags,
        )

    return _make


@pytest.fixture
def draft():
    note = DeliveryNote.create_draft(
        id="note-1",
        number="ALB-2026-001",
        customer_id="customer-1",
        customer_name="Herrería López",
    )
    note.clear_domain_events()
    return note
