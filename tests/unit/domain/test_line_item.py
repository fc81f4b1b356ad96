"""Unit tests for the LineItem entity."""

from decimal import Decimal

import pytest

from core.domain.entities import LineItem
from core.domain.exceptions import InvalidId, InvalidName, InvalidQuantity
from core.domain.value_objects import ColorClassification, Measurements, Money


RAL_9010 = ColorClassification.standard("9010")


class TestLineItemValidation:
    """Constructor rejects empty ids, empty names and non-positive quantities."""

    @pytest.mark.parametrize("item_id", ["", "   "])
    def test_empty_id_raises(self, item_id):
        with pytest.raises(InvalidId, match="Item must have an ID"):
            LineItem(id=item_id, name="Railing", color=RAL_9010, quantity=1)

    @pytest.mark.parametrize("name", ["", "   "])
    def test_empty_name_raises(self, name):
        with pytest.raises(InvalidName, match="Item must have a name"):
            LineItem(id="1", name=name, color=RAL_9010, quantity=1)

    @pytest.mark.parametrize("quantity", [0, -1, 1.5, True])
    def test_invalid_quantity_raises(self, quantity):
        with pytest.raises(InvalidQuantity):
            LineItem(id="1", name="Railing", color=RAL_9010, quantity=quantity)

    def test_name_is_trimmed(self):
        item = LineItem(id="1", name="  Gate  ", color=RAL_9010, quantity=1)
        assert item.name == "Gate"

    def test_defaults(self):
        item = LineItem(id="1", name="Gate", color=RAL_9010, quantity=1)
        assert not item.has_price()
        assert not item.has_measurements()
        assert item.requires_minimum_rate()
        assert not item.has_primer
        assert not item.is_high_thickness


class TestLineItemPricing:

    def test_total_price_is_price_times_quantity(self, make_item):
        item = make_item(quantity=3, price="12.50")
        assert item.calculate_total_price() == Money("37.50")

    def test_total_price_is_none_while_unpriced(self, make_item):
        assert make_item().calculate_total_price() is None

    def test_assign_and_remove_price(self, make_item):
        item = make_item()
        item.assign_price(Money(20))
        assert item.price == Money(20)
        item.remove_price()
        assert not item.has_price()


class TestLineItemMutators:

    def test_change_quantity_is_validated(self, make_item):
        item = make_item(quantity=2)
        with pytest.raises(InvalidQuantity):
            item.change_quantity(0)
        assert item.quantity == 2

    def test_change_name_is_validated(self, make_item):
        item = make_item(name="Gate")
        with pytest.raises(InvalidName):
            item.change_name(" ")
        item.change_name(" Fence ")
        assert item.name == "Fence"

    def test_surcharge_flags(self, make_item):
        item = make_item()
        item.change_surcharge_flags(has_primer=True)
        assert item.has_primer
        assert not item.is_high_thickness


class TestLineItemIdentity:

    def test_equality_by_id_only(self, make_item):
        a = make_item(item_id="same", name="Gate", quantity=1)
        b = make_item(item_id="same", name="Fence", quantity=9)
        assert a == b
        assert hash(a) == hash(b)
        assert a != make_item(item_id="other")


class TestLineItemSerialization:

    def test_to_dict(self):
        item = LineItem(
            id="1",
            name="Railing",
            color=RAL_9010,
            quantity=2,
            measurements=Measurements.with_linear_meters(10, thickness=3),
            price=Money("7.5"),
        )
        data = item.to_dict()
        assert data["color"] == "RAL 9010"
        assert data["color_is_standard"] is True
        assert data["measurements"] == "10 ml, thickness 3mm"
        assert data["price"] == "7.5"
        assert data["total_price"] == "15.0"

    def test_from_dict_restores_item(self):
        item = LineItem(
            id="1",
            name="Panel",
            color=ColorClassification.special("Oxidon"),
            quantity=4,
            measurements=Measurements.with_square_meters("8.5"),
            price=Money(3),
            has_primer=True,
        )
        restored = LineItem.from_dict(item.to_dict())
        assert restored == item
        assert restored.color == item.color
        assert restored.measurements.square_meters == Decimal("8.5")
        assert restored.price == Money(3)
        assert restored.has_primer
