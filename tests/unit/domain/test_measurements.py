"""Unit tests for the Measurements value object."""

from decimal import Decimal

import pytest

from core.domain.exceptions import InvalidMeasurement
from core.domain.value_objects import Measurements


class TestMeasurementsConstruction:

    def test_linear_meters_with_thickness(self):
        m = Measurements.with_linear_meters(10, thickness=3)
        assert m.linear_meters == Decimal("10")
        assert m.square_meters is None
        assert m.has_measurements()
        assert m.has_special_thickness()

    def test_square_meters(self):
        m = Measurements.with_square_meters("8.5")
        assert m.square_meters == Decimal("8.5")
        assert not m.has_special_thickness()

    def test_without_measurements(self):
        m = Measurements.without_measurements()
        assert not m.has_measurements()

    @pytest.mark.parametrize("value", [0, -2, "abc"])
    def test_non_positive_or_invalid_values_raise(self, value):
        with pytest.raises(InvalidMeasurement):
            Measurements.with_linear_meters(value)

    def test_invalid_thickness_raises(self):
        with pytest.raises(InvalidMeasurement):
            Measurements.without_measurements(thickness=0)

    def test_from_values_treats_zero_as_absent(self):
        m = Measurements.from_values(linear_meters=0, square_meters=None, thickness=2)
        assert not m.has_measurements()
        assert m.thickness == Decimal("2")


class TestMeasurementsDescription:

    def test_linear_with_thickness(self):
        assert Measurements.with_linear_meters(10, thickness=3).describe() == "10 ml, thickness 3mm"

    def test_area_with_thickness(self):
        assert Measurements.with_square_meters(8.5, thickness=2).describe() == "8.5 m², thickness 2mm"

    def test_no_measurements(self):
        assert Measurements.without_measurements().describe() == "No measurements"
