"""Unit tests for ColorClassification."""

import pytest

from core.domain.exceptions import InvalidColorCode
from core.domain.value_objects import ColorClassification, ColorKind


class TestStandardColor:

    @pytest.mark.parametrize("raw", ["9010", "RAL 9010", "RAL9010", "ral 9010", "RAC 9010", "  9010  "])
    def test_accepts_code_with_optional_scheme_label(self, raw):
        color = ColorClassification.standard(raw)
        assert color.is_standard()
        assert color.code() == "9010"

    @pytest.mark.parametrize("raw", ["901", "90100", "RAL", "RAL 90A0", "", "white"])
    def test_rejects_malformed_codes(self, raw):
        with pytest.raises(InvalidColorCode):
            ColorClassification.standard(raw)

    @pytest.mark.parametrize("raw", ["٩٠١٠", "RAL ٩٠١٠", "９０１０"])
    def test_rejects_non_ascii_digits(self, raw):
        with pytest.raises(InvalidColorCode):
            ColorClassification.standard(raw)

    def test_constructor_rejects_non_ascii_digits(self):
        with pytest.raises(InvalidColorCode):
            ColorClassification(ColorKind.STANDARD, "٩٠١٠")

    def test_display(self):
        assert ColorClassification.standard("ral7016").display() == "RAL 7016"

    def test_equality_uses_normalized_code(self):
        assert ColorClassification.standard("RAL 9010") == ColorClassification.standard("9010")


class TestSpecialColor:

    def test_free_text_is_trimmed(self):
        color = ColorClassification.special("  Oxidon forja  ")
        assert color.is_special()
        assert color.display() == "Oxidon forja"

    @pytest.mark.parametrize("raw", ["", "   "])
    def test_empty_text_raises(self, raw):
        with pytest.raises(InvalidColorCode):
            ColorClassification.special(raw)

    def test_special_and_standard_never_equal(self):
        assert ColorClassification.special("9010") != ColorClassification.standard("9010")


class TestFromText:
    """The use cases classify raw form input with from_text."""

    def test_four_digit_input_is_standard(self):
        assert ColorClassification.from_text("RAC 3000").kind == ColorKind.STANDARD

    def test_anything_else_is_special(self):
        color = ColorClassification.from_text("Gris forja")
        assert color.kind == ColorKind.SPECIAL
        assert str(color) == "Gris forja"

    def test_non_ascii_digits_are_special(self):
        color = ColorClassification.from_text("٩٠١٠")
        assert color.kind == ColorKind.SPECIAL
        assert color.code() == "٩٠١٠"
