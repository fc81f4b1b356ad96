"""Unit tests for delivery note numbering."""

import pytest

from core.domain.exceptions import InvalidNumber
from core.domain.value_objects import DeliveryNoteNumber


class TestDeliveryNoteNumber:

    def test_format_pads_sequence(self):
        assert DeliveryNoteNumber.format("ALB", 2026, 7) == "ALB-2026-007"

    def test_format_keeps_wide_sequences(self):
        assert DeliveryNoteNumber.format("alb", 2026, 1234) == "ALB-2026-1234"

    def test_sequence_starts_at_one(self):
        with pytest.raises(InvalidNumber):
            DeliveryNoteNumber.format("ALB", 2026, 0)

    def test_parse(self):
        number = DeliveryNoteNumber.parse("ALB-2026-042")
        assert (number.prefix, number.year, number.sequence) == ("ALB", 2026, 42)
        assert str(number) == "ALB-2026-042"

    @pytest.mark.parametrize("raw", ["", "ALB-26-001", "ALB2026001", "ALB-2026-01"])
    def test_parse_rejects_malformed(self, raw):
        with pytest.raises(InvalidNumber):
            DeliveryNoteNumber.parse(raw)

    def test_parse_rejects_non_ascii_digits(self):
        with pytest.raises(InvalidNumber):
            DeliveryNoteNumber.parse("ALB-٢٠٢٦-001")


class TestNextInSequence:
    """Numbers continue after the highest one issued; gaps are never refilled."""

    def test_first_number_of_the_year(self):
        assert DeliveryNoteNumber.next_in_sequence("ALB", 2026, []) == "ALB-2026-001"

    def test_gap_left_by_a_deleted_note_is_skipped(self):
        issued = ["ALB-2026-002"]  # 001 was deleted
        assert DeliveryNoteNumber.next_in_sequence("ALB", 2026, issued) == "ALB-2026-003"

    def test_wide_sequences_compare_numerically(self):
        issued = ["ALB-2026-999", "ALB-2026-1000", "ALB-2026-998"]
        assert DeliveryNoteNumber.next_in_sequence("alb", 2026, issued) == "ALB-2026-1001"

    def test_other_prefixes_years_and_formats_are_ignored(self):
        issued = ["ALB-2025-040", "DN-2026-012", "legacy 77", "ALB-2026-003"]
        assert DeliveryNoteNumber.next_in_sequence("ALB", 2026, issued) == "ALB-2026-004"
