"""Delivery note number value object."""
import re
from dataclasses import dataclass
from typing import Iterable

from ..exceptions import InvalidNumber


NUMBER_PATTERN = re.compile(r"^([A-Z][A-Z0-9]*)-([0-9]{4})-([0-9]{3,})$")


@dataclass(frozen=True)
class DeliveryNoteNumber:
    """
    Human-readable delivery note number.

    Format: PREFIX-YEAR-NNN (sequence zero-padded to 3 digits, restarts
    every year)
    Examples:
    - ALB-2026-001
    - ALB-2026-142
    """
    prefix: str
    year: int
    sequence: int

    def __post_init__(self):
        if not self.prefix or not re.fullmatch(r"[A-Z][A-Z0-9]*", self.prefix):
            raise InvalidNumber(f"Invalid number prefix: {self.prefix!r}")
        if not 1 <= self.year <= 9999:
            raise InvalidNumber(f"Invalid number year: {self.year!r}")
        if self.sequence < 1:
            raise InvalidNumber(f"Sequence must start at 1 (got {self.sequence})")

    @property
    def value(self) -> str:
        return f"{self.prefix}-{self.year:04d}-{self.sequence:03d}"

    @classmethod
    def format(cls, prefix: str, year: int, sequence: int) -> str:
        return cls(prefix=prefix.upper(), year=year, sequence=sequence).value

    @classmethod
    def parse(cls, value: str) -> "DeliveryNoteNumber":
        match = NUMBER_PATTERN.match(value or "")
        if not match:
            raise InvalidNumber(f"Invalid delivery note number: {value!r}")
        prefix, year, sequence = match.groups()
        return cls(prefix=prefix, year=int(year), sequence=int(sequence))

    @classmethod
    def next_in_sequence(cls, prefix: str, year: int, issued: Iterable[str]) -> str:
        """
        Number following the highest sequence already issued for prefix and year.

        Gaps left by deleted notes are never refilled. Numbers with another
        prefix or year, or in a foreign format, are ignored.
        """
        prefix = prefix.upper()
        highest = 0
        for value in issued:
            match = NUMBER_PATTERN.match(value or "")
            if match is None:
                continue
            number_prefix, number_year, sequence = match.groups()
            if number_prefix == prefix and int(number_year) == year:
                highest = max(highest, int(sequence))
        return cls.format(prefix, year, highest + 1)

    def __str__(self) -> str:
        return self.value
