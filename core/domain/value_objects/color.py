"""Coating color classification value object."""
import re
from dataclasses import dataclass
from enum import Enum

from ..exceptions import InvalidColorCode


# "9010", "RAL 9010", "ral9010", "RAC 9010"
STANDARD_CODE_PATTERN = re.compile(r"^(?:(?:RAL|RAC)\s*)?([0-9]{4})$", re.IGNORECASE)


class ColorKind(str, Enum):
    """Which variant of the classification is active."""

    STANDARD = "standard"
    SPECIAL = "special"


@dataclass(frozen=True)
class ColorClassification:
    """
    Color of a coated piece.

    Either a standardized 4-digit RAL code (stored as the bare digits) or a
    free-text "special" color name. Equality compares variant + value.
    """
    kind: ColorKind
    value: str

    def __post_init__(self):
        if not isinstance(self.value, str) or not self.value.strip():
            raise InvalidColorCode("Color cannot be empty")
        if self.kind == ColorKind.STANDARD and not re.fullmatch(r"[0-9]{4}", self.value):
            raise InvalidColorCode(f"Invalid standard color code: {self.value}")

    @classmethod
    def standard(cls, code: str) -> "ColorClassification":
        match = STANDARD_CODE_PATTERN.match((code or "").strip())
        if not match:
            raise InvalidColorCode(
                f"Standard color code must have 4 digits: {code!r}"
            )
        return cls(ColorKind.STANDARD, match.group(1))

    @classmethod
    def special(cls, text: str) -> "ColorClassification":
        if not isinstance(text, str) or not text.strip():
            raise InvalidColorCode("Special color name cannot be empty")
        return cls(ColorKind.SPECIAL, text.strip())

    @classmethod
    def from_text(cls, text: str) -> "ColorClassification":
        """Classify raw user input: 4-digit codes are standard, anything else special."""
        if isinstance(text, str) and STANDARD_CODE_PATTERN.match(text.strip()):
            return cls.standard(text)
        return cls.special(text)

    def is_standard(self) -> bool:
        return self.kind == ColorKind.STANDARD

    def is_special(self) -> bool:
        return self.kind == ColorKind.SPECIAL

    def code(self) -> str:
        return self.value

    def display(self) -> str:
        if self.is_standard():
            return f"RAL {self.value}"
        return self.value

    def __str__(self) -> str:
        return self.display()
