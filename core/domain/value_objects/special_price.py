"""Special-piece price override."""
from dataclasses import dataclass
from typing import Any, Dict

from ..exceptions import InvalidName
from .money import Money


@dataclass(frozen=True)
class SpecialPrice:
    """
    Fixed price for a named piece ("Corner", "Gate hinge", ...).

    Bypasses measurement pricing when an item's name matches
    case-insensitively.
    """
    name: str
    price: Money

    def __post_init__(self):
        if not isinstance(self.name, str) or not self.name.strip():
            raise InvalidName("Special piece must have a name")
        object.__setattr__(self, 'name', self.name.strip())
        if not isinstance(self.price, Money):
            object.__setattr__(self, 'price', Money(self.price))

    def matches(self, item_name: str) -> bool:
        if not item_name:
            return False
        return self.name.casefold() == item_name.strip().casefold()

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "price": str(self.price.amount)}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SpecialPrice":
        return cls(name=data["name"], price=Money(data["price"]))
