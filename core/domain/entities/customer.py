"""Customer entity."""
from datetime import datetime, timezone
from typing import Any, Dict, Optional
from uuid import uuid4

from ..exceptions import InvalidId, InvalidName


MIN_NAME_LENGTH = 2


def _validate_name(name: str) -> str:
    if not isinstance(name, str) or not name.strip():
        raise InvalidName("Name cannot be empty")
    trimmed = name.strip()
    if len(trimmed) < MIN_NAME_LENGTH:
        raise InvalidName(f"Name must be at least {MIN_NAME_LENGTH} characters")
    return trimmed


def _clean(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    return value.strip() or None


class Customer:
    """A workshop customer; owns exactly one PricingProfile."""

    def __init__(
        self,
        id: str,
        name: str,
        email: Optional[str] = None,
        phone: Optional[str] = None,
        created_at: Optional[datetime] = None,
        updated_at: Optional[datetime] = None,
    ):
        if not isinstance(id, str) or not id.strip():
            raise InvalidId("Customer must have an ID")
        self._id = id
        self._name = _validate_name(name)
        self._email = _clean(email)
        self._phone = _clean(phone)
        self._created_at = created_at or datetime.now(timezone.utc)
        self._updated_at = updated_at or self._created_at

    @classmethod
    def create(cls, name: str, email: Optional[str] = None, phone: Optional[str] = None) -> 'Customer':
        return cls(id=str(uuid4()), name=name, email=email, phone=phone)

    @property
    def id(self) -> str:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def email(self) -> Optional[str]:
        return self._email

    @property
    def phone(self) -> Optional[str]:
        return self._phone

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    def change_name(self, name: str) -> None:
        self._name = _validate_name(name)
        self._updated_at = datetime.now(timezone.utc)

    def change_contact_info(self, email: Optional[str] = None, phone: Optional[str] = None) -> None:
        """Only the given fields change; pass an empty string to clear one."""
        if email is not None:
            self._email = _clean(email)
        if phone is not None:
            self._phone = _clean(phone)
        self._updated_at = datetime.now(timezone.utc)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Customer):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self._id,
            'name': self._name,
            'email': self._email,
            'phone': self._phone,
            'created_at': self._created_at.isoformat(),
            'updated_at': self._updated_at.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Customer':
        return cls(
            id=data['id'],
            name=data['name'],
            email=data.get('email'),
            phone=data.get('phone'),
            created_at=_parse_datetime(data.get('created_at')),
            updated_at=_parse_datetime(data.get('updated_at')),
        )


def _parse_datetime(value: Any) -> Optional[datetime]:
    if value is None or isinstance(value, datetime):
        return value
    return datetime.fromisoformat(value)
