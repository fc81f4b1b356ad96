"""
Base Domain Event.

All domain events inherit from this base class.
"""
from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal
from typing import Optional, Dict, Any
import uuid


_METADATA_FIELDS = (
    'event_id', 'event_type', 'event_version',
    'aggregate_id', 'aggregate_type', 'user_id', 'occurred_at',
)


@dataclass
class DomainEvent:
    """
    Base class for all domain events.

    Events are immutable records of things that have happened to an
    aggregate. They are collected by the aggregate and published by the
    application layer after the unit of work commits.
    """

    # Event metadata
    event_id: str = field(default_factory=lambda: str(uuid.uuid4()))
    event_type: str = field(init=False, default="")
    event_version: int = 1

    # Aggregate information
    aggregate_id: str = field(default="")
    aggregate_type: str = field(init=False, default="")

    user_id: Optional[str] = None

    # Timestamp
    occurred_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def __post_init__(self):
        """Set event type and aggregate type from class name."""
        if not self.event_type:
            object.__setattr__(self, 'event_type', self.__class__.__name__)

        if not self.aggregate_type:
            object.__setattr__(self, 'aggregate_type', self._get_aggregate_type())

    def _get_aggregate_type(self) -> str:
        """
        Aggregate type for this event.

        Subclasses grouped per aggregate override this; the fallback is the
        class name without its 'Event' suffix.
        """
        event_name = self.__class__.__name__
        if event_name.endswith('Event'):
            event_name = event_name[:-5]
        return event_name

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert event to dictionary for serialization.

        Returns:
            Dictionary representation of event
        """
        return {
            "event_id": self.event_id,
            "event_type": self.event_type,
            "event_version": self.event_version,
            "aggregate_id": self.aggregate_id,
            "aggregate_type": self.aggregate_type,
            "user_id": self.user_id,
            "occurred_at": self.occurred_at.isoformat(),
            "data": self._get_event_data(),
        }

    def _get_event_data(self) -> Dict[str, Any]:
        """Event-specific payload (every non-metadata field)."""
        data = {}

        for key, value in self.__dict__.items():
            if key in _METADATA_FIELDS:
                continue
            if isinstance(value, Decimal):
                # Decimal is not JSON serializable
                data[key] = str(value)
            elif hasattr(value, 'to_dict'):
                data[key] = value.to_dict()
            else:
                data[key] = value

        return data
