"""SQLAlchemy repository implementations."""

from .customer_repository_impl import SqlAlchemyCustomerRepository, SqlAlchemyPricingProfileRepository
from .delivery_note_repository_impl import SqlAlchemyDeliveryNoteRepository

__all__ = [
    "SqlAlchemyCustomerRepository",
    "SqlAlchemyDeliveryNoteRepository",
    "SqlAlchemyPricingProfileRepository",
]
