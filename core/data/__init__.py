"""Data layer - SQLAlchemy persistence and mapping."""

from .mappers import CustomerMapper, DeliveryNoteMapper, LineItemMapper, PricingProfileMapper
from .models import (
    Base,
    CustomerModel,
    DeliveryNoteItemModel,
    DeliveryNoteModel,
    PricingProfileModel,
)
from .repositories import (
    SqlAlchemyCustomerRepository,
    SqlAlchemyDeliveryNoteRepository,
    SqlAlchemyPricingProfileRepository,
)
from .uow import SqlAlchemyUnitOfWork, create_uow

__all__ = [
    "Base",
    "create_uow",
    "CustomerMapper",
    "CustomerModel",
    "DeliveryNoteItemModel",
    "DeliveryNoteMapper",
    "DeliveryNoteModel",
    "LineItemMapper",
    "PricingProfileMapper",
    "PricingProfileModel",
    "SqlAlchemyCustomerRepository",
    "SqlAlchemyDeliveryNoteRepository",
    "SqlAlchemyPricingProfileRepository",
    "SqlAlchemyUnitOfWork",
]
