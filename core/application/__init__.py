"""Application layer - services, use cases, unit of work and DTOs."""

from .services import CustomerApplicationService, DeliveryNoteApplicationService
from .unit_of_work import AbstractUnitOfWork

__all__ = [
    "AbstractUnitOfWork",
    "CustomerApplicationService",
    "DeliveryNoteApplicationService",
]
