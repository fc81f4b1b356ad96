"""FastAPI dependencies for dependency injection."""

from pathlib import Path
from typing import Callable

from dotenv import load_dotenv
from fastapi import Depends

from core.application.services import CustomerApplicationService, DeliveryNoteApplicationService
from core.application.unit_of_work import AbstractUnitOfWork
from core.data.uow import create_uow
from core.domain.services import PricingService, build_adjustments
from core.infrastructure.adapters.persistence import InMemoryStorage, InMemoryUnitOfWork
from core.infrastructure.database.lifecycle import get_session_factory
from core.infrastructure.event_bus import get_event_bus
from core.settings import AppSettings, get_app_settings


# Load environment variables ONCE before any settings objects are created
_PROJECT_ROOT = Path(__file__).resolve().parents[2]
load_dotenv(dotenv_path=_PROJECT_ROOT / ".env")

UnitOfWorkFactory = Callable[[], AbstractUnitOfWork]

# Process-wide store used when API_STORAGE=memory
_memory_storage = InMemoryStorage()


def get_settings() -> AppSettings:
    return get_app_settings()


def get_uow_factory(settings: AppSettings = Depends(get_settings)) -> UnitOfWorkFactory:
    """Unit of work factory for the configured storage backend.

    Returns:
        Callable building a fresh unit of work per operation
    """
    if settings.api.storage == "memory":
        return lambda: InMemoryUnitOfWork(_memory_storage)

    session_factory = get_session_factory()
    return lambda: create_uow(session_factory)


def get_pricing_service(settings: AppSettings = Depends(get_settings)) -> PricingService:
    return PricingService(build_adjustments(settings.pricing))


def get_delivery_note_service(
    uow_factory: UnitOfWorkFactory = Depends(get_uow_factory),
    pricing: PricingService = Depends(get_pricing_service),
    settings: AppSettings = Depends(get_settings),
) -> DeliveryNoteApplicationService:
    """Get DeliveryNoteApplicationService instance."""
    return DeliveryNoteApplicationService(
        uow_factory,
        pricing=pricing,
        number_prefix=settings.numbering.prefix,
        event_bus=get_event_bus(),
    )


def get_customer_service(
    uow_factory: UnitOfWorkFactory = Depends(get_uow_factory),
) -> CustomerApplicationService:
    """Get CustomerApplicationService instance."""
    return CustomerApplicationService(uow_factory)
