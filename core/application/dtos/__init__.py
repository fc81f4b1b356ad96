"""Application DTOs."""

from .customer_dto import (
    CreateCustomerRequest,
    CustomerDTO,
    CustomerListDTO,
    PricingProfileDTO,
    PricingRatesInput,
    SpecialPriceDTO,
    UpdateCustomerRequest,
)
from .delivery_note_dto import (
    CreateDeliveryNoteRequest,
    DeliveryNoteDTO,
    DeliveryNoteListDTO,
    LineItemDTO,
    LineItemInput,
    UpdateDeliveryNoteRequest,
    UpdateItemPriceRequest,
)

__all__ = [
    "CreateCustomerRequest",
    "CreateDeliveryNoteRequest",
    "CustomerDTO",
    "CustomerListDTO",
    "DeliveryNoteDTO",
    "DeliveryNoteListDTO",
    "LineItemDTO",
    "LineItemInput",
    "PricingProfileDTO",
    "PricingRatesInput",
    "SpecialPriceDTO",
    "UpdateCustomerRequest",
    "UpdateDeliveryNoteRequest",
    "UpdateItemPriceRequest",
]
