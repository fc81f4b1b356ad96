"""
Domain exceptions.

Closed taxonomy of failures raised by the delivery-note domain.
Every exception carries a machine-readable ``code`` that the API layer
translates into an HTTP response.

CRITICAL: This file must contain ZERO imports from:
- sqlalchemy
- pydantic
- fastapi
"""
from typing import Iterable, Optional


class DomainException(Exception):
    """Base class for all domain errors."""

    code: str = "DOMAIN_ERROR"

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.code)
        self.message = message or self.code

    def to_dict(self) -> dict:
        return {"code": self.code, "detail": self.message}


# =============================================================================
# VALIDATION ERRORS
# =============================================================================

class DomainValidationError(DomainException, ValueError):
    """Invalid primitive input (empty id, negative price, ...)."""

    code = "VALIDATION_ERROR"


class InvalidId(DomainValidationError):
    code = "INVALID_ID"


class InvalidNumber(InvalidId):
    code = "INVALID_NUMBER"


class InvalidName(DomainValidationError):
    code = "INVALID_NAME"


class InvalidQuantity(DomainValidationError):
    code = "INVALID_QUANTITY"

    def __init__(self, quantity=None):
        super().__init__(f"Quantity must be greater than 0 (got {quantity!r})")
        self.quantity = quantity


class NegativePrice(DomainValidationError):
    code = "NEGATIVE_PRICE"

    def __init__(self, value=None):
        super().__init__(f"Prices cannot be negative (got {value!r})")
        self.value = value


class InvalidColorCode(DomainValidationError):
    code = "INVALID_COLOR_CODE"


class InvalidMeasurement(DomainValidationError):
    code = "INVALID_MEASUREMENT"


# =============================================================================
# DELIVERY NOTE ERRORS
# =============================================================================

class DeliveryNoteException(DomainException):
    """Violation of a delivery-note business rule."""


class WithoutCustomer(DeliveryNoteException, ValueError):
    code = "WITHOUT_CUSTOMER"

    def __init__(self):
        super().__init__("Delivery note must belong to a customer")


class NotEditable(DeliveryNoteException):
    code = "NOT_EDITABLE"

    def __init__(self, status: Optional[str] = None):
        detail = "Delivery note can only be edited in draft status"
        if status:
            detail = f"{detail} (current status: {status})"
        super().__init__(detail)
        self.status = status


class ItemNotFound(DeliveryNoteException):
    code = "ITEM_NOT_FOUND"

    def __init__(self, item_id: str):
        super().__init__(f"Item {item_id} not found in delivery note")
        self.item_id = item_id


class InvalidStatus(DeliveryNoteException):
    code = "INVALID_STATUS"

    def __init__(self, current: str, target: str):
        super().__init__(f"Cannot change status from {current} to {target}")
        self.current = current
        self.target = target


class WithoutItems(DeliveryNoteException):
    code = "WITHOUT_ITEMS"

    def __init__(self):
        super().__init__("Cannot validate a delivery note without items")


class AlreadyFinalized(DeliveryNoteException):
    code = "ALREADY_FINALIZED"

    def __init__(self):
        super().__init__("Delivery note is already finalized")


class ItemsWithoutPrice(DeliveryNoteException):
    code = "ITEMS_WITHOUT_PRICE"

    def __init__(self, item_names: Iterable[str] = ()):
        self.item_names = list(item_names)
        super().__init__(
            "All items must have a price before validation: "
            + ", ".join(self.item_names)
        )


# =============================================================================
# LOOKUP ERRORS
# =============================================================================

class NotFoundError(DomainException):
    """Requested aggregate does not exist."""

    code = "NOT_FOUND"
    resource = "Resource"

    def __init__(self, resource_id: str):
        super().__init__(f"{self.resource} with ID {resource_id} not found")
        self.resource_id = resource_id


class DeliveryNoteNotFound(NotFoundError):
    code = "DELIVERY_NOTE_NOT_FOUND"
    resource = "Delivery note"


class CustomerNotFound(NotFoundError):
    code = "CUSTOMER_NOT_FOUND"
    resource = "Customer"


class PricingProfileNotFound(NotFoundError):
    code = "PRICING_PROFILE_NOT_FOUND"
    resource = "Pricing profile"
