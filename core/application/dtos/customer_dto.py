"""Application DTOs for customers and pricing profiles."""

from datetime import datetime
from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, Field


class SpecialPriceDTO(BaseModel):
    """Fixed price for a named piece."""

    name: str = Field(..., description="Piece name (matched case-insensitively)")
    price: Decimal = Field(..., description="Fixed unit price")

    model_config = {"frozen": True}


class PricingRatesInput(BaseModel):
    """Customer pricing agreement."""

    price_per_linear_meter: Decimal = Field(default=Decimal("0"), description="Rate per linear meter")
    price_per_square_meter: Decimal = Field(default=Decimal("0"), description="Rate per square meter")
    minimum_price: Decimal = Field(default=Decimal("0"), description="Minimum unit price")
    special_prices: Optional[List[SpecialPriceDTO]] = Field(
        None, description="Special-piece prices (replaces the list when given)"
    )

    model_config = {"frozen": True}


class CreateCustomerRequest(BaseModel):
    """Request DTO for creating a customer (and its pricing profile)."""

    name: str = Field(..., description="Customer name (at least 2 characters)")
    email: Optional[str] = Field(None, description="Contact email")
    phone: Optional[str] = Field(None, description="Contact phone")
    pricing: Optional[PricingRatesInput] = Field(None, description="Initial pricing profile")

    model_config = {"frozen": True}


class UpdateCustomerRequest(BaseModel):
    """Request DTO for updating a customer. Omitted fields stay unchanged."""

    name: Optional[str] = None
    email: Optional[str] = Field(None, description="'' clears the email")
    phone: Optional[str] = Field(None, description="'' clears the phone")

    model_config = {"frozen": True}


class CustomerDTO(BaseModel):
    """Response DTO for customer details."""

    id: str
    name: str
    email: Optional[str] = None
    phone: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    model_config = {"frozen": True}


class PricingProfileDTO(BaseModel):
    """Response DTO for a customer's pricing profile."""

    id: str
    customer_id: str
    price_per_linear_meter: Decimal
    price_per_square_meter: Decimal
    minimum_price: Decimal
    special_prices: List[SpecialPriceDTO] = Field(default_factory=list)
    created_at: datetime
    updated_at: datetime

    model_config = {"frozen": True}


class CustomerListDTO(BaseModel):
    """DTO for listing customers."""

    customers: List[CustomerDTO] = Field(default_factory=list)
    total: int = Field(..., ge=0)

    model_config = {"frozen": True}
