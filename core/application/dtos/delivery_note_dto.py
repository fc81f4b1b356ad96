"""Application DTOs for delivery note operations."""

from datetime import datetime
from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, Field

from core.domain.enums import DeliveryNoteStatus


# Business rules (positive quantity, non-negative price, ...) are enforced by
# the domain so every violation surfaces with its domain error code.

class LineItemInput(BaseModel):
    """Item as entered on the delivery note form."""

    id: Optional[str] = Field(None, description="Existing item ID (kept on update)")
    name: str = Field(..., description="Piece name")
    color: str = Field(..., description="RAL code (e.g. 'RAL 9010') or special color name")
    quantity: int = Field(..., description="Number of identical pieces")
    linear_meters: Optional[Decimal] = Field(None, description="Length in meters")
    square_meters: Optional[Decimal] = Field(None, description="Area in square meters")
    thickness: Optional[Decimal] = Field(None, description="Coating thickness in mm")
    has_primer: bool = Field(default=False, description="Primer coat applied")
    is_high_thickness: bool = Field(default=False, description="High-thickness coating")
    price: Optional[Decimal] = Field(
        None, description="Explicit unit price; resolved from the pricing profile when omitted"
    )

    model_config = {"frozen": True}


class CreateDeliveryNoteRequest(BaseModel):
    """Request DTO for creating a delivery note."""

    customer_id: str = Field(..., description="Customer ID")
    items: List[LineItemInput] = Field(default_factory=list, description="Line items")
    notes: Optional[str] = Field(None, description="Free-text notes")
    date: Optional[datetime] = Field(None, description="Delivery date (defaults to now)")

    model_config = {"frozen": True}


class UpdateDeliveryNoteRequest(BaseModel):
    """Request DTO for updating a delivery note. Omitted fields stay unchanged."""

    items: Optional[List[LineItemInput]] = Field(None, description="Replacement item list")
    notes: Optional[str] = Field(None, description="Free-text notes ('' clears)")
    date: Optional[datetime] = Field(None, description="Delivery date")
    status: Optional[DeliveryNoteStatus] = Field(None, description="Target status")

    model_config = {"frozen": True}


class UpdateItemPriceRequest(BaseModel):
    """Request DTO for pricing one item. A null price removes it."""

    price: Optional[Decimal] = Field(None, description="Unit price")

    model_config = {"frozen": True}


class LineItemDTO(BaseModel):
    """Response DTO for a line item."""

    id: str = Field(..., description="Item ID")
    name: str = Field(..., description="Piece name")
    color: str = Field(..., description="Display color")
    color_code: str = Field(..., description="RAL digits or special color name")
    color_is_standard: bool = Field(..., description="True for RAL colors")
    quantity: int = Field(..., description="Quantity")
    measurements: str = Field(..., description="Human-readable measurements")
    linear_meters: Optional[Decimal] = None
    square_meters: Optional[Decimal] = None
    thickness: Optional[Decimal] = None
    has_primer: bool = False
    is_high_thickness: bool = False
    price: Optional[Decimal] = Field(None, description="Unit price (null when unpriced)")
    total_price: Optional[Decimal] = Field(None, description="Unit price x quantity")

    model_config = {"frozen": True}


class DeliveryNoteDTO(BaseModel):
    """Response DTO for delivery note details."""

    id: str = Field(..., description="Delivery note ID")
    number: str = Field(..., description="Delivery note number (PREFIX-YEAR-NNN)")
    customer_id: str = Field(..., description="Customer ID")
    customer_name: str = Field(..., description="Customer name at creation time")
    date: datetime = Field(..., description="Delivery date")
    status: DeliveryNoteStatus = Field(..., description="draft, validated or finalized")
    items: List[LineItemDTO] = Field(default_factory=list, description="Line items")
    item_count: int = Field(..., ge=0, description="Number of items")
    total_amount: Optional[Decimal] = Field(None, description="Total (null while items are unpriced)")
    notes: Optional[str] = None
    created_at: datetime = Field(..., description="Creation timestamp")
    all_have_price: bool = Field(..., description="Every item is priced")
    items_without_price: int = Field(..., ge=0, description="Number of unpriced items")

    model_config = {"frozen": True}


class DeliveryNoteListDTO(BaseModel):
    """DTO for listing delivery notes."""

    delivery_notes: List[DeliveryNoteDTO] = Field(default_factory=list)
    total: int = Field(..., ge=0, description="Total count")

    model_config = {"frozen": True}
