"""
Delivery Note Status Enum.

Lifecycle states in increasing order of immutability.
"""
from enum import Enum


class DeliveryNoteStatus(str, Enum):
    """Delivery note status values."""

    DRAFT = "draft"
    VALIDATED = "validated"
    FINALIZED = "finalized"
