"""Domain services."""
from .pricing import (
    HighThicknessSurcharge,
    PriceAdjustment,
    PricingService,
    PrimerSurcharge,
    build_adjustments,
)

__all__ = [
    "HighThicknessSurcharge",
    "PriceAdjustment",
    "PricingService",
    "PrimerSurcharge",
    "build_adjustments",
]
