from decimal import Decimal

from pydantic import Field
from pydantic_settings import BaseSettings


class PricingSettings(BaseSettings):
    """
    Optional pricing surcharges.
    Loaded automatically from .env with prefix PRICING_*

    Both surcharges are off unless explicitly enabled.
    """

    apply_primer_surcharge: bool = False
    primer_factor: Decimal = Field(default=Decimal("2"), ge=0)

    apply_high_thickness_surcharge: bool = False
    high_thickness_factor: Decimal = Field(default=Decimal("1.7"), ge=0)

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "env_prefix": "PRICING_",
        "extra": "ignore",
    }
