from __future__ import annotations

from functools import lru_cache

from pydantic import BaseModel, ConfigDict

from core.settings.sections.api import ApiSettings
from core.settings.sections.database import DatabaseSettings
from core.settings.sections.numbering import NumberingSettings
from core.settings.sections.pricing import PricingSettings


class AppSettings(BaseModel):
    """Application settings aggregator."""

    model_config = ConfigDict(arbitrary_types_allowed=True, extra="ignore")

    api: ApiSettings
    database: DatabaseSettings
    numbering: NumberingSettings
    pricing: PricingSettings

    @property
    def log_level(self) -> str:
        return self.api.log_level


@lru_cache()
def get_app_settings() -> AppSettings:
    return AppSettings(
        api=ApiSettings(),
        database=DatabaseSettings(),
        numbering=NumberingSettings(),
        pricing=PricingSettings(),
    )
