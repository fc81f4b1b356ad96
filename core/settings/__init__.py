# Settings package
from core.settings.modules import AppSettings, get_app_settings
from core.settings.sections.api import ApiSettings
from core.settings.sections.database import DatabaseSettings
from core.settings.sections.numbering import NumberingSettings
from core.settings.sections.pricing import PricingSettings

__all__ = [
    "ApiSettings",
    "AppSettings",
    "DatabaseSettings",
    "NumberingSettings",
    "PricingSettings",
    "get_app_settings",
]
