"""
Test settings loading from environment variables.

Every section reads its own prefix and the aggregator wires them together.
"""
from __future__ import annotations

from decimal import Decimal

import pytest
from pydantic import ValidationError

from core.domain.services import HighThicknessSurcharge, PrimerSurcharge, build_adjustments
from core.settings import PricingSettings, get_app_settings


@pytest.fixture(autouse=True)
def fresh_settings():
    get_app_settings.cache_clear()
    yield
    get_app_settings.cache_clear()


def test_defaults():
    settings = get_app_settings()

    assert settings.numbering.prefix == "ALB"
    assert settings.api.storage == "database"
    assert settings.log_level == "INFO"
    assert settings.database.is_sqlite
    assert settings.pricing.apply_primer_surcharge is False
    assert settings.pricing.high_thickness_factor == Decimal("1.7")
    assert build_adjustments(settings.pricing) == []


def test_every_section_reads_its_prefix(monkeypatch):
    monkeypatch.setenv("NUMBERING_PREFIX", "DN")
    monkeypatch.setenv("API_STORAGE", "memory")
    monkeypatch.setenv("API_LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("DB_DATABASE_URL", "postgresql+asyncpg://localhost/epoxiron")
    monkeypatch.setenv("PRICING_APPLY_PRIMER_SURCHARGE", "true")
    monkeypatch.setenv("PRICING_PRIMER_FACTOR", "1.5")

    settings = get_app_settings()

    assert settings.numbering.prefix == "DN"
    assert settings.api.storage == "memory"
    assert settings.log_level == "DEBUG"
    assert not settings.database.is_sqlite
    assert settings.pricing.primer_factor == Decimal("1.5")


def test_enabled_surcharges_become_adjustments(monkeypatch):
    monkeypatch.setenv("PRICING_APPLY_PRIMER_SURCHARGE", "true")
    monkeypatch.setenv("PRICING_APPLY_HIGH_THICKNESS_SURCHARGE", "true")

    adjustments = build_adjustments(get_app_settings().pricing)

    assert [type(a) for a in adjustments] == [PrimerSurcharge, HighThicknessSurcharge]
    assert adjustments[0].factor == Decimal("2")


def test_negative_factor_is_rejected(monkeypatch):
    monkeypatch.setenv("PRICING_HIGH_THICKNESS_FACTOR", "-1")

    with pytest.raises(ValidationError):
        PricingSettings()
