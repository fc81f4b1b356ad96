"""Declarative base and column types shared by all ORM models."""

from decimal import Decimal

from sqlalchemy import String
from sqlalchemy.orm import declarative_base
from sqlalchemy.types import TypeDecorator

Base = declarative_base()


class DecimalString(TypeDecorator):
    """Exact Decimal stored as its string form.

    Numeric(p, s) rounds to its scale and SQLite keeps it as a float; surcharge
    factors produce amounts with more decimals than any fixed scale.
    """

    impl = String(64)
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if value is None:
            return None
        return str(Decimal(str(value)))

    def process_result_value(self, value, dialect):
        if value is None:
            return None
        return Decimal(value)
