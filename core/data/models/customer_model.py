"""SQLAlchemy ORM models for customers and their pricing profiles."""

from sqlalchemy import JSON, Column, DateTime, String

from .base import Base, DecimalString


class CustomerModel(Base):
    """SQLAlchemy ORM model for customers table."""

    __tablename__ = "customers"

    id = Column(String(36), primary_key=True)
    name = Column(String(255), nullable=False, index=True)
    email = Column(String(255), nullable=True)
    phone = Column(String(50), nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False)
    updated_at = Column(DateTime(timezone=True), nullable=False)


class PricingProfileModel(Base):
    """SQLAlchemy ORM model for pricing_profiles table."""

    __tablename__ = "pricing_profiles"

    id = Column(String(36), primary_key=True)
    customer_id = Column(String(36), nullable=False, unique=True, index=True)
    price_per_linear_meter = Column(DecimalString, nullable=False, default="0")
    price_per_square_meter = Column(DecimalString, nullable=False, default="0")
    minimum_price = Column(DecimalString, nullable=False, default="0")
    # [{"name": "Corner", "price": "5.00"}, ...] in list order
    special_prices = Column(JSON, nullable=False, default=list)
    created_at = Column(DateTime(timezone=True), nullable=False)
    updated_at = Column(DateTime(timezone=True), nullable=False)
