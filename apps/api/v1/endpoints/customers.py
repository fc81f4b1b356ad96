"""Customer and pricing profile endpoints for REST API."""

import logging

from fastapi import APIRouter, Depends, Query, Response, status

from core.application.dtos.customer_dto import (
    CreateCustomerRequest,
    CustomerDTO,
    CustomerListDTO,
    PricingProfileDTO,
    PricingRatesInput,
    UpdateCustomerRequest,
)
from core.application.services import CustomerApplicationService

from apps.api.deps import get_customer_service

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/customers", tags=["customers"])


@router.post("", response_model=CustomerDTO, status_code=status.HTTP_201_CREATED)
async def create_customer(
    request: CreateCustomerRequest,
    service: CustomerApplicationService = Depends(get_customer_service),
) -> CustomerDTO:
    """Create a customer together with its pricing profile."""
    return await service.create_customer(request)


@router.get("", response_model=CustomerListDTO)
async def list_customers(
    limit: int = Query(default=100, ge=1, le=1000),
    service: CustomerApplicationService = Depends(get_customer_service),
) -> CustomerListDTO:
    return await service.list_customers(limit=limit)


@router.get("/{customer_id}", response_model=CustomerDTO)
async def get_customer(
    customer_id: str,
    service: CustomerApplicationService = Depends(get_customer_service),
) -> CustomerDTO:
    return await service.get_customer(customer_id)


@router.patch("/{customer_id}", response_model=CustomerDTO)
async def update_customer(
    customer_id: str,
    request: UpdateCustomerRequest,
    service: CustomerApplicationService = Depends(get_customer_service),
) -> CustomerDTO:
    return await service.update_customer(customer_id, request)


@router.delete("/{customer_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_customer(
    customer_id: str,
    service: CustomerApplicationService = Depends(get_customer_service),
) -> Response:
    await service.delete_customer(customer_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{customer_id}/pricing", response_model=PricingProfileDTO)
async def get_pricing_profile(
    customer_id: str,
    service: CustomerApplicationService = Depends(get_customer_service),
) -> PricingProfileDTO:
    return await service.get_pricing_profile(customer_id)


@router.put("/{customer_id}/pricing", response_model=PricingProfileDTO)
async def update_pricing_profile(
    customer_id: str,
    request: PricingRatesInput,
    service: CustomerApplicationService = Depends(get_customer_service),
) -> PricingProfileDTO:
    """Replace the rates and, when given, the special-piece prices."""
    return await service.update_pricing_profile(customer_id, request)
