"""Delivery note endpoints for REST API."""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query, Response, status

from core.application.dtos.delivery_note_dto import (
    CreateDeliveryNoteRequest,
    DeliveryNoteDTO,
    DeliveryNoteListDTO,
    LineItemInput,
    UpdateDeliveryNoteRequest,
    UpdateItemPriceRequest,
)
from core.application.services import DeliveryNoteApplicationService
from core.domain.enums import DeliveryNoteStatus

from apps.api.deps import get_delivery_note_service

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/delivery-notes", tags=["delivery-notes"])

# Domain errors are translated to HTTP responses by the app-level handler.


@router.post("", response_model=DeliveryNoteDTO, status_code=status.HTTP_201_CREATED)
async def create_delivery_note(
    request: CreateDeliveryNoteRequest,
    service: DeliveryNoteApplicationService = Depends(get_delivery_note_service),
) -> DeliveryNoteDTO:
    """Open a draft delivery note; items are priced from the customer's profile."""
    return await service.create_delivery_note(request)


@router.get("", response_model=DeliveryNoteListDTO)
async def list_delivery_notes(
    customer_id: Optional[str] = Query(default=None, description="Only this customer's notes"),
    status_filter: Optional[DeliveryNoteStatus] = Query(default=None, alias="status"),
    limit: int = Query(default=100, ge=1, le=1000, description="Maximum number of notes"),
    service: DeliveryNoteApplicationService = Depends(get_delivery_note_service),
) -> DeliveryNoteListDTO:
    return await service.list_delivery_notes(customer_id=customer_id, status=status_filter, limit=limit)


@router.get("/{note_id}", response_model=DeliveryNoteDTO)
async def get_delivery_note(
    note_id: str,
    service: DeliveryNoteApplicationService = Depends(get_delivery_note_service),
) -> DeliveryNoteDTO:
    return await service.get_delivery_note(note_id)


@router.put("/{note_id}", response_model=DeliveryNoteDTO)
async def update_delivery_note(
    note_id: str,
    request: UpdateDeliveryNoteRequest,
    service: DeliveryNoteApplicationService = Depends(get_delivery_note_service),
) -> DeliveryNoteDTO:
    """Edit items, notes and date (draft only) and/or change status."""
    return await service.update_delivery_note(note_id, request)


@router.delete("/{note_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_delivery_note(
    note_id: str,
    service: DeliveryNoteApplicationService = Depends(get_delivery_note_service),
) -> Response:
    """Delete a draft. Validated and finalized notes are kept."""
    await service.delete_delivery_note(note_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/{note_id}/items", response_model=DeliveryNoteDTO, status_code=status.HTTP_201_CREATED)
async def add_item(
    note_id: str,
    item: LineItemInput,
    service: DeliveryNoteApplicationService = Depends(get_delivery_note_service),
) -> DeliveryNoteDTO:
    return await service.add_item(note_id, item)


@router.delete("/{note_id}/items/{item_id}", response_model=DeliveryNoteDTO)
async def remove_item(
    note_id: str,
    item_id: str,
    service: DeliveryNoteApplicationService = Depends(get_delivery_note_service),
) -> DeliveryNoteDTO:
    return await service.remove_item(note_id, item_id)


@router.put("/{note_id}/items/{item_id}/price", response_model=DeliveryNoteDTO)
async def update_item_price(
    note_id: str,
    item_id: str,
    request: UpdateItemPriceRequest,
    service: DeliveryNoteApplicationService = Depends(get_delivery_note_service),
) -> DeliveryNoteDTO:
    """Set the unit price of an item (null removes it). Allowed until finalized."""
    return await service.update_item_price(note_id, item_id, request.price)


@router.post("/{note_id}/validate", response_model=DeliveryNoteDTO)
async def validate_delivery_note(
    note_id: str,
    service: DeliveryNoteApplicationService = Depends(get_delivery_note_service),
) -> DeliveryNoteDTO:
    return await service.validate(note_id)


@router.post("/{note_id}/finalize", response_model=DeliveryNoteDTO)
async def finalize_delivery_note(
    note_id: str,
    service: DeliveryNoteApplicationService = Depends(get_delivery_note_service),
) -> DeliveryNoteDTO:
    return await service.finalize(note_id)


@router.post("/{note_id}/reopen", response_model=DeliveryNoteDTO)
async def reopen_delivery_note(
    note_id: str,
    service: DeliveryNoteApplicationService = Depends(get_delivery_note_service),
) -> DeliveryNoteDTO:
    return await service.reopen(note_id)
