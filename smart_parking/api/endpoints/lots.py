"""Lot and slot endpoints."""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from smart_parking.api.deps import get_booking_service
from smart_parking.schemas.lot import LotListResponse
from smart_parking.schemas.slot import SlotListResponse
from smart_parking.services.booking import BookingService

router = APIRouter()


@router.get("/lots", response_model=LotListResponse)
async def list_lots(service: BookingService = Depends(get_booking_service)):
    """List all parking lots."""
    lots = await service.list_lots()
    return LotListResponse(lots=lots)


@router.get("/slots", response_model=SlotListResponse)
async def list_slots(
    lot_id: Optional[str] = Query(None, alias="lotId", description="Filter by lot ID"),
    status_filter: Optional[str] = Query(
        None,
        alias="status",
        pattern="^(available|occupied)$",
        description="Filter by status (available/occupied)",
    ),
    service: BookingService = Depends(get_booking_service),
):
    """List all parking slots, optionally filtered by lot or status."""
    slots = await service.list_slots(lot_id=lot_id, status=status_filter)
    return SlotListResponse(slots=slots)
