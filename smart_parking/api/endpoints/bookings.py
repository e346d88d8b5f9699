"""Booking endpoints."""

from fastapi import APIRouter, Depends

from smart_parking.api.deps import get_booking_service
from smart_parking.schemas.booking import (
    BookingConfirmation,
    BookingCreate,
    BookingDetail,
    BookingListResponse,
    ReleaseRequest,
    ReleaseResponse,
)
from smart_parking.services.booking import BookingService

router = APIRouter()


@router.post("/book", response_model=BookingConfirmation)
async def book_slot(
    booking_data: BookingCreate,
    service: BookingService = Depends(get_booking_service),
):
    """Book a parking slot and return directions to it."""
    result = await service.book(booking_data)
    return BookingConfirmation(
        booking=result.booking,
        directions=result.directions,
        message=result.message,
    )


@router.get("/booking/{booking_id}", response_model=BookingDetail)
async def get_booking(
    booking_id: str,
    service: BookingService = Depends(get_booking_service),
):
    """Get a booking with directions to its slot."""
    booking = await service.get_booking(booking_id)
    return BookingDetail(booking=booking, directions=service.directions_for(booking))


@router.get("/bookings", response_model=BookingListResponse)
async def list_bookings(service: BookingService = Depends(get_booking_service)):
    """List all bookings, newest first."""
    bookings = await service.list_bookings()
    return BookingListResponse(bookings=bookings, count=len(bookings))


@router.post("/release", response_model=ReleaseResponse)
async def release_booking(
    release_data: ReleaseRequest,
    service: BookingService = Depends(get_booking_service),
):
    """Release a booking by slot ID or booking ID."""
    result = await service.release(
        slot_id=release_data.slot_id,
        booking_id=release_data.booking_id,
    )
    return ReleaseResponse(message=result.message, booking=result.booking)
