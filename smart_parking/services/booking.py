"""Booking lifecycle: reserve a slot, look bookings up, release them."""

import logging
import math
import time
from dataclasses import dataclass
from datetime import timedelta
from typing import List, Optional
from uuid import uuid4

from smart_parking.db.base import utcnow
from smart_parking.db.models import Booking, Lot, Slot
from smart_parking.db.models.booking import BOOKING_CONFIRMED, BOOKING_RELEASED
from smart_parking.db.models.slot import SLOT_AVAILABLE
from smart_parking.db.store import ParkingStore
from smart_parking.exceptions import ConflictError, ParkingError, ValidationError
from smart_parking.schemas.booking import MAX_BOOKING_HOURS, MAX_HOURLY_RATE, BookingCreate
from smart_parking.schemas.directions import DirectionSet
from smart_parking.services.directions import generate_directions

logger = logging.getLogger(__name__)

REQUIRED_FIELDS_MESSAGE = "Missing required fields: slotId, lotName, vehicleNumber, hours"


def new_booking_id() -> str:
    """Generate a booking id such as ``BK-1760000000000-3f2a9c0d1e4b``.

    48 random bits per millisecond; a clash is caught by the primary key.
    """
    return f"BK-{int(time.time() * 1000)}-{uuid4().hex[:12]}"


@dataclass
class BookingResult:
    booking: Booking
    directions: DirectionSet
    message: str


@dataclass
class ReleaseResult:
    booking: Booking
    message: str


class BookingService:
    """Orchestrates bookings on top of a :class:`ParkingStore`.

    Each mutating operation is one unit of work: either every write is
    committed or the session is rolled back.
    """

    def __init__(self, store: ParkingStore):
        self.store = store

    async def list_lots(self) -> List[Lot]:
        return await self.store.list_lots()

    async def list_slots(
        self,
        lot_id: Optional[str] = None,
        status: Optional[str] = None,
    ) -> List[Slot]:
        return await self.store.list_slots(lot_id=lot_id, status=status)

    async def book(self, request: BookingCreate) -> BookingResult:
        """Reserve a slot for a vehicle.

        The slot moves to ``occupied`` through a compare-and-swap, so two
        concurrent requests for the same slot cannot both succeed.
        """
        if not (request.slot_id and request.lot_name and request.vehicle_number and request.hours):
            raise ValidationError(REQUIRED_FIELDS_MESSAGE)
        if request.hours <= 0:
            raise ValidationError("hours must be a positive integer")
        if request.hours > MAX_BOOKING_HOURS:
            raise ValidationError(f"hours must not exceed {MAX_BOOKING_HOURS}")

        slot = await self.store.get_slot(request.slot_id)
        if slot.status != SLOT_AVAILABLE:
            raise ConflictError(f"Slot {slot.id} is already booked")

        rate = request.rate if request.rate is not None else slot.rate
        if not math.isfinite(rate) or not 0 <= rate <= MAX_HOURLY_RATE:
            raise ValidationError(f"rate must be between 0 and {MAX_HOURLY_RATE:g}")

        booking_time = utcnow()
        booking = Booking(
            booking_id=new_booking_id(),
            slot_id=slot.id,
            lot_id=request.lot_id or slot.lot_id,
            lot_name=request.lot_name or slot.lot_name,
            slot_type=request.slot_type or slot.type,
            vehicle_number=request.vehicle_number,
            hours=request.hours,
            rate=rate,
            total_cost=rate * request.hours,
            status=BOOKING_CONFIRMED,
            booking_time=booking_time,
            expiry_time=booking_time + timedelta(hours=request.hours),
        )

        try:
            await self.store.occupy_slot(slot.id, request.vehicle_number)
            await self.store.insert_booking(booking)
            await self.store.commit()
        except ParkingError:
            await self.store.rollback()
            raise

        logger.info(
            f"Booked slot {slot.id} for {booking.vehicle_number} "
            f"({booking.hours}h, total {booking.total_cost}) as {booking.booking_id}"
        )
        return BookingResult(
            booking=booking,
            directions=self.directions_for(booking),
            message=f"Booking confirmed! Slot {slot.id} is reserved for {booking.hours} hour(s).",
        )

    async def release(
        self,
        slot_id: Optional[str] = None,
        booking_id: Optional[str] = None,
    ) -> ReleaseResult:
        """Release the latest active booking for a slot or a booking id.

        ``slot_id`` takes precedence when both are given. A booking that is
        already released is not found again.
        """
        if not slot_id and not booking_id:
            raise ValidationError("Either slotId or bookingId is required")

        if slot_id:
            booking = await self.store.find_latest_booking(
                slot_id=slot_id, status=BOOKING_CONFIRMED
            )
        else:
            booking = await self.store.find_latest_booking(
                booking_id=booking_id, status=BOOKING_CONFIRMED
            )

        try:
            await self.store.update_booking_status(
                booking.booking_id, BOOKING_RELEASED, released_at=utcnow()
            )
            await self.store.update_slot(booking.slot_id, SLOT_AVAILABLE, "")
            await self.store.commit()
        except ParkingError:
            await self.store.rollback()
            raise

        logger.info(f"Released booking {booking.booking_id} on slot {booking.slot_id}")
        return ReleaseResult(
            booking=booking,
            message=f"Slot {booking.slot_id} has been released",
        )

    async def get_booking(self, booking_id: str) -> Booking:
        return await self.store.get_booking(booking_id)

    async def list_bookings(self) -> List[Booking]:
        return await self.store.list_bookings()

    @staticmethod
    def directions_for(booking: Booking) -> DirectionSet:
        return generate_directions(booking.slot_id, booking.lot_name, booking.slot_type)
