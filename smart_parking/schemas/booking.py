"""Booking schemas."""

from datetime import datetime
from typing import List, Optional

from pydantic import Field, field_validator

from smart_parking.schemas.base import CamelModel
from smart_parking.schemas.directions import DirectionSet

# One year
MAX_BOOKING_HOURS = 24 * 365
MAX_HOURLY_RATE = 1000.0


class BookingCreate(CamelModel):
    """Schema for a booking request.

    Required fields are checked by the booking service so that a missing
    field is reported the same way regardless of how it is missing.
    """

    slot_id: Optional[str] = None
    lot_name: Optional[str] = None
    lot_id: Optional[str] = None
    slot_type: Optional[str] = Field(None, pattern="^(car|bike|ev|accessible)$")
    vehicle_number: Optional[str] = Field(None, max_length=64)
    hours: Optional[int] = Field(None, le=MAX_BOOKING_HOURS)
    rate: Optional[float] = Field(None, ge=0.0, le=MAX_HOURLY_RATE, allow_inf_nan=False)

    @field_validator("slot_type", mode="before")
    @classmethod
    def empty_slot_type_is_unset(cls, value):
        """An empty slot type means "use the slot's own type"."""
        if value == "":
            return None
        return value


class ReleaseRequest(CamelModel):
    """Schema for a release request. One selector is required."""

    slot_id: Optional[str] = None
    booking_id: Optional[str] = None


class BookingResponse(CamelModel):
    """Schema for booking response."""

    booking_id: str
    slot_id: str
    lot_id: Optional[str]
    lot_name: Optional[str]
    slot_type: Optional[str]
    vehicle_number: str
    hours: int
    rate: float
    total_cost: float
    status: str
    booking_time: datetime
    expiry_time: datetime
    released_at: Optional[datetime] = None


class BookingConfirmation(CamelModel):
    """Schema for a successful booking."""

    success: bool = True
    booking: BookingResponse
    directions: DirectionSet
    message: str


class BookingDetail(CamelModel):
    """Schema for a booking with directions to its slot."""

    success: bool = True
    booking: BookingResponse
    directions: DirectionSet


class BookingListResponse(CamelModel):
    """Schema for the booking listing."""

    success: bool = True
    bookings: List[BookingResponse]
    count: int


class ReleaseResponse(CamelModel):
    """Schema for a released booking."""

    success: bool = True
    message: str
    booking: BookingResponse
