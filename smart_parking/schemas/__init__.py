"""Schemas package."""

from smart_parking.schemas.booking import (
    BookingConfirmation,
    BookingCreate,
    BookingDetail,
    BookingListResponse,
    BookingResponse,
    ReleaseRequest,
    ReleaseResponse,
)
from smart_parking.schemas.directions import DirectionSet, DirectionStep
from smart_parking.schemas.lot import LotListResponse, LotResponse
from smart_parking.schemas.slot import SlotListResponse, SlotResponse

__all__ = [
    "BookingConfirmation",
    "BookingCreate",
    "BookingDetail",
    "BookingListResponse",
    "BookingResponse",
    "ReleaseRequest",
    "ReleaseResponse",
    "DirectionSet",
    "DirectionStep",
    "LotListResponse",
    "LotResponse",
    "SlotListResponse",
    "SlotResponse",
]
