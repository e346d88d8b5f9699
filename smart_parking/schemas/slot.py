"""Slot schemas."""

from typing import List

from smart_parking.schemas.base import CamelModel


class SlotResponse(CamelModel):
    """Schema for slot response."""

    id: str
    lot_id: str
    lot_name: str
    type: str
    rate: float
    status: str
    vehicle: str = ""


class SlotListResponse(CamelModel):
    """Schema for the slot listing."""

    success: bool = True
    slots: List[SlotResponse]
