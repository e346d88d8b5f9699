"""Lot schemas."""

from typing import List

from smart_parking.schemas.base import CamelModel


class LotResponse(CamelModel):
    """Schema for lot response."""

    id: str
    name: str


class LotListResponse(CamelModel):
    """Schema for the lot listing."""

    success: bool = True
    lots: List[LotResponse]
