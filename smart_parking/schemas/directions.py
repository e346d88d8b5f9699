"""Directions schemas."""

from typing import List, Optional

from pydantic import model_serializer

from smart_parking.schemas.base import CamelModel


class DirectionStep(CamelModel):
    """One numbered instruction on the way to a slot.

    ``landmarks`` is only emitted for steps that have them.
    """

    step: int
    instruction: str
    details: str
    landmarks: Optional[List[str]] = None

    @model_serializer(mode="wrap")
    def drop_missing_landmarks(self, handler):
        data = handler(self)
        if self.landmarks is None:
            data.pop("landmarks", None)
        return data


class DirectionSet(CamelModel):
    """Route description from the street to a slot."""

    slot_id: str
    lot_name: str
    slot_type: str
    address: str
    entrance: str
    zone: str
    directions: List[DirectionStep]
    landmarks: List[str]
    estimated_time: str
    google_maps_link: str
