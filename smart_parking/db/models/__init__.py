"""Database models package."""

from smart_parking.db.base import Base
from smart_parking.db.models.booking import Booking
from smart_parking.db.models.lot import Lot
from smart_parking.db.models.slot import Slot

__all__ = [
    "Base",
    "Booking",
    "Lot",
    "Slot",
]
