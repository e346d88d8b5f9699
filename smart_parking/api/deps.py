"""Shared API dependencies."""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from smart_parking.db.session import get_db
from smart_parking.db.store import ParkingStore
from smart_parking.services.booking import BookingService


async def get_store(db: AsyncSession = Depends(get_db)) -> ParkingStore:
    """Store bound to the request's session."""
    return ParkingStore(db)


async def get_booking_service(store: ParkingStore = Depends(get_store)) -> BookingService:
    """Booking service bound to the request's store."""
    return BookingService(store)
