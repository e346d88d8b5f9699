"""Persistence store for lots, slots and bookings."""

import logging
from contextlib import contextmanager
from datetime import datetime
from typing import List, Optional

from sqlalchemy import func, select, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from smart_parking.db.models import Booking, Lot, Slot
from smart_parking.db.models.slot import SLOT_AVAILABLE, SLOT_OCCUPIED
from smart_parking.exceptions import (
    BookingIdCollisionError,
    ConflictError,
    NotFoundError,
    StoreError,
)

logger = logging.getLogger(__name__)


@contextmanager
def _store_errors(action: str):
    """Re-raise SQLAlchemy failures as StoreError."""
    try:
        yield
    except SQLAlchemyError as exc:
        logger.error(f"Store failure while trying to {action}", exc_info=True)
        raise StoreError(f"Failed to {action}") from exc


class ParkingStore:
    """Keyed reads and writes over a single session.

    Writes are flushed but not committed; callers decide when the unit of
    work ends with :meth:`commit` or :meth:`rollback`.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    # Lots and slots

    async def list_lots(self) -> List[Lot]:
        with _store_errors("list lots"):
            result = await self.session.execute(select(Lot).order_by(Lot.id))
            return list(result.scalars().all())

    async def list_slots(
        self,
        lot_id: Optional[str] = None,
        status: Optional[str] = None,
    ) -> List[Slot]:
        query = select(Slot).order_by(Slot.id)
        if lot_id:
            query = query.where(Slot.lot_id == lot_id)
        if status:
            query = query.where(Slot.status == status)

        with _store_errors("list slots"):
            result = await self.session.execute(query)
            return list(result.scalars().all())

    async def count_slots(self) -> int:
        with _store_errors("count slots"):
            result = await self.session.execute(select(func.count()).select_from(Slot))
            return result.scalar_one()

    async def get_slot(self, slot_id: str) -> Slot:
        with _store_errors("read slot"):
            result = await self.session.execute(select(Slot).where(Slot.id == slot_id))
            slot = result.scalar_one_or_none()

        if not slot:
            raise NotFoundError(f"Slot {slot_id} not found")
        return slot

    async def update_slot(self, slot_id: str, status: str, vehicle: str) -> Slot:
        slot = await self.get_slot(slot_id)
        slot.status = status
        slot.vehicle = vehicle
        with _store_errors("update slot"):
            await self.session.flush()
        return slot

    async def occupy_slot(self, slot_id: str, vehicle: str) -> None:
        """Mark a slot occupied only if it is still available.

        Raises ConflictError when another request took the slot first.
        """
        query = (
            update(Slot)
            .where(Slot.id == slot_id, Slot.status == SLOT_AVAILABLE)
            .values(status=SLOT_OCCUPIED, vehicle=vehicle)
        )
        with _store_errors("update slot"):
            result = await self.session.execute(query)

        if result.rowcount == 0:
            raise ConflictError(f"Slot {slot_id} is already booked")

    # Bookings

    async def insert_booking(self, booking: Booking) -> Booking:
        self.session.add(booking)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            logger.error(f"Booking id {booking.booking_id} already exists")
            raise BookingIdCollisionError(
                f"Booking id {booking.booking_id} already exists"
            ) from exc
        except SQLAlchemyError as exc:
            logger.error("Store failure while trying to insert booking", exc_info=True)
            raise StoreError("Failed to create booking") from exc
        return booking

    async def get_booking(self, booking_id: str) -> Booking:
        with _store_errors("read booking"):
            result = await self.session.execute(
                select(Booking).where(Booking.booking_id == booking_id)
            )
            booking = result.scalar_one_or_none()

        if not booking:
            raise NotFoundError("Booking not found")
        return booking

    async def list_bookings(self) -> List[Booking]:
        with _store_errors("list bookings"):
            result = await self.session.execute(
                select(Booking).order_by(Booking.booking_time.desc())
            )
            return list(result.scalars().all())

    async def find_latest_booking(
        self,
        slot_id: Optional[str] = None,
        booking_id: Optional[str] = None,
        status: Optional[str] = None,
    ) -> Booking:
        """Return the most recent booking matching the given filters."""
        query = select(Booking).order_by(Booking.booking_time.desc()).limit(1)
        if slot_id:
            query = query.where(Booking.slot_id == slot_id)
        if booking_id:
            query = query.where(Booking.booking_id == booking_id)
        if status:
            query = query.where(Booking.status == status)

        with _store_errors("find booking"):
            result = await self.session.execute(query)
            booking = result.scalar_one_or_none()

        if not booking:
            raise NotFoundError("Booking not found")
        return booking

    async def update_booking_status(
        self,
        booking_id: str,
        status: str,
        released_at: Optional[datetime] = None,
    ) -> Booking:
        booking = await self.get_booking(booking_id)
        booking.status = status
        booking.released_at = released_at
        with _store_errors("update booking"):
            await self.session.flush()
        return booking

    # Unit of work

    async def commit(self) -> None:
        with _store_errors("commit"):
            await self.session.commit()

    async def rollback(self) -> None:
        with _store_errors("roll back"):
            await self.session.rollback()
