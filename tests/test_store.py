"""Tests for the persistence store."""

from datetime import datetime, timedelta, timezone

import pytest
from sqlalchemy.exc import OperationalError

from smart_parking.db.models import Booking
from smart_parking.db.store import ParkingStore
from smart_parking.exceptions import (
    BookingIdCollisionError,
    ConflictError,
    NotFoundError,
    StoreError,
)


def make_booking(booking_id: str, slot_id: str = "S001", booking_time=None) -> Booking:
    booking_time = booking_time or datetime(2026, 1, 1, 9, 0, tzinfo=timezone.utc)
    return Booking(
        booking_id=booking_id,
        slot_id=slot_id,
        lot_id="lot-1",
        lot_name="Lot A",
        slot_type="bike",
        vehicle_number="KA01AB1234",
        hours=2,
        rate=1.5,
        total_cost=3.0,
        status="confirmed",
        booking_time=booking_time,
        expiry_time=booking_time + timedelta(hours=2),
    )


async def test_get_slot_missing(store: ParkingStore):
    with pytest.raises(NotFoundError):
        await store.get_slot("S999")


async def test_list_slots_filters(store: ParkingStore):
    """Test filtering slots by lot and status."""
    assert len(await store.list_slots()) == 120
    lot_slots = await store.list_slots(lot_id="lot-2")
    assert [s.id for s in lot_slots] == [f"S{n:03d}" for n in range(25, 49)]

    await store.update_slot("S030", "occupied", "MH12XY0001")
    await store.commit()

    occupied = await store.list_slots(status="occupied")
    assert [s.id for s in occupied] == ["S030"]
    assert occupied[0].vehicle == "MH12XY0001"


async def test_update_slot_missing(store: ParkingStore):
    with pytest.raises(NotFoundError):
        await store.update_slot("S999", "occupied", "X")


async def test_occupy_slot_only_from_available(store: ParkingStore):
    """Test the compare-and-swap on slot status."""
    await store.occupy_slot("S005", "DL3CAB0001")
    await store.commit()

    slot = await store.get_slot("S005")
    assert slot.status == "occupied"
    assert slot.vehicle == "DL3CAB0001"

    with pytest.raises(ConflictError):
        await store.occupy_slot("S005", "DL3CAB0002")

    slot = await store.get_slot("S005")
    assert slot.vehicle == "DL3CAB0001"


async def test_insert_and_get_booking(store: ParkingStore):
    await store.insert_booking(make_booking("BK-1"))
    await store.commit()

    booking = await store.get_booking("BK-1")
    assert booking.slot_id == "S001"
    assert booking.total_cost == 3.0
    assert booking.booking_time.tzinfo is not None

    with pytest.raises(NotFoundError):
        await store.get_booking("BK-missing")


async def test_insert_duplicate_booking_id(store: ParkingStore, seeded_session):
    """Test that a clashing booking id surfaces as a retryable store error."""
    await store.insert_booking(make_booking("BK-dup"))
    await store.commit()
    seeded_session.expunge_all()

    with pytest.raises(BookingIdCollisionError) as exc_info:
        await store.insert_booking(make_booking("BK-dup"))
    assert isinstance(exc_info.value, StoreError)
    assert exc_info.value.status_code == 503
    await store.rollback()


async def test_list_bookings_newest_first(store: ParkingStore):
    base = datetime(2026, 1, 1, 9, 0, tzinfo=timezone.utc)
    await store.insert_booking(make_booking("BK-old", booking_time=base))
    await store.insert_booking(make_booking("BK-new", booking_time=base + timedelta(hours=3)))
    await store.insert_booking(make_booking("BK-mid", booking_time=base + timedelta(hours=1)))
    await store.commit()

    bookings = await store.list_bookings()
    assert [b.booking_id for b in bookings] == ["BK-new", "BK-mid", "BK-old"]


async def test_find_latest_booking(store: ParkingStore):
    """Test that the latest booking for a slot wins."""
    base = datetime(2026, 1, 1, 9, 0, tzinfo=timezone.utc)
    await store.insert_booking(make_booking("BK-1", booking_time=base))
    await store.insert_booking(make_booking("BK-2", booking_time=base + timedelta(hours=5)))
    await store.insert_booking(make_booking("BK-3", slot_id="S002", booking_time=base + timedelta(hours=9)))
    await store.commit()

    assert (await store.find_latest_booking(slot_id="S001")).booking_id == "BK-2"
    assert (await store.find_latest_booking(booking_id="BK-1")).booking_id == "BK-1"

    await store.update_booking_status("BK-2", "released", released_at=base + timedelta(hours=6))
    await store.commit()

    latest_active = await store.find_latest_booking(slot_id="S001", status="confirmed")
    assert latest_active.booking_id == "BK-1"

    with pytest.raises(NotFoundError):
        await store.find_latest_booking(slot_id="S050")


async def test_update_booking_status(store: ParkingStore):
    released_at = datetime(2026, 1, 1, 10, 0, tzinfo=timezone.utc)
    await store.insert_booking(make_booking("BK-1"))
    await store.commit()

    booking = await store.update_booking_status("BK-1", "released", released_at=released_at)
    await store.commit()

    assert booking.status == "released"
    assert booking.released_at == released_at

    with pytest.raises(NotFoundError):
        await store.update_booking_status("BK-missing", "released")


async def test_driver_failure_becomes_store_error(store: ParkingStore, monkeypatch):
    """Test that SQLAlchemy errors are not leaked to callers."""

    async def failing_execute(*args, **kwargs):
        raise OperationalError("SELECT 1", {}, Exception("disk I/O error"))

    monkeypatch.setattr(store.session, "execute", failing_execute)

    with pytest.raises(StoreError) as exc_info:
        await store.list_lots()
    assert exc_info.value.public_message == "Database error"
