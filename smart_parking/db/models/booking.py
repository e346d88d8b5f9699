"""Booking model."""

from sqlalchemy import CheckConstraint, Column, Float, ForeignKey, Integer, String

from smart_parking.db.base import Base, UTCDateTime

BOOKING_CONFIRMED = "confirmed"
BOOKING_RELEASED = "released"


class Booking(Base):
    """Time-bounded reservation of one slot by one vehicle."""

    __tablename__ = "bookings"

    booking_id = Column(String(64), primary_key=True)
    slot_id = Column(String(16), ForeignKey("slots.id"), nullable=False, index=True)
    lot_id = Column(String(32), nullable=True)
    lot_name = Column(String(255), nullable=True)
    slot_type = Column(String(16), nullable=True)
    vehicle_number = Column(String(64), nullable=False)
    hours = Column(Integer, nullable=False)
    rate = Column(Float, nullable=False)
    total_cost = Column(Float, nullable=False)
    status = Column(String(16), nullable=False, default=BOOKING_CONFIRMED)

    # Time information
    booking_time = Column(UTCDateTime, nullable=False, index=True)
    expiry_time = Column(UTCDateTime, nullable=False)
    released_at = Column(UTCDateTime, nullable=True)

    # Constraints
    __table_args__ = (
        CheckConstraint("status IN ('confirmed', 'released')", name="check_booking_status"),
        CheckConstraint("hours > 0", name="check_booking_hours"),
    )

    def __repr__(self):
        return f"<Booking(booking_id={self.booking_id}, slot_id={self.slot_id}, status={self.status})>"
