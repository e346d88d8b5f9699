"""Slot model."""

from sqlalchemy import CheckConstraint, Column, Float, ForeignKey, String
from sqlalchemy.orm import relationship

from smart_parking.db.base import Base

SLOT_TYPES = ("car", "bike", "ev", "accessible")

SLOT_AVAILABLE = "available"
SLOT_OCCUPIED = "occupied"


class Slot(Base):
    """Individually bookable parking space."""

    __tablename__ = "slots"

    id = Column(String(16), primary_key=True)
    lot_id = Column(String(32), ForeignKey("lots.id"), nullable=False)
    # Copied from the lot
    lot_name = Column(String(255), nullable=False)
    type = Column(String(16), nullable=False)
    rate = Column(Float, nullable=False)
    status = Column(String(16), nullable=False, default=SLOT_AVAILABLE)
    vehicle = Column(String(64), nullable=False, default="")

    # Constraints
    __table_args__ = (
        CheckConstraint("type IN ('car', 'bike', 'ev', 'accessible')", name="check_slot_type"),
        CheckConstraint("status IN ('available', 'occupied')", name="check_slot_status"),
    )

    # Relationships
    lot = relationship("Lot", back_populates="slots")

    def __repr__(self):
        return f"<Slot(id={self.id}, status={self.status})>"
