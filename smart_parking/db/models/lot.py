"""Lot model."""

from sqlalchemy import Column, String
from sqlalchemy.orm import relationship

from smart_parking.db.base import Base


class Lot(Base):
    """Named parking area. Created at seed time and never modified."""

    __tablename__ = "lots"

    id = Column(String(32), primary_key=True)
    name = Column(String(255), nullable=False)

    # Relationships
    slots = relationship("Slot", back_populates="lot")

    def __repr__(self):
        return f"<Lot(id={self.id}, name={self.name})>"
