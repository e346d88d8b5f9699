"""Sample data for an empty database."""

import logging
from typing import List, Sequence, Tuple

from sqlalchemy.ext.asyncio import AsyncSession

from smart_parking.db.models import Lot, Slot
from smart_parking.db.models.slot import SLOT_AVAILABLE, SLOT_TYPES
from smart_parking.db.store import ParkingStore

logger = logging.getLogger(__name__)

LOT_NAMES = ("Lot A", "Lot B", "Lot C", "Rooftop", "Basement 1")
SLOTS_PER_LOT = 24
RATE_BY_TYPE = {
    "car": 3.0,
    "bike": 1.5,
    "ev": 4.0,
    "accessible": 2.5,
}


def build_seed_data(
    lot_names: Sequence[str] = LOT_NAMES,
    slots_per_lot: int = SLOTS_PER_LOT,
) -> Tuple[List[Lot], List[Slot]]:
    """Build the deterministic sample lots and slots.

    Slot ids run ``S001``, ``S002``... across all lots. The slot type is
    picked from the position within the lot offset by the running id
    counter.
    """
    lots = [Lot(id=f"lot-{i + 1}", name=name) for i, name in enumerate(lot_names)]
    slots = []

    counter = 1
    for lot in lots:
        for i in range(slots_per_lot):
            slot_type = SLOT_TYPES[(i + counter) % len(SLOT_TYPES)]
            slots.append(
                Slot(
                    id=f"S{counter:03d}",
                    lot_id=lot.id,
                    lot_name=lot.name,
                    type=slot_type,
                    rate=RATE_BY_TYPE[slot_type],
                    status=SLOT_AVAILABLE,
                    vehicle="",
                )
            )
            counter += 1

    return lots, slots


async def seed_database(session: AsyncSession) -> bool:
    """Insert sample lots and slots if the slots table is empty.

    Returns True when data was written.
    """
    store = ParkingStore(session)
    if await store.count_slots() > 0:
        logger.info("Slots already present, skipping seed")
        return False

    logger.info("Seeding database with sample lots and slots")
    lots, slots = build_seed_data()
    session.add_all(lots)
    session.add_all(slots)
    await store.commit()
    logger.info(f"Seed complete: {len(lots)} lots, {len(slots)} slots")
    return True
