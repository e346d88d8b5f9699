"""Step-by-step directions from a lot's street address to a slot."""

from typing import Dict, List, NamedTuple, Optional, Tuple
from urllib.parse import quote

from smart_parking.schemas.directions import DirectionSet, DirectionStep

GOOGLE_MAPS_SEARCH_URL = "https://www.google.com/maps/search/?api=1&query="
ESTIMATED_TIME = "2-3 minutes"


class LotLocation(NamedTuple):
    address: str
    entrance: str
    landmarks: List[str]


LOT_LOCATIONS: Dict[str, LotLocation] = {
    "Lot A": LotLocation(
        address="123 Main Street, Downtown",
        entrance="North Entrance",
        landmarks=["next to City Hall", "opposite Metro Station"],
    ),
    "Lot B": LotLocation(
        address="456 Park Avenue, Midtown",
        entrance="East Entrance",
        landmarks=["near Shopping Mall", "beside Park Plaza"],
    ),
    "Lot C": LotLocation(
        address="789 Commerce Road, Business District",
        entrance="South Entrance",
        landmarks=["across from Office Tower", "adjacent to Convention Center"],
    ),
    "Rooftop": LotLocation(
        address="321 Building Heights, City Center",
        entrance="Elevator Access - Level 5",
        landmarks=["Top floor of Central Plaza", "via Express Elevator"],
    ),
    "Basement 1": LotLocation(
        address="654 Underground Way, Sublevel District",
        entrance="Underground Access - Level B1",
        landmarks=["Below Ground Floor", "via Escalator or Elevator"],
    ),
}

# (highest slot number, zone, location within the lot)
ZONES: List[Tuple[int, str, str]] = [
    (30, "Zone A", "First two rows near entrance"),
    (60, "Zone B", "Middle section"),
    (90, "Zone C", "Back section"),
]
FAR_ZONE = ("Zone D", "Far end section")


def get_lot_location(lot_name: str) -> LotLocation:
    """Look up a known lot, falling back to a generic location."""
    location = LOT_LOCATIONS.get(lot_name)
    if location is None:
        return LotLocation(
            address=f"{lot_name} Parking Area",
            entrance="Main Entrance",
            landmarks=["Follow parking signs"],
        )
    return location


def parse_slot_number(slot_id: str) -> Optional[int]:
    """Return the numeric part of an id like ``S042``, or None."""
    digits = slot_id[1:] if slot_id.startswith("S") else slot_id
    try:
        return int(digits)
    except ValueError:
        return None


def classify_zone(slot_number: Optional[int]) -> Tuple[str, str]:
    """Map a slot number to its zone and location description."""
    if slot_number is not None:
        for upper, zone, location in ZONES:
            if slot_number <= upper:
                return zone, location
    return FAR_ZONE


def maps_link(address: str) -> str:
    """Google Maps search URL for an address."""
    return GOOGLE_MAPS_SEARCH_URL + quote(address, safe="!~*'()")


def generate_directions(slot_id: str, lot_name: str, slot_type: str) -> DirectionSet:
    """Build directions to ``slot_id`` in ``lot_name``.

    Pure function: the same arguments always give the same result.
    """
    location = get_lot_location(lot_name)
    zone, zone_location = classify_zone(parse_slot_number(slot_id))

    directions = [
        DirectionStep(
            step=1,
            instruction=f"Navigate to {location.address}",
            details=f"Your destination is {location.address}",
            landmarks=list(location.landmarks) or None,
        ),
        DirectionStep(
            step=2,
            instruction=f"Enter through {location.entrance}",
            details=f'Look for signs indicating "{location.entrance}"',
        ),
        DirectionStep(
            step=3,
            instruction=f"Find {zone} ({zone_location})",
            details=(
                f"Follow the overhead signs to {zone}. "
                f"Your slot {slot_id} is located in {zone_location}"
            ),
        ),
        DirectionStep(
            step=4,
            instruction=f"Locate Slot {slot_id}",
            details=(
                f"Slot {slot_id} is marked with clear signage. "
                f"It's a {slot_type.upper()} parking space."
            ),
        ),
        DirectionStep(
            step=5,
            instruction="Park your vehicle",
            details=(
                f"Confirm you're in Slot {slot_id} before exiting your vehicle. "
                "The slot is reserved for your booking."
            ),
        ),
    ]

    return DirectionSet(
        slot_id=slot_id,
        lot_name=lot_name,
        slot_type=slot_type,
        address=location.address,
        entrance=location.entrance,
        zone=zone,
        directions=directions,
        landmarks=list(location.landmarks),
        estimated_time=ESTIMATED_TIME,
        google_maps_link=maps_link(location.address),
    )
