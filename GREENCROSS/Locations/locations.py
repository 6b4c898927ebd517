# Locations/locations.py
from typing import List, Optional

from GREENCROSS.Locations.models import Location

# ✅ Pickup points around Houston
LOCATIONS: List[Location] = [
    Location(
        id="houston-main",
        name="GreenCross Houston",
        status="open",
        address_lines=["9030 North Fwy", "Houston, TX 77037"],
        phone="(713) 555-0100",
        latitude=29.8896,
        longitude=-95.4118,
    ),
    Location(
        id="midtown",
        name="GreenCross Midtown",
        status="open",
        address_lines=["1200 Main St", "Houston, TX 77002"],
        phone="(713) 555-0123",
        latitude=29.7569,
        longitude=-95.3623,
    ),
    Location(
        id="westheimer",
        name="GreenCross Westheimer",
        status="open",
        address_lines=["6400 Westheimer Rd", "Houston, TX 77057"],
        phone="(713) 555-0199",
        latitude=29.7389,
        longitude=-95.4971,
    ),
]


def get_location_by_id(location_id: str) -> Optional[Location]:
    for location in LOCATIONS:
        if location.id == location_id:
            return location
    return None


def get_location_by_name(name: str) -> Optional[Location]:
    """Preorder forms reference pickup points by display name."""
    for location in LOCATIONS:
        if location.name == name:
            return location
    return None
