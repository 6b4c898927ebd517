# GREENCROSS/routers/geo.py
from typing import Optional, Sequence
import math

from GREENCROSS.Locations.models import GeoPoint, Location

EARTH_RADIUS_KM = 6371


def haversine(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Great-circle distance in km between two coordinates."""
    dlat = math.radians(lat2 - lat1)
    dlon = math.radians(lon2 - lon1)
    a = (
        math.sin(dlat / 2) ** 2
        + math.cos(math.radians(lat1))
        * math.cos(math.radians(lat2))
        * math.sin(dlon / 2) ** 2
    )
    return EARTH_RADIUS_KM * (2 * math.atan2(math.sqrt(a), math.sqrt(1 - a)))


def distance_in_km(location: Location, point: GeoPoint) -> float:
    return haversine(location.latitude, location.longitude, point.latitude, point.longitude)


def find_nearest_location(locations: Sequence[Location], point: GeoPoint) -> Optional[Location]:
    """
    Location closest to `point`, or None for an empty directory.
    Ties keep the first location in input order.
    """
    if not locations:
        return None

    nearest = locations[0]
    min_distance = distance_in_km(nearest, point)
    for location in locations[1:]:
        d = distance_in_km(location, point)
        if d < min_distance:
            min_distance = d
            nearest = location
    return nearest
