import pytest

from GREENCROSS.Locations.locations import LOCATIONS
from GREENCROSS.Locations.models import GeoPoint, Location
from GREENCROSS.routers.geo import distance_in_km, find_nearest_location, haversine


def _location(id, lat, lon):
    return Location(
        id=id,
        name=id.title(),
        status="open",
        address_lines=["1 Test St"],
        phone="555-0000",
        latitude=lat,
        longitude=lon,
    )


def test_haversine_same_point_is_zero():
    assert haversine(29.7569, -95.3623, 29.7569, -95.3623) == 0


def test_haversine_known_distance():
    # one degree of latitude on a 6371 km sphere
    assert haversine(0, 0, 1, 0) == pytest.approx(111.195, abs=0.01)


def test_haversine_is_symmetric():
    a = haversine(29.8896, -95.4118, 29.7389, -95.4971)
    b = haversine(29.7389, -95.4971, 29.8896, -95.4118)
    assert a == pytest.approx(b)


def test_empty_directory_has_no_nearest():
    assert find_nearest_location([], GeoPoint(latitude=29.7, longitude=-95.4)) is None


@pytest.mark.parametrize("location", LOCATIONS, ids=lambda loc: loc.id)
def test_exact_coordinates_return_that_location(location):
    point = GeoPoint(latitude=location.latitude, longitude=location.longitude)
    assert find_nearest_location(LOCATIONS, point) == location
    assert distance_in_km(location, point) == 0


def test_nearest_is_minimum_distance():
    # Galleria area, west of downtown
    point = GeoPoint(latitude=29.74, longitude=-95.46)
    nearest = find_nearest_location(LOCATIONS, point)
    distances = {loc.id: distance_in_km(loc, point) for loc in LOCATIONS}
    assert nearest.id == min(distances, key=distances.get)
    assert nearest.id == "westheimer"


def test_ties_keep_first_location():
    first = _location("first", 10.0, 10.0)
    second = _location("second", 10.0, 10.0)
    point = GeoPoint(latitude=11.0, longitude=10.0)
    assert find_nearest_location([first, second], point) is first
    assert find_nearest_location([second, first], point) is second
