# Locations/directory.py
import logging

from fastapi import APIRouter, HTTPException, Query

from GREENCROSS.Locations.locations import LOCATIONS, get_location_by_id
from GREENCROSS.Locations.models import GeoPoint, Location
from GREENCROSS.routers.geo import distance_in_km, find_nearest_location

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/locations", tags=["locations"])


@router.get("", response_model=dict)
async def list_locations():
    return {"data": [location.model_dump() for location in LOCATIONS]}


# ==============================
# PUBLIC: NEAREST PICKUP POINT
# ==============================
@router.get("/nearest", response_model=dict)
async def get_nearest_location(
    latitude: float = Query(..., ge=-90, le=90),
    longitude: float = Query(..., ge=-180, le=180),
):
    """
    Nearest pickup location to the caller's position (great-circle distance).
    """
    point = GeoPoint(latitude=latitude, longitude=longitude)
    nearest = find_nearest_location(LOCATIONS, point)
    if nearest is None:
        raise HTTPException(status_code=404, detail="No pickup locations available")

    distance = distance_in_km(nearest, point)
    logger.debug("Nearest location to (%s, %s) is %s (%.2fkm)", latitude, longitude, nearest.id, distance)
    return {
        "location": nearest.model_dump(),
        "distance_km": round(distance, 3),
    }


@router.get("/{location_id}", response_model=Location)
async def get_location(location_id: str):
    location = get_location_by_id(location_id)
    if location is None:
        raise HTTPException(status_code=404, detail="Location not found")
    return location
