# Locations/models.py
from pydantic import BaseModel, ConfigDict, Field
from typing import List, Literal


class Location(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1, max_length=100)
    status: Literal["open", "closed"]
    address_lines: List[str]
    phone: str
    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)


class GeoPoint(BaseModel):
    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)
