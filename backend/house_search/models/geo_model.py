from pydantic import BaseModel, Field
from typing import Optional, List, Dict, Any

# --- Domain Models ---
class Coordinate(BaseModel):
    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)

    model_config = {"frozen": True}

class HouseListing(BaseModel):
    coordinate: Coordinate
    price: int = Field(..., ge=200000, lt=700000)

class LocationInfo(BaseModel):
    coordinate: Coordinate
    city: str
    region: str
    country: str

class RouteResult(BaseModel):
    # GeoJSON LineString as emitted by OSRM: coordinates are [lng, lat]
    geometry: Dict[str, Any]
    duration_seconds: float
    distance_meters: float

# --- API Request/Response Models ---
class HouseResponse(BaseModel):
    lat: float
    lng: float
    price: int

    @classmethod
    def from_listing(cls, listing: HouseListing) -> "HouseResponse":
        return cls(
            lat=listing.coordinate.latitude,
            lng=listing.coordinate.longitude,
            price=listing.price
        )

class LocationResponse(BaseModel):
    latitude: float
    longitude: float
    city: str
    region: str
    country: str

    @classmethod
    def from_info(cls, info: LocationInfo) -> "LocationResponse":
        return cls(
            latitude=info.coordinate.latitude,
            longitude=info.coordinate.longitude,
            city=info.city,
            region=info.region,
            country=info.country
        )

class RouteRequest(BaseModel):
    src: Optional[List[float]] = Field(None, description="Start point as [lat, lng]")
    dest: Optional[List[float]] = Field(None, description="End point as [lat, lng]")

class RouteResponse(BaseModel):
    geometry: Dict[str, Any]
    duration: float
    distance: float

    @classmethod
    def from_result(cls, result: RouteResult) -> "RouteResponse":
        return cls(
            geometry=result.geometry,
            duration=result.duration_seconds,
            distance=result.distance_meters
        )
