from fastapi import APIRouter, Depends, Query
from typing import List, Optional

from house_search.models.geo_model import HouseResponse
from house_search.services.Houses_service import HousesService

router = APIRouter(tags=["houses"])

# --- Dependency Injection ---
def get_houses_service() -> HousesService:
    return HousesService()

@router.get("/houses", response_model=List[HouseResponse])
async def get_houses_endpoint(
    lat: Optional[float] = Query(None, description="Search center latitude"),
    lng: Optional[float] = Query(None, description="Search center longitude"),
    radius: Optional[float] = Query(None, description="Search radius in meters"),
    service: HousesService = Depends(get_houses_service)
):
    """Mock listings scattered uniformly inside the search circle."""
    return service.get_houses(lat, lng, radius)
