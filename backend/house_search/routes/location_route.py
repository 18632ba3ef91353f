from fastapi import APIRouter, Depends, Request, Response
from typing import Optional

from house_search.core.config import settings
from house_search.models.geo_model import LocationResponse
from house_search.services.Location_service import LocationService

router = APIRouter(tags=["location"])

# --- Dependency Injection ---
def get_location_service() -> LocationService:
    return LocationService()

def get_client_ip(request: Request) -> Optional[str]:
    if settings.TRUST_FORWARDED_FOR:
        forwarded = request.headers.get("x-forwarded-for")
        if forwarded:
            return forwarded.split(",")[0].strip()
    return request.client.host if request.client else None

@router.get("/ipLocation", response_model=LocationResponse)
async def get_ip_location_endpoint(
    response: Response,
    client_ip: Optional[str] = Depends(get_client_ip),
    service: LocationService = Depends(get_location_service)
):
    """
    Best-effort location of the caller. Falls back to New Delhi when the
    provider cannot place the address; X-Location-Source tells which.
    """
    info, source = await service.resolve_with_source(client_ip)
    response.headers["X-Location-Source"] = source
    return LocationResponse.from_info(info)
