from fastapi import APIRouter, Depends

from house_search.models.geo_model import RouteRequest, RouteResponse
from house_search.services.Route_service import RouteService

router = APIRouter(tags=["route"])

# --- Dependency Injection ---
def get_route_service() -> RouteService:
    return RouteService()

@router.post("/route", response_model=RouteResponse)
async def get_route_endpoint(
    request: RouteRequest,
    service: RouteService = Depends(get_route_service)
):
    result = await service.route_between(request.src, request.dest)
    return RouteResponse.from_result(result)
