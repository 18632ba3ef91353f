import httpx
import logging
import math
from typing import Optional, List

from house_search.core.config import settings
from house_search.core.errors import InvalidArgument, NotFound, ServiceUnavailable
from house_search.core.logger import logs
from house_search.models.geo_model import Coordinate, RouteResult

# OSRM answers these with a 400 status; they mean "no route", not a broken request
NO_ROUTE_CODES = {"NoRoute", "NoSegment"}

class RouteService:
    """Driving routes from an OSRM server."""

    def __init__(self, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.base_url = settings.OSRM_URL.rstrip("/")
        self.profile = settings.OSRM_PROFILE
        self.timeout = settings.UPSTREAM_TIMEOUT
        self.transport = transport

    async def route_between(self, src: Optional[List[float]], dest: Optional[List[float]]) -> RouteResult:
        """Validates raw `[lat, lng]` pairs from a request and routes between them."""
        if src is None or dest is None:
            raise InvalidArgument("Both src and dest are required")
        return await self.route(self._to_coordinate("src", src), self._to_coordinate("dest", dest))

    async def route(self, src: Coordinate, dest: Coordinate) -> RouteResult:
        if src is None or dest is None:
            raise InvalidArgument("Both src and dest are required")

        # OSRM wants lng,lat
        url = (
            f"{self.base_url}/route/v1/{self.profile}/"
            f"{src.longitude},{src.latitude};{dest.longitude},{dest.latitude}"
        )
        params = {"overview": "full", "geometries": "geojson"}
        logs.log(logging.INFO, f"Requesting route {src.latitude},{src.longitude} -> {dest.latitude},{dest.longitude}")

        async with httpx.AsyncClient(transport=self.transport, timeout=self.timeout) as client:
            try:
                resp = await client.get(url, params=params)
                data = resp.json()
            except (httpx.HTTPError, ValueError) as e:
                logs.log(logging.ERROR, f"Routing API failed: {str(e)}")
                raise ServiceUnavailable("Routing service failed") from e

        if not isinstance(data, dict):
            logs.log(logging.ERROR, f"Unexpected routing payload: {data}")
            raise ServiceUnavailable("Routing service failed")

        if data.get("code") in NO_ROUTE_CODES:
            logs.log(logging.INFO, f"No route available: {data.get('message')}")
            raise NotFound("No route found")

        if resp.is_error:
            logs.log(logging.ERROR, f"Routing API returned {resp.status_code}: {data.get('message')}")
            raise ServiceUnavailable("Routing service failed")

        routes = data.get("routes") or []
        if not routes:
            logs.log(logging.INFO, "Routing API returned zero routes")
            raise NotFound("No route found")

        best = routes[0]
        try:
            result = RouteResult(
                geometry=best["geometry"],
                duration_seconds=best["duration"],
                distance_meters=best["distance"]
            )
        except (KeyError, TypeError, ValueError) as e:
            logs.log(logging.ERROR, f"Unexpected route payload: {best}")
            raise ServiceUnavailable("Routing service failed") from e

        logs.log(logging.INFO, f"Route found: {result.distance_meters:.0f} m, {result.duration_seconds:.0f} s")
        return result

    def _to_coordinate(self, name: str, pair: List[float]) -> Coordinate:
        if len(pair) != 2 or not all(math.isfinite(v) for v in pair):
            raise InvalidArgument(f"{name} must be a [lat, lng] pair")
        lat, lng = pair
        if not (-90 <= lat <= 90 and -180 <= lng <= 180):
            raise InvalidArgument(f"{name} is out of range: {pair}")
        return Coordinate(latitude=lat, longitude=lng)
