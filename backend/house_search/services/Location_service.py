import httpx
import ipaddress
import logging
from typing import Optional, Tuple

from house_search.core.config import settings
from house_search.core.errors import ServiceUnavailable
from house_search.core.logger import logs
from house_search.models.geo_model import Coordinate, LocationInfo

FALLBACK_LOCATION = LocationInfo(
    coordinate=Coordinate(latitude=28.6139, longitude=77.2090),
    city="New Delhi",
    region="National Capital Territory of Delhi",
    country="India"
)

def _strip_port(raw: str) -> str:
    """Drops a trailing port: `1.2.3.4:443` and `[::1]:443` both carry one."""
    if raw.startswith("["):
        return raw[1:].split("]", 1)[0]
    if raw.count(":") == 1:
        return raw.split(":", 1)[0]
    return raw

class LocationService:
    """Resolves a client IP to a location through ip-api.com."""

    def __init__(self, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.base_url = settings.IP_LOCATION_URL
        self.timeout = settings.UPSTREAM_TIMEOUT
        self.transport = transport

    async def resolve(self, client_ip: Optional[str] = None) -> LocationInfo:
        info, _ = await self.resolve_with_source(client_ip)
        return info

    async def resolve_with_source(self, client_ip: Optional[str] = None) -> Tuple[LocationInfo, str]:
        """
        Same as `resolve`, also reporting whether the answer came from the
        provider ("lookup") or is the built-in default ("fallback").
        """
        hint = self._ip_hint(client_ip)
        if hint is None:
            logs.log(logging.INFO, f"Client IP {client_ip} is not publicly routable, using fallback location")
            return FALLBACK_LOCATION, "fallback"

        url = f"{self.base_url.rstrip('/')}/{hint}" if hint else self.base_url
        logs.log(logging.INFO, f"Looking up location for IP '{hint or 'request origin'}'")

        async with httpx.AsyncClient(transport=self.transport, timeout=self.timeout) as client:
            try:
                resp = await client.get(url)
                resp.raise_for_status()
                data = resp.json()
            except (httpx.HTTPError, ValueError) as e:
                logs.log(logging.ERROR, f"IP location API failed: {str(e)}")
                raise ServiceUnavailable("Failed to fetch location") from e

        if not isinstance(data, dict):
            logs.log(logging.ERROR, f"Unexpected IP location payload: {data}")
            raise ServiceUnavailable("Failed to fetch location")

        if data.get("status") == "fail":
            logs.log(logging.WARNING, f"IP location lookup reported failure: {data.get('message')}")
            return FALLBACK_LOCATION, "fallback"

        try:
            info = LocationInfo(
                coordinate=Coordinate(latitude=data["lat"], longitude=data["lon"]),
                city=data.get("city") or "",
                region=data.get("regionName") or "",
                country=data.get("country") or ""
            )
        except (KeyError, TypeError, ValueError) as e:
            logs.log(logging.ERROR, f"Unexpected IP location payload: {data}")
            raise ServiceUnavailable("Failed to fetch location") from e

        logs.log(logging.INFO, f"Resolved location: {info.city}, {info.region}, {info.country}")
        return info, "lookup"

    def _ip_hint(self, client_ip: Optional[str]) -> Optional[str]:
        """
        Returns "" when the provider should infer the address itself, the IP to
        look up, or None when the address can never be geolocated.
        """
        if not client_ip:
            return ""
        try:
            addr = ipaddress.ip_address(_strip_port(client_ip.strip()))
        except ValueError:
            logs.log(logging.WARNING, f"Ignoring unparsable client IP: {client_ip}")
            return ""
        if addr.is_loopback or addr.is_unspecified:
            return ""
        if addr.is_private or addr.is_link_local or addr.is_reserved or addr.is_multicast:
            return None
        return str(addr)
