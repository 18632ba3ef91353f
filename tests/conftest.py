import httpx
import pytest
from fastapi.testclient import TestClient

from house_search.main import app
from house_search.routes.location_route import get_location_service
from house_search.routes.directions_route import get_route_service
from house_search.services.Location_service import LocationService
from house_search.services.Route_service import RouteService


class RecordingTransport(httpx.MockTransport):
    """MockTransport that remembers every request it served."""

    def __init__(self, handler):
        self.requests = []

        def record(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(record)


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def mock_location_upstream():
    """Installs a fake ip-api.com; returns the transport for inspection."""
    def install(handler) -> RecordingTransport:
        transport = RecordingTransport(handler)
        app.dependency_overrides[get_location_service] = lambda: LocationService(transport=transport)
        return transport
    return install


@pytest.fixture
def mock_route_upstream():
    """Installs a fake OSRM server; returns the transport for inspection."""
    def install(handler) -> RecordingTransport:
        transport = RecordingTransport(handler)
        app.dependency_overrides[get_route_service] = lambda: RouteService(transport=transport)
        return transport
    return install
