import pytest
import requests

import api_client
from api_client import (
    BackendError, get_houses_within_radius, get_ip_location,
    get_path_between_src_and_dest
)


class FakeResponse:
    def __init__(self, payload=None, status_code=200, reason="OK"):
        self.payload = payload
        self.status_code = status_code
        self.reason = reason

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.exceptions.HTTPError(f"{self.status_code} {self.reason}")

    def json(self):
        if self.payload is None:
            raise ValueError("no json")
        return self.payload


def _serve(monkeypatch, method, response):
    calls = []

    def fake(url, **kwargs):
        calls.append((url, kwargs))
        if isinstance(response, Exception):
            raise response
        return response

    monkeypatch.setattr(api_client.requests, method, fake)
    return calls


def test_houses_are_requested_with_center_and_radius(monkeypatch):
    houses = [{"lat": 28.61, "lng": 77.21, "price": 250000}]
    calls = _serve(monkeypatch, "get", FakeResponse(houses))

    assert get_houses_within_radius(28.6, 77.2, 7500) == houses
    url, kwargs = calls[0]
    assert url == f"{api_client.BACKEND_URL}/houses"
    assert kwargs["params"] == {"lat": 28.6, "lng": 77.2, "radius": 7500}


@pytest.mark.parametrize("failure", [
    requests.exceptions.ConnectionError("backend down"),
    FakeResponse({"error": "lat and lng are required"}, status_code=400, reason="Bad Request"),
])
def test_houses_failure_degrades_to_empty_list_quietly(monkeypatch, capsys, failure):
    _serve(monkeypatch, "get", failure)

    assert get_houses_within_radius(28.6, 77.2, 7500) == []
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == ""


def test_route_error_body_becomes_backend_error(monkeypatch):
    _serve(monkeypatch, "post", FakeResponse({"error": "No route found"}, status_code=404, reason="Not Found"))

    with pytest.raises(BackendError, match="No route found"):
        get_path_between_src_and_dest([0, 0], [1, 1])


def test_route_sends_lat_lng_pairs(monkeypatch):
    route = {"geometry": {"type": "LineString", "coordinates": []}, "duration": 1.0, "distance": 2.0}
    calls = _serve(monkeypatch, "post", FakeResponse(route))

    assert get_path_between_src_and_dest([28.6, 77.2], [28.7, 77.3]) == route
    assert calls[0][1]["json"] == {"src": [28.6, 77.2], "dest": [28.7, 77.3]}


def test_ip_location_non_json_error_uses_reason(monkeypatch):
    _serve(monkeypatch, "get", FakeResponse(None, status_code=502, reason="Bad Gateway"))

    with pytest.raises(BackendError, match="Bad Gateway"):
        get_ip_location()
