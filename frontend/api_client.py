import os

import requests

# Backend API configuration
BACKEND_URL = os.getenv("BACKEND_URL", "http://localhost:8000")

class BackendError(RuntimeError):
    """The backend answered with an `{"error": ...}` body."""

def _error_message(resp: requests.Response) -> str:
    try:
        return resp.json().get("error", resp.reason)
    except ValueError:
        return resp.reason

def get_ip_location() -> dict:
    resp = requests.get(f"{BACKEND_URL}/ipLocation", timeout=15)
    if resp.status_code != 200:
        raise BackendError(_error_message(resp))
    return resp.json()

def get_houses_within_radius(lat: float, lng: float, radius: int) -> list:
    """Returns an empty list on failure so the map still renders."""
    try:
        resp = requests.get(
            f"{BACKEND_URL}/houses",
            params={"lat": lat, "lng": lng, "radius": radius},
            timeout=15
        )
        resp.raise_for_status()
        return resp.json()
    except requests.exceptions.RequestException:
        return []

def get_path_between_src_and_dest(src: list, dest: list) -> dict:
    resp = requests.post(f"{BACKEND_URL}/route", json={"src": src, "dest": dest}, timeout=30)
    if resp.status_code != 200:
        raise BackendError(_error_message(resp))
    return resp.json()
