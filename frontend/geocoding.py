import os
from typing import Optional

import requests

NOMINATIM_URL = os.getenv("NOMINATIM_URL", "https://nominatim.openstreetmap.org/search")
USER_AGENT = "HouseSearchMap/1.0"

def search_place(query: str) -> Optional[dict]:
    """
    Looks a place name up on Nominatim.

    Returns `{"lat", "lng", "display_name"}` for the best match, None when
    nothing matches, or `{"error": message}` when the lookup itself failed.
    """
    query = (query or "").strip()
    if not query:
        return None
    try:
        resp = requests.get(
            NOMINATIM_URL,
            params={"q": query, "format": "json", "limit": 1},
            headers={"User-Agent": USER_AGENT},
            timeout=5
        )
        resp.raise_for_status()
        data = resp.json()
    except requests.exceptions.RequestException as e:
        return {"error": f"Place search failed: {e}"}
    except ValueError:
        return {"error": "Place search returned an unreadable answer"}

    if not data:
        return None
    item = data[0]
    return {
        "lat": float(item["lat"]),
        "lng": float(item["lon"]),
        "display_name": item.get("display_name", query)
    }
