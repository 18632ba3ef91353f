"""
Builds the folium map shown by the Streamlit client.

Icons are handed in through `MarkerStyle` rather than patched into folium's
defaults, so two maps on the same page can be styled independently.
"""
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

import folium
from folium.plugins import MarkerCluster

INITIAL_ZOOM = 12
SEARCH_RADIUS_METERS = 7500
# Close / middle / far rings around the search center
RING_RADII_METERS = (2500, 5000, 7500)
RING_COLORS = ("green", "orange", "red")
ROUTE_COLOR = "#00b0ff"
ROUTE_WEIGHT = 5

DEFAULT_TILES = "OpenStreetMap"
DEFAULT_ATTRIBUTION = "&copy; OpenStreetMap contributors"


@dataclass
class MarkerStyle:
    """Icon configuration for each kind of marker on the map."""
    user_color: str = "blue"
    user_icon: str = "user"
    center_color: str = "darkblue"
    center_icon: str = "screenshot"
    house_color: str = "cadetblue"
    house_icon: str = "home"
    prefix: str = "glyphicon"

    def user(self) -> folium.Icon:
        return folium.Icon(color=self.user_color, icon=self.user_icon, prefix=self.prefix)

    def center(self) -> folium.Icon:
        return folium.Icon(color=self.center_color, icon=self.center_icon, prefix=self.prefix)

    def house(self) -> folium.Icon:
        return folium.Icon(color=self.house_color, icon=self.house_icon, prefix=self.prefix)


@dataclass
class MapState:
    """Everything the page knows about; each field may still be empty."""
    user_location: Optional[dict] = None
    search_center: Optional[Tuple[float, float]] = None
    houses: List[dict] = field(default_factory=list)
    route: Optional[dict] = None


def route_path(route: Optional[dict]) -> List[Tuple[float, float]]:
    """Turns the API's [lng, lat] GeoJSON line into (lat, lng) pairs."""
    if not route or not route.get("geometry"):
        return []
    return [(coord[1], coord[0]) for coord in route["geometry"].get("coordinates", [])]


def format_price(price: int) -> str:
    return f"${price:,}"


def format_route_details(route: Optional[dict]) -> Optional[str]:
    if not route:
        return None
    minutes = route.get("duration", 0) / 60
    km = route.get("distance", 0) / 1000
    return f"{km:.1f} km · {minutes:.0f} min"


def location_label(location: dict) -> str:
    return f"{location.get('city')}, {location.get('region')}, {location.get('country')}"


def map_center(state: MapState) -> Optional[Tuple[float, float]]:
    if state.search_center:
        return state.search_center
    if state.user_location:
        return (state.user_location["latitude"], state.user_location["longitude"])
    return None


def map_zoom(state: MapState) -> int:
    return INITIAL_ZOOM + 2 if state.search_center else INITIAL_ZOOM


def clicked_point(event: Optional[dict]) -> Optional[Tuple[float, float]]:
    """(lat, lng) out of a streamlit-folium click payload, if there is one."""
    if not event or event.get("lat") is None or event.get("lng") is None:
        return None
    return (float(event["lat"]), float(event["lng"]))


def find_house(
    houses: Sequence[dict],
    point: Optional[Tuple[float, float]],
    tolerance: float = 1e-6
) -> Optional[dict]:
    """The listing whose marker sits at `point`; other markers match nothing."""
    if point is None:
        return None
    lat, lng = point
    for house in houses:
        if abs(house["lat"] - lat) <= tolerance and abs(house["lng"] - lng) <= tolerance:
            return house
    return None


def build_map(
    state: MapState,
    style: Optional[MarkerStyle] = None,
    tiles: str = DEFAULT_TILES,
    attribution: str = DEFAULT_ATTRIBUTION,
    ring_radii: Sequence[int] = RING_RADII_METERS
) -> folium.Map:
    center = map_center(state)
    if center is None:
        raise ValueError("Map needs either a user location or a search center")

    style = style or MarkerStyle()
    zoom = map_zoom(state)
    attr = None if tiles == DEFAULT_TILES else attribution
    fmap = folium.Map(location=list(center), zoom_start=zoom, tiles=tiles, attr=attr, zoom_control=True)

    if state.user_location:
        folium.Marker(
            [state.user_location["latitude"], state.user_location["longitude"]],
            popup=location_label(state.user_location),
            icon=style.user()
        ).add_to(fmap)

    if state.search_center:
        lat, lng = state.search_center
        folium.Marker([lat, lng], tooltip=f"{lat}, {lng}", icon=style.center()).add_to(fmap)
        for radius, color in zip(ring_radii, RING_COLORS):
            folium.Circle([lat, lng], radius=radius, color=color, fill=False).add_to(fmap)

    if state.houses:
        cluster = MarkerCluster(
            options={
                "maxClusterRadius": 150,
                "spiderfyOnMaxZoom": False,
                "disableClusteringAtZoom": 17,
                "chunkedLoading": True,
            }
        ).add_to(fmap)
        for house in state.houses:
            folium.Marker(
                [house["lat"], house["lng"]],
                tooltip=f"{house['lat']}, {house['lng']}",
                popup=format_price(house["price"]),
                icon=style.house()
            ).add_to(cluster)

    path = route_path(state.route)
    if path:
        folium.PolyLine(path, color=ROUTE_COLOR, weight=ROUTE_WEIGHT).add_to(fmap)
        folium.Marker(list(path[-1]), icon=style.house(), popup=format_route_details(state.route)).add_to(fmap)

    return fmap
