import pytest

from map_view import (
    INITIAL_ZOOM, MapState, MarkerStyle, build_map, clicked_point, find_house,
    format_price, format_route_details, location_label, map_center, map_zoom, route_path
)

USER = {
    "latitude": 28.6139,
    "longitude": 77.2090,
    "city": "New Delhi",
    "region": "National Capital Territory of Delhi",
    "country": "India",
}

ROUTE = {
    "geometry": {"type": "LineString", "coordinates": [[77.2, 28.6], [77.25, 28.65], [77.3, 28.7]]},
    "duration": 912.4,
    "distance": 14021.7,
}


def test_route_path_swaps_to_lat_lng():
    assert route_path(ROUTE) == [(28.6, 77.2), (28.65, 77.25), (28.7, 77.3)]
    assert route_path(None) == []
    assert route_path({"geometry": None}) == []


def test_formatting_helpers():
    assert format_price(450000) == "$450,000"
    assert format_route_details(ROUTE) == "14.0 km · 15 min"
    assert format_route_details(None) is None
    assert location_label(USER) == "New Delhi, National Capital Territory of Delhi, India"


def test_map_with_only_user_location():
    html = build_map(MapState(user_location=USER)).get_root().render()

    assert "New Delhi" in html
    assert "markerClusterGroup" not in html
    assert "L.polyline" not in html


def test_full_map_renders_houses_rings_and_route():
    state = MapState(
        user_location=USER,
        search_center=(28.6, 77.2),
        houses=[
            {"lat": 28.61, "lng": 77.21, "price": 250000},
            {"lat": 28.59, "lng": 77.19, "price": 680000},
        ],
        route=ROUTE,
    )
    fmap = build_map(state, style=MarkerStyle(house_color="green"))
    html = fmap.get_root().render()

    assert "markerClusterGroup" in html
    assert "L.polyline" in html
    assert "#00b0ff" in html
    assert html.count("L.circle(") == 3
    assert "$680,000" in html
    assert fmap.location == [28.6, 77.2]


def test_map_requires_a_center():
    with pytest.raises(ValueError):
        build_map(MapState())


def test_clicked_point_reads_streamlit_folium_payload():
    assert clicked_point({"lat": 28.61, "lng": 77.21}) == (28.61, 77.21)
    assert clicked_point(None) is None
    assert clicked_point({}) is None
    assert clicked_point({"lat": 28.61, "lng": None}) is None


def test_find_house_matches_only_house_markers():
    houses = [
        {"lat": 28.61, "lng": 77.21, "price": 250000},
        {"lat": 28.59, "lng": 77.19, "price": 680000},
    ]

    assert find_house(houses, (28.59, 77.19))["price"] == 680000
    assert find_house(houses, (28.5900000001, 77.19))["price"] == 680000
    # the user and search-center markers are not listings
    assert find_house(houses, (USER["latitude"], USER["longitude"])) is None
    assert find_house(houses, None) is None


def test_view_follows_the_search_center():
    before = MapState(user_location=USER)
    after = MapState(user_location=USER, search_center=(19.076, 72.8777))

    assert map_center(before) == (28.6139, 77.2090)
    assert map_zoom(before) == INITIAL_ZOOM
    assert map_center(after) == (19.076, 72.8777)
    assert map_zoom(after) == INITIAL_ZOOM + 2
