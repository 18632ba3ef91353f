import streamlit as st
import requests
from streamlit_folium import st_folium

from api_client import (
    BackendError, get_houses_within_radius, get_ip_location,
    get_path_between_src_and_dest
)
from geocoding import search_place
from map_view import (
    MapState, MarkerStyle, SEARCH_RADIUS_METERS,
    build_map, clicked_point, find_house, format_price,
    format_route_details, location_label, map_center, map_zoom
)

# Page configuration
st.set_page_config(
    page_title="House Search Map",
    page_icon="🏠",
    layout="wide",
    initial_sidebar_state="expanded"
)

st.markdown("""
<style>
    .main-header {
        font-size: 2.2rem;
        color: #1E88E5;
        text-align: center;
        padding: 0.5rem 0;
        font-weight: bold;
    }
    .details-card {
        padding: 1rem;
        background-color: #0d3c61;
        border-radius: 0.5rem;
        border-left: 4px solid #00b0ff;
        margin: 1rem 0;
    }
</style>
""", unsafe_allow_html=True)

MARKER_STYLE = MarkerStyle()

# Initialize session state
if "houses" not in st.session_state:
    st.session_state.houses = []

if "search_center" not in st.session_state:
    st.session_state.search_center = None

if "route" not in st.session_state:
    st.session_state.route = None

# Clicks already acted on; st_folium keeps returning the last one on every rerun
if "handled_click" not in st.session_state:
    st.session_state.handled_click = None

if "handled_object_click" not in st.session_state:
    st.session_state.handled_object_click = None

@st.cache_data(ttl=12 * 60 * 60, show_spinner=False)
def cached_ip_location() -> dict:
    """Looks up the user's location once; cached for the session's lifetime."""
    return get_ip_location()

def show_notices():
    """Toasts queued before the last rerun."""
    for message, icon in st.session_state.pop("notices", []):
        st.toast(message, icon=icon)

def notify(message: str, icon: str):
    st.session_state.setdefault("notices", []).append((message, icon))

def set_search_center(lat: float, lng: float):
    """Moves the search circle and reloads the houses around it."""
    st.session_state.search_center = (lat, lng)
    st.session_state.route = None
    houses = get_houses_within_radius(lat, lng, SEARCH_RADIUS_METERS)
    st.session_state.houses = houses
    if houses:
        notify(f"{len(houses)} Houses Found", "✅")
    else:
        notify("An Error Occurred While Fetching!!", "❌")

def route_to_house(house: dict):
    src = list(st.session_state.search_center)
    dest = [house["lat"], house["lng"]]
    try:
        st.session_state.route = get_path_between_src_and_dest(src, dest)
        notify(f"Route Successfully Fetched ({format_price(house['price'])})", "✅")
    except (requests.exceptions.RequestException, BackendError) as e:
        st.session_state.route = None
        notify(f"An Error Occurred While Fetching!! {e}", "❌")

# Header
st.markdown('<div class="main-header">🏠 House Search Map</div>', unsafe_allow_html=True)

try:
    with st.spinner("📍 Detecting your location..."):
        user_location = cached_ip_location()
except (requests.exceptions.RequestException, BackendError) as e:
    st.toast("An error occurred while fetching data", icon="❌")
    st.error(f"Could not detect your location: {e}")
    st.stop()

show_notices()

# Sidebar
with st.sidebar:
    st.header("🔍 Search")
    st.write(f"**You are near:** {location_label(user_location)}")

    place = st.text_input("Search a place", placeholder="e.g. Connaught Place, New Delhi")
    if st.button("📍 Go", use_container_width=True) and place:
        result = search_place(place)
        if result is None:
            st.toast(f"No place found for '{place}'", icon="⚠️")
        elif "error" in result:
            st.toast(result["error"], icon="❌")
        else:
            set_search_center(result["lat"], result["lng"])
            st.rerun()

    if st.button("🏠 Houses near me", use_container_width=True):
        set_search_center(user_location["latitude"], user_location["longitude"])
        st.rerun()

    st.divider()
    st.markdown(
        "🖱️ **Click the map** to search for houses around that point.  \n"
        "🏘️ **Click a house** to get the driving route to it."
    )

state = MapState(
    user_location=user_location,
    search_center=st.session_state.search_center,
    houses=st.session_state.houses,
    route=st.session_state.route
)
fmap = build_map(state, style=MARKER_STYLE)

# center/zoom move the existing map, which flies to a newly chosen search center
map_event = st_folium(
    fmap,
    center=list(map_center(state)),
    zoom=map_zoom(state),
    key="house-map",
    height=650,
    returned_objects=["last_clicked", "last_object_clicked"]
) or {}

object_click = clicked_point(map_event.get("last_object_clicked"))
map_click = clicked_point(map_event.get("last_clicked"))

if object_click and object_click != st.session_state.handled_object_click:
    st.session_state.handled_object_click = object_click
    house = find_house(st.session_state.houses, object_click)
    if house and st.session_state.search_center:
        route_to_house(house)
        st.rerun()
elif map_click and map_click != st.session_state.handled_click:
    st.session_state.handled_click = map_click
    set_search_center(*map_click)
    st.rerun()

details = format_route_details(st.session_state.route)
if details:
    st.markdown(f'<div class="details-card">🛣️ <b>Route:</b> {details}</div>', unsafe_allow_html=True)

# Footer
st.divider()
st.markdown("""
<div style='text-align: center; color: #999; padding: 1rem;'>
    <small>Powered by FastAPI, ip-api.com & OSRM | Map data © OpenStreetMap contributors</small>
</div>
""", unsafe_allow_html=True)
