"""
Uniform point-in-circle sampling used to fabricate house listings.

Distances are converted from meters to degrees with a flat 111300 m/deg
factor. This is not geodesically exact: longitudinal spread is understated
away from the equator and the error grows with the radius.
"""
import math
import random
from typing import List, Optional

from house_search.core.errors import InvalidArgument
from house_search.models.geo_model import Coordinate, HouseListing

METERS_PER_DEGREE = 111300.0
MIN_PRICE = 200000
MAX_PRICE = 700000  # exclusive


def meters_to_degrees(meters: float) -> float:
    return meters / METERS_PER_DEGREE


def _wrap_longitude(lng: float) -> float:
    if -180.0 <= lng <= 180.0:
        return lng
    return (lng + 180.0) % 360.0 - 180.0


def generate(
    center: Coordinate,
    radius_meters: float,
    count: int,
    rng: Optional[random.Random] = None
) -> List[HouseListing]:
    """
    Returns `count` listings spread uniformly by area inside the circle.

    The radius is drawn as R * sqrt(u); drawing it uniformly would crowd
    points around the center.
    """
    if radius_meters is None or not math.isfinite(radius_meters) or radius_meters < 0:
        raise InvalidArgument(f"radius must be a non-negative number, got {radius_meters}")
    if count < 0:
        raise InvalidArgument(f"count must be non-negative, got {count}")

    rng = rng or random.Random()
    radius_deg = meters_to_degrees(radius_meters)
    listings = []

    for _ in range(count):
        r = radius_deg * math.sqrt(rng.random())
        theta = rng.random() * 2 * math.pi

        lat = center.latitude + r * math.cos(theta)
        lng = center.longitude + r * math.sin(theta)

        listings.append(HouseListing(
            coordinate=Coordinate(
                latitude=min(90.0, max(-90.0, lat)),
                longitude=_wrap_longitude(lng)
            ),
            price=rng.randrange(MIN_PRICE, MAX_PRICE)
        ))

    return listings
