import math
import logging
import random
from typing import Optional, List

from house_search.core.config import settings
from house_search.core.errors import InvalidArgument
from house_search.core.logger import logs
from house_search.models.geo_model import Coordinate, HouseResponse
from house_search.services import point_sampler

class HousesService:
    def __init__(self, count: int = None, rng: Optional[random.Random] = None):
        self.count = settings.HOUSES_PER_REQUEST if count is None else count
        self.rng = rng

    def get_houses(
        self,
        lat: Optional[float],
        lng: Optional[float],
        radius: Optional[float] = None
    ) -> List[HouseResponse]:
        if lat is None or lng is None:
            raise InvalidArgument("lat and lng are required")
        if not (math.isfinite(lat) and -90 <= lat <= 90):
            raise InvalidArgument(f"lat must be within [-90, 90], got {lat}")
        if not (math.isfinite(lng) and -180 <= lng <= 180):
            raise InvalidArgument(f"lng must be within [-180, 180], got {lng}")
        if radius is None:
            radius = settings.DEFAULT_RADIUS_METERS

        center = Coordinate(latitude=lat, longitude=lng)
        listings = point_sampler.generate(center, radius, self.count, rng=self.rng)

        logs.log(logging.INFO, f"Generated {len(listings)} houses around {lat}, {lng}", extra={"radius": radius})
        return [HouseResponse.from_listing(listing) for listing in listings]
