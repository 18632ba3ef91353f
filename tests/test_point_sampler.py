import math
import random

import pytest

from house_search.core.errors import InvalidArgument
from house_search.models.geo_model import Coordinate
from house_search.services import point_sampler
from house_search.services.point_sampler import METERS_PER_DEGREE, generate


def _offset_sq(center, listing):
    dlat = listing.coordinate.latitude - center.latitude
    dlng = listing.coordinate.longitude - center.longitude
    return dlat ** 2 + dlng ** 2


def test_returns_requested_count_inside_circle():
    center = Coordinate(latitude=51.5074, longitude=-0.1278)
    radius_m = 7500
    listings = generate(center, radius_m, 200, rng=random.Random(1))

    assert len(listings) == 200
    radius_deg = radius_m / METERS_PER_DEGREE
    for listing in listings:
        assert _offset_sq(center, listing) <= radius_deg ** 2 + 1e-12
        assert 200000 <= listing.price < 700000


def test_zero_count_and_zero_radius():
    center = Coordinate(latitude=10, longitude=20)
    assert generate(center, 1000, 0) == []

    listings = generate(center, 0, 5, rng=random.Random(2))
    assert len(listings) == 5
    assert all(l.coordinate == center for l in listings)


@pytest.mark.parametrize("radius", [-1, float("nan"), float("inf")])
def test_rejects_invalid_radius(radius):
    with pytest.raises(InvalidArgument):
        generate(Coordinate(latitude=0, longitude=0), radius, 10)


def test_rejects_negative_count():
    with pytest.raises(InvalidArgument):
        generate(Coordinate(latitude=0, longitude=0), 100, -1)


def test_seeded_rng_is_reproducible():
    center = Coordinate(latitude=0, longitude=0)
    first = generate(center, 1000, 20, rng=random.Random(42))
    second = generate(center, 1000, 20, rng=random.Random(42))
    assert first == second


def test_density_is_uniform_by_area():
    center = Coordinate(latitude=0, longitude=0)
    radius_m = 10000
    n = 20000
    listings = generate(center, radius_m, n, rng=random.Random(7))
    radius_deg_sq = (radius_m / METERS_PER_DEGREE) ** 2

    # r^2 / R^2 is U(0,1) when points are uniform over the disk
    normalized = [_offset_sq(center, l) / radius_deg_sq for l in listings]
    bins = [0, 0, 0, 0]
    for value in normalized:
        bins[min(3, int(value * 4))] += 1

    for count in bins:
        assert abs(count / n - 0.25) < 0.02
    assert abs(sum(normalized) / n - 0.5) < 0.02

    # Uniform radius would put half the points inside R/2; uniform area puts a quarter
    inner = sum(1 for value in normalized if value < 0.25)
    assert abs(inner / n - 0.25) < 0.02


def test_prices_cover_the_range():
    center = Coordinate(latitude=0, longitude=0)
    prices = [l.price for l in generate(center, 100, 5000, rng=random.Random(3))]
    assert min(prices) < 250000
    assert max(prices) > 650000


def test_points_near_pole_and_antimeridian_stay_valid():
    pole = Coordinate(latitude=89.99, longitude=179.99)
    for listing in generate(pole, 50000, 500, rng=random.Random(5)):
        assert -90 <= listing.coordinate.latitude <= 90
        assert -180 <= listing.coordinate.longitude <= 180


def test_meters_to_degrees():
    assert point_sampler.meters_to_degrees(111300) == pytest.approx(1.0)
    assert math.isclose(point_sampler.meters_to_degrees(0), 0.0)
