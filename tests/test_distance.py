"""Unit tests for great-circle distance."""

import math

import pytest

from listing_pricing.domain.distance import EARTH_RADIUS_KM, distance_km, haversine_km
from listing_pricing.domain.entities import GeoPoint, InvalidCoordinate
from tests.conftest import EAST_VILLAGE, NEW_YORK


class TestHaversine:
    def test_same_point_is_zero(self):
        assert haversine_km(19.0, 72.0, 19.0, 72.0) == 0.0

    def test_known_distance(self):
        # Lower Manhattan → East Village ~6.3 km
        d = haversine_km(40.7128, -74.0060, 40.7306, -73.9352)
        assert d == pytest.approx(6.286, abs=0.02)

    def test_one_degree_of_latitude(self):
        d = haversine_km(0.0, 0.0, 1.0, 0.0)
        assert d == pytest.approx(EARTH_RADIUS_KM * math.pi / 180)

    def test_antipodal_points_half_circumference(self):
        d = haversine_km(0.0, 0.0, 0.0, 180.0)
        assert d == pytest.approx(EARTH_RADIUS_KM * math.pi)


class TestDistanceKm:
    def test_no_destination_is_zero(self):
        assert distance_km(NEW_YORK, None) == 0.0

    def test_same_point_is_zero(self):
        assert distance_km(NEW_YORK, GeoPoint(40.7128, -74.0060)) == 0.0

    @pytest.mark.parametrize(
        "a, b",
        [
            (NEW_YORK, EAST_VILLAGE),
            (GeoPoint(-33.8688, 151.2093), GeoPoint(51.5074, -0.1278)),
            (GeoPoint(89.9, 10.0), GeoPoint(-89.9, -170.0)),
        ],
    )
    def test_symmetric(self, a, b):
        assert distance_km(a, b) == pytest.approx(distance_km(b, a))

    def test_non_negative(self):
        assert distance_km(EAST_VILLAGE, NEW_YORK) > 0

    @pytest.mark.parametrize("bad", [math.nan, math.inf, -math.inf])
    def test_non_finite_latitude_rejected(self, bad):
        with pytest.raises(InvalidCoordinate):
            distance_km(GeoPoint(bad, 0.0), NEW_YORK)

    def test_non_finite_destination_rejected(self):
        with pytest.raises(InvalidCoordinate):
            distance_km(NEW_YORK, GeoPoint(40.0, math.nan))

    def test_nan_origin_rejected_without_destination(self):
        with pytest.raises(InvalidCoordinate):
            distance_km(GeoPoint(math.nan, 0.0), None)

    def test_non_numeric_rejected(self):
        with pytest.raises(InvalidCoordinate):
            distance_km(GeoPoint("40.7", -74.0), NEW_YORK)

    def test_out_of_range_is_not_validated(self):
        assert distance_km(GeoPoint(95.0, 0.0), GeoPoint(0.0, 0.0)) > 0
