"""
Unit tests for the spherical primitives in the geospatial package.
"""

import numpy as np
import pytest

from common.constants import GeodeticConstants
from common.units import DistanceUnit
from geospatial.coordinate_models import (
    angular_distance,
    cartesian_to_spherical,
    normalize_bearing,
    normalize_longitude,
    spherical_to_cartesian,
)
from geospatial.distance_calculations import (
    destination_point,
    distance_matrix,
    great_circle_distance,
    great_circle_distance_batch,
    initial_bearing,
    rhumb_line_bearing,
    rhumb_line_destination,
    rhumb_line_distance,
    rhumb_line_distance_units,
)
from geospatial.projections import (
    great_circle_intermediate_point,
    great_circle_project,
    great_circle_project_to_segment,
)

R = GeodeticConstants.EARTH_RADIUS_KM.value


def arc_km(degrees):
    return R * np.radians(degrees)


# (lat1, lon1, lat2, lon2): mid-latitude, across the antimeridian, and over each pole
PAIRS = [
    (40.7128, -74.0060, 51.5074, -0.1278),
    (0.0, 179.0, 0.0, -179.0),
    (60.0, 179.0, -60.0, -179.0),
    (80.0, 10.0, 85.0, -170.0),
    (-70.0, -60.0, -65.0, 120.0),
]


def lon_diff(a, b):
    return normalize_longitude(a - b)


class TestCoordinateModels:
    """Tests for angle conventions and conversions."""

    def test_normalize_longitude_wraps_into_range(self):
        assert normalize_longitude(190.0) == pytest.approx(-170.0)
        assert normalize_longitude(-190.0) == pytest.approx(170.0)
        assert normalize_longitude(45.0) == pytest.approx(45.0)

    def test_normalize_longitude_half_open(self):
        """180 maps onto -180."""
        assert normalize_longitude(180.0) == pytest.approx(-180.0)

    def test_normalize_bearing(self):
        assert normalize_bearing(-90.0) == pytest.approx(270.0)
        assert normalize_bearing(360.0) == pytest.approx(0.0)

    def test_angular_distance_quarter_circle(self):
        assert angular_distance(0, 0, 0, 90) == pytest.approx(np.pi / 2)

    def test_cartesian_round_trip(self):
        lat, lon = np.radians(30.0), np.radians(-60.0)
        x, y, z = spherical_to_cartesian(lat, lon)
        assert x * x + y * y + z * z == pytest.approx(1.0)
        assert cartesian_to_spherical(x, y, z) == pytest.approx((lat, lon))


class TestGreatCircle:
    """Tests for great-circle distance, bearing and destination."""

    def test_new_york_to_london(self):
        d = great_circle_distance(40.7128, -74.0060, 51.5074, -0.1278)
        assert abs(d - 5570) < 10

    @pytest.mark.parametrize("lat1, lon1, lat2, lon2", PAIRS)
    def test_symmetric(self, lat1, lon1, lat2, lon2):
        d1 = great_circle_distance(lat1, lon1, lat2, lon2)
        d2 = great_circle_distance(lat2, lon2, lat1, lon1)
        assert d1 == pytest.approx(d2)

    def test_zero_for_same_point(self):
        assert great_circle_distance(10, 20, 10, 20) == 0.0
        assert great_circle_distance(0, 180, 0, -180) == pytest.approx(0.0, abs=1e-9)

    def test_short_way_across_antimeridian(self):
        assert great_circle_distance(0, 179, 0, -179) == pytest.approx(arc_km(2))

    def test_bounded_by_half_circumference(self):
        assert great_circle_distance(0, 0, 0, 180) == pytest.approx(np.pi * R)

    def test_batch_matches_scalar(self):
        lats = np.array([0.0, 40.7128])
        lons = np.array([0.0, -74.0060])
        batch = great_circle_distance_batch(lats, lons, 51.5074, -0.1278)
        assert batch[1] == pytest.approx(great_circle_distance(40.7128, -74.0060, 51.5074, -0.1278))

    def test_distance_matrix(self):
        m = distance_matrix([(0, 0), (0, 90), (45, 45)])
        assert m.shape == (3, 3)
        np.testing.assert_allclose(np.diag(m), 0.0)
        np.testing.assert_allclose(m, m.T)
        assert m[0, 1] == pytest.approx(arc_km(90))

    def test_initial_bearing_cardinal(self):
        assert initial_bearing(0, 0, 10, 0) == pytest.approx(0.0)
        assert initial_bearing(0, 0, 0, 10) == pytest.approx(90.0)
        assert initial_bearing(0, 0, -10, 0) == pytest.approx(180.0)

    def test_destination_point_quarter_circle_east(self):
        lat, lon = destination_point(0, 0, 90, arc_km(90))
        assert lat == pytest.approx(0.0, abs=1e-9)
        assert lon == pytest.approx(90.0)


class TestRhumbLine:
    """Tests for rhumb-line navigation."""

    def test_new_york_to_london(self):
        d = rhumb_line_distance(40.7128, -74.0060, 51.5074, -0.1278)
        assert abs(d - 5794) < 10

    @pytest.mark.parametrize("lat1, lon1, lat2, lon2", PAIRS)
    def test_never_shorter_than_great_circle(self, lat1, lon1, lat2, lon2):
        gc = great_circle_distance(lat1, lon1, lat2, lon2)
        assert gc <= rhumb_line_distance(lat1, lon1, lat2, lon2) + 1e-9

    @pytest.mark.parametrize("lat1, lon1, lat2, lon2", PAIRS)
    def test_symmetric(self, lat1, lon1, lat2, lon2):
        d1 = rhumb_line_distance(lat1, lon1, lat2, lon2)
        d2 = rhumb_line_distance(lat2, lon2, lat1, lon1)
        assert d1 == pytest.approx(d2)

    def test_along_equator_equals_great_circle(self):
        assert rhumb_line_distance(0, 0, 0, 10) == pytest.approx(arc_km(10))

    def test_east_west_off_equator(self):
        """On a parallel the course is scaled by cos(latitude)."""
        d = rhumb_line_distance(60, 0, 60, 10)
        assert d == pytest.approx(arc_km(10) * np.cos(np.radians(60)))

    def test_crosses_antimeridian_the_short_way(self):
        assert rhumb_line_distance(0, 179, 0, -179) == pytest.approx(arc_km(2))

    def test_units(self):
        km = rhumb_line_distance(0, 0, 0, 10)
        miles = rhumb_line_distance_units(0, 0, 0, 10, DistanceUnit.MILES)
        assert miles == pytest.approx(km / 1.609344)

    def test_bearing(self):
        assert rhumb_line_bearing(0, 0, 0, 10) == pytest.approx(90.0)
        assert rhumb_line_bearing(0, 0, 10, 0) == pytest.approx(0.0)
        assert rhumb_line_bearing(0, 10, 0, 0) == pytest.approx(270.0)

    def test_destination_east(self):
        lat, lon = rhumb_line_destination(0, 0, arc_km(1), 90)
        assert lat == pytest.approx(0.0, abs=1e-9)
        assert lon == pytest.approx(1.0)

    def test_destination_north(self):
        lat, lon = rhumb_line_destination(0, 0, arc_km(10), 0)
        assert lat == pytest.approx(10.0)
        assert lon == pytest.approx(0.0, abs=1e-9)

    def test_destination_past_pole_stays_on_sphere(self):
        lat, _ = rhumb_line_destination(80, 0, arc_km(20), 0)
        assert -90.0 <= lat <= 90.0


class TestProjections:
    """Tests for interpolation and projection onto great circles."""

    @pytest.mark.parametrize("lat1, lon1, lat2, lon2", PAIRS)
    def test_intermediate_point_endpoints(self, lat1, lon1, lat2, lon2):
        lat, lon = great_circle_intermediate_point(lat1, lon1, lat2, lon2, 0.0)
        assert lat == pytest.approx(lat1, abs=1e-9)
        assert lon_diff(lon, lon1) == pytest.approx(0.0, abs=1e-9)
        lat, lon = great_circle_intermediate_point(lat1, lon1, lat2, lon2, 1.0)
        assert lat == pytest.approx(lat2, abs=1e-9)
        assert lon_diff(lon, lon2) == pytest.approx(0.0, abs=1e-9)

    def test_intermediate_point_midway_on_equator(self):
        lat, lon = great_circle_intermediate_point(0, 0, 0, 90, 0.5)
        assert lat == pytest.approx(0.0, abs=1e-9)
        assert lon == pytest.approx(45.0)

    def test_intermediate_point_coincident(self):
        assert great_circle_intermediate_point(10, 190, 10, 190, 0.5) == pytest.approx((10.0, -170.0))

    def test_project_onto_equator(self):
        p = great_circle_project(0, 0, 0, 10, 10, 5)
        assert abs(p.cross_track_km) == pytest.approx(arc_km(10), abs=1e-6)
        assert p.along_track_km == pytest.approx(arc_km(5), abs=1e-6)
        assert p.lat == pytest.approx(0.0, abs=1e-9)
        assert p.lon == pytest.approx(5.0)

    def test_project_beyond_end_is_unclamped(self):
        p = great_circle_project(0, 0, 0, 10, 0, 20)
        assert abs(p.cross_track_km) < 1e-6
        assert p.along_track_km == pytest.approx(arc_km(20), abs=1e-6)

    def test_project_behind_start_is_negative(self):
        p = great_circle_project(0, 0, 0, 10, 0, -5)
        assert p.along_track_km == pytest.approx(-arc_km(5), abs=1e-6)

    def test_project_degenerate_path(self):
        lat, lon, xt, at = great_circle_project(1, 1, 1, 1, 2, 2)
        assert (lat, lon) == (1.0, 1.0)
        assert xt == pytest.approx(great_circle_distance(1, 1, 2, 2))
        assert at == 0.0

    def test_segment_clamps_past_end(self):
        p = great_circle_project_to_segment(0, 0, 0, 10, 0, 20)
        assert (p.lat, p.lon) == (0.0, 10.0)
        assert p.cross_track_km == pytest.approx(arc_km(10))
        assert p.along_track_km == pytest.approx(arc_km(10))

    def test_segment_clamps_before_start(self):
        p = great_circle_project_to_segment(0, 0, 0, 10, 0, -5)
        assert (p.lat, p.lon) == (0.0, 0.0)
        assert p.cross_track_km == pytest.approx(arc_km(5))
        assert p.along_track_km == 0.0

    def test_segment_interior_matches_unclamped(self):
        a = great_circle_project(0, 0, 0, 10, 10, 5)
        b = great_circle_project_to_segment(0, 0, 0, 10, 10, 5)
        assert a == b
