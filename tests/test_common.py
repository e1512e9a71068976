"""
Unit tests for the common package: geometry types, units, errors, logging.
"""

import dataclasses
import logging
import math

import pytest

from common.constants import GeodeticConstants
from common.exceptions import GeometryError, UnsupportedVariantError
from common.logging_config import get_logger
from common.types import (
    Feature,
    FeatureCollection,
    LineString,
    MultiPolygon,
    Point,
    Polygon,
)
from common.units import (
    DistanceUnit,
    Q_,
    as_kilometers,
    convert_distance_from_km,
    convert_distance_to_km,
)
from geospatial.distance_calculations import great_circle_distance


class TestGeometryTypes:
    """Tests for the immutable geometry variants."""

    def test_point_coerces_to_float_tuple(self):
        p = Point([1, 2])
        assert p.coordinates == (1.0, 2.0)
        assert isinstance(p.coordinates[0], float)

    def test_point_lat_lon_order(self):
        p = Point.from_lat_lon(51.5, -0.1)
        assert p.coordinates == (-0.1, 51.5)
        assert (p.lon, p.lat) == (-0.1, 51.5)
        assert p.lat_lon == (51.5, -0.1)

    def test_point_needs_two_values(self):
        with pytest.raises(ValueError):
            Point([1.0])

    def test_frozen(self):
        p = Point((0, 0))
        with pytest.raises(dataclasses.FrozenInstanceError):
            p.coordinates = (1.0, 1.0)

    def test_caller_lists_not_aliased(self):
        ring = [[0, 0], [1, 0], [1, 1], [0, 0]]
        polygon = Polygon([ring])
        ring.append([5, 5])
        ring[0][0] = 9
        assert len(polygon.exterior) == 4
        assert polygon.exterior[0] == (0.0, 0.0)

    def test_polygon_exterior_and_holes(self, square_with_hole):
        assert len(square_with_hole.exterior) == 5
        assert len(square_with_hole.holes) == 1
        assert Polygon().exterior is None

    def test_multipolygon_members(self, two_squares, square):
        assert two_squares.polygons[0] == square

    def test_feature_equality_ignores_properties(self):
        a = Feature(Point((1, 2)), {"name": "a"})
        b = Feature(Point((1, 2)), {"name": "b"})
        assert a == b

    def test_position_rejects_strings(self):
        """A two-character string is not a position."""
        with pytest.raises(TypeError):
            Point("12")
        with pytest.raises(TypeError):
            LineString([b"12", (0, 0)])

    def test_collection_members_must_be_features(self, square):
        with pytest.raises(UnsupportedVariantError):
            FeatureCollection([square])
        with pytest.raises(UnsupportedVariantError):
            FeatureCollection([Feature(square), Point((1, 2))])

    def test_type_tags(self):
        assert Point.type == "Point"
        assert LineString().type == "LineString"
        assert MultiPolygon.type == "MultiPolygon"


class TestUnits:
    """Tests for the pint-backed distance conversions."""

    def test_from_km(self):
        assert convert_distance_from_km(1.609344, DistanceUnit.MILES) == pytest.approx(1.0)
        assert convert_distance_from_km(1.0, DistanceUnit.METERS) == pytest.approx(1000.0)
        assert convert_distance_from_km(3.0, DistanceUnit.KILOMETERS) == 3.0

    def test_to_km(self):
        assert convert_distance_to_km(1.0, DistanceUnit.NAUTICAL_MILES) == pytest.approx(1.852)

    def test_as_kilometers_quantity(self):
        assert as_kilometers(Q_(500, "meter")) == pytest.approx(0.5)
        assert as_kilometers(Q_(5, "nautical_mile")) == pytest.approx(9.26)

    def test_as_kilometers_bare_number(self):
        assert as_kilometers(3) == 3.0

    def test_as_kilometers_rejects_non_length(self):
        with pytest.raises(ValueError, match="incompatible units"):
            as_kilometers(Q_(1, "second"))


class TestErrors:
    """Tests for the error taxonomy."""

    def test_unsupported_variant_is_type_and_value_error(self):
        err = UnsupportedVariantError(object(), "center")
        assert isinstance(err, TypeError)
        assert isinstance(err, ValueError)
        assert isinstance(err, GeometryError)
        assert "unsupported geojson type object in center" in str(err)


class TestLogging:
    """Tests for logger configuration."""

    def test_single_handler(self):
        a = get_logger("geometry.test_handler")
        b = get_logger("geometry.test_handler")
        assert a is b
        assert len(a.handlers) == 1
        assert a.level == logging.INFO


class TestGeodeticConstants:
    """Tests for the reference-sphere constants."""

    def test_half_circumference(self):
        radius = GeodeticConstants.EARTH_RADIUS_KM.value
        assert great_circle_distance(0, 0, 0, 180) == pytest.approx(math.pi * radius)
