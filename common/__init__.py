"""
Common utilities and infrastructure for the spherical navigation core.

This package provides foundational components used across all modules:
- Geodetic constants and numerical tolerances
- Unit registry and distance conversions
- GeoJSON-shaped geometry types
- Error taxonomy
- Logging infrastructure
"""

from common.constants import GeodeticConstants
from common.units import DistanceUnit, convert_distance_from_km, convert_distance_to_km
from common.types import (
    Position,
    Point,
    LineString,
    Polygon,
    MultiLineString,
    MultiPolygon,
    Feature,
    FeatureCollection,
    GEOMETRY_TYPES,
)
from common.exceptions import (
    GeometryError,
    DegenerateGeometryError,
    EmptyGeometryError,
    UnsupportedVariantError,
    NoResultError,
)
from common.logging_config import get_logger

__all__ = [
    "GeodeticConstants",
    "DistanceUnit",
    "convert_distance_from_km",
    "convert_distance_to_km",
    "Position",
    "Point",
    "LineString",
    "Polygon",
    "MultiLineString",
    "MultiPolygon",
    "Feature",
    "FeatureCollection",
    "GEOMETRY_TYPES",
    "GeometryError",
    "DegenerateGeometryError",
    "EmptyGeometryError",
    "UnsupportedVariantError",
    "NoResultError",
    "get_logger",
]
