"""
Point-on-Surface Selection.

Unlike the bounding-box center, which can fall outside a concave shape,
:func:`point_on_surface` returns a point that lies on or within the geometry:

=================  ======================================================
Point              the point itself
LineString         arc-length midpoint (first coordinate if zero length)
Polygon            centroid if inside, else the first exterior vertex
MultiLineString    the longest member line, recursively
MultiPolygon       the largest member polygon, recursively
Feature            its geometry, recursively
FeatureCollection  polygon > line > point, see below
=================  ======================================================

FeatureCollection Selection
---------------------------
Features are scanned in order, remembering the first Point, the longest
LineString and the largest Polygon. A MultiLineString member answers
immediately if no positive-length LineString has been seen yet, and a
MultiPolygon member answers immediately if no positive-area Polygon has
been seen yet. After the scan the largest Polygon wins, then the longest
LineString, then the first Point. Members that are degenerate or not
recognized are skipped.
"""

from functools import singledispatch
from typing import Optional

from common.exceptions import (
    DegenerateGeometryError,
    EmptyGeometryError,
    GeometryError,
    NoResultError,
    UnsupportedVariantError,
)
from common.logging_config import get_logger
from common.types import (
    Feature,
    FeatureCollection,
    GeoJSON,
    LineString,
    MultiLineString,
    MultiPolygon,
    Point,
    Polygon,
)
from geometry.lines import line_midpoint, line_string_length_km
from geometry.rings import point_in_polygon, polygon_centroid_area

logger = get_logger(__name__)


@singledispatch
def point_on_surface(geometry: GeoJSON) -> Point:
    """A point guaranteed to lie on the geometry.

    Raises
    ------
    UnsupportedVariantError
        If ``geometry`` (or a Feature's geometry) is not a recognized
        variant.
    EmptyGeometryError
        If the geometry has no coordinates or members.
    DegenerateGeometryError
        If the selected line has fewer than 2 coordinates.
    NoResultError
        If a FeatureCollection holds no usable geometry.
    """
    raise UnsupportedVariantError(geometry, "point on surface")


@point_on_surface.register
def _(geometry: Point) -> Point:
    return geometry


@point_on_surface.register
def _(geometry: LineString) -> Point:
    return line_midpoint(geometry)


@point_on_surface.register
def _(geometry: Polygon) -> Point:
    if not geometry.coordinates or not geometry.coordinates[0]:
        raise EmptyGeometryError("polygon has no coordinates")
    centroid, _, valid = polygon_centroid_area(geometry)
    if valid and point_in_polygon(centroid, geometry):
        return Point(centroid)
    logger.debug("Centroid outside polygon; using first exterior vertex")
    return Point(geometry.coordinates[0][0])


@point_on_surface.register
def _(geometry: MultiLineString) -> Point:
    best: Optional[LineString] = None
    best_len = 0.0
    for line in geometry.lines:
        try:
            length = line_string_length_km(line)
        except DegenerateGeometryError:
            continue
        if length > best_len:
            best_len = length
            best = line
    if best_len == 0 and geometry.coordinates:
        best = geometry.lines[0]
    if best is None or not best.coordinates:
        raise EmptyGeometryError("multilinestring has no coordinates")
    return line_midpoint(best)


@point_on_surface.register
def _(geometry: MultiPolygon) -> Point:
    best: Optional[Polygon] = None
    best_area = 0.0
    for polygon in geometry.polygons:
        _, area, valid = polygon_centroid_area(polygon)
        if valid and area > best_area:
            best_area = area
            best = polygon
    if best_area == 0 and geometry.coordinates:
        best = geometry.polygons[0]
    if best is None or not best.coordinates:
        raise EmptyGeometryError("multipolygon has no coordinates")
    return point_on_surface(best)


@point_on_surface.register
def _(geometry: Feature) -> Point:
    return point_on_surface(geometry.geometry)


@point_on_surface.register
def _(geometry: FeatureCollection) -> Point:
    best_poly: Optional[Polygon] = None
    best_area = 0.0
    best_line: Optional[LineString] = None
    best_line_len = 0.0
    first_point: Optional[Point] = None

    for feature in geometry.features:
        member = feature.geometry
        if isinstance(member, Point):
            if first_point is None:
                first_point = member
        elif isinstance(member, LineString):
            try:
                length = line_string_length_km(member)
            except DegenerateGeometryError:
                continue
            if length > best_line_len:
                best_line_len = length
                best_line = member
        elif isinstance(member, Polygon):
            _, area, valid = polygon_centroid_area(member)
            if valid and area > best_area:
                best_area = area
                best_poly = member
        elif isinstance(member, (MultiLineString, MultiPolygon)):
            try:
                candidate = point_on_surface(member)
            except GeometryError as e:
                logger.debug("Skipping %s member: %s", member.type, e)
                continue
            seen = best_line_len if isinstance(member, MultiLineString) else best_area
            if seen == 0:
                return candidate
        else:
            logger.debug("Skipping unsupported member %s", type(member).__name__)

    if best_area > 0:
        return point_on_surface(best_poly)
    if best_line_len > 0:
        return line_midpoint(best_line)
    if first_point is not None:
        return first_point
    raise NoResultError("featurecollection has no supported geometries")
