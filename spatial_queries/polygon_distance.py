"""
Signed Point-to-Polygon Distance.

Distances are in kilometres, measured to the nearest ring edge (exterior or
hole) with :func:`geometry.lines.line_point_distance`. The sign encodes
containment: negative inside, positive outside. A point inside a hole is
outside the polygon.
"""

from functools import singledispatch
from typing import Iterable, Sequence

import numpy as np

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
    Position,
)
from geometry.lines import line_point_distance
from geometry.rings import close_ring, point_in_polygon

logger = get_logger(__name__)


def ring_distance(ring: Sequence[Position], point: Point) -> float:
    """Distance from a point to a ring's edges, closing the ring if open.

    Raises
    ------
    DegenerateGeometryError
        If the ring has fewer than 2 coordinates.
    """
    if len(ring) < 2:
        raise DegenerateGeometryError("ring must have at least 2 coordinates")
    return line_point_distance(LineString(close_ring(ring)), point)


def _combine_signed(distances: Iterable[float], what: str) -> float:
    """Min |d| over signed distances, negative if any was negative."""
    min_dist = np.inf
    inside = False
    for dist in distances:
        min_dist = min(min_dist, abs(dist))
        if dist < 0:
            inside = True
    if np.isinf(min_dist):
        raise NoResultError(f"{what} contains no polygons with valid rings")
    return float(-min_dist if inside else min_dist)


def _members(polygons: Iterable[Polygon], point: Point) -> Iterable[float]:
    for polygon in polygons:
        try:
            yield _polygon_distance(polygon, point)
        except GeometryError as e:
            logger.debug("Skipping polygon member: %s", e)


def _polygon_distance(polygon: Polygon, point: Point) -> float:
    if not polygon.coordinates:
        raise EmptyGeometryError("polygon has no coordinates")

    min_dist = np.inf
    for ring in polygon.coordinates:
        if len(ring) < 2:
            continue
        min_dist = min(min_dist, ring_distance(ring, point))

    if np.isinf(min_dist):
        raise DegenerateGeometryError("unable to compute distance to polygon edges")

    if point_in_polygon(point.coordinates, polygon):
        return float(-min_dist)
    return float(min_dist)


@singledispatch
def polygon_point_distance(geometry: GeoJSON, point: Point) -> float:
    """Signed distance from a point to polygonal geometry, in kilometres.

    Parameters
    ----------
    geometry : Polygon, MultiPolygon, Feature or FeatureCollection
        The polygonal geometry.
    point : Point
        The query point.

    Returns
    -------
    float
        Distance to the nearest ring edge; negative when the point is inside
        (any member of) the geometry.

    Raises
    ------
    UnsupportedVariantError
        If the geometry is not polygonal, or a collection member is not a
        recognized variant.
    EmptyGeometryError
        If a Polygon has no rings, or a multi-geometry/collection has no
        members.
    DegenerateGeometryError
        If no ring of a Polygon has 2 or more coordinates.
    NoResultError
        If no member of a MultiPolygon/FeatureCollection qualifies.

    Examples
    --------
    >>> square = Polygon([[(0, 0), (2, 0), (2, 2), (0, 2), (0, 0)]])
    >>> polygon_point_distance(square, Point((1, 1))) < 0
    True
    """
    raise UnsupportedVariantError(geometry, "polygon distance")


@polygon_point_distance.register
def _(geometry: Polygon, point: Point) -> float:
    return _polygon_distance(geometry, point)


@polygon_point_distance.register
def _(geometry: MultiPolygon, point: Point) -> float:
    if not geometry.coordinates:
        raise EmptyGeometryError("multipolygon has no polygons")
    return _combine_signed(_members(geometry.polygons, point), "multipolygon")


@polygon_point_distance.register
def _(geometry: Feature, point: Point) -> float:
    return polygon_point_distance(geometry.geometry, point)


@polygon_point_distance.register
def _(geometry: FeatureCollection, point: Point) -> float:
    if not geometry.features:
        raise EmptyGeometryError("featurecollection has no features")

    polygons = []
    for feature in geometry.features:
        member = feature.geometry
        if isinstance(member, Polygon):
            polygons.append(member)
        elif isinstance(member, MultiPolygon):
            polygons.extend(member.polygons)
        elif not isinstance(member, (Point, LineString, MultiLineString)):
            raise UnsupportedVariantError(member, "featurecollection member")

    return _combine_signed(_members(polygons, point), "featurecollection")
