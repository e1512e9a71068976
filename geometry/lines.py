"""
Line Algorithms.

Arc-length parametrization of a polyline along great circles, and
nearest-distance queries from a point to a polyline.
"""

from typing import Optional, Tuple, Union

import numpy as np
import pint

from common.exceptions import DegenerateGeometryError
from common.types import LineString, Point, Position
from common.units import as_kilometers
from geospatial.distance_calculations import great_circle_distance
from geospatial.projections import (
    great_circle_intermediate_point,
    great_circle_project,
    great_circle_project_to_segment,
)


def _require_segments(line: LineString) -> None:
    if len(line.coordinates) < 2:
        raise DegenerateGeometryError("linestring must have at least 2 coordinates")


def _segment_lengths(line: LineString):
    for (lon1, lat1), (lon2, lat2) in zip(line.coordinates, line.coordinates[1:]):
        yield great_circle_distance(lat1, lon1, lat2, lon2)


def line_string_length_km(line: LineString) -> float:
    """Total great-circle length of a line in kilometres.

    Raises
    ------
    DegenerateGeometryError
        If the line has fewer than 2 coordinates.
    """
    _require_segments(line)
    return float(sum(_segment_lengths(line)))


def point_at_distance(
    line: LineString,
    distance_km: Union[float, pint.Quantity]
) -> Point:
    """Point at a given distance along a line.

    Parameters
    ----------
    line : LineString
        At least 2 coordinates.
    distance_km : float or pint.Quantity
        Distance from the first coordinate, in kilometres if a bare number.

    Returns
    -------
    Point
        The first coordinate for distances <= 0, the last coordinate for
        distances beyond the line's length, otherwise the great-circle
        interpolated point within the covering segment.

    Raises
    ------
    DegenerateGeometryError
        If the line has fewer than 2 coordinates.
    """
    _require_segments(line)
    distance_km = as_kilometers(distance_km)
    if distance_km <= 0:
        return Point(line.coordinates[0])

    remaining = distance_km
    for (lon1, lat1), (lon2, lat2) in zip(line.coordinates, line.coordinates[1:]):
        seg = great_circle_distance(lat1, lon1, lat2, lon2)
        if remaining <= seg:
            fraction = remaining / seg
            lat, lon = great_circle_intermediate_point(lat1, lon1, lat2, lon2, fraction)
            return Point.from_lat_lon(lat, lon)
        remaining -= seg

    return Point(line.coordinates[-1])


def line_midpoint_with_length(line: LineString) -> Tuple[float, Optional[Position]]:
    """Length of a line and its arc-length midpoint.

    Returns
    -------
    Tuple[float, Position or None]
        (length_km, midpoint). The midpoint is ``None`` for a zero-length
        line.
    """
    length = line_string_length_km(line)
    if length == 0:
        return length, None
    return length, point_at_distance(line, length / 2).coordinates


def line_midpoint(line: LineString) -> Point:
    """Arc-length midpoint; the first coordinate for a zero-length line."""
    length, mid = line_midpoint_with_length(line)
    if mid is None:
        return Point(line.coordinates[0])
    return Point(mid)


def line_point_distance(line: LineString, point: Point) -> float:
    """Perpendicular distance from a point to a line, in kilometres.

    The minimum over all segments of the absolute cross-track distance to
    the INFINITE great circle through the segment. Feet of perpendiculars
    outside a segment's endpoints still count; use
    :func:`line_point_distance_to_segments` for endpoint-clamped distance.

    Raises
    ------
    DegenerateGeometryError
        If the line has fewer than 2 coordinates.
    """
    _require_segments(line)
    lat_p, lon_p = point.lat_lon
    min_dist = np.inf
    for (lon1, lat1), (lon2, lat2) in zip(line.coordinates, line.coordinates[1:]):
        projection = great_circle_project(lat1, lon1, lat2, lon2, lat_p, lon_p)
        min_dist = min(min_dist, abs(projection.cross_track_km))
    return float(min_dist)


def line_point_distance_to_segments(line: LineString, point: Point) -> float:
    """Distance from a point to the nearest point ON a line, in kilometres.

    Like :func:`line_point_distance` but each segment is clamped at its
    endpoints.
    """
    _require_segments(line)
    lat_p, lon_p = point.lat_lon
    min_dist = np.inf
    for (lon1, lat1), (lon2, lat2) in zip(line.coordinates, line.coordinates[1:]):
        projection = great_circle_project_to_segment(lat1, lon1, lat2, lon2, lat_p, lon_p)
        min_dist = min(min_dist, abs(projection.cross_track_km))
    return float(min_dist)


def nearest_point_on_line(line: LineString, point: Point) -> Tuple[Point, float]:
    """Nearest point on a line and its distance in kilometres.

    Segments are clamped at their endpoints. Ties keep the earliest segment.
    """
    _require_segments(line)
    lat_p, lon_p = point.lat_lon
    best = None
    best_dist = np.inf
    for (lon1, lat1), (lon2, lat2) in zip(line.coordinates, line.coordinates[1:]):
        projection = great_circle_project_to_segment(lat1, lon1, lat2, lon2, lat_p, lon_p)
        dist = abs(projection.cross_track_km)
        if dist < best_dist:
            best_dist = dist
            best = projection
    return Point.from_lat_lon(best.lat, best.lon), float(best_dist)
