"""
Point-level navigation helpers.

Thin wrappers that take :class:`Point` values, stored ``(lon, lat)``, and call
the ``(lat, lon)`` primitives in :mod:`geospatial.distance_calculations`.
"""

from typing import Union

import pint

from common.types import Point
from common.units import DistanceUnit, as_kilometers, convert_distance_from_km
from geospatial.distance_calculations import (
    destination_point,
    great_circle_distance,
    initial_bearing,
    rhumb_line_bearing,
    rhumb_line_destination,
    rhumb_line_distance_units,
)


def point_distance(
    start: Point,
    end: Point,
    unit: DistanceUnit = DistanceUnit.KILOMETERS
) -> float:
    """Great-circle distance between two points in ``unit``."""
    km = great_circle_distance(start.lat, start.lon, end.lat, end.lon)
    return convert_distance_from_km(km, unit)


def point_bearing(start: Point, end: Point) -> float:
    """Initial great-circle bearing in degrees, [0, 360)."""
    return initial_bearing(start.lat, start.lon, end.lat, end.lon)


def point_destination(
    start: Point,
    distance_km: Union[float, pint.Quantity],
    bearing_deg: float
) -> Point:
    """Point reached along a great circle from ``start``."""
    lat, lon = destination_point(start.lat, start.lon, bearing_deg, as_kilometers(distance_km))
    return Point.from_lat_lon(lat, lon)


def point_rhumb_distance(
    start: Point,
    end: Point,
    unit: DistanceUnit = DistanceUnit.KILOMETERS
) -> float:
    """Rhumb-line distance between two points in ``unit``."""
    return rhumb_line_distance_units(start.lat, start.lon, end.lat, end.lon, unit)


def point_rhumb_bearing(start: Point, end: Point) -> float:
    """Constant rhumb-line bearing in degrees, [0, 360)."""
    return rhumb_line_bearing(start.lat, start.lon, end.lat, end.lon)


def point_rhumb_destination(
    start: Point,
    distance_km: Union[float, pint.Quantity],
    bearing_deg: float
) -> Point:
    """Point reached by holding ``bearing_deg`` for ``distance_km``.

    Parameters
    ----------
    start : Point
        Starting point.
    distance_km : float or pint.Quantity
        Distance to travel, in kilometres if a bare number.
    bearing_deg : float
        Constant bearing in degrees clockwise from north.

    Examples
    --------
    >>> p = point_rhumb_destination(Point((0, 0)), 111.19492664455873, 90)
    >>> round(p.lon, 6), round(p.lat, 6)
    (1.0, 0.0)
    """
    lat, lon = rhumb_line_destination(start.lat, start.lon, as_kilometers(distance_km), bearing_deg)
    return Point.from_lat_lon(lat, lon)
