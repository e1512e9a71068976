"""
Great-Circle Route Generation.

A route is sampled as evenly-fractioned intermediate points along the great
circle between two endpoints. Longitudes are normalized to [-180, 180), so a
route that crosses the antimeridian shows a longitude jump of nearly 360°
between consecutive samples; the route is split there and returned as a
MultiLineString whose parts each stay on one side.
"""

from dataclasses import dataclass
from typing import List, Optional, Union

import pint

from common.logging_config import get_logger
from common.types import LineString, MultiLineString, Point, Position
from common.units import as_kilometers
from geospatial.coordinate_models import normalize_longitude
from geospatial.distance_calculations import great_circle_distance
from geospatial.projections import great_circle_intermediate_point

logger = get_logger(__name__)

Route = Union[LineString, MultiLineString]


@dataclass
class RouteConfig:
    """Configuration for route sampling.

    Attributes
    ----------
    default_npoints : int
        Point count used when the requested count is not positive.
    antimeridian_jump_deg : float
        Longitude jump between consecutive samples above which the route is
        split into a new part.
    """
    default_npoints: int = 2
    antimeridian_jump_deg: float = 180.0


def _split_at_antimeridian(positions: List[Position], jump_deg: float) -> List[List[Position]]:
    parts = [[positions[0]]]
    for prev, curr in zip(positions, positions[1:]):
        if abs(curr[0] - prev[0]) > jump_deg:
            logger.debug("Splitting route between lon %.6f and %.6f", prev[0], curr[0])
            parts.append([])
        parts[-1].append(curr)
    return parts


def great_circle_route(
    start: Point,
    end: Point,
    npoints: int = 2,
    config: Optional[RouteConfig] = None
) -> Route:
    """Sample the great circle between two points.

    Parameters
    ----------
    start, end : Point
        Route endpoints.
    npoints : int
        Number of samples including both endpoints. Non-positive values fall
        back to ``config.default_npoints``.
    config : RouteConfig, optional
        Sampling configuration.

    Returns
    -------
    LineString or MultiLineString
        A LineString when the route stays on one side of the antimeridian,
        otherwise a MultiLineString of the parts in travel order.
        Identical endpoints give a LineString repeating ``start``.

    Examples
    --------
    >>> route = great_circle_route(Point((0, 0)), Point((90, 0)), npoints=3)
    >>> [round(lon) for lon, _ in route.coordinates]
    [0, 45, 90]
    """
    config = config or RouteConfig()
    if npoints <= 0:
        npoints = config.default_npoints

    if start.coordinates == end.coordinates:
        return LineString([start.coordinates] * npoints)

    if npoints == 1:
        return LineString([(normalize_longitude(start.lon), start.lat)])

    lat1, lon1 = start.lat_lon
    lat2, lon2 = end.lat_lon
    positions = []
    for i in range(npoints):
        lat, lon = great_circle_intermediate_point(lat1, lon1, lat2, lon2, i / (npoints - 1))
        positions.append((lon, lat))

    parts = _split_at_antimeridian(positions, config.antimeridian_jump_deg)
    if len(parts) == 1:
        return LineString(parts[0])
    return MultiLineString(parts)


def great_circle_route_by_distance(
    start: Point,
    end: Point,
    spacing_km: Union[float, pint.Quantity],
    config: Optional[RouteConfig] = None
) -> Route:
    """Sample the great circle at roughly fixed spacing.

    The point count is ``max(2, int(total / spacing) + 1)``; a route shorter
    than ``spacing_km`` is just its two endpoints.

    Raises
    ------
    ValueError
        If the spacing is not positive.
    """
    spacing_km = as_kilometers(spacing_km)
    if spacing_km <= 0:
        raise ValueError(f"Route spacing must be positive, got {spacing_km}")

    total = great_circle_distance(start.lat, start.lon, end.lat, end.lon)
    npoints = max(2, int(total / spacing_km) + 1)
    return great_circle_route(start, end, npoints, config)
