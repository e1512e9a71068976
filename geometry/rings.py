"""
Ring and Polygon Algorithms.

Planar algorithms evaluated directly on (lon, lat) degree coordinates:
shoelace area and centroid, hole-aware polygon centroid, and a
boundary-inclusive ray-casting point-in-polygon test.

Notes
-----
Areas are in square degrees ("planar-equivalent units"). They are only used
as relative weights and for validity checks, never as physical areas.
"""

from typing import Optional, Sequence, Tuple

from common.constants import GeodeticConstants
from common.exceptions import DegenerateGeometryError, EmptyGeometryError
from common.logging_config import get_logger
from common.types import Polygon, Position

logger = get_logger(__name__)


def close_ring(ring: Sequence[Position]) -> Tuple[Position, ...]:
    """Return the ring with its first position appended if it is open.

    Always builds a new tuple; the input is never modified.
    """
    coords = tuple(ring)
    if coords and coords[0] != coords[-1]:
        coords = coords + (coords[0],)
    return coords


def ring_area_centroid(ring: Sequence[Position]) -> Tuple[float, float, float]:
    """Signed area and centroid of a ring (shoelace formula).

    Parameters
    ----------
    ring : sequence of Position
        Ring vertices as (lon, lat). The closing edge from the last vertex
        back to the first is always included, so closed and open rings give
        the same result.

    Returns
    -------
    Tuple[float, float, float]
        (signed_area, centroid_lon, centroid_lat). Counter-clockwise rings
        have positive area. Rings with fewer than 3 points, or with zero
        area, give ``(0, 0, 0)``.
    """
    n = len(ring)
    if n < 3:
        return 0.0, 0.0, 0.0

    area = 0.0
    cx = 0.0
    cy = 0.0
    for i in range(n):
        x0, y0 = ring[i]
        x1, y1 = ring[(i + 1) % n]
        cross = x0 * y1 - x1 * y0
        area += cross
        cx += (x0 + x1) * cross
        cy += (y0 + y1) * cross

    area *= 0.5
    if area == 0:
        return 0.0, 0.0, 0.0
    return area, cx / (6 * area), cy / (6 * area)


def polygon_centroid_area(polygon: Polygon) -> Tuple[Optional[Position], float, bool]:
    """Area-weighted centroid of a polygon with holes subtracted.

    Each hole's absolute area and weighted centroid are subtracted from the
    exterior's, whatever the winding direction of either ring.

    Returns
    -------
    Tuple[Position or None, float, bool]
        (centroid, absolute_area, valid). ``valid`` is False, with centroid
        ``None`` and area 0, when the polygon has no rings, the exterior is
        degenerate, or nothing remains after subtracting the holes.
    """
    if not polygon.coordinates:
        return None, 0.0, False

    outer_area, outer_cx, outer_cy = ring_area_centroid(polygon.coordinates[0])
    if outer_area == 0:
        return None, 0.0, False

    area_sum = abs(outer_area)
    lon_sum = outer_cx * area_sum
    lat_sum = outer_cy * area_sum

    for hole in polygon.coordinates[1:]:
        area, cx, cy = ring_area_centroid(hole)
        if area == 0:
            continue
        abs_area = abs(area)
        area_sum -= abs_area
        lon_sum -= cx * abs_area
        lat_sum -= cy * abs_area

    if area_sum <= 0:
        logger.debug("Polygon holes cover the whole exterior; no centroid")
        return None, 0.0, False
    return (lon_sum / area_sum, lat_sum / area_sum), area_sum, True


def polygon_area(polygon: Polygon) -> float:
    """Absolute area of a polygon minus its holes, in square degrees.

    Raises
    ------
    EmptyGeometryError
        If the polygon has no rings.
    DegenerateGeometryError
        If the exterior is degenerate or fully covered by holes.
    """
    if not polygon.coordinates:
        raise EmptyGeometryError("polygon has no coordinates")
    _, area, valid = polygon_centroid_area(polygon)
    if not valid:
        raise DegenerateGeometryError("polygon has no positive area")
    return area


def polygon_centroid(polygon: Polygon) -> Position:
    """Hole-aware centroid of a polygon. Raises like :func:`polygon_area`."""
    if not polygon.coordinates:
        raise EmptyGeometryError("polygon has no coordinates")
    centroid, _, valid = polygon_centroid_area(polygon)
    if not valid:
        raise DegenerateGeometryError("polygon has no positive area")
    return centroid


def point_on_segment(p: Position, a: Position, b: Position) -> bool:
    """Whether ``p`` lies on the segment ``a``-``b``.

    Collinearity (cross product) and parametric bounds (dot product) are both
    tested against a fixed absolute tolerance in degree space.
    """
    eps = GeodeticConstants.BOUNDARY_EPSILON
    ax, ay = a
    bx, by = b
    px, py = p

    cross = (px - ax) * (by - ay) - (py - ay) * (bx - ax)
    if abs(cross) > eps:
        return False
    dot = (px - ax) * (bx - ax) + (py - ay) * (by - ay)
    if dot < -eps:
        return False
    sq_len = (bx - ax) * (bx - ax) + (by - ay) * (by - ay)
    if dot - sq_len > eps:
        return False
    return True


def point_in_ring(point: Position, ring: Sequence[Position]) -> bool:
    """Boundary-inclusive point-in-ring test.

    A point on any edge (including the implicit closing edge of an open ring)
    is inside. Otherwise a horizontal ray towards +lon is cast and edge
    crossings are counted with the half-open rule ``(yi > y) != (yj > y)``.
    Rings with fewer than 3 points contain nothing.
    """
    n = len(ring)
    if n < 3:
        return False

    for i in range(n - 1):
        if point_on_segment(point, ring[i], ring[i + 1]):
            return True
    if ring[0] != ring[n - 1] and point_on_segment(point, ring[n - 1], ring[0]):
        return True

    inside = False
    x, y = point
    j = n - 1
    for i in range(n):
        xi, yi = ring[i]
        xj, yj = ring[j]
        if (yi > y) != (yj > y) and x < (xj - xi) * (y - yi) / (yj - yi) + xi:
            inside = not inside
        j = i
    return inside


def point_in_polygon(point: Position, polygon: Polygon) -> bool:
    """Inside the exterior ring and not inside any hole.

    A point on a hole's boundary counts as in the hole and is therefore
    outside the polygon.
    """
    if not polygon.coordinates:
        return False
    if not point_in_ring(point, polygon.coordinates[0]):
        return False
    for hole in polygon.coordinates[1:]:
        if point_in_ring(point, hole):
            return False
    return True
