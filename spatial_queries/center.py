"""
Center and Center-of-Mass Queries.

Two notions of "center" over any geometry variant:

- :func:`center` is the midpoint of the longitude/latitude bounding box of
  every position.
- :func:`center_of_mass` weights contributions by the highest-dimension
  geometry present: polygons by area, else lines by length, else points by
  count.

Center-of-mass Accumulation
---------------------------
The traversal folds contributions into a :class:`MassAccumulator` that is
created fresh for each top-level call and never shared. Degenerate
contributions (zero-area polygons, lines shorter than 2 coordinates or of
zero length) are skipped rather than weighted by zero; an unsupported
variant anywhere aborts the whole query.
"""

from dataclasses import dataclass
from functools import singledispatch

from common.exceptions import NoResultError, UnsupportedVariantError
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
from geometry.lines import line_midpoint_with_length
from geometry.rings import polygon_centroid_area
from geometry.traversal import iter_positions

logger = get_logger(__name__)


def center(geometry: GeoJSON) -> Point:
    """Midpoint of the bounding box of all positions.

    Parameters
    ----------
    geometry : GeoJSON
        Any variant.

    Returns
    -------
    Point
        ``((min_lon + max_lon) / 2, (min_lat + max_lat) / 2)``. The box is
        taken in plain degree space, without antimeridian wrapping.

    Raises
    ------
    UnsupportedVariantError
        If any member is not a recognized variant.
    NoResultError
        If the geometry has no positions.
    """
    positions = list(iter_positions(geometry))
    if not positions:
        raise NoResultError("no coordinates found")

    lons = [p[0] for p in positions]
    lats = [p[1] for p in positions]
    return Point(((min(lons) + max(lons)) / 2, (min(lats) + max(lats)) / 2))


@dataclass
class MassAccumulator:
    """Running weighted sums for one center-of-mass computation."""
    area_sum: float = 0.0
    area_lon_sum: float = 0.0
    area_lat_sum: float = 0.0
    length_sum: float = 0.0
    length_lon_sum: float = 0.0
    length_lat_sum: float = 0.0
    point_count: int = 0
    point_lon_sum: float = 0.0
    point_lat_sum: float = 0.0

    def add_point(self, position: Position) -> None:
        self.point_count += 1
        self.point_lon_sum += position[0]
        self.point_lat_sum += position[1]

    def add_line(self, line: LineString) -> None:
        if len(line.coordinates) < 2:
            logger.debug("Skipping line with %d coordinates", len(line.coordinates))
            return
        length, mid = line_midpoint_with_length(line)
        if mid is None:
            logger.debug("Skipping zero-length line")
            return
        self.length_sum += length
        self.length_lon_sum += mid[0] * length
        self.length_lat_sum += mid[1] * length

    def add_polygon(self, polygon: Polygon) -> None:
        centroid, area, valid = polygon_centroid_area(polygon)
        if not valid or area == 0:
            logger.debug("Skipping degenerate polygon")
            return
        self.area_sum += area
        self.area_lon_sum += centroid[0] * area
        self.area_lat_sum += centroid[1] * area

    def result(self) -> Point:
        """The weighted center, by priority area > length > points.

        Raises
        ------
        NoResultError
            If nothing has been accumulated.
        """
        if self.area_sum > 0:
            return Point((self.area_lon_sum / self.area_sum, self.area_lat_sum / self.area_sum))
        if self.length_sum > 0:
            return Point((self.length_lon_sum / self.length_sum, self.length_lat_sum / self.length_sum))
        if self.point_count > 0:
            return Point((self.point_lon_sum / self.point_count, self.point_lat_sum / self.point_count))
        raise NoResultError("no coordinates found")


@singledispatch
def accumulate_mass(geometry: GeoJSON, acc: MassAccumulator) -> None:
    """Add a geometry's contributions to ``acc``."""
    raise UnsupportedVariantError(geometry, "center of mass")


@accumulate_mass.register
def _(geometry: Point, acc: MassAccumulator) -> None:
    acc.add_point(geometry.coordinates)


@accumulate_mass.register
def _(geometry: LineString, acc: MassAccumulator) -> None:
    acc.add_line(geometry)


@accumulate_mass.register
def _(geometry: Polygon, acc: MassAccumulator) -> None:
    acc.add_polygon(geometry)


@accumulate_mass.register
def _(geometry: MultiLineString, acc: MassAccumulator) -> None:
    for line in geometry.lines:
        acc.add_line(line)


@accumulate_mass.register
def _(geometry: MultiPolygon, acc: MassAccumulator) -> None:
    for polygon in geometry.polygons:
        acc.add_polygon(polygon)


@accumulate_mass.register
def _(geometry: Feature, acc: MassAccumulator) -> None:
    accumulate_mass(geometry.geometry, acc)


@accumulate_mass.register
def _(geometry: FeatureCollection, acc: MassAccumulator) -> None:
    for feature in geometry.features:
        accumulate_mass(feature, acc)


def center_of_mass(geometry: GeoJSON) -> Point:
    """Mass-weighted center of a geometry.

    Polygons contribute their hole-aware centroid weighted by area, lines
    their arc-length midpoint weighted by length, points their position
    with unit weight. Only the highest-dimension kind that accumulated any
    weight determines the result.

    Raises
    ------
    UnsupportedVariantError
        If any member is not a recognized variant.
    NoResultError
        If no member contributed any weight.

    Examples
    --------
    >>> square = Polygon([[(0, 0), (2, 0), (2, 2), (0, 2), (0, 0)]])
    >>> center_of_mass(square).coordinates
    (1.0, 1.0)
    """
    acc = MassAccumulator()
    accumulate_mass(geometry, acc)
    return acc.result()
