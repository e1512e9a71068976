"""
Uniform traversal over the geometry variants.

Dispatch is by concrete variant class via ``functools.singledispatch``. The
fallback registered for ``object`` raises ``UnsupportedVariantError``, so an
unknown object (or a Feature whose geometry is ``None``) is reported rather
than silently skipped.
"""

from functools import singledispatch
from typing import Iterator, List

from common.exceptions import UnsupportedVariantError
from common.types import (
    Feature,
    FeatureCollection,
    GeoJSON,
    GEOMETRY_TYPES,
    LineString,
    MultiLineString,
    MultiPolygon,
    Point,
    Polygon,
    Position,
)


def is_geometry(obj: object) -> bool:
    """True if ``obj`` is one of the recognized variants."""
    return isinstance(obj, GEOMETRY_TYPES)


def require_geometry(obj: object, context: str = "") -> GeoJSON:
    """Return ``obj`` unchanged, or raise if it is not a recognized variant."""
    if not is_geometry(obj):
        raise UnsupportedVariantError(obj, context)
    return obj


@singledispatch
def iter_positions(geometry: GeoJSON) -> Iterator[Position]:
    """Yield every position of a geometry in document order.

    Polygon rings are yielded exterior first, then holes; multi-geometries
    member by member; a FeatureCollection feature by feature.

    Raises
    ------
    UnsupportedVariantError
        On the first object that is not a recognized variant. Positions
        already yielded before it have been produced.
    """
    raise UnsupportedVariantError(geometry, "position traversal")


@iter_positions.register
def _(geometry: Point) -> Iterator[Position]:
    yield geometry.coordinates


@iter_positions.register
def _(geometry: LineString) -> Iterator[Position]:
    yield from geometry.coordinates


@iter_positions.register
def _(geometry: Polygon) -> Iterator[Position]:
    for ring in geometry.coordinates:
        yield from ring


@iter_positions.register
def _(geometry: MultiLineString) -> Iterator[Position]:
    for line in geometry.coordinates:
        yield from line


@iter_positions.register
def _(geometry: MultiPolygon) -> Iterator[Position]:
    for polygon in geometry.coordinates:
        for ring in polygon:
            yield from ring


@iter_positions.register
def _(geometry: Feature) -> Iterator[Position]:
    yield from iter_positions(geometry.geometry)


@iter_positions.register
def _(geometry: FeatureCollection) -> Iterator[Position]:
    for feature in geometry.features:
        yield from iter_positions(feature)


def collect_positions(geometry: GeoJSON) -> List[Position]:
    """All positions of a geometry as a list, in document order.

    The whole traversal completes before anything is returned, so an
    unsupported member anywhere aborts the call.
    """
    return list(iter_positions(geometry))
