"""
Geometry Type Definitions for the Navigation Core.

This module defines the closed set of GeoJSON-shaped geometry variants used
throughout the system. Every algorithm downstream dispatches over exactly
these classes; an object of any other type is reported as unsupported.

Coordinate Convention
---------------------
Positions are stored GeoJSON-style as ``(longitude, latitude)`` in DEGREES,
longitude first. The spherical primitives in ``geospatial`` take their
arguments in ``(lat, lon)`` order instead; use :meth:`Point.lat_lon` and
:meth:`Point.from_lat_lon` to cross between the two.

Immutability
------------
All variants are frozen dataclasses. Constructors copy nested sequences into
tuples, so a caller's lists are never aliased or mutated by the core.
"""

from dataclasses import dataclass, field
from typing import Any, ClassVar, Iterable, Mapping, Optional, Sequence, Tuple, Union

from common.exceptions import UnsupportedVariantError

# (longitude, latitude) in degrees
Position = Tuple[float, float]
Ring = Tuple[Position, ...]


def _to_position(value: Sequence[float]) -> Position:
    """Copy a 2-sequence into a ``(lon, lat)`` float tuple."""
    if isinstance(value, (str, bytes)):
        raise TypeError(f"Position must be a sequence of numbers, got {value!r}")
    if len(value) < 2:
        raise ValueError(f"Position needs longitude and latitude, got {value!r}")
    return (float(value[0]), float(value[1]))


def _to_positions(values: Iterable[Sequence[float]]) -> Tuple[Position, ...]:
    return tuple(_to_position(v) for v in values)


@dataclass(frozen=True)
class Point:
    """A single position.

    Attributes
    ----------
    coordinates : Position
        ``(longitude, latitude)`` in degrees.

    Examples
    --------
    >>> p = Point.from_lat_lon(51.5074, -0.1278)
    >>> p.coordinates
    (-0.1278, 51.5074)
    """
    coordinates: Position

    type: ClassVar[str] = "Point"

    def __post_init__(self):
        object.__setattr__(self, "coordinates", _to_position(self.coordinates))

    @classmethod
    def from_lat_lon(cls, lat: float, lon: float) -> 'Point':
        """Create a point from primitive-order ``(lat, lon)`` arguments."""
        return cls((lon, lat))

    @property
    def lon(self) -> float:
        return self.coordinates[0]

    @property
    def lat(self) -> float:
        return self.coordinates[1]

    @property
    def lat_lon(self) -> Tuple[float, float]:
        """The position in ``(lat, lon)`` order."""
        return self.coordinates[1], self.coordinates[0]


@dataclass(frozen=True)
class LineString:
    """An ordered sequence of positions. Most operations need at least 2."""
    coordinates: Tuple[Position, ...] = ()

    type: ClassVar[str] = "LineString"

    def __post_init__(self):
        object.__setattr__(self, "coordinates", _to_positions(self.coordinates))


@dataclass(frozen=True)
class Polygon:
    """A sequence of rings; ring 0 is the exterior, the rest are holes.

    Rings are expected to be closed (first position equals last) but this is
    not enforced.
    """
    coordinates: Tuple[Ring, ...] = ()

    type: ClassVar[str] = "Polygon"

    def __post_init__(self):
        object.__setattr__(
            self, "coordinates", tuple(_to_positions(r) for r in self.coordinates)
        )

    @property
    def exterior(self) -> Optional[Ring]:
        return self.coordinates[0] if self.coordinates else None

    @property
    def holes(self) -> Tuple[Ring, ...]:
        return self.coordinates[1:]


@dataclass(frozen=True)
class MultiLineString:
    """Line bodies without per-member metadata."""
    coordinates: Tuple[Tuple[Position, ...], ...] = ()

    type: ClassVar[str] = "MultiLineString"

    def __post_init__(self):
        object.__setattr__(
            self, "coordinates", tuple(_to_positions(l) for l in self.coordinates)
        )

    @property
    def lines(self) -> Tuple[LineString, ...]:
        return tuple(LineString(c) for c in self.coordinates)


@dataclass(frozen=True)
class MultiPolygon:
    """Polygon bodies without per-member metadata."""
    coordinates: Tuple[Tuple[Ring, ...], ...] = ()

    type: ClassVar[str] = "MultiPolygon"

    def __post_init__(self):
        object.__setattr__(
            self,
            "coordinates",
            tuple(tuple(_to_positions(r) for r in poly) for poly in self.coordinates),
        )

    @property
    def polygons(self) -> Tuple[Polygon, ...]:
        return tuple(Polygon(c) for c in self.coordinates)


# Bare geometries (what a Feature may wrap)
Geometry = Union[Point, LineString, Polygon, MultiLineString, MultiPolygon]


@dataclass(frozen=True)
class Feature:
    """A geometry plus opaque properties.

    Attributes
    ----------
    geometry : Geometry or None
        The wrapped geometry. ``None`` is accepted for GeoJSON null
        geometries but is rejected by every algorithm.
    properties : Mapping
        Arbitrary metadata, not interpreted by the core. Excluded from
        equality.
    """
    geometry: Optional[Geometry]
    properties: Mapping[str, Any] = field(default_factory=dict, compare=False)

    type: ClassVar[str] = "Feature"


@dataclass(frozen=True)
class FeatureCollection:
    """An ordered sequence of features.

    Raises
    ------
    UnsupportedVariantError
        If any member is not a :class:`Feature`.
    """
    features: Tuple[Feature, ...] = ()

    type: ClassVar[str] = "FeatureCollection"

    def __post_init__(self):
        features = tuple(self.features)
        for member in features:
            if not isinstance(member, Feature):
                raise UnsupportedVariantError(member, "featurecollection member")
        object.__setattr__(self, "features", features)


# Anything an algorithm accepts
GeoJSON = Union[Geometry, Feature, FeatureCollection]

# The closed set of recognized variants
GEOMETRY_TYPES = (
    Point,
    LineString,
    Polygon,
    MultiLineString,
    MultiPolygon,
    Feature,
    FeatureCollection,
)

TYPES_BY_NAME = {cls.type: cls for cls in GEOMETRY_TYPES}
