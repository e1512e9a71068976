"""
GeoJSON serialization of the geometry variants.

Encoding and decoding go through the ``geojson`` library: :func:`to_geojson`
builds ``geojson`` objects (plain ``dict`` subclasses with RFC 7946 member
names), and :func:`loads` parses text into them before they are converted to
the immutable variants in ``common.types``.

Coordinates are written as ``[longitude, latitude]`` lists rounded to
``GEOJSON_COORDINATE_PRECISION`` decimal places, the ``geojson`` library's
default, which is about 0.1 m on the ground. Features always carry a
``"properties"`` member, as RFC 7946 requires.
"""

from functools import singledispatch
from typing import Any, Mapping

import geojson

from common.exceptions import UnsupportedVariantError
from common.types import (
    Feature,
    FeatureCollection,
    GeoJSON,
    LineString,
    MultiLineString,
    MultiPolygon,
    Point,
    Polygon,
    TYPES_BY_NAME,
)

GEOJSON_COORDINATE_PRECISION = 6

_GEOMETRY_CLASSES = (
    geojson.Point,
    geojson.LineString,
    geojson.Polygon,
    geojson.MultiLineString,
    geojson.MultiPolygon,
)


@singledispatch
def to_geojson(geometry: GeoJSON) -> geojson.GeoJSON:
    """Convert a geometry to the matching ``geojson`` object.

    Raises
    ------
    UnsupportedVariantError
        If ``geometry`` is not a recognized variant.
    """
    raise UnsupportedVariantError(geometry, "serialization")


@to_geojson.register
def _(geometry: Point) -> geojson.Point:
    return geojson.Point(geometry.coordinates, precision=GEOJSON_COORDINATE_PRECISION)


@to_geojson.register
def _(geometry: LineString) -> geojson.LineString:
    return geojson.LineString(geometry.coordinates, precision=GEOJSON_COORDINATE_PRECISION)


@to_geojson.register
def _(geometry: Polygon) -> geojson.Polygon:
    return geojson.Polygon(geometry.coordinates, precision=GEOJSON_COORDINATE_PRECISION)


@to_geojson.register
def _(geometry: MultiLineString) -> geojson.MultiLineString:
    return geojson.MultiLineString(geometry.coordinates, precision=GEOJSON_COORDINATE_PRECISION)


@to_geojson.register
def _(geometry: MultiPolygon) -> geojson.MultiPolygon:
    return geojson.MultiPolygon(geometry.coordinates, precision=GEOJSON_COORDINATE_PRECISION)


@to_geojson.register
def _(geometry: Feature) -> geojson.Feature:
    return geojson.Feature(
        geometry=None if geometry.geometry is None else to_geojson(geometry.geometry),
        properties=dict(geometry.properties),
    )


@to_geojson.register
def _(geometry: FeatureCollection) -> geojson.FeatureCollection:
    return geojson.FeatureCollection([to_geojson(feature) for feature in geometry.features])


def _to_instance(mapping: Mapping[str, Any]) -> geojson.GeoJSON:
    if not isinstance(mapping, Mapping):
        raise UnsupportedVariantError(mapping, "GeoJSON decoding")
    try:
        return geojson.GeoJSON.to_instance(mapping, strict=True)
    except (TypeError, ValueError) as e:
        raise UnsupportedVariantError(mapping, f"GeoJSON decoding ({e})") from e


def _check_valid(obj: geojson.GeoJSON) -> None:
    if not obj.is_valid:
        raise UnsupportedVariantError(obj, f"GeoJSON validation ({obj.errors()})")


def from_geojson(mapping: Mapping[str, Any], validate: bool = False) -> GeoJSON:
    """Build a geometry from a GeoJSON mapping.

    Parameters
    ----------
    mapping : Mapping
        A decoded GeoJSON object with a ``"type"`` member; either a plain
        ``dict`` or a ``geojson`` object.
    validate : bool
        Also apply the ``geojson`` library's RFC 7946 checks to every
        geometry (closed rings of 4 or more positions, lines of 2 or more).
        Off by default, since the algorithms accept open rings and report
        short lines themselves.

    Returns
    -------
    GeoJSON
        The matching immutable variant.

    Raises
    ------
    UnsupportedVariantError
        For a non-mapping, an unknown ``"type"``, malformed coordinates,
        non-mapping properties, a collection member that is not a Feature,
        or (with ``validate``) a geometry the ``geojson`` library rejects.
    """
    obj = _to_instance(mapping)

    if isinstance(obj, _GEOMETRY_CLASSES):
        if validate:
            _check_valid(obj)
        try:
            return TYPES_BY_NAME[obj["type"]](obj["coordinates"])
        except (TypeError, ValueError) as e:
            raise UnsupportedVariantError(obj, f"malformed {obj['type']} coordinates") from e

    if isinstance(obj, geojson.Feature):
        properties = obj.get("properties")
        if properties is not None and not isinstance(properties, Mapping):
            raise UnsupportedVariantError(properties, "feature properties")
        geometry = obj.get("geometry")
        return Feature(
            geometry=None if geometry is None else _bare_geometry(geometry, validate),
            properties=dict(properties or {}),
        )

    if isinstance(obj, geojson.FeatureCollection):
        members = obj.get("features")
        if not isinstance(members, (list, tuple)):
            raise UnsupportedVariantError(members, "featurecollection features")
        return FeatureCollection(tuple(from_geojson(f, validate) for f in members))

    raise UnsupportedVariantError(obj, f"GeoJSON type {obj.get('type')!r}")


def _bare_geometry(mapping: Mapping[str, Any], validate: bool):
    geometry = from_geojson(mapping, validate)
    if isinstance(geometry, (Feature, FeatureCollection)):
        raise UnsupportedVariantError(geometry, "feature geometry")
    return geometry


def dumps(geometry: GeoJSON, **kwargs) -> str:
    """Serialize a geometry to GeoJSON text. Keyword arguments go to ``geojson.dumps``."""
    return geojson.dumps(to_geojson(geometry), **kwargs)


def loads(text: str, validate: bool = False) -> GeoJSON:
    """Parse GeoJSON text into a geometry.

    Raises
    ------
    UnsupportedVariantError
        For text that is not JSON, or any of the cases of
        :func:`from_geojson`.
    """
    try:
        obj = geojson.loads(text)
    except (TypeError, ValueError) as e:
        raise UnsupportedVariantError(text, f"GeoJSON text ({e})") from e
    return from_geojson(obj, validate)
