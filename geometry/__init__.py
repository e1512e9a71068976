"""
Geometry Module for the Spherical Navigation Core.

Algorithms over the GeoJSON-shaped variants in ``common.types``. Spherical
trigonometry is delegated to ``geospatial``; planar ring math works directly
in degree space.

This module provides:
- Variant traversal and position flattening
- Ring closure, shoelace area/centroid and point-in-polygon
- Great-circle line length, interpolation and point-to-line distance
- GeoJSON serialization
"""

from geometry.traversal import (
    is_geometry,
    require_geometry,
    iter_positions,
    collect_positions,
)

from geometry.rings import (
    close_ring,
    ring_area_centroid,
    polygon_centroid_area,
    polygon_area,
    polygon_centroid,
    point_on_segment,
    point_in_ring,
    point_in_polygon,
)

from geometry.lines import (
    line_string_length_km,
    point_at_distance,
    line_midpoint,
    line_midpoint_with_length,
    line_point_distance,
    line_point_distance_to_segments,
    nearest_point_on_line,
)

from geometry.serialization import (
    to_geojson,
    from_geojson,
    dumps,
    loads,
)

__all__ = [
    # Traversal
    "is_geometry",
    "require_geometry",
    "iter_positions",
    "collect_positions",
    # Rings
    "close_ring",
    "ring_area_centroid",
    "polygon_centroid_area",
    "polygon_area",
    "polygon_centroid",
    "point_on_segment",
    "point_in_ring",
    "point_in_polygon",
    # Lines
    "line_string_length_km",
    "point_at_distance",
    "line_midpoint",
    "line_midpoint_with_length",
    "line_point_distance",
    "line_point_distance_to_segments",
    "nearest_point_on_line",
    # Serialization
    "to_geojson",
    "from_geojson",
    "dumps",
    "loads",
]
