"""
Composite spatial queries over any geometry variant.

This module provides:
- Bounding-box center and mass-weighted center
- Point-on-surface selection
- Signed point-to-polygon distance
- Antimeridian-aware great-circle routes
- Point-level navigation helpers
"""

from spatial_queries.center import (
    MassAccumulator,
    center,
    center_of_mass,
)

from spatial_queries.surface import point_on_surface

from spatial_queries.polygon_distance import (
    ring_distance,
    polygon_point_distance,
)

from spatial_queries.routes import (
    RouteConfig,
    great_circle_route,
    great_circle_route_by_distance,
)

from spatial_queries.navigation import (
    point_distance,
    point_bearing,
    point_destination,
    point_rhumb_distance,
    point_rhumb_bearing,
    point_rhumb_destination,
)

__all__ = [
    # Centers
    "MassAccumulator",
    "center",
    "center_of_mass",
    "point_on_surface",
    # Polygon distance
    "ring_distance",
    "polygon_point_distance",
    # Routes
    "RouteConfig",
    "great_circle_route",
    "great_circle_route_by_distance",
    # Navigation
    "point_distance",
    "point_bearing",
    "point_destination",
    "point_rhumb_distance",
    "point_rhumb_bearing",
    "point_rhumb_destination",
]
