"""
Geospatial Module for the Spherical Navigation Core.

All Earth-surface calculations system-wide originate from this module. The
geometry algorithms in ``geometry`` and ``spatial_queries`` never evaluate
spherical trigonometry themselves.

This module provides:
- Angle conventions and spherical coordinate conversions
- Great-circle and rhumb-line distance, bearing and destination
- Great-circle interpolation and projection (unclamped and segment-clamped)
"""

from geospatial.coordinate_models import (
    to_radians,
    to_degrees,
    normalize_longitude,
    normalize_bearing,
    angular_distance,
)

from geospatial.distance_calculations import (
    great_circle_distance,
    great_circle_distance_batch,
    distance_matrix,
    initial_bearing,
    destination_point,
    rhumb_line_distance,
    rhumb_line_distance_units,
    rhumb_line_bearing,
    rhumb_line_destination,
)

from geospatial.projections import (
    GreatCircleProjection,
    great_circle_intermediate_point,
    great_circle_project,
    great_circle_project_to_segment,
)

__all__ = [
    # Coordinate models
    "to_radians",
    "to_degrees",
    "normalize_longitude",
    "normalize_bearing",
    "angular_distance",
    # Distance calculations
    "great_circle_distance",
    "great_circle_distance_batch",
    "distance_matrix",
    "initial_bearing",
    "destination_point",
    "rhumb_line_distance",
    "rhumb_line_distance_units",
    "rhumb_line_bearing",
    "rhumb_line_destination",
    # Projections
    "GreatCircleProjection",
    "great_circle_intermediate_point",
    "great_circle_project",
    "great_circle_project_to_segment",
]
