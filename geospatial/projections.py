"""
Great-Circle Interpolation and Projection.

This module places points ON a great circle: interpolating between two
endpoints, and projecting an arbitrary point onto the great circle through
two endpoints (cross-track / along-track decomposition).

Two projectors are provided and they are NOT interchangeable:

- :func:`great_circle_project` projects onto the infinite great circle.
  Along-track distance is signed and may fall outside the segment, and the
  cross-track distance is always the perpendicular one.
- :func:`great_circle_project_to_segment` clamps to the segment. Beyond
  either end it returns that endpoint, and the cross-track distance becomes
  the straight great-circle distance to it.

For a point far outside a short segment's span the unclamped cross-track
distance can be much smaller than the clamped one.

References
----------
- Veness, C. Cross-track distance and along-track distance.
  https://www.movable-type.co.uk/scripts/latlong.html#cross-track
"""

from dataclasses import dataclass
from typing import Tuple
import numpy as np

from geospatial.coordinate_models import (
    angular_distance,
    angular_to_km,
    cartesian_to_spherical,
    normalize_longitude,
    spherical_to_cartesian,
    to_degrees,
    to_radians,
)
from geospatial.distance_calculations import (
    destination_point,
    great_circle_distance,
    initial_bearing,
)


@dataclass(frozen=True)
class GreatCircleProjection:
    """Result of projecting a point onto a great-circle path.

    Attributes
    ----------
    lat, lon : float
        The projected point in degrees, longitude normalized.
    cross_track_km : float
        Signed perpendicular distance from the path. Positive means the point
        lies to the right of the direction of travel.
    along_track_km : float
        Signed distance from the path start to the foot of the projection.
        Negative values lie behind the start.
    """
    lat: float
    lon: float
    cross_track_km: float
    along_track_km: float

    def __iter__(self):
        return iter((self.lat, self.lon, self.cross_track_km, self.along_track_km))


def great_circle_intermediate_point(
    lat1: float,
    lon1: float,
    lat2: float,
    lon2: float,
    fraction: float
) -> Tuple[float, float]:
    """Point at a fraction of the way along the great circle.

    Parameters
    ----------
    lat1, lon1 : float
        Start point in degrees.
    lat2, lon2 : float
        End point in degrees.
    fraction : float
        0 gives the start, 1 the end. Values outside [0, 1] extrapolate
        along the same great circle.

    Returns
    -------
    Tuple[float, float]
        (lat, lon) in degrees, longitude normalized to [-180, 180).

    Notes
    -----
    Spherical linear interpolation of the endpoint unit vectors:

        a = sin((1−f)·δ) / sin δ,   b = sin(f·δ) / sin δ
        v = a·v1 + b·v2

    Coincident endpoints (δ = 0) return the start unchanged apart from
    longitude normalization. Exactly antipodal endpoints have no unique
    great circle and give an arbitrary result.
    """
    delta = angular_distance(lat1, lon1, lat2, lon2)
    if delta == 0:
        return float(lat1), normalize_longitude(lon1)

    sin_delta = np.sin(delta)
    a = np.sin((1 - fraction) * delta) / sin_delta
    b = np.sin(fraction * delta) / sin_delta

    x1, y1, z1 = spherical_to_cartesian(to_radians(lat1), to_radians(lon1))
    x2, y2, z2 = spherical_to_cartesian(to_radians(lat2), to_radians(lon2))

    lat_rad, lon_rad = cartesian_to_spherical(
        a * x1 + b * x2,
        a * y1 + b * y2,
        a * z1 + b * z2,
    )
    return to_degrees(lat_rad), normalize_longitude(to_degrees(lon_rad))


def great_circle_project(
    lat1: float,
    lon1: float,
    lat2: float,
    lon2: float,
    lat_p: float,
    lon_p: float
) -> GreatCircleProjection:
    """Project a point onto the infinite great circle through two points.

    Parameters
    ----------
    lat1, lon1 : float
        Path start in degrees.
    lat2, lon2 : float
        Path end in degrees (defines the direction only).
    lat_p, lon_p : float
        Point to project, in degrees.

    Returns
    -------
    GreatCircleProjection
        Projected point with signed, unclamped cross- and along-track
        distances in kilometres.

    Notes
    -----
    δxt = asin(sin δ13 · sin(θ13 − θ12))
    δat = ± acos(cos δ13 / cos δxt), sign of cos(θ13 − θ12)

    A zero-length path has no direction: the start is returned with
    along-track 0 and cross-track equal to the distance to the start.
    """
    delta12 = angular_distance(lat1, lon1, lat2, lon2)
    delta13 = angular_distance(lat1, lon1, lat_p, lon_p)

    if delta12 == 0:
        return GreatCircleProjection(
            lat=float(lat1),
            lon=normalize_longitude(lon1),
            cross_track_km=angular_to_km(delta13),
            along_track_km=0.0,
        )

    theta12 = to_radians(initial_bearing(lat1, lon1, lat2, lon2))
    theta13 = to_radians(initial_bearing(lat1, lon1, lat_p, lon_p))
    d_theta = theta13 - theta12

    delta_xt = float(np.arcsin(np.clip(np.sin(delta13) * np.sin(d_theta), -1.0, 1.0)))

    cos_xt = np.cos(delta_xt)
    if cos_xt == 0:
        # Point is a pole of the path: every foot is equally near
        delta_at = 0.0
    else:
        delta_at = float(np.arccos(np.clip(np.cos(delta13) / cos_xt, -1.0, 1.0)))
        if np.cos(d_theta) < 0:
            delta_at = -delta_at

    along_track_km = angular_to_km(delta_at)
    lat, lon = destination_point(lat1, lon1, to_degrees(theta12), along_track_km)

    return GreatCircleProjection(
        lat=lat,
        lon=lon,
        cross_track_km=angular_to_km(delta_xt),
        along_track_km=along_track_km,
    )


def great_circle_project_to_segment(
    lat1: float,
    lon1: float,
    lat2: float,
    lon2: float,
    lat_p: float,
    lon_p: float
) -> GreatCircleProjection:
    """Project a point onto the great-circle SEGMENT between two points.

    Same as :func:`great_circle_project` while the foot of the projection
    lies within the segment. Otherwise the nearer endpoint is returned, the
    along-track distance is clamped to 0 or the segment length, and the
    cross-track distance is the great-circle distance to that endpoint.

    Returns
    -------
    GreatCircleProjection
        Projected point with distances in kilometres.
    """
    projection = great_circle_project(lat1, lon1, lat2, lon2, lat_p, lon_p)
    total_km = great_circle_distance(lat1, lon1, lat2, lon2)

    if total_km == 0:
        return projection

    if projection.along_track_km < 0:
        return GreatCircleProjection(
            lat=float(lat1),
            lon=normalize_longitude(lon1),
            cross_track_km=great_circle_distance(lat_p, lon_p, lat1, lon1),
            along_track_km=0.0,
        )
    if projection.along_track_km > total_km:
        return GreatCircleProjection(
            lat=float(lat2),
            lon=normalize_longitude(lon2),
            cross_track_km=great_circle_distance(lat_p, lon_p, lat2, lon2),
            along_track_km=total_km,
        )
    return projection
