"""
Coordinate Models for Spherical Earth Geometry.

This module implements the angle conventions and coordinate conversions the
navigation primitives are built on. The Earth is modelled as a sphere of
fixed radius (see ``GeodeticConstants.EARTH_RADIUS_KM``).

Conventions
-----------
- Angles are passed in DEGREES at the public boundary and converted to
  radians internally.
- Longitudes returned by the primitives are normalized to [-180, 180).
- Bearings are reported clockwise from true north in [0, 360).
- Latitudes are not clamped; callers supplying |lat| > 90 get whatever the
  trigonometry gives.

References
----------
- Veness, C. Calculate distance, bearing and more between latitude/longitude
  points. https://www.movable-type.co.uk/scripts/latlong.html
- Gade, K. (2010). A non-singular horizontal position representation.
  Journal of Navigation, 63(3), 395-417.
"""

from typing import Tuple
import numpy as np

from common.constants import GeodeticConstants


def to_radians(deg: float) -> float:
    """Convert degrees to radians."""
    return deg * np.pi / 180.0


def to_degrees(rad: float) -> float:
    """Convert radians to degrees."""
    return rad * 180.0 / np.pi


def normalize_longitude(lon_deg: float) -> float:
    """Wrap a longitude into [-180, 180).

    Parameters
    ----------
    lon_deg : float
        Longitude in degrees, any range.

    Returns
    -------
    float
        Equivalent longitude in [-180, 180).

    Examples
    --------
    >>> normalize_longitude(190.0)
    -170.0
    >>> normalize_longitude(180.0)
    -180.0
    """
    return float((lon_deg + 180.0) % 360.0 - 180.0)


def normalize_bearing(bearing_deg: float) -> float:
    """Wrap a bearing into [0, 360)."""
    return float((bearing_deg + 360.0) % 360.0)


def angular_distance(
    lat1: float,
    lon1: float,
    lat2: float,
    lon2: float
) -> float:
    """Central angle between two points (haversine formula).

    Parameters
    ----------
    lat1, lon1 : float
        First point in degrees.
    lat2, lon2 : float
        Second point in degrees.

    Returns
    -------
    float
        Angular separation in radians, in [0, π].

    Notes
    -----
    a = sin²(Δφ/2) + cos φ1 · cos φ2 · sin²(Δλ/2)
    c = 2 · atan2(√a, √(1−a))

    The atan2 form stays well conditioned for both tiny and near-antipodal
    separations.
    """
    phi1 = to_radians(lat1)
    phi2 = to_radians(lat2)
    d_phi = to_radians(lat2 - lat1)
    d_lambda = to_radians(lon2 - lon1)

    a = (np.sin(d_phi / 2) * np.sin(d_phi / 2)
         + np.cos(phi1) * np.cos(phi2) * np.sin(d_lambda / 2) * np.sin(d_lambda / 2))
    return float(2 * np.arctan2(np.sqrt(a), np.sqrt(1 - a)))


def angular_to_km(angle_rad: float) -> float:
    """Arc length on the reference sphere for a central angle."""
    return angle_rad * GeodeticConstants.EARTH_RADIUS_KM.value


def km_to_angular(distance_km: float) -> float:
    """Central angle subtended by an arc length on the reference sphere."""
    return distance_km / GeodeticConstants.EARTH_RADIUS_KM.value


def spherical_to_cartesian(lat_rad: float, lon_rad: float) -> Tuple[float, float, float]:
    """Unit vector (n-vector) for a point on the sphere.

    Parameters
    ----------
    lat_rad, lon_rad : float
        Latitude and longitude in radians.

    Returns
    -------
    Tuple[float, float, float]
        (x, y, z) on the unit sphere; x through (0°, 0°), y through
        (0°, 90°E), z through the North Pole.
    """
    cos_lat = np.cos(lat_rad)
    return (
        float(cos_lat * np.cos(lon_rad)),
        float(cos_lat * np.sin(lon_rad)),
        float(np.sin(lat_rad)),
    )


def cartesian_to_spherical(x: float, y: float, z: float) -> Tuple[float, float]:
    """Latitude and longitude (radians) of a vector's direction.

    The vector need not be normalized.
    """
    lat_rad = np.arctan2(z, np.sqrt(x * x + y * y))
    lon_rad = np.arctan2(y, x)
    return float(lat_rad), float(lon_rad)
