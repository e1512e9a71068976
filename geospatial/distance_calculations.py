"""
Distance and Bearing Calculations on the Reference Sphere.

This module provides the great-circle and rhumb-line navigation primitives.
All inputs are in degrees in ``(lat, lon)`` argument order; distances are
returned in kilometres unless a ``DistanceUnit`` is requested.

Scientific Context
------------------
Domain: Spherical trigonometry, marine and air navigation
Model: Sphere of radius 6371 km

Great circle vs. rhumb line
---------------------------
1. Great circle (orthodrome): the shortest path between two points on the
   sphere. Its bearing changes continuously along the route.

2. Rhumb line (loxodrome): a path of constant compass bearing. It is a
   straight line on a Mercator chart and is never shorter than the great
   circle between the same endpoints.

Implementation
--------------
Closed-form spherical formulas evaluated with numpy. The batch functions
broadcast over arrays so that a full distance matrix can be built for
routing collaborators that use great-circle distance as an edge weight.

References
----------
- Sinnott, R.W. (1984). Virtues of the Haversine. Sky and Telescope, 68(2), 159.
- Bowditch, N. (2002). The American Practical Navigator, ch. 24.
"""

from typing import Sequence, Tuple
import numpy as np
from numpy.typing import NDArray

from common.constants import GeodeticConstants
from common.units import DistanceUnit, convert_distance_from_km
from geospatial.coordinate_models import (
    angular_distance,
    angular_to_km,
    km_to_angular,
    normalize_bearing,
    normalize_longitude,
    to_degrees,
    to_radians,
)


def great_circle_distance(
    lat1: float,
    lon1: float,
    lat2: float,
    lon2: float
) -> float:
    """Great-circle distance between two points (haversine formula).

    Parameters
    ----------
    lat1, lon1 : float
        First point in degrees.
    lat2, lon2 : float
        Second point in degrees.

    Returns
    -------
    float
        Distance in kilometres. Symmetric, non-negative, at most π·R.

    Examples
    --------
    >>> # New York to London
    >>> round(great_circle_distance(40.7128, -74.0060, 51.5074, -0.1278))
    5570
    """
    return angular_to_km(angular_distance(lat1, lon1, lat2, lon2))


def great_circle_distance_batch(
    lat1: NDArray[np.float64],
    lon1: NDArray[np.float64],
    lat2: NDArray[np.float64],
    lon2: NDArray[np.float64]
) -> NDArray[np.float64]:
    """Compute great-circle distances for arrays of point pairs.

    This is the vectorized version for efficient batch processing.

    Parameters
    ----------
    lat1, lon1 : ndarray
        First points in degrees.
    lat2, lon2 : ndarray
        Second points in degrees.

    Returns
    -------
    ndarray
        Distances in kilometres.

    Notes
    -----
    This function uses numpy broadcasting, so inputs can be:
    - Same shape: pairwise distances
    - Broadcastable shapes: distance from one point to many, etc.
    """
    phi1 = np.radians(np.asarray(lat1, dtype=np.float64))
    phi2 = np.radians(np.asarray(lat2, dtype=np.float64))
    d_phi = phi2 - phi1
    d_lambda = np.radians(np.asarray(lon2, dtype=np.float64) - np.asarray(lon1, dtype=np.float64))

    a = np.sin(d_phi / 2) ** 2 + np.cos(phi1) * np.cos(phi2) * np.sin(d_lambda / 2) ** 2
    c = 2 * np.arctan2(np.sqrt(a), np.sqrt(1 - a))

    return GeodeticConstants.EARTH_RADIUS_KM.value * c


def distance_matrix(coordinates: Sequence[Tuple[float, float]]) -> NDArray[np.float64]:
    """Dense great-circle distance matrix.

    Parameters
    ----------
    coordinates : sequence of (lat, lon)
        Points in degrees, latitude first.

    Returns
    -------
    ndarray
        (N, N) symmetric matrix of distances in kilometres with a zero
        diagonal, suitable as edge weights for shortest-path or tour
        heuristics.
    """
    points = np.asarray(coordinates, dtype=np.float64).reshape(-1, 2)
    lats = points[:, 0]
    lons = points[:, 1]
    matrix = great_circle_distance_batch(
        lats[:, np.newaxis], lons[:, np.newaxis],
        lats[np.newaxis, :], lons[np.newaxis, :]
    )
    np.fill_diagonal(matrix, 0.0)
    return matrix


def initial_bearing(
    lat1: float,
    lon1: float,
    lat2: float,
    lon2: float
) -> float:
    """Initial great-circle bearing from point 1 to point 2.

    Returns
    -------
    float
        Bearing in degrees clockwise from true north, in [0, 360).

    Notes
    -----
    θ = atan2(sin Δλ · cos φ2, cos φ1 · sin φ2 − sin φ1 · cos φ2 · cos Δλ)
    """
    phi1 = to_radians(lat1)
    phi2 = to_radians(lat2)
    d_lambda = to_radians(lon2 - lon1)

    y = np.sin(d_lambda) * np.cos(phi2)
    x = np.cos(phi1) * np.sin(phi2) - np.sin(phi1) * np.cos(phi2) * np.cos(d_lambda)
    return normalize_bearing(to_degrees(float(np.arctan2(y, x))))


def destination_point(
    lat: float,
    lon: float,
    bearing_deg: float,
    distance_km: float
) -> Tuple[float, float]:
    """Point reached by travelling along a great circle.

    Parameters
    ----------
    lat, lon : float
        Starting point in degrees.
    bearing_deg : float
        Initial bearing in degrees clockwise from north.
    distance_km : float
        Distance to travel. Negative values travel backwards.

    Returns
    -------
    Tuple[float, float]
        (lat, lon) in degrees, longitude normalized.
    """
    delta = km_to_angular(distance_km)
    theta = to_radians(bearing_deg)
    phi1 = to_radians(lat)
    lambda1 = to_radians(lon)

    sin_phi2 = np.sin(phi1) * np.cos(delta) + np.cos(phi1) * np.sin(delta) * np.cos(theta)
    phi2 = np.arcsin(np.clip(sin_phi2, -1.0, 1.0))
    y = np.sin(theta) * np.sin(delta) * np.cos(phi1)
    x = np.cos(delta) - np.sin(phi1) * sin_phi2
    lambda2 = lambda1 + np.arctan2(y, x)

    return float(to_degrees(phi2)), normalize_longitude(to_degrees(float(lambda2)))


def _rhumb_deltas(
    lat1: float,
    lon1: float,
    lat2: float,
    lon2: float
) -> Tuple[float, float, float, float]:
    """(Δφ, Δλ, Δψ, q) for a rhumb line, Δλ wrapped to the shorter side."""
    phi1 = to_radians(lat1)
    phi2 = to_radians(lat2)
    d_phi = phi2 - phi1
    d_lambda = to_radians(lon2 - lon1)

    # Crossing the antimeridian
    if abs(d_lambda) > np.pi:
        if d_lambda > 0:
            d_lambda = -(2 * np.pi - d_lambda)
        else:
            d_lambda = 2 * np.pi + d_lambda

    # Stretched (Mercator) latitude difference
    d_psi = float(np.log(np.tan(phi2 / 2 + np.pi / 4) / np.tan(phi1 / 2 + np.pi / 4)))

    # East-west course: Δφ/Δψ is 0/0, use its limit
    if abs(d_psi) > GeodeticConstants.MERCATOR_EPSILON:
        q = d_phi / d_psi
    else:
        q = float(np.cos(phi1))

    return d_phi, d_lambda, d_psi, q


def rhumb_line_distance(
    lat1: float,
    lon1: float,
    lat2: float,
    lon2: float
) -> float:
    """Rhumb-line (loxodrome) distance between two points.

    Parameters
    ----------
    lat1, lon1 : float
        First point in degrees.
    lat2, lon2 : float
        Second point in degrees.

    Returns
    -------
    float
        Distance in kilometres along the path of constant bearing. Never
        less than the great-circle distance for the same endpoints.
    """
    d_phi, d_lambda, _, q = _rhumb_deltas(lat1, lon1, lat2, lon2)
    delta = np.sqrt(d_phi * d_phi + q * q * d_lambda * d_lambda)
    return float(angular_to_km(delta))


def rhumb_line_distance_units(
    lat1: float,
    lon1: float,
    lat2: float,
    lon2: float,
    unit: DistanceUnit = DistanceUnit.KILOMETERS
) -> float:
    """Rhumb-line distance expressed in ``unit``."""
    return convert_distance_from_km(rhumb_line_distance(lat1, lon1, lat2, lon2), unit)


def rhumb_line_bearing(
    lat1: float,
    lon1: float,
    lat2: float,
    lon2: float
) -> float:
    """Constant bearing of the rhumb line from point 1 to point 2.

    Returns
    -------
    float
        Bearing in degrees clockwise from true north, in [0, 360).
    """
    _, d_lambda, d_psi, _ = _rhumb_deltas(lat1, lon1, lat2, lon2)
    return normalize_bearing(to_degrees(float(np.arctan2(d_lambda, d_psi))))


def rhumb_line_destination(
    lat: float,
    lon: float,
    distance_km: float,
    bearing_deg: float
) -> Tuple[float, float]:
    """Point reached by travelling a constant bearing.

    Parameters
    ----------
    lat, lon : float
        Starting point in degrees.
    distance_km : float
        Distance to travel in kilometres.
    bearing_deg : float
        Constant bearing in degrees clockwise from north.

    Returns
    -------
    Tuple[float, float]
        (lat, lon) in degrees, longitude normalized. A path carried past a
        pole is reflected back onto the sphere.
    """
    delta = km_to_angular(distance_km)
    theta = to_radians(bearing_deg)
    phi1 = to_radians(lat)
    lambda1 = to_radians(lon)

    d_phi = delta * np.cos(theta)
    phi2 = phi1 + d_phi

    # Past a pole
    if abs(phi2) > np.pi / 2:
        phi2 = np.pi - phi2 if phi2 > 0 else -np.pi - phi2

    d_psi = np.log(np.tan(phi2 / 2 + np.pi / 4) / np.tan(phi1 / 2 + np.pi / 4))
    if abs(d_psi) > GeodeticConstants.MERCATOR_EPSILON:
        q = d_phi / d_psi
    else:
        q = np.cos(phi1)

    d_lambda = delta * np.sin(theta) / q
    lambda2 = lambda1 + d_lambda

    return float(to_degrees(phi2)), normalize_longitude(to_degrees(float(lambda2)))
