"""
Geodetic Constants for Spherical Navigation.

This module provides the constants of the spherical Earth model together with
their provenance, and the numerical tolerances used by the geometry
algorithms. All navigation in this system is computed on a sphere of fixed
radius; no ellipsoidal parameters are used.

Unit conversion factors are not kept here; ``common.units`` takes them from
the pint registry.

References
----------
- IUGG mean Earth radius (Moritz, 1980, Geodetic Reference System 1980)
"""

from dataclasses import dataclass
from typing import Final


@dataclass(frozen=True)
class Constant:
    """A constant with uncertainty and provenance.

    Attributes
    ----------
    value : float
        The nominal value of the constant.
    uncertainty : float
        The standard uncertainty (1-sigma) of the constant.
    unit : str
        The unit of the constant.
    source : str
        Reference for the constant value.
    description : str
        Human-readable description of the constant.
    """
    value: float
    uncertainty: float
    unit: str
    source: str
    description: str


class GeodeticConstants:
    """Registry of constants used by the navigation primitives.

    Spherical Earth
    ---------------
    The radius below is the only Earth parameter used by the system.
    Changing it rescales every distance result.

    Tolerances
    ----------
    Fixed absolute tolerances in degree or Mercator space. They are not
    distance-invariant across latitudes; changing them changes how
    edge-adjacent points are classified.
    """

    # =========================================================================
    # Spherical Earth Model
    # =========================================================================

    EARTH_RADIUS_KM: Final[Constant] = Constant(
        value=6371.0,
        uncertainty=0.0,  # Fixed by convention
        unit="km",
        source="IUGG mean radius, rounded",
        description="Radius of the reference sphere used for all distances"
    )

    # =========================================================================
    # Numerical Tolerances
    # =========================================================================

    BOUNDARY_EPSILON: Final[float] = 1e-12
    """Collinearity tolerance (degrees squared) for on-edge classification."""

    MERCATOR_EPSILON: Final[float] = 1e-12
    """Below this stretched-latitude change a rhumb course is east-west."""
