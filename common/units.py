"""
Unit Registry and Distance Conversions.

This module provides a centralized unit system using the `pint` library.
Distances in the navigation core are computed in kilometres; this module
converts them to and from the other supported units, and accepts pint
quantities wherever a kilometre value is expected.

Example Usage
-------------
>>> from common.units import Q_, as_kilometers
>>> as_kilometers(Q_(5, 'nautical_mile'))
9.26
"""

from enum import Enum
from typing import Union

import pint
from pint import UnitRegistry as PintUnitRegistry

# Create the global unit registry
ureg = PintUnitRegistry()

# Convenience alias for creating quantities
Q_ = ureg.Quantity


class DistanceUnit(Enum):
    """Units a kilometre distance can be reported in.

    Each member's value is the pint unit expression for that unit.
    """
    KILOMETERS = "kilometer"
    METERS = "meter"
    MILES = "mile"
    NAUTICAL_MILES = "nautical_mile"


def convert_distance_from_km(km: float, unit: DistanceUnit) -> float:
    """Convert a kilometre value to the requested unit.

    Parameters
    ----------
    km : float
        Distance in kilometres.
    unit : DistanceUnit
        Target unit.

    Returns
    -------
    float
        Distance expressed in ``unit``.
    """
    if unit is DistanceUnit.KILOMETERS:
        return float(km)
    return float(Q_(km, DistanceUnit.KILOMETERS.value).to(unit.value).magnitude)


def convert_distance_to_km(value: float, unit: DistanceUnit) -> float:
    """Convert a distance in ``unit`` to kilometres."""
    if unit is DistanceUnit.KILOMETERS:
        return float(value)
    return float(Q_(value, unit.value).to(DistanceUnit.KILOMETERS.value).magnitude)


def as_kilometers(value: Union[float, pint.Quantity]) -> float:
    """Return a distance in kilometres.

    Bare numbers are taken to already be kilometres. Quantities are
    converted, and must have length dimensionality.

    Raises
    ------
    ValueError
        If a quantity without length dimensionality is given.
    """
    if isinstance(value, pint.Quantity):
        try:
            return float(value.to(DistanceUnit.KILOMETERS.value).magnitude)
        except pint.DimensionalityError as e:
            raise ValueError(
                f"Distance has incompatible units. "
                f"Expected a length, got {value.units}"
            ) from e
    return float(value)
