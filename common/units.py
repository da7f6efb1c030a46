"""
Unit Registry for Distance and Angle Inputs.

This module provides a centralized unit system using the `pint` library.
Public functions that take distances or sizes accept either bare floats
(interpreted in the canonical unit) or pint quantities, which are converted
here. Quantities with the wrong dimensionality raise errors instead of being
silently reinterpreted.

Example Usage
-------------
>>> from common.units import Q_, magnitude_in
>>> magnitude_in(Q_(2.5, 'km'), 'm')
2500.0
>>> magnitude_in(12.0, 'm')
12.0
"""

from typing import Union

import pint
from pint import UnitRegistry as PintUnitRegistry

# Create the global unit registry
ureg = PintUnitRegistry()

# Convenience alias for creating quantities
Q_ = ureg.Quantity

Scalar = Union[float, int, pint.Quantity]


def magnitude_in(value: Scalar, unit: str, name: str = "value") -> float:
    """Return the magnitude of a value expressed in the given unit.

    Parameters
    ----------
    value : float or pint.Quantity
        A bare number (already in `unit`) or a quantity.
    unit : str
        Canonical unit string, e.g. 'm' or 'degree'.
    name : str
        Parameter name used in error messages.

    Returns
    -------
    float
        The numeric value in `unit`.

    Raises
    ------
    ValueError
        If `value` is a quantity with incompatible dimensionality.
    """
    if isinstance(value, pint.Quantity):
        try:
            return float(value.to(unit).magnitude)
        except pint.DimensionalityError as e:
            raise ValueError(
                f"Parameter '{name}' has incompatible units. "
                f"Expected {unit}, got {value.units}"
            ) from e
    return float(value)
