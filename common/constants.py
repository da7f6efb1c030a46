"""
Physical Constants for Spherical Earth Geometry.

This module provides the Earth radii and numerical tolerances used by the
n-vector geometry engine. All constants are defined in SI units and carry
their provenance so that results are reproducible across implementations.

References
----------
- WGS84 parameters: NIMA TR8350.2, Third Edition, 2000
- Mean radius: IUGG arithmetic mean radius R1
"""

from dataclasses import dataclass
from typing import Final


@dataclass(frozen=True)
class Constant:
    """A physical constant with uncertainty and provenance.

    Attributes
    ----------
    value : float
        The nominal value of the constant.
    uncertainty : float
        The standard uncertainty (1-sigma) of the constant.
    unit : str
        The SI unit of the constant.
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


class PhysicalConstants:
    """Registry of physical constants used throughout the system.

    The three radii are part of the public contract: distances and
    projections are only reproducible if these exact values are used.

    Earth Geometry
    --------------
    The sphere used for surface distances has the mean radius. The
    equatorial and polar radii only enter through the latitude-dependent
    geocentric radius correction.
    """

    # =========================================================================
    # Earth Radii
    # =========================================================================

    EARTH_MEAN_RADIUS: Final[Constant] = Constant(
        value=6_371_008.8,
        uncertainty=0.1,
        unit="m",
        source="IUGG mean radius",
        description="Mean radius of Earth, radius of the model sphere"
    )

    EARTH_EQUATORIAL_RADIUS: Final[Constant] = Constant(
        value=6_378_137.0,
        uncertainty=0.0,  # Defined exactly
        unit="m",
        source="WGS84, NIMA TR8350.2",
        description="Semi-major axis (equatorial radius) of WGS84 ellipsoid"
    )

    EARTH_POLAR_RADIUS: Final[Constant] = Constant(
        value=6_356_752.3142,
        uncertainty=0.0001,
        unit="m",
        source="WGS84, NIMA TR8350.2",
        description="Semi-minor axis (polar radius) of WGS84 ellipsoid"
    )


class GeometryTolerances:
    """Numerical tolerances of the n-vector algorithms.

    Attributes
    ----------
    DEGENERATE_NORM : float
        Vectors with a norm at or below this value have no direction.
        Covers rounding residues such as sin(pi) ~ 1.2e-16 left by
        exactly antipodal or polar inputs.
    INTERSECTION_AMBIGUITY : float
        Bound on |mid . i1| below which the two antipodal intersection
        candidates are considered equidistant from the paths.
    SEGMENT_LENGTH_TOLERANCE_M : float
        Allowed mismatch (meters) between an arc length and the sum of
        its two parts through an intersection point.
    """

    DEGENERATE_NORM: Final[float] = 1e-12
    INTERSECTION_AMBIGUITY: Final[float] = 1e-12
    SEGMENT_LENGTH_TOLERANCE_M: Final[float] = 0.3


# Plain float aliases for use in hot numerical code
EARTH_MEAN_RADIUS_M: Final[float] = PhysicalConstants.EARTH_MEAN_RADIUS.value
EARTH_EQUATORIAL_RADIUS_M: Final[float] = PhysicalConstants.EARTH_EQUATORIAL_RADIUS.value
EARTH_POLAR_RADIUS_M: Final[float] = PhysicalConstants.EARTH_POLAR_RADIUS.value
