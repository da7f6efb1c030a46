"""
Latitude-Dependent Earth Radius.

The geometry engine works on a sphere. The only concession to the Earth's
flattening is the geocentric radius, used to turn a distance travelled
from a given latitude into an angle on the sphere.

References
----------
- NIMA TR8350.2: WGS84 parameters
- Torge, W. (2001). Geodesy (3rd ed.). de Gruyter.
"""

import numpy as np

from common.constants import EARTH_EQUATORIAL_RADIUS_M, EARTH_POLAR_RADIUS_M
from common.units import Scalar, magnitude_in


def geocentric_radius(
    latitude: Scalar,
    equatorial_radius: float = EARTH_EQUATORIAL_RADIUS_M,
    polar_radius: float = EARTH_POLAR_RADIUS_M
) -> float:
    """Compute the distance from Earth's center to its surface at a latitude.

    Parameters
    ----------
    latitude : float or pint.Quantity
        Signed latitude in degrees.
    equatorial_radius : float
        Equatorial radius a in meters (default: WGS84).
    polar_radius : float
        Polar radius b in meters (default: WGS84).

    Returns
    -------
    float
        Radius R in meters.

    Notes
    -----
    R = sqrt(((a²cosφ)² + (b²sinφ)²) / ((a cosφ)² + (b sinφ)²))

    which is evaluated as the blend R² = w·a² + (1 - w)·b² with
    w = (a cosφ)² / ((a cosφ)² + (b sinφ)²). In that form the result is
    exactly a at φ = 0 and exactly b at φ = ±90°.
    """
    lat_rad = np.radians(magnitude_in(latitude, "degree", "latitude"))
    cos_lat = np.cos(lat_rad)
    sin_lat = np.sin(lat_rad)

    a_sq = equatorial_radius * equatorial_radius
    b_sq = polar_radius * polar_radius

    eq_term = a_sq * cos_lat * cos_lat
    polar_term = b_sq * sin_lat * sin_lat
    weight = eq_term / (eq_term + polar_term)

    return float(np.sqrt(weight * a_sq + (1.0 - weight) * b_sq))
