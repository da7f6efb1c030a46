"""
Great-Circle Calculations on n-Vectors.

This module provides distances, midpoints, destination points and path
intersections on a spherical Earth. All functions are pure and operate
on unit n-vectors produced by `geospatial.nvector`.

Scientific Context
------------------
Domain: Spherical trigonometry expressed with vector algebra
Model: Sphere with the IUGG mean radius

Why n-Vectors
-------------
1. Angles come from atan2(|a×b|, a·b), which keeps full precision for
   both very small and nearly antipodal separations, where acos(a·b)
   loses most of its significant digits.
2. There are no special cases at the antimeridian.
3. A great circle is fully described by its plane normal a×b, so the
   crossing of two paths is the cross product of their normals.

Limitations
-----------
Distances are spherical, not ellipsoidal; expect up to ~0.5% difference
from a WGS84 geodesic. The segment intersection test absorbs rounding
with a fixed 0.3 m tolerance.

References
----------
- Gade, K. (2010). A Non-singular Horizontal Position Representation.
  Journal of Navigation, 63(3), 395-417.
"""

from typing import Optional

import numpy as np

from common.constants import EARTH_MEAN_RADIUS_M, GeometryTolerances
from common.logging_config import get_logger
from common.types import LonLat, SegmentIntersection
from common.units import Scalar, magnitude_in
from geospatial.coordinate_models import geocentric_radius
from geospatial.nvector import NVector, unit_vector

logger = get_logger(__name__)

_NORTH_POLE = np.array([0.0, 0.0, 1.0])


def angle_between(start: NVector, end: NVector) -> float:
    """Compute the angle subtended at the sphere's center by two points.

    Parameters
    ----------
    start, end : NVector
        Unit n-vectors.

    Returns
    -------
    float
        Angle in radians, in [0, π].
    """
    a = start.vec
    b = end.vec
    sin_theta = np.linalg.norm(np.cross(a, b))
    cos_theta = np.dot(a, b)
    return float(np.arctan2(sin_theta, cos_theta))


def surface_distance(start: NVector, end: NVector) -> float:
    """Compute the great-circle distance between two points in meters.

    Uses the mean Earth radius; this is a spherical approximation.
    """
    return angle_between(start, end) * EARTH_MEAN_RADIUS_M


def midpoint(start: NVector, end: NVector) -> NVector:
    """Compute the midpoint of the shorter arc between two points.

    Raises
    ------
    DegenerateVectorError
        If the points are antipodal (their sum is the zero vector).
    """
    return NVector.from_array(unit_vector(start.vec + end.vec))


def great_circle_normal(start: NVector, end: NVector) -> NVector:
    """Compute the unit normal of the great-circle plane through two points.

    The orientation follows the right-hand rule from `start` to `end`.

    Raises
    ------
    DegenerateVectorError
        If the points are identical or antipodal, which leaves the plane
        undefined.
    """
    return NVector.from_array(unit_vector(np.cross(start.vec, end.vec)))


def destination_point(
    start: NVector,
    angular_distance: float,
    bearing_rad: float
) -> NVector:
    """Travel along a great circle from a start point.

    Parameters
    ----------
    start : NVector
        Start point.
    angular_distance : float
        Distance to travel as an angle in radians.
    bearing_rad : float
        Initial bearing in radians, clockwise from north.

    Returns
    -------
    NVector
        The destination point.

    Raises
    ------
    DegenerateVectorError
        If `start` is at a pole, where east and north are undefined.

    Notes
    -----
    With N the polar axis:
    - east  dE = N × start
    - north dN = start × dE
    - direction d = dN·cos(bearing) + dE·sin(bearing)
    - destination = start·cos(δ) + d·sin(δ)
    """
    p = start.vec

    east = unit_vector(np.cross(_NORTH_POLE, p))
    north = unit_vector(np.cross(p, east))

    direction = north * np.cos(bearing_rad) + east * np.sin(bearing_rad)
    destination = p * np.cos(angular_distance) + direction * np.sin(angular_distance)
    return NVector.from_array(unit_vector(destination))


def destination_point_meters(
    start: NVector,
    distance_m: Scalar,
    bearing_deg: float,
    reference_latitude: float
) -> NVector:
    """Travel a distance in meters along a great circle.

    Parameters
    ----------
    start : NVector
        Start point.
    distance_m : float or pint.Quantity
        Distance to travel; bare numbers are meters.
    bearing_deg : float
        Initial bearing in degrees, clockwise from north.
    reference_latitude : float
        Latitude in degrees at which the Earth radius is evaluated to turn
        the distance into an angle.

    Returns
    -------
    NVector
        The destination point.
    """
    distance = magnitude_in(distance_m, "m", "distance_m")
    angular_distance = distance / geocentric_radius(reference_latitude)
    return destination_point(start, angular_distance, np.radians(bearing_deg))


def destination_lonlat(
    start: LonLat,
    distance_m: Scalar,
    bearing_deg: float
) -> LonLat:
    """Travel a distance from a longitude/latitude position.

    The geocentric radius is evaluated at the start latitude.

    Examples
    --------
    >>> dest = destination_lonlat(LonLat(0.0, 0.0), 111_319.49, 90.0)
    >>> round(dest.longitude, 3), round(dest.latitude, 3)
    (1.0, 0.0)
    """
    point = destination_point_meters(
        NVector.from_lonlat(start), distance_m, bearing_deg, start.latitude
    )
    return point.to_lonlat()


def great_circle_intersection(
    path1_start: NVector,
    path1_end: NVector,
    path2_start: NVector,
    path2_end: NVector
) -> Optional[NVector]:
    """Find where the great circles through two paths cross.

    Two great circles always cross at two antipodal points. The one
    returned is the candidate on the same side of the sphere as the
    normalized sum of all four path points.

    Parameters
    ----------
    path1_start, path1_end : NVector
        The first path.
    path2_start, path2_end : NVector
        The second path.

    Returns
    -------
    NVector or None
        The crossing point, or None when both candidates are equally far
        from the paths (parallel or symmetric configurations).

    Raises
    ------
    DegenerateVectorError
        If a path has identical or antipodal endpoints, or both paths lie
        on the same great circle.

    Notes
    -----
    The side selection is a heuristic. Configurations where |mid·i1| is
    close to the 1e-12 threshold can flip between None and a point under
    rounding.
    """
    # great circle plane normals
    c1 = unit_vector(np.cross(path1_start.vec, path1_end.vec))
    c2 = unit_vector(np.cross(path2_start.vec, path2_end.vec))

    # there are 2 antipodal intersection candidate points
    i1 = unit_vector(np.cross(c1, c2))
    i2 = unit_vector(np.cross(c2, c1))

    mid = unit_vector(
        path1_start.vec + path1_end.vec + path2_start.vec + path2_end.vec
    )
    dp = float(np.dot(mid, i1))

    if abs(dp) <= GeometryTolerances.INTERSECTION_AMBIGUITY:
        logger.debug(f"Ambiguous great-circle intersection, mid.i1={dp:.3e}")
        return None

    return NVector.from_array(i1 if dp > 0 else i2)


def segments_intersect(
    path1_start: NVector,
    path1_end: NVector,
    path2_start: NVector,
    path2_end: NVector
) -> SegmentIntersection:
    """Test whether two great-circle arcs cross each other.

    The crossing point of the two great circles lies on an arc exactly
    when the arc length equals the sum of the distances from both arc
    ends to the crossing point.

    Parameters
    ----------
    path1_start, path1_end : NVector
        The first arc.
    path2_start, path2_end : NVector
        The second arc.

    Returns
    -------
    SegmentIntersection
        `intersects` is True when the crossing lies on both arcs within
        0.3 m. `center_distance_m` is the distance from the midpoint of
        the second arc to the crossing, or 0.0 if no crossing point could
        be determined.
    """
    intersection = great_circle_intersection(
        path1_start, path1_end, path2_start, path2_end
    )
    if intersection is None:
        return SegmentIntersection(False, 0.0)

    center_point = midpoint(path2_start, path2_end)
    center_distance = surface_distance(center_point, intersection)

    tolerance = GeometryTolerances.SEGMENT_LENGTH_TOLERANCE_M
    for start, end in ((path1_start, path1_end), (path2_start, path2_end)):
        delta = (
            surface_distance(start, end)
            - surface_distance(start, intersection)
            - surface_distance(end, intersection)
        )
        if abs(delta) > tolerance:
            return SegmentIntersection(False, center_distance)

    return SegmentIntersection(True, center_distance)
