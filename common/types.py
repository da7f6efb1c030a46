"""
Type Definitions for the Geometry Interfaces.

This module defines the small value types exchanged between the geometry
engine and its callers. Positions handed in by callers are plain
longitude/latitude pairs; results that carry more than one value are
named tuples so they can still be unpacked positionally.
"""

from dataclasses import dataclass
from typing import NamedTuple, Tuple


@dataclass(frozen=True)
class LonLat:
    """A longitude/latitude pair in decimal degrees.

    Longitude comes first to ease input from x-y systems where
    x = longitude and y = latitude.

    Attributes
    ----------
    longitude : float
        Signed longitude in DEGREES. Not wrapped to [-180, 180].
    latitude : float
        Signed latitude in DEGREES. Not clamped to [-90, 90].

    Notes
    -----
    Equality compares both fields exactly; no tolerance is applied.

    Examples
    --------
    >>> LonLat(-0.1278, 51.5074) == LonLat(-0.1278, 51.5074)
    True
    """
    longitude: float = 0.0
    latitude: float = 0.0

    def as_tuple(self) -> Tuple[float, float]:
        """Return (longitude, latitude)."""
        return self.longitude, self.latitude


class SegmentIntersection(NamedTuple):
    """Outcome of a great-circle segment intersection test.

    Attributes
    ----------
    intersects : bool
        True if the crossing point lies on both arcs.
    center_distance_m : float
        Surface distance in meters from the midpoint of the second path
        to the crossing point. Reported whenever a crossing point was
        determined, even if it lies outside the arcs; 0.0 when no
        crossing could be determined.
    """
    intersects: bool
    center_distance_m: float
