"""
N-Vector Representation of Positions on a Sphere.

A position is stored as the unit vector normal to the sphere at that
point (the n-vector). Unlike latitude/longitude, this representation has
no singularities at the poles or at the antimeridian, and great-circle
calculations reduce to dot and cross products.

Frame
-----
- Origin at the sphere's center
- X-axis through (0° latitude, 0° longitude)
- Y-axis through (0° latitude, 90°E)
- Z-axis through the North Pole

References
----------
- Gade, K. (2010). A Non-singular Horizontal Position Representation.
  Journal of Navigation, 63(3), 395-417.
"""

from typing import Tuple, Union

import numpy as np
from numpy.typing import NDArray

from common.constants import GeometryTolerances
from common.types import LonLat


class DegenerateVectorError(ValueError):
    """Raised when a vector with zero magnitude is normalized.

    The direction of such a vector is undefined. This typically results
    from the cross product of identical or antipodal points, the sum of
    antipodal points, or the local east direction at a pole.
    """


def unit_vector(vec: NDArray[np.float64]) -> NDArray[np.float64]:
    """Return `vec` scaled to unit length.

    Parameters
    ----------
    vec : ndarray
        Vector of shape (3,).

    Returns
    -------
    ndarray
        A new array with norm 1.

    Raises
    ------
    DegenerateVectorError
        If the norm is at or below `GeometryTolerances.DEGENERATE_NORM`.
    """
    norm = np.linalg.norm(vec)
    if norm <= GeometryTolerances.DEGENERATE_NORM:
        raise DegenerateVectorError(
            f"Cannot normalize vector {vec!r}: magnitude {norm:.3e} is zero"
        )
    return vec / norm


class NVector:
    """A 3-D vector representing a point on the unit sphere.

    Instances produced by `from_degrees`, `from_lonlat` and by the
    great-circle functions are always of unit length. The raw
    constructor does not normalize, so it can also hold intermediate
    vectors such as the polar axis or a sum of positions.

    Parameters
    ----------
    x, y, z : float
        Cartesian components.

    Examples
    --------
    >>> p = NVector.from_degrees(-0.1278, 51.5074)
    >>> lon, lat = p.to_degrees()
    >>> round(lat, 4)
    51.5074
    """

    __slots__ = ("_vec",)

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0):
        self._vec = np.array([x, y, z], dtype=np.float64)

    @classmethod
    def from_array(cls, vec: NDArray[np.float64]) -> "NVector":
        """Wrap a length-3 array without normalizing it."""
        x, y, z = np.asarray(vec, dtype=np.float64)
        return cls(x, y, z)

    @classmethod
    def from_degrees(cls, longitude: float, latitude: float) -> "NVector":
        """Create an n-vector from longitude and latitude in degrees.

        Longitude comes first to ease input from x-y systems.
        """
        lat_rad = np.radians(latitude)
        lon_rad = np.radians(longitude)
        cos_lat = np.cos(lat_rad)

        point = cls(
            cos_lat * np.cos(lon_rad),
            cos_lat * np.sin(lon_rad),
            np.sin(lat_rad),
        )
        return point.normalize()

    @classmethod
    def from_lonlat(cls, position: LonLat) -> "NVector":
        return cls.from_degrees(*position.as_tuple())

    @property
    def vec(self) -> NDArray[np.float64]:
        """Copy of the underlying (3,) array."""
        return self._vec.copy()

    @property
    def x(self) -> float:
        return float(self._vec[0])

    @property
    def y(self) -> float:
        return float(self._vec[1])

    @property
    def z(self) -> float:
        return float(self._vec[2])

    @property
    def latitude(self) -> float:
        """Latitude in degrees."""
        x, y, z = self._vec
        return float(np.degrees(np.arctan2(z, np.sqrt(x * x + y * y))))

    @property
    def longitude(self) -> float:
        """Longitude in degrees.

        At the poles longitude is undefined; the value returned is
        whatever atan2 yields (0 when x = y = 0).
        """
        return float(np.degrees(np.arctan2(self._vec[1], self._vec[0])))

    def to_degrees(self) -> Tuple[float, float]:
        """Return (longitude, latitude) in degrees."""
        return self.longitude, self.latitude

    def to_lonlat(self) -> LonLat:
        return LonLat(self.longitude, self.latitude)

    def norm(self) -> float:
        return float(np.linalg.norm(self._vec))

    def normalize(self) -> "NVector":
        """Scale this vector to unit length in place and return it.

        Raises
        ------
        DegenerateVectorError
            If the vector has zero magnitude.
        """
        self._vec = unit_vector(self._vec)
        return self

    def normalized(self) -> "NVector":
        """Return a unit-length copy of this vector."""
        return NVector.from_array(unit_vector(self._vec))

    def dot(self, other: "NVector") -> float:
        return float(np.dot(self._vec, other._vec))

    def cross(self, other: "NVector") -> "NVector":
        return NVector.from_array(np.cross(self._vec, other._vec))

    def isclose(self, other: "NVector", atol: float = 1e-12) -> bool:
        """Component-wise comparison within an absolute tolerance."""
        return bool(np.allclose(self._vec, other._vec, rtol=0.0, atol=atol))

    def __add__(self, other: "NVector") -> "NVector":
        return NVector.from_array(self._vec + other._vec)

    def __sub__(self, other: "NVector") -> "NVector":
        return NVector.from_array(self._vec - other._vec)

    def __mul__(self, scalar: float) -> "NVector":
        return NVector.from_array(self._vec * scalar)

    __rmul__ = __mul__

    def __neg__(self) -> "NVector":
        return NVector.from_array(-self._vec)

    def __repr__(self) -> str:
        x, y, z = self._vec
        return f"NVector({x!r}, {y!r}, {z!r})"


PointLike = Union[NVector, LonLat]


def as_nvector(position: PointLike) -> NVector:
    """Accept either an n-vector or a longitude/latitude pair."""
    if isinstance(position, LonLat):
        return NVector.from_lonlat(position)
    return position


# Vectorized versions for batch processing
def lonlat_to_nvectors(
    longitudes: NDArray[np.float64],
    latitudes: NDArray[np.float64]
) -> NDArray[np.float64]:
    """Vectorized longitude/latitude to n-vector conversion.

    Parameters
    ----------
    longitudes : ndarray
        Array of longitudes in degrees.
    latitudes : ndarray
        Array of latitudes in degrees.

    Returns
    -------
    ndarray
        Array of shape (N, 3) with one unit vector per row.
    """
    lat_rad = np.radians(np.asarray(latitudes, dtype=np.float64))
    lon_rad = np.radians(np.asarray(longitudes, dtype=np.float64))
    cos_lat = np.cos(lat_rad)

    vecs = np.stack(
        [cos_lat * np.cos(lon_rad), cos_lat * np.sin(lon_rad), np.sin(lat_rad)],
        axis=-1
    )
    return vecs / np.linalg.norm(vecs, axis=-1, keepdims=True)


def nvectors_to_lonlat(
    vecs: NDArray[np.float64]
) -> Tuple[NDArray[np.float64], NDArray[np.float64]]:
    """Vectorized n-vector to longitude/latitude conversion.

    Parameters
    ----------
    vecs : ndarray
        Array of shape (N, 3).

    Returns
    -------
    Tuple[ndarray, ndarray]
        (longitudes, latitudes) in degrees.
    """
    vecs = np.asarray(vecs, dtype=np.float64)
    x, y, z = vecs[..., 0], vecs[..., 1], vecs[..., 2]
    latitudes = np.degrees(np.arctan2(z, np.sqrt(x**2 + y**2)))
    longitudes = np.degrees(np.arctan2(y, x))
    return longitudes, latitudes
