"""
Rotation Matrices for Re-centering the Sphere.

A map centred on (latitude, longitude) with a given orientation is
obtained by rotating the sphere so that this point moves to
(0°, 0°) and the requested bearing points up. The rotation is composed
from three elementary rotations about the coordinate axes.

Conventions
-----------
The elementary builders return passive (frame) rotations:
rotating the frame by +θ about an axis moves points by -θ.
- rotate_z(longitude) brings the centre meridian to 0°
- rotate_y(latitude) brings the centre latitude to 0°
- orient_to_north(orientation) spins the map about the X-axis, which now
  points at the centre
"""

from typing import Optional

import numpy as np
from numpy.typing import NDArray

from geospatial.nvector import NVector, unit_vector


class RotationMatrix:
    """A 3x3 rotation applied to n-vectors.

    Parameters
    ----------
    matrix : ndarray, optional
        Initial (3, 3) matrix. Defaults to the identity.

    Notes
    -----
    Matrices built with the classmethods below are proper rotations
    (orthonormal, determinant +1). A matrix passed in directly is not
    checked; use `is_proper_rotation` if it comes from elsewhere.
    """

    def __init__(self, matrix: Optional[NDArray[np.float64]] = None):
        if matrix is None:
            matrix = np.eye(3)
        self.matrix = np.asarray(matrix, dtype=np.float64)
        if self.matrix.shape != (3, 3):
            raise ValueError(f"Rotation matrix must be 3x3, got {self.matrix.shape}")

    @classmethod
    def identity(cls) -> "RotationMatrix":
        return cls(np.eye(3))

    @classmethod
    def rotate_x(cls, theta_rad: float) -> "RotationMatrix":
        """Rotation of the frame about the X-axis (orientation)."""
        c, s = np.cos(theta_rad), np.sin(theta_rad)
        return cls(np.array([
            [1.0, 0.0, 0.0],
            [0.0, c, s],
            [0.0, -s, c],
        ]))

    @classmethod
    def rotate_y(cls, theta_rad: float) -> "RotationMatrix":
        """Rotation of the frame about the Y-axis (latitude)."""
        c, s = np.cos(theta_rad), np.sin(theta_rad)
        return cls(np.array([
            [c, 0.0, s],
            [0.0, 1.0, 0.0],
            [-s, 0.0, c],
        ]))

    @classmethod
    def rotate_z(cls, theta_rad: float) -> "RotationMatrix":
        """Rotation of the frame about the Z-axis (longitude)."""
        c, s = np.cos(theta_rad), np.sin(theta_rad)
        return cls(np.array([
            [c, s, 0.0],
            [-s, c, 0.0],
            [0.0, 0.0, 1.0],
        ]))

    @classmethod
    def orient_to_north(cls, orientation_deg: float) -> "RotationMatrix":
        """Rotation that turns the map by a bearing from true north.

        Bearings are measured clockwise from north, opposite to the
        right-handed sense of `rotate_x`, so the X rotation is applied
        transposed (i.e. inverted).
        """
        return cls.rotate_x(np.radians(orientation_deg)).transpose()

    @classmethod
    def compose(
        cls,
        orientation_deg: float,
        latitude_deg: float,
        longitude_deg: float
    ) -> "RotationMatrix":
        """Build the rotation that centres a map on a point.

        Parameters
        ----------
        orientation_deg : float
            Map orientation in degrees clockwise from true north.
        latitude_deg : float
            Latitude of the map centre in degrees.
        longitude_deg : float
            Longitude of the map centre in degrees.

        Returns
        -------
        RotationMatrix
            orientation × latitude × longitude; applied to a vector the
            longitude rotation acts first.
        """
        orientation = cls.orient_to_north(orientation_deg)
        latitude = cls.rotate_y(np.radians(latitude_deg))
        longitude = cls.rotate_z(np.radians(longitude_deg))
        return orientation @ latitude @ longitude

    def transpose(self) -> "RotationMatrix":
        return RotationMatrix(self.matrix.T.copy())

    def transform(self, point: NVector) -> NVector:
        """Rotate an n-vector, re-normalizing to absorb matrix drift."""
        return NVector.from_array(unit_vector(self.matrix @ point.vec))

    def transform_many(self, vecs: NDArray[np.float64]) -> NDArray[np.float64]:
        """Rotate an (N, 3) array of n-vectors row by row."""
        rotated = np.asarray(vecs, dtype=np.float64) @ self.matrix.T
        return rotated / np.linalg.norm(rotated, axis=-1, keepdims=True)

    def is_proper_rotation(self, tolerance: float = 1e-9) -> bool:
        """Check orthonormality and a determinant of +1."""
        orthonormal = np.allclose(self.matrix @ self.matrix.T, np.eye(3), atol=tolerance)
        return bool(orthonormal and abs(np.linalg.det(self.matrix) - 1.0) <= tolerance)

    def __matmul__(self, other: "RotationMatrix") -> "RotationMatrix":
        return RotationMatrix(self.matrix @ other.matrix)

    def __repr__(self) -> str:
        return f"RotationMatrix({self.matrix.tolist()!r})"
