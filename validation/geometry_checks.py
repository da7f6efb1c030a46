"""
Geometry Consistency Checks.

This module provides checks that verify the invariants the n-vector engine
relies on, for use on data coming from outside the package (stored
vectors, matrices loaded from elsewhere, coordinate batches).

Check Categories
----------------
1. Unit norm of n-vectors
2. Proper rotation (orthonormal, determinant +1)
3. Longitude/latitude round trip through n-vectors
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

import numpy as np
from numpy.typing import NDArray

from common.logging_config import get_logger
from geospatial.nvector import lonlat_to_nvectors, nvectors_to_lonlat
from geospatial.rotation import RotationMatrix

logger = get_logger(__name__)


@dataclass
class ValidationResult:
    """Result of a validation check.

    Attributes
    ----------
    test_name : str
        Name of the test.
    passed : bool
        Whether the test passed.
    message : str
        Description of result.
    details : dict
        Additional details.
    """
    test_name: str
    passed: bool
    message: str
    details: Dict[str, Any]


class GeometryConsistencyChecker:
    """Checker for the invariants of n-vectors and rotation matrices."""

    def __init__(
        self,
        strict_mode: bool = False,
        log_violations: bool = True,
        tolerance: float = 1e-9
    ):
        """Initialize geometry checker.

        Parameters
        ----------
        strict_mode : bool
            If True, raise ValueError on the first failing check.
        log_violations : bool
            Whether to log failing checks.
        tolerance : float
            Absolute tolerance for norms, matrix entries and degrees.
        """
        self.strict_mode = strict_mode
        self.log_violations = log_violations
        self.tolerance = tolerance
        self._logger = get_logger("GeometryConsistencyChecker")

    def check_all(
        self,
        vectors: Optional[NDArray[np.float64]] = None,
        rotation: Optional[RotationMatrix] = None,
        longitudes: Optional[NDArray[np.float64]] = None,
        latitudes: Optional[NDArray[np.float64]] = None
    ) -> List[ValidationResult]:
        """Run every check for which inputs were given.

        Parameters
        ----------
        vectors : ndarray, optional
            n-vectors of shape (N, 3).
        rotation : RotationMatrix, optional
            Matrix to validate.
        longitudes, latitudes : ndarray, optional
            Coordinates in degrees for the round-trip check.

        Returns
        -------
        List[ValidationResult]
            Results of all checks that were run.
        """
        results = []

        if vectors is not None:
            results.append(self.check_unit_norm(vectors))

        if rotation is not None:
            results.append(self.check_rotation_matrix(rotation))

        if longitudes is not None and latitudes is not None:
            results.append(self.check_round_trip(longitudes, latitudes))

        return results

    def check_unit_norm(self, vectors: NDArray[np.float64]) -> ValidationResult:
        """Check that every row is a unit vector."""
        vectors = np.atleast_2d(np.asarray(vectors, dtype=np.float64))
        deviation = np.abs(np.linalg.norm(vectors, axis=-1) - 1.0)
        num_violations = int(np.sum(deviation > self.tolerance))

        return self._report(ValidationResult(
            test_name="unit_norm",
            passed=num_violations == 0,
            message=f"Unit norm check: {num_violations} violations",
            details={
                'num_vectors': int(len(vectors)),
                'num_violations': num_violations,
                'max_deviation': float(np.max(deviation)) if len(deviation) else 0.0,
            }
        ))

    def check_rotation_matrix(self, rotation: RotationMatrix) -> ValidationResult:
        """Check that a matrix is orthonormal with determinant +1."""
        matrix = rotation.matrix
        orthogonality_error = float(np.max(np.abs(matrix @ matrix.T - np.eye(3))))
        determinant = float(np.linalg.det(matrix))

        return self._report(ValidationResult(
            test_name="proper_rotation",
            passed=rotation.is_proper_rotation(self.tolerance),
            message=f"Rotation check: det={determinant:.12f}",
            details={
                'determinant': determinant,
                'orthogonality_error': orthogonality_error,
            }
        ))

    def check_round_trip(
        self,
        longitudes: NDArray[np.float64],
        latitudes: NDArray[np.float64]
    ) -> ValidationResult:
        """Check that coordinates survive conversion to n-vectors and back.

        Longitude differences are wrapped to [-180, 180) so that inputs
        outside the principal range compare equal to their image. Points
        at the poles are excluded from the longitude comparison.
        """
        longitudes = np.atleast_1d(np.asarray(longitudes, dtype=np.float64))
        latitudes = np.atleast_1d(np.asarray(latitudes, dtype=np.float64))

        lons_back, lats_back = nvectors_to_lonlat(lonlat_to_nvectors(longitudes, latitudes))

        lat_error = np.abs(lats_back - latitudes)
        lon_error = np.abs((lons_back - longitudes + 180.0) % 360.0 - 180.0)
        lon_error = np.where(np.abs(latitudes) >= 90.0, 0.0, lon_error)

        num_violations = int(
            np.sum((lat_error > self.tolerance) | (lon_error > self.tolerance))
        )

        return self._report(ValidationResult(
            test_name="lonlat_round_trip",
            passed=num_violations == 0,
            message=f"Round trip check: {num_violations} violations",
            details={
                'max_lat_error_deg': float(np.max(lat_error)),
                'max_lon_error_deg': float(np.max(lon_error)),
                'num_violations': num_violations,
            }
        ))

    def _report(self, result: ValidationResult) -> ValidationResult:
        if not result.passed:
            if self.log_violations:
                self._logger.warning(
                    f"GEOMETRY CHECK | {result.test_name} | FAIL | {result.message}"
                )
            if self.strict_mode:
                raise ValueError(f"Geometry check '{result.test_name}' failed: {result.message}")
        return result
