"""
Validation Framework for the n-Vector Geometry Package.
"""

from validation.geometry_checks import (
    GeometryConsistencyChecker,
    ValidationResult,
)

__all__ = [
    "GeometryConsistencyChecker",
    "ValidationResult",
]
