"""
Common utilities and infrastructure for the n-vector geometry package.

This package provides foundational components used across all modules:
- Earth radii and numerical tolerances
- Unit registry for distance and angle inputs
- Value types exchanged with callers
- Logging infrastructure
"""

from common.constants import PhysicalConstants, GeometryTolerances
from common.units import ureg, Q_, magnitude_in
from common.types import LonLat, SegmentIntersection
from common.logging_config import get_logger

__all__ = [
    "PhysicalConstants",
    "GeometryTolerances",
    "ureg",
    "Q_",
    "magnitude_in",
    "LonLat",
    "SegmentIntersection",
    "get_logger",
]
