"""
Geospatial Module for the n-Vector Geometry Package.

All Earth-surface calculations originate from this module:
- n-vector positions and conversions
- Great-circle distances, destinations and intersections
- Rotation matrices and the rotation-based map transform
- Flat-plane line helpers for projected coordinates
"""

from geospatial.nvector import (
    NVector,
    DegenerateVectorError,
    lonlat_to_nvectors,
    nvectors_to_lonlat,
)

from geospatial.coordinate_models import geocentric_radius

from geospatial.distance_calculations import (
    angle_between,
    surface_distance,
    midpoint,
    great_circle_normal,
    destination_point,
    destination_point_meters,
    destination_lonlat,
    great_circle_intersection,
    segments_intersect,
)

from geospatial.rotation import RotationMatrix

from geospatial.projections import MapTransform, MapTransformConfig

from geospatial.planar import (
    sine_of_angle_between,
    sine_of_angle_between_lines,
    sine_of_half_angle_between,
    point_on_parameterized_line,
    is_point_on_segment,
    twice_signed_area,
    distance_squared_to_line,
    distance_to_line,
)

__all__ = [
    # n-vectors
    "NVector",
    "DegenerateVectorError",
    "lonlat_to_nvectors",
    "nvectors_to_lonlat",
    # Earth radius
    "geocentric_radius",
    # Great-circle calculations
    "angle_between",
    "surface_distance",
    "midpoint",
    "great_circle_normal",
    "destination_point",
    "destination_point_meters",
    "destination_lonlat",
    "great_circle_intersection",
    "segments_intersect",
    # Map transform
    "RotationMatrix",
    "MapTransform",
    "MapTransformConfig",
    # Planar helpers
    "sine_of_angle_between",
    "sine_of_angle_between_lines",
    "sine_of_half_angle_between",
    "point_on_parameterized_line",
    "is_point_on_segment",
    "twice_signed_area",
    "distance_squared_to_line",
    "distance_to_line",
]
