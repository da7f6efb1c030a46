"""
Rotation-Based Map Transform.

This module places geographic points on a flat, oriented, scaled canvas.
A point is first rotated so that the map centre sits at (0°, 0°) with the
requested orientation up, then its rotated longitude/latitude are scaled
linearly to meters, and finally the meters are mapped to canvas units.

Validity
--------
The degree-to-meter step is a linear scale of angles, not a conformal or
equal-area projection. It is accurate near the map centre and distortion
grows with distance from it. This is intended for local maps (a few tens
of kilometers) and must not be used for continental extents.

Canvas Frame
------------
Map coordinates have their origin at the bottom left; canvas coordinates
have theirs at the top left, so the vertical axis is flipped.
"""

from dataclasses import dataclass
from typing import Tuple

import numpy as np
from numpy.typing import NDArray

from common.constants import EARTH_MEAN_RADIUS_M
from common.logging_config import get_logger
from common.units import Scalar, magnitude_in
from geospatial.nvector import (
    NVector,
    PointLike,
    as_nvector,
    lonlat_to_nvectors,
    nvectors_to_lonlat,
)
from geospatial.rotation import RotationMatrix

logger = get_logger(__name__)

# Rotates a map position through 90 degrees to align with the canvas
_MAP_TO_CANVAS = np.array([
    [0.0, 1.0],
    [-1.0, 0.0],
])


@dataclass
class MapTransformConfig:
    """Configuration for a map transform.

    Attributes
    ----------
    radius_m : float
        Radius of the sphere used to scale angles to meters.
    orientation_deg : float
        Map orientation in degrees clockwise from true north.
    latitude_deg : float
        Latitude of the map centre in degrees.
    longitude_deg : float
        Longitude of the map centre in degrees.
    origin_x_m, origin_y_m : float
        Position of the map centre relative to the bottom left of the map,
        in meters.
    map_width_m, map_height_m : float
        Extent of the map in meters.
    canvas_width, canvas_height : float
        Extent of the canvas in drawing units.
    """
    radius_m: float = EARTH_MEAN_RADIUS_M
    orientation_deg: float = 0.0
    latitude_deg: float = 0.0
    longitude_deg: float = 0.0
    origin_x_m: float = 0.0
    origin_y_m: float = 0.0
    map_width_m: float = 0.0
    map_height_m: float = 0.0
    canvas_width: float = 0.0
    canvas_height: float = 0.0


class MapTransform:
    """Transform from n-vectors to map meters and canvas units.

    All settings are independent; nothing derived is cached, so callers
    are responsible for keeping map and canvas aspect ratios consistent.

    Examples
    --------
    >>> transform = MapTransform()
    >>> transform.set_rotation(0.0, 51.5, -0.12)
    >>> transform.set_map_size(2000.0, 1000.0)
    >>> transform.set_canvas_size(800.0, 400.0)
    >>> transform.set_map_origin(1000.0, 500.0)
    >>> px, py = transform.project_to_pixels(NVector.from_degrees(-0.12, 51.5))
    """

    def __init__(self):
        self._circumference = 0.0
        self._rotation = RotationMatrix.identity()
        self._origin_x = 0.0
        self._origin_y = 0.0
        self._map_width = 0.0
        self._map_height = 0.0
        self._canvas_width = 0.0
        self._canvas_height = 0.0
        self.set_earth_radius()

    @classmethod
    def from_config(cls, config: MapTransformConfig) -> "MapTransform":
        transform = cls()
        transform.set_radius(config.radius_m)
        transform.set_rotation(
            config.orientation_deg, config.latitude_deg, config.longitude_deg
        )
        transform.set_map_origin(config.origin_x_m, config.origin_y_m)
        transform.set_map_size(config.map_width_m, config.map_height_m)
        transform.set_canvas_size(config.canvas_width, config.canvas_height)
        return transform

    @property
    def circumference(self) -> float:
        return self._circumference

    @property
    def rotation(self) -> RotationMatrix:
        return self._rotation

    @property
    def map_origin(self) -> Tuple[float, float]:
        return self._origin_x, self._origin_y

    @property
    def map_size(self) -> Tuple[float, float]:
        return self._map_width, self._map_height

    @property
    def canvas_size(self) -> Tuple[float, float]:
        return self._canvas_width, self._canvas_height

    def set_radius(self, radius: Scalar) -> None:
        """Set the sphere radius (meters) used to scale angles."""
        self._circumference = 2.0 * np.pi * magnitude_in(radius, "m", "radius")

    def set_earth_radius(self) -> None:
        self.set_radius(EARTH_MEAN_RADIUS_M)

    def set_rotation(
        self,
        orientation_deg: float,
        latitude_deg: float,
        longitude_deg: float
    ) -> None:
        """Rotate the map from (0° lat, 0° lon, north up) to a centre and orientation.

        To centre a north-up map on a point call
        ``set_rotation(0, latitude, longitude)``. The matrix is rebuilt in
        full on every call.
        """
        self._rotation = RotationMatrix.compose(orientation_deg, latitude_deg, longitude_deg)
        logger.debug(
            f"Map rotation set: orientation={orientation_deg}, "
            f"latitude={latitude_deg}, longitude={longitude_deg}"
        )

    def set_map_origin(self, origin_x: Scalar, origin_y: Scalar) -> None:
        """Set the map centre relative to the bottom left of the map, in meters."""
        self._origin_x = magnitude_in(origin_x, "m", "origin_x")
        self._origin_y = magnitude_in(origin_y, "m", "origin_y")

    def set_map_size(self, width: Scalar, height: Scalar) -> None:
        """Set the map extent in meters."""
        self._map_width = magnitude_in(width, "m", "width")
        self._map_height = magnitude_in(height, "m", "height")

    def set_canvas_size(self, width: float, height: float) -> None:
        """Set the canvas extent in drawing units."""
        self._canvas_width = float(width)
        self._canvas_height = float(height)

    def project(self, position: PointLike) -> Tuple[float, float]:
        """Return the map position of a point relative to the map centre.

        Parameters
        ----------
        position : NVector or LonLat
            The geographic point.

        Returns
        -------
        Tuple[float, float]
            (x, y) in meters from the map centre.
        """
        rotated = self._rotation.transform(as_nvector(position))
        lon, lat = rotated.to_degrees()
        x = lon * self._circumference / 360.0
        y = lat * self._circumference / 360.0
        return x, y

    def project_lonlat(self, longitude: float, latitude: float) -> Tuple[float, float]:
        """Map position for longitude/latitude given in degrees."""
        return self.project(NVector.from_degrees(longitude, latitude))

    def project_many(
        self,
        longitudes: NDArray[np.float64],
        latitudes: NDArray[np.float64]
    ) -> Tuple[NDArray[np.float64], NDArray[np.float64]]:
        """Vectorized `project_lonlat`.

        Parameters
        ----------
        longitudes, latitudes : ndarray
            Coordinates in degrees.

        Returns
        -------
        Tuple[ndarray, ndarray]
            (x, y) arrays in meters from the map centre.
        """
        rotated = self._rotation.transform_many(lonlat_to_nvectors(longitudes, latitudes))
        lons, lats = nvectors_to_lonlat(rotated)
        return lons * self._circumference / 360.0, lats * self._circumference / 360.0

    def to_pixels(self, map_x: float, map_y: float) -> Tuple[float, float]:
        """Convert a map position in meters to canvas units from the top left.

        Raises
        ------
        ValueError
            If the map width or height has not been set (is zero).
        """
        if self._map_width == 0.0 or self._map_height == 0.0:
            raise ValueError(
                f"Map size must be non-zero, got "
                f"{self._map_width} x {self._map_height} m"
            )

        canvas_x, canvas_y = _MAP_TO_CANVAS @ np.array([map_x, map_y], dtype=np.float64)

        x = (self._origin_x + canvas_x) * (self._canvas_width / self._map_width)
        y = self._canvas_height - (
            (self._origin_y + canvas_y) * (self._canvas_height / self._map_height)
        )
        return float(x), float(y)

    def project_to_pixels(self, position: PointLike) -> Tuple[float, float]:
        """Canvas position of a geographic point."""
        return self.to_pixels(*self.project(position))
