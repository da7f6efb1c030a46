"""
Flat-Plane Line Helpers.

Utilities for 2-D line segments on a map or canvas, after points have been
projected. These are independent of the spherical model.

Points and direction vectors are length-2 arrays (or sequences) of x, y.
"Origin transformed" means a line translated so that its start is at
(0, 0), i.e. the vector end - start.

References
----------
- Morrison, J.C. (1991). Distance from a Point to a Line. Graphics Gems II,
  Chapter 1.3.
"""

from typing import Sequence, Union

import numpy as np
from numpy.typing import NDArray

Point2D = Union[Sequence[float], NDArray[np.float64]]


def _as_point(point: Point2D) -> NDArray[np.float64]:
    return np.asarray(point, dtype=np.float64)


def cross_2d(v1: Point2D, v2: Point2D) -> float:
    """z-component of the cross product of two 2-D vectors."""
    a = _as_point(v1)
    b = _as_point(v2)
    return float(a[0] * b[1] - a[1] * b[0])


def origin_transform_line(start: Point2D, end: Point2D) -> NDArray[np.float64]:
    """Translate a line so that its start point is (0, 0)."""
    return _as_point(end) - _as_point(start)


def sine_of_angle_between(line1: Point2D, line2: Point2D) -> float:
    """Sine of the signed angle from one origin-transformed line to another.

    Positive for an anticlockwise turn, negative for clockwise, and 0 only
    if the lines are parallel.
    """
    a = _as_point(line1)
    b = _as_point(line2)
    return cross_2d(a, b) / abs(np.linalg.norm(a) * np.linalg.norm(b))


def sine_of_angle_between_lines(
    line1_start: Point2D,
    line1_end: Point2D,
    line2_start: Point2D,
    line2_end: Point2D
) -> float:
    """`sine_of_angle_between` for lines given by their end points."""
    return sine_of_angle_between(
        origin_transform_line(line1_start, line1_end),
        origin_transform_line(line2_start, line2_end),
    )


def sine_of_half_angle_between(line1: Point2D, line2: Point2D) -> float:
    return float(np.sin(0.5 * np.arcsin(sine_of_angle_between(line1, line2))))


def point_on_parameterized_line(
    start: Point2D,
    end: Point2D,
    t: float
) -> NDArray[np.float64]:
    """Point start + t·(end - start); t = 0 gives start, t = 1 gives end."""
    return _as_point(start) + origin_transform_line(start, end) * t


def is_point_on_segment(
    start: Point2D,
    end: Point2D,
    point: Point2D,
    tolerance: float = 1e-9
) -> bool:
    """Check that a point is collinear with a segment and strictly inside it.

    Parameters
    ----------
    start, end : array_like
        Segment end points.
    point : array_like
        Point to test.
    tolerance : float
        Allowed |AB × AC| for the point to count as collinear.

    Returns
    -------
    bool
        False for points off the line, beyond either end, or on an end.
    """
    ab = origin_transform_line(start, end)
    ac = origin_transform_line(start, point)
    if abs(cross_2d(ab, ac)) > tolerance:
        return False

    # check if between A and B
    k_ac = float(np.dot(ab, ac))
    k_ab = float(np.dot(ab, ab))
    return 0.0 < k_ac < k_ab


def twice_signed_area(start: Point2D, end: Point2D, point: Point2D) -> float:
    """Twice the signed area of the triangle (start, end, point)."""
    s = _as_point(start)
    p = _as_point(point)
    line = origin_transform_line(start, end)
    return float((p[1] - s[1]) * line[0] - (p[0] - s[0]) * line[1])


def distance_squared_to_line(start: Point2D, end: Point2D, point: Point2D) -> float:
    """Squared perpendicular distance from a point to the infinite line.

    Raises
    ------
    ValueError
        If start and end coincide, which does not define a line.
    """
    line = origin_transform_line(start, end)
    length_sq = float(np.dot(line, line))
    if length_sq == 0.0:
        raise ValueError("Line start and end points coincide")
    return twice_signed_area(start, end, point) ** 2 / length_sq


def distance_to_line(start: Point2D, end: Point2D, point: Point2D) -> float:
    return float(np.sqrt(distance_squared_to_line(start, end, point)))
