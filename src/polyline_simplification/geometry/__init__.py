"""
Geometric primitives for polyline simplification.

This subpackage contains the immutable point and vector types and the
squared distance kernels used by every simplification algorithm.
"""

from polyline_simplification.geometry.point import (
    EPSILON,
    Point2,
    Vector2,
    approx_equal,
)
from polyline_simplification.geometry.distance import (
    point_distance2,
    line_distance2,
    segment_distance2,
    ray_distance2,
)

__all__ = [
    "EPSILON",
    "Point2",
    "Vector2",
    "approx_equal",
    "point_distance2",
    "line_distance2",
    "segment_distance2",
    "ray_distance2",
]
