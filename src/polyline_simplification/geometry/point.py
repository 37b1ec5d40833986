# polyline_simplification/geometry/point.py
"""
Immutable 2D point and vector types.

This module provides the small geometric vocabulary used by the distance
kernels and the simplification algorithms: points, vectors and an
epsilon-aware scalar comparison.
"""

from dataclasses import dataclass
from typing import Any, Tuple

import numpy as np

EPSILON: float = 1e-9
"""Default tolerance for near-zero comparisons."""


def approx_equal(a: float, b: float, epsilon: float = EPSILON) -> bool:
    """
    Check whether two scalars are equal within a tolerance.

    The comparison is written so that infinities compare correctly
    (``inf - inf`` is never evaluated).

    Args:
        a: First value.
        b: Second value.
        epsilon: Maximum allowed difference.

    Returns:
        bool: True if ``|a - b| <= epsilon``.
    """
    if b > a:
        return b <= a + epsilon
    return a <= b + epsilon


@dataclass(frozen=True)
class Vector2:
    """Immutable 2D vector."""

    x: float
    y: float

    def dot(self, other: "Vector2") -> float:
        return self.x * other.x + self.y * other.y

    def length2(self) -> float:
        """Squared length of the vector."""
        return self.dot(self)

    def length(self) -> float:
        return float(np.sqrt(self.length2()))

    def __add__(self, other: "Vector2") -> "Vector2":
        return Vector2(self.x + other.x, self.y + other.y)

    def __mul__(self, scalar: float) -> "Vector2":
        return Vector2(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__


@dataclass(frozen=True)
class Point2:
    """
    Immutable 2D point with value semantics.

    Points compare and hash by coordinates, so they can be used in sets
    and as dictionary keys.
    """

    x: float
    y: float

    @classmethod
    def of(cls, value: Any) -> "Point2":
        """
        Coerce a value into a Point2.

        Args:
            value: A Point2, or any sequence of exactly two numbers
                (tuple, list or numpy row).

        Returns:
            Point2: The same object if it already is a Point2, otherwise a new point.

        Raises:
            ValueError: If the value does not describe a 2D point.
        """
        if isinstance(value, cls):
            return value

        try:
            coords = np.asarray(value, dtype=float)
        except (TypeError, ValueError) as e:
            raise ValueError(f"Cannot convert {value!r} to a 2D point: {e}") from e

        if coords.shape != (2,):
            raise ValueError(f"Cannot convert {value!r} to a 2D point: expected 2 coordinates")

        return cls(float(coords[0]), float(coords[1]))

    def __sub__(self, other: "Point2") -> Vector2:
        return Vector2(self.x - other.x, self.y - other.y)

    def __add__(self, vector: Vector2) -> "Point2":
        return Point2(self.x + vector.x, self.y + vector.y)

    def distance2_to(self, other: "Point2") -> float:
        """Squared Euclidean distance to another point."""
        return (other - self).length2()

    def distance_to(self, other: "Point2") -> float:
        return float(np.sqrt(self.distance2_to(other)))

    def lerp(self, other: "Point2", alpha: float) -> "Point2":
        """
        Linear interpolation between this point and another.

        Args:
            other: End point.
            alpha: Interpolation parameter; 0 gives this point, 1 gives ``other``.

        Returns:
            Point2: The interpolated point.
        """
        return Point2(
            (1 - alpha) * self.x + alpha * other.x,
            (1 - alpha) * self.y + alpha * other.y,
        )

    def as_tuple(self) -> Tuple[float, float]:
        return self.x, self.y
