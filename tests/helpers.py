"""Helpers shared by the test modules."""

from typing import List

from polyline_simplification.geometry import Point2


def points_of(coords) -> List[Point2]:
    """Build a list of Point2 from coordinate pairs."""
    return [Point2(float(x), float(y)) for x, y in coords]


def is_subsequence(subset, sequence) -> bool:
    """Check that ``subset`` appears in ``sequence`` in order."""
    remaining = iter(sequence)
    return all(any(item == candidate for candidate in remaining) for item in subset)
