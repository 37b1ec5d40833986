# polyline_simplification/__init__.py
"""
Polyline Simplification Package.

This package provides streaming polyline simplification algorithms that
reduce dense point sequences (sampled curves, GPS tracks) to a subsequence
approximating the original shape within a tolerance.

Main components:
- geometry: Point/vector types and squared distance kernels
- simplifiers: Nth-point, radial distance, perpendicular distance,
  Reumann-Witkam and Opheim algorithms in push and pull forms
- core: Batch simplification and the file pipeline
- utils: Registry, work distribution and polyline file I/O
- config: Configuration schemas for Hydra integration
"""

from polyline_simplification.geometry import Point2, Vector2
from polyline_simplification.simplifiers import (
    SimplifiedSequence,
    get_simplifier,
    list_simplifiers,
    simplify,
)

__version__ = "0.1.0"

__all__ = [
    "Point2",
    "Vector2",
    "SimplifiedSequence",
    "get_simplifier",
    "list_simplifiers",
    "simplify",
]
