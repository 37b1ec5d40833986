"""
Polyline simplification algorithms.

This package provides five streaming simplification algorithms, each as a
strategy class and as push/pull functions.
"""

# Import the base classes
from .strategy import SimplifierStrategy
from .sequence import SimplifiedSequence

# Import the registry functions
from .registry import register_simplifier, get_simplifier, list_simplifiers

# Import all strategies to register them
from .strategies import (
    NthPointStrategy,
    RadialDistanceStrategy,
    PerpendicularDistanceStrategy,
    ReumannWitkamStrategy,
    OpheimStrategy,
)

from .api import (
    nth_point,
    iter_nth_point,
    radial_distance,
    iter_radial_distance,
    perpendicular_distance,
    iter_perpendicular_distance,
    perpendicular_distance_pass,
    reumann_witkam,
    iter_reumann_witkam,
    opheim,
    iter_opheim,
    simplify,
)

__all__ = [
    "SimplifierStrategy",
    "SimplifiedSequence",
    "register_simplifier",
    "get_simplifier",
    "list_simplifiers",
    "NthPointStrategy",
    "RadialDistanceStrategy",
    "PerpendicularDistanceStrategy",
    "ReumannWitkamStrategy",
    "OpheimStrategy",
    "nth_point",
    "iter_nth_point",
    "radial_distance",
    "iter_radial_distance",
    "perpendicular_distance",
    "iter_perpendicular_distance",
    "perpendicular_distance_pass",
    "reumann_witkam",
    "iter_reumann_witkam",
    "opheim",
    "iter_opheim",
    "simplify",
]
