"""
Simplification strategies implementation.

This subpackage contains the polyline simplification algorithms. Importing
it registers every strategy with the simplifier registry.
"""

from .nth_point import NthPointStrategy
from .radial_distance import RadialDistanceStrategy
from .perpendicular_distance import PerpendicularDistanceStrategy
from .reumann_witkam import ReumannWitkamStrategy
from .opheim import OpheimStrategy

__all__ = [
    'NthPointStrategy',
    'RadialDistanceStrategy',
    'PerpendicularDistanceStrategy',
    'ReumannWitkamStrategy',
    'OpheimStrategy',
]
