from typing import Any, Dict, Iterator
import logging

from polyline_simplification.geometry import Point2, point_distance2
from ..strategy import SimplifierStrategy, is_degenerate, squared_tolerance
from ..registry import register_simplifier

# Configure module logger
logger = logging.getLogger(__name__)


@register_simplifier("radial_distance")
class RadialDistanceStrategy(SimplifierStrategy):
    """
    Strategy for radial distance simplification.

    Points closer than the tolerance to the last kept point (the anchor)
    are dropped. A point at or beyond the tolerance is kept and becomes the
    new anchor. The last input point is always kept.
    """

    def __init__(self, config: Dict[str, Any]) -> None:
        """
        Initialize the radial distance strategy.

        Args:
            config: Configuration parameters. Requires:
                - 'tol': Minimum distance between consecutive kept points.

        Raises:
            ValueError: If the tolerance is missing or negative.
        """
        super().__init__(config)
        self.tol2 = squared_tolerance(config.get("tol"), "tol")
        logger.debug(f"Configured radial distance simplifier with tol2={self.tol2}")

    def is_identity(self) -> bool:
        return is_degenerate(self.tol2)

    def _scan(self, points: Iterator[Point2]) -> Iterator[Point2]:
        anchor = next(points, None)
        if anchor is None:
            return

        yield anchor

        last = anchor
        retained = True
        for point in points:
            last = point
            retained = point_distance2(anchor, point) >= self.tol2
            if retained:
                anchor = point
                yield point

        if not retained:
            yield last
