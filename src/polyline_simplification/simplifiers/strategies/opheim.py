from typing import Any, Dict, Iterator
import logging

from polyline_simplification.geometry import Point2, point_distance2, ray_distance2
from ..strategy import SimplifierStrategy, is_degenerate, squared_tolerance
from ..registry import register_simplifier

# Configure module logger
logger = logging.getLogger(__name__)


@register_simplifier("opheim")
class OpheimStrategy(SimplifierStrategy):
    """
    Strategy for Opheim simplification.

    A constrained variant of Reumann-Witkam that uses a ray instead of a
    line. Starting from a key point, points within ``min_tol`` are skipped
    until one falls outside and fixes the ray direction. Subsequent points
    are dropped while they stay within ``min_tol`` of the ray and within
    ``max_tol`` of the key point. The first point that breaks either bound
    makes its predecessor the next key point, and is then tested against it.
    """

    def __init__(self, config: Dict[str, Any]) -> None:
        """
        Initialize the Opheim strategy.

        Args:
            config: Configuration parameters. Requires:
                - 'min_tol': Maximum distance of a dropped point from the ray.
                - 'max_tol': Maximum distance of a dropped point from the key point.

        Raises:
            ValueError: If either tolerance is missing or negative.
        """
        super().__init__(config)
        self.min_tol2 = squared_tolerance(config.get("min_tol"), "min_tol")
        self.max_tol2 = squared_tolerance(config.get("max_tol"), "max_tol")

        if self.max_tol2 < self.min_tol2:
            logger.warning(
                "max_tol is smaller than min_tol; every ray ends before it can be tested"
            )

        logger.debug(
            f"Configured Opheim simplifier with min_tol2={self.min_tol2}, max_tol2={self.max_tol2}"
        )

    def is_identity(self) -> bool:
        return is_degenerate(self.min_tol2) or is_degenerate(self.max_tol2)

    def _scan(self, points: Iterator[Point2]) -> Iterator[Point2]:
        # Ray R(r0, r1)
        r0 = next(points, None)
        if r0 is None:
            return

        yield r0

        r1 = r0
        ray_defined = False
        pi = pj = None

        for pj in points:
            if ray_defined:
                if (point_distance2(r0, pj) < self.max_tol2
                        and ray_distance2(r0, r1, pj) < self.min_tol2):
                    pi = pj
                    continue

                # pj broke a bound, pi is the next key
                yield pi
                r0 = pi
                ray_defined = False

            # Discard points within the minimum tolerance, the first one
            # outside defines the ray direction
            if point_distance2(r0, pj) >= self.min_tol2:
                r1 = pj
                ray_defined = True

            pi = pj

        # The last point is always kept
        if pj is not None:
            yield pj
