from typing import Any, Dict, Iterator
import logging

from polyline_simplification.geometry import Point2, line_distance2
from ..strategy import SimplifierStrategy, is_degenerate, squared_tolerance
from ..registry import register_simplifier

# Configure module logger
logger = logging.getLogger(__name__)


@register_simplifier("reumann_witkam")
class ReumannWitkamStrategy(SimplifierStrategy):
    """
    Strategy for Reumann-Witkam simplification.

    A strip of half-width ``tol`` is laid along the key line through the
    last key point and its successor. Points inside the strip are dropped.
    When a point leaves the strip, the point before it becomes the next key
    point and the strip is realigned with the line through those two points.

    For closed polylines the wrap-around from the last point back to the
    first is tested as well, and the last point is only kept if the first
    point falls outside the final strip.
    """

    def __init__(self, config: Dict[str, Any]) -> None:
        """
        Initialize the Reumann-Witkam strategy.

        Args:
            config: Configuration parameters. Requires:
                - 'tol': Half-width of the strip.
                May include:
                - 'closed': Whether the polyline wraps around (default False).

        Raises:
            ValueError: If the tolerance is missing or negative, or ``closed`` is not a bool.
        """
        super().__init__(config)
        self.tol2 = squared_tolerance(config.get("tol"), "tol")

        closed = config.get("closed", False)
        if not isinstance(closed, bool):
            raise ValueError(f"Flag 'closed' must be a boolean, got {closed!r}")

        self.closed = closed
        logger.debug(
            f"Configured Reumann-Witkam simplifier with tol2={self.tol2}, closed={self.closed}"
        )

    def is_identity(self) -> bool:
        return is_degenerate(self.tol2)

    def _scan(self, points: Iterator[Point2]) -> Iterator[Point2]:
        # Key line L(p0, p1)
        p0 = next(points, None)
        if p0 is None:
            return

        first = p0
        yield p0

        p1 = next(points, None)
        if p1 is None:
            return

        pj = p1
        for point in points:
            pi = pj
            pj = point

            if line_distance2(p0, p1, pj) < self.tol2:
                continue

            # pj left the strip, pi is the next key
            yield pi
            p0 = pi
            p1 = pj

        # Open polylines always keep the last point; closed ones test the
        # wrap-around to the first point against the last key line
        if not self.closed or line_distance2(p0, p1, first) >= self.tol2:
            yield pj
