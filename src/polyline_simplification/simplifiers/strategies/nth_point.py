from typing import Any, Dict, Iterator
import numbers
import logging

from polyline_simplification.geometry import Point2
from ..strategy import SimplifierStrategy
from ..registry import register_simplifier

# Configure module logger
logger = logging.getLogger(__name__)


@register_simplifier("nth_point")
class NthPointStrategy(SimplifierStrategy):
    """
    Strategy that keeps every n-th point.

    The first and last points are always kept. Indices are counted from
    the first point, so with ``n = 3`` the points at indices 0, 3, 6, ...
    are retained. Any ``n`` below 2 keeps every point.
    """

    def __init__(self, config: Dict[str, Any]) -> None:
        """
        Initialize the n-th point strategy.

        Args:
            config: Configuration parameters. Requires:
                - 'n': Keep one point out of every ``n`` (non-negative integer).

        Raises:
            ValueError: If ``n`` is missing, not an integer or negative.
        """
        super().__init__(config)

        n = config.get("n")
        if isinstance(n, bool) or not isinstance(n, numbers.Integral):
            raise ValueError(f"Point interval 'n' must be an integer, got {n!r}")
        if n < 0:
            raise ValueError(f"Point interval 'n' must be non-negative, got {n}")

        self.n = int(n)
        logger.debug(f"Configured nth point simplifier with n={n}")

    def is_identity(self) -> bool:
        return self.n < 2

    def _scan(self, points: Iterator[Point2]) -> Iterator[Point2]:
        current = next(points, None)
        if current is None:
            return

        # The first point is always kept
        yield current

        retained = True
        for index, point in enumerate(points, start=1):
            current = point
            retained = index % self.n == 0
            if retained:
                yield point

        # The last point is always kept
        if not retained:
            yield current
