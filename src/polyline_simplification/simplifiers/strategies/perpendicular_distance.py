from typing import Any, Callable, Dict, Iterable, Iterator, List, Optional
import numbers
import logging

from polyline_simplification.geometry import Point2, segment_distance2
from ..strategy import SimplifierStrategy, is_degenerate, squared_tolerance
from ..registry import register_simplifier

# Configure module logger
logger = logging.getLogger(__name__)


@register_simplifier("perpendicular_distance")
class PerpendicularDistanceStrategy(SimplifierStrategy):
    """
    Strategy for perpendicular distance simplification.

    A window of three consecutive points (p0, p1, p2) slides along the
    polyline, where p0 is the last kept point. If p1 lies closer than the
    tolerance to the segment p0-p2 it is dropped, p2 is kept and the window
    jumps ahead by two points; otherwise p1 is kept and the window moves by
    one point.

    With ``repeat`` set, the single pass is applied repeatedly to its own
    output, up to ``repeat`` times, stopping early as soon as a pass removes
    no points.
    """

    def __init__(self, config: Dict[str, Any]) -> None:
        """
        Initialize the perpendicular distance strategy.

        Args:
            config: Configuration parameters. Requires:
                - 'tol': Maximum distance of a dropped point to its segment.
                May include:
                - 'repeat': Maximum number of passes (integer > 1).

        Raises:
            ValueError: If the tolerance is invalid or ``repeat`` is not an integer > 1.
        """
        super().__init__(config)
        self.tol2 = squared_tolerance(config.get("tol"), "tol")

        repeat = config.get("repeat")
        if repeat is not None:
            if isinstance(repeat, bool) or not isinstance(repeat, numbers.Integral):
                raise ValueError(f"Pass count 'repeat' must be an integer, got {repeat!r}")
            if repeat <= 1:
                raise ValueError(f"Pass count 'repeat' must be greater than 1, got {repeat}")
            repeat = int(repeat)

        self.repeat: Optional[int] = repeat
        logger.debug(
            f"Configured perpendicular distance simplifier with tol2={self.tol2}, repeat={repeat}"
        )

    def is_identity(self) -> bool:
        return is_degenerate(self.tol2)

    def _scan(self, points: Iterator[Point2]) -> Iterator[Point2]:
        if self.repeat is None:
            yield from self._single_pass(points)
            return

        current: List[Point2] = list(points)
        for pass_index in range(1, self.repeat):
            simplified = list(self._single_pass(iter(current)))
            removed = len(current) - len(simplified)
            current = simplified

            logger.debug(f"Pass {pass_index}: removed {removed} points, {len(current)} left")

            if removed == 0:
                yield from current
                return

        yield from self._single_pass(iter(current))

    def run_pass(self, points: Iterable[Any], on_retain: Callable[[Point2], Any]) -> int:
        """
        Run a single pass, invoking a callback per retained point.

        The ``repeat`` setting is ignored.

        Args:
            points: Input points.
            on_retain: Callback invoked once for each retained point, in order.

        Returns:
            int: Number of points removed by the pass.
        """
        consumed = 0

        def counted() -> Iterator[Point2]:
            nonlocal consumed
            for point in points:
                consumed += 1
                yield Point2.of(point)

        source = counted()
        retained_points = source if self.is_identity() else self._single_pass(source)

        retained = 0
        for point in retained_points:
            on_retain(point)
            retained += 1

        return consumed - retained

    def _single_pass(self, points: Iterator[Point2]) -> Iterator[Point2]:
        p0 = next(points, None)
        if p0 is None:
            return

        # The first point is always kept
        yield p0

        p1 = next(points, None)
        if p1 is None:
            return

        for p2 in points:
            # Test p1 against the segment p0-p2
            if segment_distance2(p0, p2, p1) < self.tol2:
                yield p2
                p0 = p2

                # Move up by two points; p2 may have been the last one
                p1 = next(points, None)
                if p1 is None:
                    return
            else:
                yield p1
                p0 = p1
                p1 = p2

        # The last point is kept unless it repeats the last kept point
        if p1 != p0:
            yield p1
