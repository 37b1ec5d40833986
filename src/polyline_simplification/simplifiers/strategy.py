from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, Iterable, Iterator, List

from polyline_simplification.geometry import Point2, approx_equal
from polyline_simplification.simplifiers.sequence import SimplifiedSequence


def squared_tolerance(value: Any, name: str = "tol") -> float:
    """
    Validate a distance tolerance and return its square.

    Args:
        value: Tolerance value from the configuration.
        name: Parameter name, used in error messages.

    Returns:
        float: The squared tolerance.

    Raises:
        ValueError: If the tolerance is missing, not a number or negative.
    """
    if value is None:
        raise ValueError(f"Tolerance '{name}' is required")

    try:
        tolerance = float(value)
    except (TypeError, ValueError):
        raise ValueError(f"Tolerance '{name}' must be a number, got {value!r}")

    if tolerance != tolerance or tolerance < 0:
        raise ValueError(f"Tolerance '{name}' must be non-negative, got {value!r}")

    return tolerance * tolerance


def is_degenerate(tol2: float) -> bool:
    """Check whether a squared tolerance is zero within epsilon."""
    return approx_equal(tol2, 0)


class SimplifierStrategy(ABC):
    """
    Abstract base class for polyline simplification strategies.

    A strategy implements one algorithm as a single generator over the
    input points. Both delivery forms are derived from that generator:
    :meth:`push` drains it into a callback and :meth:`pull` wraps it in a
    restartable :class:`SimplifiedSequence`, so the two always produce the
    same points.

    Parameters are validated in the constructor, before any scanning.
    """

    def __init__(self, config: Dict[str, Any]) -> None:
        """
        Initialize the simplification strategy.

        Args:
            config: Configuration parameters for the strategy.
        """
        self.config = config
        self.name = config.get("name", self.__class__.__name__)

    @abstractmethod
    def is_identity(self) -> bool:
        """
        Check whether the configured parameters disable simplification.

        Returns:
            bool: True if every input point is retained unchanged.
        """
        pass

    @abstractmethod
    def _scan(self, points: Iterator[Point2]) -> Iterator[Point2]:
        """
        Core algorithm: yield the retained points of a single forward pass.

        Args:
            points: Iterator over the input points, already coerced to Point2.

        Yields:
            Point2: Retained points, in input order.
        """
        pass

    def scan(self, points: Iterable[Any]) -> Iterator[Point2]:
        """
        Start a new scan over the input.

        Args:
            points: Input points (Point2 or any 2-element sequence).

        Returns:
            Iterator[Point2]: Lazy iterator over the retained points.
        """
        source = map(Point2.of, points)
        if self.is_identity():
            return source
        return self._scan(source)

    def push(self, points: Iterable[Any], on_retain: Callable[[Point2], Any]) -> int:
        """
        Run the algorithm to completion, invoking a callback per retained point.

        Args:
            points: Input points.
            on_retain: Callback invoked once for each retained point, in order.

        Returns:
            int: Number of retained points.
        """
        retained = 0
        for point in self.scan(points):
            on_retain(point)
            retained += 1
        return retained

    def pull(self, points: Iterable[Any]) -> SimplifiedSequence:
        """
        Build a lazy, restartable sequence of retained points.

        Args:
            points: Input points. Use a re-iterable source for restartability.

        Returns:
            SimplifiedSequence: Sequence that rescans the input on every iteration.
        """
        return SimplifiedSequence(self.scan, points)

    def simplify(self, points: Iterable[Any]) -> List[Point2]:
        """Run the algorithm and return the retained points as a list."""
        return list(self.scan(points))

    def __repr__(self) -> str:
        params = ", ".join(f"{k}={v!r}" for k, v in self.config.items() if k != "name")
        return f"{self.__class__.__name__}({params})"
