# polyline_simplification/simplifiers/api.py
"""
Function-style entry points for the simplification algorithms.

Every algorithm comes in two forms:

- a push form, ``<algorithm>(points, ..., on_retain)``, which consumes the
  whole input and calls ``on_retain`` once per retained point, returning the
  number of retained points;
- a pull form, ``iter_<algorithm>(points, ...)``, which returns a lazy,
  restartable :class:`SimplifiedSequence`.

Parameters are validated when the function is called, so the pull form
raises ``ValueError`` immediately rather than on first iteration.
"""

from typing import Any, Callable, Iterable, List, Optional

from polyline_simplification.geometry import Point2
from .registry import get_simplifier
from .sequence import SimplifiedSequence
from .strategies import (
    NthPointStrategy,
    OpheimStrategy,
    PerpendicularDistanceStrategy,
    RadialDistanceStrategy,
    ReumannWitkamStrategy,
)

Points = Iterable[Any]
Callback = Callable[[Point2], Any]


def nth_point(points: Points, n: int, on_retain: Callback) -> int:
    return NthPointStrategy({"n": n}).push(points, on_retain)


def iter_nth_point(points: Points, n: int) -> SimplifiedSequence:
    return NthPointStrategy({"n": n}).pull(points)


def radial_distance(points: Points, tol: float, on_retain: Callback) -> int:
    return RadialDistanceStrategy({"tol": tol}).push(points, on_retain)


def iter_radial_distance(points: Points, tol: float) -> SimplifiedSequence:
    return RadialDistanceStrategy({"tol": tol}).pull(points)


def perpendicular_distance(
        points: Points,
        tol: float,
        on_retain: Callback,
        repeat: Optional[int] = None
) -> int:
    """
    Push form of perpendicular distance simplification.

    Args:
        points: Input points.
        tol: Distance tolerance.
        on_retain: Callback invoked once per retained point.
        repeat: If given, maximum number of passes (must be > 1).

    Returns:
        int: Number of retained points.
    """
    strategy = PerpendicularDistanceStrategy({"tol": tol, "repeat": repeat})
    return strategy.push(points, on_retain)


def iter_perpendicular_distance(
        points: Points,
        tol: float,
        repeat: Optional[int] = None
) -> SimplifiedSequence:
    strategy = PerpendicularDistanceStrategy({"tol": tol, "repeat": repeat})
    return strategy.pull(points)


def perpendicular_distance_pass(points: Points, tol: float, on_retain: Callback) -> int:
    """
    Run one perpendicular distance pass and report how many points it removed.

    Args:
        points: Input points.
        tol: Distance tolerance.
        on_retain: Callback invoked once per retained point.

    Returns:
        int: Number of removed points.
    """
    return PerpendicularDistanceStrategy({"tol": tol}).run_pass(points, on_retain)


def reumann_witkam(
        points: Points,
        tol: float,
        on_retain: Callback,
        closed: bool = False
) -> int:
    return ReumannWitkamStrategy({"tol": tol, "closed": closed}).push(points, on_retain)


def iter_reumann_witkam(points: Points, tol: float, closed: bool = False) -> SimplifiedSequence:
    return ReumannWitkamStrategy({"tol": tol, "closed": closed}).pull(points)


def opheim(points: Points, min_tol: float, max_tol: float, on_retain: Callback) -> int:
    return OpheimStrategy({"min_tol": min_tol, "max_tol": max_tol}).push(points, on_retain)


def iter_opheim(points: Points, min_tol: float, max_tol: float) -> SimplifiedSequence:
    return OpheimStrategy({"min_tol": min_tol, "max_tol": max_tol}).pull(points)


def simplify(name: str, points: Points, **params: Any) -> List[Point2]:
    """
    Simplify a polyline with an algorithm chosen by name.

    Args:
        name: Registered algorithm name (see ``list_simplifiers``).
        points: Input points.
        **params: Algorithm parameters, e.g. ``tol=0.5`` or ``n=3``.

    Returns:
        List[Point2]: Retained points.

    Raises:
        ValueError: If the algorithm is unknown or the parameters are invalid.

    Example:
        >>> simplify("radial_distance", [(0, 0), (0.1, 0), (2, 0)], tol=1.0)
        [Point2(x=0.0, y=0.0), Point2(x=2.0, y=0.0)]
    """
    return get_simplifier(name, params).simplify(points)
