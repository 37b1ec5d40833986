# polyline_simplification/simplifiers/sequence.py
"""
Restartable lazy sequence of retained points.
"""

from typing import Any, Callable, Iterable, Iterator

from polyline_simplification.geometry import Point2


class SimplifiedSequence(Iterable[Point2]):
    """
    Lazy, restartable view over a simplification run.

    Nothing is computed until the sequence is iterated. Every call to
    ``iter()`` starts a fresh scan from the beginning of the source, and
    each scan suspends between retained points. Restarting only yields the
    same points again if the source itself can be iterated more than once
    (a list, a tuple, an array); a one-shot iterator is exhausted by the
    first scan.
    """

    def __init__(
            self,
            scan: Callable[[Iterable[Any]], Iterator[Point2]],
            points: Iterable[Any]
    ) -> None:
        """
        Args:
            scan: Function returning a new generator of retained points for a source.
            points: The source points.
        """
        self._scan = scan
        self._points = points

    def __iter__(self) -> Iterator[Point2]:
        return self._scan(self._points)

    def __repr__(self) -> str:
        owner = getattr(self._scan, "__self__", None)
        name = owner.name if owner is not None else getattr(self._scan, "__name__", "scan")
        return f"{self.__class__.__name__}({name})"
