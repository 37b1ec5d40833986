"""Shared pytest fixtures for the polyline simplification test suite.

Fixtures:
    straight_line: Ten collinear points spaced 1 apart along the x axis
    square_outline: Closed square outline with points every unit, no repeated start
    random_walk: Factory for reproducible noisy polylines as numpy arrays
"""

from typing import Callable, List, Tuple

import numpy as np
import pytest

from polyline_simplification.geometry import Point2

from helpers import points_of


@pytest.fixture
def straight_line() -> List[Point2]:
    return points_of((x, 0) for x in range(10))


@pytest.fixture
def square_outline() -> List[Point2]:
    return points_of([(0, 0), (1, 0), (2, 0), (2, 1), (2, 2), (1, 2), (0, 2), (0, 1)])


@pytest.fixture
def random_walk() -> Callable[..., np.ndarray]:
    """Return a factory producing seeded random-walk polylines of shape (n, 2)."""

    def make(n: int = 200, seed: int = 0, step: Tuple[float, float] = (1.0, 0.5)) -> np.ndarray:
        rng = np.random.RandomState(seed)
        steps = np.column_stack([
            rng.uniform(0.0, step[0], size=n),
            rng.normal(0.0, step[1], size=n),
        ])
        return np.cumsum(steps, axis=0)

    return make
