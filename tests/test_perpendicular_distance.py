"""Tests for perpendicular distance simplification and its multi-pass driver."""

import pytest

from polyline_simplification.simplifiers import (
    PerpendicularDistanceStrategy,
    iter_perpendicular_distance,
    perpendicular_distance,
    perpendicular_distance_pass,
)

from helpers import points_of


def test_spike_is_retained():
    points = points_of([(0, 0), (5, 0), (5, 5), (10, 0)])
    assert list(iter_perpendicular_distance(points, 1)) == points


def test_window_skips_by_two_on_collinear_runs():
    points = points_of((x, 0) for x in range(5))
    result = list(iter_perpendicular_distance(points, 0.5))
    assert result == points_of([(0, 0), (2, 0), (4, 0)])


def test_trailing_point_kept_after_window_ends():
    points = points_of((x, 0) for x in range(4))
    result = list(iter_perpendicular_distance(points, 0.5))
    assert result == points_of([(0, 0), (2, 0), (3, 0)])


def test_noise_removed_and_peak_kept():
    points = points_of([(0, 0), (1, 0.1), (2, 0), (3, 5), (4, 0)])
    result = list(iter_perpendicular_distance(points, 0.5))
    assert result == points_of([(0, 0), (2, 0), (3, 5), (4, 0)])


def test_two_points_are_kept():
    points = points_of([(0, 0), (1, 1)])
    assert list(iter_perpendicular_distance(points, 5)) == points


def test_single_pass_reports_removed_points():
    points = points_of((x, 0) for x in range(5))
    collected = []
    removed = perpendicular_distance_pass(points, 0.5, collected.append)
    assert removed == 2
    assert collected == points_of([(0, 0), (2, 0), (4, 0)])


def test_single_pass_at_zero_tolerance_removes_nothing():
    points = points_of((x, 0) for x in range(5))
    collected = []
    assert perpendicular_distance_pass(points, 0, collected.append) == 0
    assert collected == points


class TestMultiPass:

    def test_repeats_until_nothing_is_removed(self):
        points = points_of((x, 0) for x in range(5))
        result = list(iter_perpendicular_distance(points, 0.5, repeat=5))
        assert result == points_of([(0, 0), (4, 0)])

    def test_final_pass_runs_after_repeat_limit(self):
        points = points_of((x, 0) for x in range(5))
        result = list(iter_perpendicular_distance(points, 0.5, repeat=2))
        assert result == points_of([(0, 0), (4, 0)])

    def test_stops_at_fixpoint(self, random_walk):
        points = points_of(random_walk(300, seed=3))
        converged = list(iter_perpendicular_distance(points, 0.8, repeat=300))
        assert list(iter_perpendicular_distance(points, 0.8, repeat=301)) == converged
        assert list(iter_perpendicular_distance(converged, 0.8)) == converged

    def test_more_passes_never_keep_more_points(self, random_walk):
        points = points_of(random_walk(300, seed=4))
        single = list(iter_perpendicular_distance(points, 0.8))
        multi = list(iter_perpendicular_distance(points, 0.8, repeat=4))
        assert len(multi) <= len(single)

    def test_push_matches_pull(self, random_walk):
        points = points_of(random_walk(150, seed=5))
        collected = []
        perpendicular_distance(points, 0.6, collected.append, repeat=3)
        assert collected == list(iter_perpendicular_distance(points, 0.6, repeat=3))

    def test_accepts_one_shot_iterator(self):
        points = iter(points_of((x, 0) for x in range(5)))
        result = list(iter_perpendicular_distance(points, 0.5, repeat=3))
        assert result == points_of([(0, 0), (4, 0)])

    @pytest.mark.parametrize("repeat", [1, 0, -2, 2.0, True])
    def test_rejects_invalid_repeat(self, repeat):
        with pytest.raises(ValueError):
            PerpendicularDistanceStrategy({"tol": 1, "repeat": repeat})

    def test_invalid_repeat_raised_before_iteration(self):
        with pytest.raises(ValueError):
            iter_perpendicular_distance([(0, 0)], 1, repeat=1)
