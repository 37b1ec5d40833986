"""Tests for batch simplification and the file pipeline."""

import numpy as np
import pytest
from omegaconf import OmegaConf

from polyline_simplification.cli.cli_utils import validate_config
from polyline_simplification.cli.simplify_polyline import validate_simplify_config
from polyline_simplification.config import AlgorithmConfig, BatchConfig, Config, OutputFormat
from polyline_simplification.core import PolylineSimplifier, build_simplifier, simplify_files
from polyline_simplification.simplifiers import get_simplifier
from polyline_simplification.utils import distribute_work, read_polyline, write_polyline


class TestDistributeWork:

    def test_covers_all_items_in_order(self):
        assert distribute_work(10, 3) == [(0, 4), (4, 7), (7, 10)]

    def test_more_processes_than_items(self):
        assert distribute_work(2, 4) == [(0, 1), (1, 2)]

    def test_rejects_zero_processes(self):
        with pytest.raises(ValueError):
            distribute_work(5, 0)


class TestPolylineSimplifier:

    def test_simplify_single_polyline(self):
        simplifier = PolylineSimplifier(get_simplifier("radial_distance", {"tol": 1.5}))
        line = np.array([[0, 0], [1, 0], [2, 0], [3, 0]], dtype=float)

        np.testing.assert_array_equal(simplifier.simplify(line), [[0, 0], [2, 0], [3, 0]])

    def test_empty_polyline(self):
        simplifier = PolylineSimplifier(get_simplifier("radial_distance", {"tol": 1.5}))

        assert simplifier.simplify(np.empty((0, 2))).shape == (0, 2)

    def test_sequential_batch(self, random_walk):
        strategy = get_simplifier("opheim", {"min_tol": 0.5, "max_tol": 4})
        simplifier = PolylineSimplifier(strategy, parallel_threshold=100)
        polylines = [random_walk(80, seed=seed) for seed in range(5)]

        results = simplifier.process(polylines)

        assert len(results) == 5
        for polyline, result in zip(polylines, results):
            np.testing.assert_array_equal(result, simplifier.simplify(polyline))

    def test_parallel_batch_preserves_order(self, random_walk):
        strategy = get_simplifier("perpendicular_distance", {"tol": 0.5, "repeat": 3})
        simplifier = PolylineSimplifier(strategy, parallel_threshold=2, num_processes=2)
        polylines = [random_walk(60, seed=seed) for seed in range(6)]

        results = simplifier.process(polylines)

        assert len(results) == 6
        for polyline, result in zip(polylines, results):
            np.testing.assert_array_equal(result, simplifier.simplify(polyline))


class TestConfig:

    def test_to_params_selects_algorithm_keys(self):
        config = AlgorithmConfig(name="opheim", tol=3.0, min_tol=1.0, max_tol=5.0)
        assert config.to_params() == {"min_tol": 1.0, "max_tol": 5.0}

    def test_to_params_unknown_algorithm(self):
        with pytest.raises(ValueError, match="Unknown algorithm"):
            AlgorithmConfig(name="visvalingam").to_params()

    def test_build_simplifier(self):
        config = Config(
            input_dir="in",
            algorithm=AlgorithmConfig(name="reumann_witkam", tol=0.5, closed=True),
            batch=BatchConfig(parallel_threshold=10, num_processes=3),
        )
        simplifier = build_simplifier(config)

        assert simplifier.strategy.name == "reumann_witkam"
        assert simplifier.strategy.closed is True
        assert simplifier.num_processes == 3

    def test_build_simplifier_rejects_missing_tolerance(self):
        config = Config(input_dir="in", algorithm=AlgorithmConfig(name="radial_distance"))
        with pytest.raises(ValueError, match="required"):
            build_simplifier(config)

    def test_validate_config_requires_input_dir(self):
        cfg = OmegaConf.structured(Config)
        with pytest.raises(ValueError, match="input_dir"):
            validate_config(cfg)

    def test_validate_simplify_config_rejects_unknown_algorithm(self):
        cfg = OmegaConf.structured(Config(input_dir="in"))
        cfg.algorithm.name = "visvalingam"
        with pytest.raises(ValueError, match="Unknown algorithm"):
            validate_simplify_config(cfg)


class TestSimplifyFiles:

    def test_writes_simplified_files(self, tmp_path, random_walk):
        input_dir = tmp_path / "in"
        output_dir = tmp_path / "out"
        for seed in range(3):
            write_polyline(input_dir / f"track_{seed}.line", random_walk(50, seed=seed))

        config = Config(
            input_dir=str(input_dir),
            output_dir=str(output_dir),
            algorithm=AlgorithmConfig(name="radial_distance", tol=2.0),
        )
        summary = simplify_files(config)

        assert summary["files"] == 3
        assert summary["points_in"] == 150
        assert 6 <= summary["points_out"] < 150
        assert sorted(p.name for p in output_dir.iterdir()) == [
            "track_0.line", "track_1.line", "track_2.line"
        ]

        original = read_polyline(input_dir / "track_0.line")
        simplified = read_polyline(output_dir / "track_0.line")
        np.testing.assert_array_equal(simplified[0], original[0])
        np.testing.assert_array_equal(simplified[-1], original[-1])

    def test_output_format_override(self, tmp_path):
        input_dir = tmp_path / "in"
        write_polyline(input_dir / "track.csv", np.array([[0, 0], [0.1, 0], [5, 0]]))

        config = Config(
            input_dir=str(input_dir),
            output_dir=str(tmp_path / "out"),
            pattern="*.csv",
            output_format=OutputFormat.NPY,
            algorithm=AlgorithmConfig(name="radial_distance", tol=1.0),
        )
        simplify_files(config)

        result = np.load(tmp_path / "out" / "track.npy")
        np.testing.assert_array_equal(result, [[0, 0], [5, 0]])

    def test_no_matching_files(self, tmp_path):
        config = Config(
            input_dir=str(tmp_path),
            algorithm=AlgorithmConfig(name="nth_point", n=2),
        )
        with pytest.raises(ValueError, match="No matching files"):
            simplify_files(config)
