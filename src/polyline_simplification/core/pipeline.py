"""
Pipeline orchestration for simplifying polyline files.

This module provides functions for building a batch simplifier from the
configuration and running it over a directory of polyline files.
"""

from pathlib import Path
from typing import Dict
import logging

from polyline_simplification.config import Config
from polyline_simplification.core.simplifier import PolylineSimplifier
from polyline_simplification.simplifiers import get_simplifier
from polyline_simplification.utils import read_polylines, write_polyline

logger = logging.getLogger(__name__)


def build_simplifier(config: Config) -> PolylineSimplifier:
    """
    Build a batch simplifier from the configuration.

    Args:
        config: Pipeline configuration.

    Returns:
        PolylineSimplifier: Simplifier using the configured algorithm.

    Raises:
        ValueError: If the algorithm or its parameters are invalid.
    """
    algorithm = config.algorithm
    strategy = get_simplifier(algorithm.name, algorithm.to_params())

    return PolylineSimplifier(
        strategy,
        parallel_threshold=config.batch.parallel_threshold,
        num_processes=config.batch.num_processes
    )


def simplify_files(config: Config) -> Dict[str, int]:
    """
    Simplify every polyline file in the input directory.

    Output files keep their input names; the extension is replaced when an
    output format is configured.

    Args:
        config: Pipeline configuration.

    Returns:
        Dict[str, int]: Summary with the number of ``files`` written and the
        total ``points_in`` and ``points_out``.

    Raises:
        FileNotFoundError: If the input directory doesn't exist.
        ValueError: If no files match or the configuration is invalid.
    """
    simplifier = build_simplifier(config)

    polylines = read_polylines(config.input_dir, config.pattern)
    if not polylines:
        raise ValueError(f"No matching files found in {config.input_dir}")

    paths = [path for path, _ in polylines]
    simplified = simplifier.process([vertices for _, vertices in polylines])

    output_dir = Path(config.output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    summary = {"files": 0, "points_in": 0, "points_out": 0}
    for path, (_, original), result in zip(paths, polylines, simplified):
        output_path = output_dir / path.name
        if config.output_format is not None:
            output_path = output_path.with_suffix(f".{config.output_format.value}")

        write_polyline(output_path, result)

        summary["files"] += 1
        summary["points_in"] += len(original)
        summary["points_out"] += len(result)

    logger.info(
        f"Simplified {summary['files']} polylines with {config.algorithm.name}: "
        f"{summary['points_in']} -> {summary['points_out']} points"
    )

    return summary

