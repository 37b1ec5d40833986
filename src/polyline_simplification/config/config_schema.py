# polyline_simplification/config/config_schema.py
"""
Configuration schemas for polyline simplification.

This module defines the structured configuration schemas used with Hydra
for selecting a simplification algorithm, its parameters, and the batch
and file settings of the command-line pipeline.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional

from hydra.core.config_store import ConfigStore
from omegaconf import MISSING


class OutputFormat(Enum):
    """Supported polyline file formats."""

    LINE = "line"
    NPY = "npy"
    CSV = "csv"


@dataclass
class AlgorithmConfig:
    """
    Configuration for a simplification algorithm.

    Only the parameters used by the selected algorithm are passed on to it.
    """

    name: str = "radial_distance"
    """Algorithm to use (nth_point, radial_distance, perpendicular_distance,
    reumann_witkam, opheim)."""

    tol: Optional[float] = None
    """Distance tolerance (radial_distance, perpendicular_distance, reumann_witkam)."""

    n: Optional[int] = None
    """Keep every n-th point (nth_point)."""

    repeat: Optional[int] = None
    """Maximum number of passes, must be > 1 when set (perpendicular_distance)."""

    closed: bool = False
    """Whether polylines wrap around from the last point to the first (reumann_witkam)."""

    min_tol: Optional[float] = None
    """Ray distance tolerance (opheim)."""

    max_tol: Optional[float] = None
    """Maximum distance from the key point (opheim)."""

    def to_params(self) -> Dict[str, Any]:
        """
        Collect the parameters relevant to the selected algorithm.

        Returns:
            Dict[str, Any]: Parameters suitable for ``get_simplifier``.

        Raises:
            ValueError: If the algorithm name is unknown.
        """
        keys = ALGORITHM_PARAMS.get(self.name)
        if keys is None:
            raise ValueError(
                f"Unknown algorithm '{self.name}'. Available: {sorted(ALGORITHM_PARAMS)}"
            )
        return {key: getattr(self, key) for key in keys}


ALGORITHM_PARAMS = {
    "nth_point": ("n",),
    "radial_distance": ("tol",),
    "perpendicular_distance": ("tol", "repeat"),
    "reumann_witkam": ("tol", "closed"),
    "opheim": ("min_tol", "max_tol"),
}


@dataclass
class BatchConfig:
    """
    Configuration for batch processing of many polylines.
    """

    parallel_threshold: int = 1000
    """Batches with more polylines than this are processed in parallel."""

    num_processes: Optional[int] = None
    """Number of worker processes (CPU count - 1 if None)."""


@dataclass
class Config:
    """
    Root configuration for the polyline simplification pipeline.
    """

    input_dir: str = MISSING
    """Directory containing the polyline files to simplify."""

    output_dir: str = "./simplified"
    """Directory where simplified polylines are written."""

    pattern: str = "*.line"
    """Glob pattern selecting input files."""

    output_format: Optional[OutputFormat] = None
    """Format of the output files (same as the input file if None)."""

    algorithm: AlgorithmConfig = field(default_factory=AlgorithmConfig)
    """Simplification algorithm and parameters."""

    batch: BatchConfig = field(default_factory=BatchConfig)
    """Batch processing settings."""

    debug: bool = False
    """Log full tracebacks on errors."""


# Register configs with Hydra
cs = ConfigStore.instance()
cs.store(name="config_schema", node=Config)
