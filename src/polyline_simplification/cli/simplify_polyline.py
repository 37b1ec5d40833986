#!/usr/bin/env python3
# polyline_simplification/cli/simplify_polyline.py
"""
Script for simplifying polyline files.

Reads every polyline file matching a pattern in the input directory,
simplifies it with the configured algorithm and writes the result to the
output directory.

The script uses Hydra for configuration management, e.g.::

    simplify-polyline input_dir=tracks algorithm.name=opheim \\
        algorithm.min_tol=1 algorithm.max_tol=10
"""

import hydra
from omegaconf import DictConfig

from polyline_simplification.config import ALGORITHM_PARAMS
from polyline_simplification.core import simplify_files
from .cli_utils import run_cli_command, validate_config


def validate_simplify_config(cfg: DictConfig) -> None:
    """
    Validate configuration specific to simplification.

    Args:
        cfg: Hydra configuration object.

    Raises:
        ValueError: If configuration is invalid for simplification.
    """
    validate_config(cfg)

    name = cfg.algorithm.name
    if name not in ALGORITHM_PARAMS:
        raise ValueError(f"Unknown algorithm '{name}'. Available: {sorted(ALGORITHM_PARAMS)}")


@hydra.main(config_path="../configs", config_name="config", version_base=None)
def main(cfg: DictConfig) -> None:
    """
    Simplify polyline files.

    Args:
        cfg: Hydra configuration object.
    """
    run_cli_command(
        cfg=cfg,
        command_func=simplify_files,
        config_validator=validate_simplify_config,
    )


if __name__ == "__main__":
    main()
