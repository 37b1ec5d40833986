# polyline_simplification/config/__init__.py
"""
Configuration schemas for the polyline simplification package.

This subpackage contains the structured configuration schemas used with
Hydra for validating and managing simplification runs.
"""

from polyline_simplification.config.config_schema import (
    ALGORITHM_PARAMS,
    AlgorithmConfig,
    BatchConfig,
    Config,
    OutputFormat,
)

__all__ = [
    "ALGORITHM_PARAMS",
    "AlgorithmConfig",
    "BatchConfig",
    "Config",
    "OutputFormat",
]
