# polyline_simplification/cli/cli_utils.py
"""
CLI utilities for polyline simplification.

This module provides common utilities for command-line scripts so that
they validate configuration, log and handle errors consistently.
"""

import logging
import sys
import traceback
from typing import Any, Callable, List, Optional

from omegaconf import DictConfig, OmegaConf

from polyline_simplification.config import Config

# Configure module-level logger
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(levelname)s - %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger(__name__)


def validate_config(cfg: DictConfig, required_keys: Optional[List[str]] = None) -> None:
    """
    Validate configuration for required keys.

    Args:
        cfg: Hydra configuration object.
        required_keys: Keys that must be set. Defaults to ["input_dir", "algorithm"].

    Raises:
        ValueError: If a required key is missing.
    """
    if required_keys is None:
        required_keys = ["input_dir", "algorithm"]

    for key in required_keys:
        if OmegaConf.is_missing(cfg, key) or not cfg.get(key):
            raise ValueError(f"'{key}' is required in configuration")

    if not cfg.algorithm.get("name"):
        raise ValueError("Algorithm name is required in configuration")


def convert_config(cfg: DictConfig) -> Config:
    """
    Convert Hydra DictConfig to structured Config object.

    Args:
        cfg: Hydra configuration object.

    Returns:
        Config: Structured configuration object.
    """
    return OmegaConf.to_object(cfg)


def handle_errors(e: Exception, cfg: DictConfig, exit_code: int = 1) -> None:
    """
    Handle exceptions in a consistent way across CLI scripts.

    Args:
        e: The exception to handle.
        cfg: Hydra configuration object (for debug mode checking).
        exit_code: Exit code to use when terminating. Defaults to 1.

    Note:
        This function will terminate the program with sys.exit().
    """
    logger.error(f"Error: {e}")

    if cfg.get("debug", False):
        logger.error(traceback.format_exc())

    sys.exit(exit_code)


def run_cli_command(
        cfg: DictConfig,
        command_func: Callable[[Config], Any],
        config_validator: Optional[Callable[[DictConfig], None]] = None,
) -> Any:
    """
    Run a CLI command with standard error handling and configuration management.

    This function encapsulates the common pattern used across CLI scripts:
    1. Log the configuration
    2. Validate the configuration
    3. Convert the configuration
    4. Run the command function

    Args:
        cfg: Hydra configuration object.
        command_func: Function that implements the command. Receives the
            structured configuration.
        config_validator: Optional custom configuration validator.

    Returns:
        The command function's result.

    Raises:
        SystemExit: If an error occurs during command execution.
    """
    logger.info("Configuration:")
    logger.info(OmegaConf.to_yaml(cfg))

    try:
        if config_validator:
            config_validator(cfg)
        else:
            validate_config(cfg)

        config = convert_config(cfg)
        result = command_func(config)

        logger.info("Command completed successfully")
        return result

    except Exception as e:
        handle_errors(e, cfg)
