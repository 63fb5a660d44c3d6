"""Opt-in logging configuration for tracing matcher evaluation."""

from __future__ import annotations

import logging
import sys
from pathlib import Path


def setup_logger(
    verbose: bool = False,
    logger_name: str = "matchwell",
    debug_file: Path | None = None,
) -> logging.Logger:
    """
    Configure and return a logger for matchwell's debug output.

    Args:
        verbose: If True, log to stderr.
        logger_name: Name of the logger to configure. Child loggers such as
            ``matchwell.assertions`` propagate to it.
        debug_file: Optional path of a log file to append to.

    Returns:
        Configured logger instance.

    Raises:
        RuntimeError: If a logger with this name already has handlers.
    """
    logger = logging.getLogger(logger_name)

    if logger.handlers:
        raise RuntimeError(
            f"Logger '{logger_name}' already exists with handlers attached; "
            "use a different logger_name"
        )

    logger.disabled = False
    logger.setLevel(logging.DEBUG)

    formatter = logging.Formatter(
        fmt="[%(asctime)s] %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S"
    )

    if debug_file is not None:
        debug_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(debug_file, mode='a')
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    if verbose:
        stderr_handler = logging.StreamHandler(sys.stderr)
        stderr_handler.setLevel(logging.DEBUG)
        stderr_handler.setFormatter(formatter)
        logger.addHandler(stderr_handler)

    return logger
