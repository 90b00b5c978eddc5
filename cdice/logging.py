"""Centralized logging configuration for cdice."""

from __future__ import annotations

import logging
import sys
from typing import Optional

# Set once the package root logger has a handler attached.
_ROOT_LOGGER_CONFIGURED = False

ROOT_LOGGER_NAME = "cdice"


def setup_root_logger(
    level: int = logging.INFO,
    format_string: Optional[str] = None,
    handler: Optional[logging.Handler] = None,
) -> None:
    """
    Attach a single handler to the package root logger.

    Library code never calls this; applications and examples do. Repeated
    calls are ignored.

    Args:
        level: Logging level for the package root logger.
        format_string: Custom format string.
        handler: Custom handler, defaults to a stdout StreamHandler.
    """
    global _ROOT_LOGGER_CONFIGURED

    if _ROOT_LOGGER_CONFIGURED:
        return

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    if format_string is None:
        format_string = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    if handler is None:
        handler = logging.StreamHandler(sys.stdout)

    handler.setFormatter(logging.Formatter(format_string))
    root_logger.addHandler(handler)

    # Propagation is kept so pytest's caplog sees the records.
    root_logger.propagate = True

    _ROOT_LOGGER_CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    """
    Return a logger below the `cdice` namespace.

    Module names from inside the package are used as-is; other names are
    nested under the package root.
    """
    if name != ROOT_LOGGER_NAME and not name.startswith(ROOT_LOGGER_NAME + "."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def set_global_log_level(level: int) -> None:
    """Set the level of the package root logger and its handlers."""
    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(level)
    for handler in root_logger.handlers:
        handler.setLevel(level)
