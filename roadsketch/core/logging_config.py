# ==============================================================================
# Roadsketch - Road Alignment Sketching Tools
# Copyright (c) 2025 Michael Yoder / Desert Springs Civil Engineering PLLC
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
#
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
# You should have received a copy of the GNU General Public License along with this program. If not, see <https://www.gnu.org/licenses/>.
#
# Primary Author: Michael Yoder
# Company: Desert Springs Civil Engineering PLLC
# ==============================================================================

"""
Logging Configuration Module
=============================

Centralized logging setup for Roadsketch.

Every module logs through the standard library under the "roadsketch"
namespace. The geometry engine only emits DEBUG records; applications
decide where they go by calling setup_logging().

Usage:
    from roadsketch.core.logging_config import get_logger

    logger = get_logger(__name__)
    logger.info("Alignment created")
    logger.debug("Deflection at IP %d: %.4f", index, deflection)

Log Levels:
    DEBUG    - Engine internals (skipped IPs, dropped offset arcs)
    INFO     - Alignment summaries and editing events
    WARNING  - Something unexpected but recoverable
    ERROR    - Operation failed
"""

import logging
import sys
from typing import Optional, TextIO

# Package-wide logger name prefix
LOGGER_PREFIX = "roadsketch"

DEFAULT_FORMAT = "[%(levelname)s] %(name)s: %(message)s"
DETAILED_FORMAT = "[%(levelname)s] %(asctime)s - %(name)s:%(lineno)d - %(message)s"

_initialized = False


def setup_logging(
    level: int = logging.INFO,
    detailed: bool = False,
    stream: Optional[TextIO] = None
) -> logging.Logger:
    """Initialize logging for Roadsketch.

    Calling it again replaces the previously installed handler.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        detailed: If True, include timestamps and line numbers
        stream: Output stream (defaults to sys.stdout)

    Returns:
        The "roadsketch" logger
    """
    global _initialized

    root_logger = logging.getLogger(LOGGER_PREFIX)

    if _initialized:
        root_logger.handlers.clear()

    root_logger.setLevel(level)

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(
        logging.Formatter(DETAILED_FORMAT if detailed else DEFAULT_FORMAT)
    )
    root_logger.addHandler(handler)

    # Avoid duplicate records through the root logger
    root_logger.propagate = False

    _initialized = True

    return root_logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger inside the roadsketch namespace.

    Args:
        name: Module name (typically __name__)

    Returns:
        Logger instance for the module

    Example:
        logger = get_logger("editor")   # -> "roadsketch.editor"
    """
    if not _initialized:
        setup_logging()

    if name != LOGGER_PREFIX and not name.startswith(LOGGER_PREFIX + "."):
        name = f"{LOGGER_PREFIX}.{name}"

    return logging.getLogger(name)


def set_log_level(level: int) -> None:
    """Change the logging level at runtime."""
    root_logger = logging.getLogger(LOGGER_PREFIX)
    root_logger.setLevel(level)
    for handler in root_logger.handlers:
        handler.setLevel(level)


def enable_debug() -> None:
    """Enable DEBUG level logging."""
    set_log_level(logging.DEBUG)


def disable_debug() -> None:
    """Set logging back to INFO level."""
    set_log_level(logging.INFO)


__all__ = [
    "setup_logging",
    "get_logger",
    "set_log_level",
    "enable_debug",
    "disable_debug",
    "LOGGER_PREFIX",
    "DEFAULT_FORMAT",
    "DETAILED_FORMAT",
]
