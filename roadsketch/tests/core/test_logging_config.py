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
Tests for Logging Configuration Module
=======================================

Tests for the centralized logging setup.
"""

import io
import logging

import pytest

from roadsketch.core import logging_config
from roadsketch.core.logging_config import (
    setup_logging,
    get_logger,
    set_log_level,
    enable_debug,
    disable_debug,
    LOGGER_PREFIX,
)


@pytest.fixture(autouse=True)
def restore_package_logger():
    """Undo setup_logging() so other tests still see records via caplog."""
    yield
    package_logger = logging.getLogger(LOGGER_PREFIX)
    package_logger.handlers.clear()
    package_logger.setLevel(logging.NOTSET)
    package_logger.propagate = True
    logging_config._initialized = False


class TestSetupLogging:
    """Tests for setup_logging function."""

    @pytest.mark.unit
    def test_setup_returns_package_logger(self):
        logger = setup_logging()
        assert isinstance(logger, logging.Logger)
        assert logger.name == LOGGER_PREFIX

    @pytest.mark.unit
    def test_setup_with_debug_level(self):
        logger = setup_logging(level=logging.DEBUG)
        assert logger.level == logging.DEBUG

    @pytest.mark.unit
    def test_setup_with_info_level(self):
        logger = setup_logging(level=logging.INFO)
        assert logger.level == logging.INFO

    @pytest.mark.unit
    def test_repeat_setup_replaces_handler(self):
        setup_logging()
        logger = setup_logging()
        assert len(logger.handlers) == 1

    @pytest.mark.unit
    def test_does_not_propagate(self):
        assert setup_logging().propagate is False

    @pytest.mark.unit
    def test_detailed_format(self):
        stream = io.StringIO()
        setup_logging(detailed=True, stream=stream)
        get_logger("detail").info("with line numbers")

        output = stream.getvalue()
        assert "roadsketch.detail:" in output
        assert "with line numbers" in output


class TestGetLogger:
    """Tests for get_logger function."""

    @pytest.mark.unit
    def test_get_logger_uses_prefix(self):
        logger = get_logger("test_module")
        assert logger.name == f"{LOGGER_PREFIX}.test_module"

    @pytest.mark.unit
    def test_package_names_are_not_prefixed_twice(self):
        logger = get_logger("roadsketch.core.alignment")
        assert logger.name == "roadsketch.core.alignment"

    @pytest.mark.unit
    def test_get_logger_same_name_same_logger(self):
        assert get_logger("same_name") is get_logger("same_name")

    @pytest.mark.unit
    def test_get_logger_initializes_logging(self):
        get_logger("lazy")
        assert logging_config._initialized is True


class TestSetLogLevel:
    """Tests for set_log_level and the debug helpers."""

    @pytest.mark.unit
    def test_set_warning_level(self):
        setup_logging()
        set_log_level(logging.WARNING)

        root = logging.getLogger(LOGGER_PREFIX)
        assert root.level == logging.WARNING
        assert all(h.level == logging.WARNING for h in root.handlers)

    @pytest.mark.unit
    def test_enable_debug(self):
        setup_logging()
        enable_debug()
        assert logging.getLogger(LOGGER_PREFIX).level == logging.DEBUG

    @pytest.mark.unit
    def test_disable_debug(self):
        setup_logging()
        enable_debug()
        disable_debug()
        assert logging.getLogger(LOGGER_PREFIX).level == logging.INFO


class TestLoggerOutput:
    """Tests for what reaches the configured stream."""

    @pytest.mark.unit
    def test_info_is_written(self):
        stream = io.StringIO()
        setup_logging(level=logging.INFO, stream=stream)
        get_logger("test_output").info("Test info message")

        assert "[INFO] roadsketch.test_output: Test info message" in stream.getvalue()

    @pytest.mark.unit
    def test_debug_filtered_at_info_level(self):
        stream = io.StringIO()
        setup_logging(level=logging.INFO, stream=stream)
        logger = get_logger("test_filter")
        logger.debug("This should not appear")
        logger.info("This should appear")

        assert "This should not appear" not in stream.getvalue()
        assert "This should appear" in stream.getvalue()

    @pytest.mark.unit
    def test_engine_debug_records(self):
        """Module loggers from the engine route through the package logger."""
        from roadsketch.core.horizontal_alignment import compute_elements, compute_offset

        stream = io.StringIO()
        setup_logging(level=logging.DEBUG, stream=stream)
        elements = compute_elements([(0, 0), (100, 0), (100, 100)], 10.0)
        compute_offset(elements, -15.0)

        assert "Dropping offset arc at IP 1" in stream.getvalue()
