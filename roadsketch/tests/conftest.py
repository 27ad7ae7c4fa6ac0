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
Pytest Configuration and Fixtures
==================================

Shared fixtures for the Roadsketch test suite.
"""

from typing import List

import pytest

from roadsketch.core.horizontal_alignment import Point, RadiusSpec, compute_elements


# =============================================================================
# Markers
# =============================================================================

def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests (fast, no external deps)")
    config.addinivalue_line("markers", "ifc: Requires ifcopenshell")


# =============================================================================
# Point Fixtures
# =============================================================================

@pytest.fixture
def right_angle_points() -> List[Point]:
    """Three IPs turning 90° clockwise on the sketch plane."""
    return [Point(0.0, 0.0), Point(100.0, 0.0), Point(100.0, 100.0)]


@pytest.fixture
def left_angle_points() -> List[Point]:
    """Three IPs turning 90° anticlockwise on the sketch plane."""
    return [Point(0.0, 0.0), Point(100.0, 0.0), Point(100.0, -100.0)]


@pytest.fixture
def collinear_points() -> List[Point]:
    """Three IPs on one straight line."""
    return [Point(0.0, 0.0), Point(100.0, 0.0), Point(200.0, 0.0)]


@pytest.fixture
def winding_points() -> List[Point]:
    """Five IPs: one right turn followed by two left turns."""
    return [
        Point(0.0, 0.0),
        Point(200.0, 0.0),
        Point(300.0, 150.0),
        Point(500.0, 150.0),
        Point(600.0, 0.0),
    ]


# =============================================================================
# Element Fixtures
# =============================================================================

@pytest.fixture
def right_angle_elements(right_angle_points):
    """Elements for the right-angle turn with a radius of 20."""
    return compute_elements(right_angle_points, RadiusSpec(default=20.0))


@pytest.fixture
def left_angle_elements(left_angle_points):
    """Elements for the left-angle turn with a radius of 20."""
    return compute_elements(left_angle_points, RadiusSpec(default=20.0))
