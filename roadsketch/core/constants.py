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
Alignment Design Constants
===========================

Thresholds and defaults shared by the alignment engine, the offset engine
and interactive selection.

Distances are in sketch units. The road marking widths are in meters and
are scaled to sketch units with PIXELS_PER_METER.
"""

# Deflections below this (radians, about 2.9°) are treated as straight
DEFLECTION_THRESHOLD = 0.05

# Cross products below this mean two directions are parallel
PARALLEL_TOLERANCE = 1e-10

# Radius used for any interior IP without an explicit override
DEFAULT_RADIUS = 100.0

# Pick distance for elements and IP handles
SELECTION_TOLERANCE = 15.0

# Road cross-section (meters)
DEFAULT_PAVEMENT_WIDTH = 3.5
DEFAULT_TRAVEL_LANE_WIDTH = 3.0
PIXELS_PER_METER = 20.0

__all__ = [
    "DEFLECTION_THRESHOLD",
    "PARALLEL_TOLERANCE",
    "DEFAULT_RADIUS",
    "SELECTION_TOLERANCE",
    "DEFAULT_PAVEMENT_WIDTH",
    "DEFAULT_TRAVEL_LANE_WIDTH",
    "PIXELS_PER_METER",
]
