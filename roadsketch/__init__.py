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
Roadsketch
Version 0.1.0

Road centerline sketching: tangents joined by circular arcs at each
intersection point, parallel offsets for lane and pavement edges, and
proximity selection of elements.

Example:
    >>> from roadsketch import Alignment
    >>> road = Alignment("Main Road", [(0, 0), (100, 0), (100, 100)], 20.0)
    >>> road.tangent_count, road.arc_count
    (2, 1)
"""

from .core.horizontal_alignment import (
    Point,
    RadiusSpec,
    TangentElement,
    ArcElement,
    compute_elements,
    compute_offset,
    find_element_at,
    find_point_at,
    find_element_by_id,
)
from .core.alignment import Alignment, AlignmentEvent
from .core.road_markings import RoadMarkingSettings, compute_road_markings

__version__ = "0.1.0"

__all__ = [
    "Point",
    "RadiusSpec",
    "TangentElement",
    "ArcElement",
    "compute_elements",
    "compute_offset",
    "find_element_at",
    "find_point_at",
    "find_element_by_id",
    "Alignment",
    "AlignmentEvent",
    "RoadMarkingSettings",
    "compute_road_markings",
]
