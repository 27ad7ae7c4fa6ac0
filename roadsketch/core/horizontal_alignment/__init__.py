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
Horizontal Alignment Package
=============================

IP-driven alignment geometry for road sketching.

This package provides:
- Planar geometry primitives (bearings, intersections, hit tests)
- Circular arc insertion at interior IPs
- Offset (parallel) element sequences for lane and pavement edges
- Proximity selection of elements and IPs

Example:
    >>> from roadsketch.core.horizontal_alignment import compute_elements
    >>> elements = compute_elements([(0, 0), (100, 0), (100, 100)], 20.0)
    >>> len(elements)
    3
"""

# Point type
from .vector import Point

# Geometry primitives
from .geometry import (
    distance,
    unit_vector,
    perpendicular_vector,
    bearing,
    line_intersection,
    angle_between_vectors,
    is_point_on_segment,
    is_point_on_arc,
    is_point_near,
    normalize_angle,
    format_bearing,
)

# Element types
from .elements import (
    RadiusSpec,
    TangentElement,
    ArcElement,
    find_element_by_id,
    tangents_of,
    arcs_of,
)

# Curve geometry
from .curve_geometry import (
    calculate_arc_element,
    calculate_arc_center,
    normalize_arc_angles,
)

# Element sequence
from .segment_builder import compute_elements

# Offsets
from .offset import compute_offset, offset_tangent, offset_arc

# Selection
from .selection import find_element_at, find_point_at, is_element_at_position

__all__ = [
    # Types
    "Point",
    "RadiusSpec",
    "TangentElement",
    "ArcElement",
    # Geometry primitives
    "distance",
    "unit_vector",
    "perpendicular_vector",
    "bearing",
    "line_intersection",
    "angle_between_vectors",
    "is_point_on_segment",
    "is_point_on_arc",
    "is_point_near",
    "normalize_angle",
    "format_bearing",
    # Curve geometry
    "calculate_arc_element",
    "calculate_arc_center",
    "normalize_arc_angles",
    # Engines
    "compute_elements",
    "compute_offset",
    "offset_tangent",
    "offset_arc",
    # Selection
    "find_element_at",
    "find_point_at",
    "is_element_at_position",
    "find_element_by_id",
    "tangents_of",
    "arcs_of",
]
