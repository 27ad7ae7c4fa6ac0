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
Element Selection Module
=========================

Proximity queries used for picking elements and IP handles.

The first match in iteration order wins; there is no nearest-distance
tie-break. With elements from compute_elements that means tangents are
preferred over arcs.
"""

from typing import Optional, Sequence

from ..constants import SELECTION_TOLERANCE
from .elements import ArcElement, Element, TangentElement
from .geometry import is_point_near, is_point_on_arc, is_point_on_segment
from .vector import Point


def is_element_at_position(
    point: Point,
    element: Element,
    tolerance: float
) -> bool:
    """Check whether point picks element.

    Tangents use the segment test; arcs use the radius-only circle test.
    """
    if isinstance(element, TangentElement):
        return is_point_on_segment(
            point, element.start_point, element.end_point, tolerance
        )
    if isinstance(element, ArcElement):
        return is_point_on_arc(
            point, element.center_point, element.radius, tolerance
        )
    return False


def find_element_at(
    point,
    elements: Sequence[Element],
    tolerance: float = SELECTION_TOLERANCE
) -> Optional[Element]:
    """Return the first element picked by point, or None."""
    point = Point(point)
    for element in elements:
        if is_element_at_position(point, element, tolerance):
            return element
    return None


def find_point_at(
    point,
    points: Sequence,
    tolerance: float = SELECTION_TOLERANCE
) -> Optional[int]:
    """Return the index of the first IP within tolerance, or None."""
    point = Point(point)
    for index, candidate in enumerate(points):
        if is_point_near(point, Point(candidate), tolerance):
            return index
    return None


__all__ = [
    "is_element_at_position",
    "find_element_at",
    "find_point_at",
]
