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
Offset Alignment Module
========================

Derives parallel elements at a signed perpendicular distance from an
alignment. Used for pavement and lane edges.

Sign convention: a positive distance moves tangents along their
perpendicular (-dy, dx), and grows the radius of right-turn arcs while
shrinking left-turn arcs. Arcs whose radius would become zero or negative
are dropped.
"""

import logging
import math
from typing import List, Optional, Sequence

from .elements import ArcElement, Element, TangentElement
from .geometry import perpendicular_vector, unit_vector
from .vector import Point

logger = logging.getLogger(__name__)


def offset_tangent(tangent: TangentElement, distance: float) -> TangentElement:
    """Translate a tangent along its perpendicular.

    Args:
        tangent: Source tangent
        distance: Signed offset distance

    Returns:
        Offset tangent with the source's bearing and length
    """
    direction = unit_vector(tangent.start_point, tangent.end_point)
    shift = perpendicular_vector(direction) * distance

    return TangentElement(
        start_point=tangent.start_point + shift,
        end_point=tangent.end_point + shift,
        bearing=tangent.bearing,
        length=tangent.length,
        original_start=tangent.original_start.copy(),
        original_end=tangent.original_end.copy(),
        index=tangent.index,
        offset=distance,
        parent_element=tangent,
    )


def offset_arc(arc: ArcElement, distance: float) -> Optional[ArcElement]:
    """Offset an arc about its own center.

    The end points are pushed along the normals at the arc's drawing
    angles, {-sin(a), cos(a)}, using start_angle for start_point and
    end_angle for end_point.

    Args:
        arc: Source arc
        distance: Signed offset distance

    Returns:
        Offset arc, or None if the offset radius is not positive
    """
    if arc.is_right_turn:
        radius = arc.radius + distance
    else:
        radius = arc.radius - distance

    if radius <= 0:
        logger.debug(
            "Dropping offset arc at IP %d: radius %.3f - offset %.3f",
            arc.ip_index, arc.radius, distance
        )
        return None

    start_normal = Point(-math.sin(arc.start_angle), math.cos(arc.start_angle))
    end_normal = Point(-math.sin(arc.end_angle), math.cos(arc.end_angle))

    return ArcElement(
        center_point=arc.center_point.copy(),
        radius=radius,
        start_angle=arc.start_angle,
        end_angle=arc.end_angle,
        deflection_angle=arc.deflection_angle,
        is_right_turn=arc.is_right_turn,
        start_point=arc.start_point + start_normal * distance,
        end_point=arc.end_point + end_normal * distance,
        ip_point=arc.ip_point.copy(),
        tangent_length=arc.tangent_length,
        ip_index=arc.ip_index,
        offset=distance,
        parent_element=arc,
    )


def compute_offset(elements: Sequence[Element], distance: float) -> List[Element]:
    """Compute the offset element sequence.

    Args:
        elements: Source elements (from compute_elements)
        distance: Signed offset distance

    Returns:
        Offset elements in the source order, minus any collapsed arcs
    """
    if not elements:
        return []

    result: List[Element] = []
    for element in elements:
        if isinstance(element, TangentElement):
            result.append(offset_tangent(element, distance))
        elif isinstance(element, ArcElement):
            arc = offset_arc(element, distance)
            if arc is not None:
                result.append(arc)
    return result


__all__ = [
    "offset_tangent",
    "offset_arc",
    "compute_offset",
]
