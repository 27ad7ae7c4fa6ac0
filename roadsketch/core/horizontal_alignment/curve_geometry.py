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
Horizontal Curve Geometry Module
=================================

Derives the circular arc that joins two tangents at an interior IP.

For a signed deflection Δ and radius R:
    T  = R * tan(|Δ| / 2)          tangent length
    BC = IP - T * incoming_unit    arc start
    EC = IP + T * outgoing_unit    arc end

The center is where the inward normals raised at BC and EC meet.
"""

import logging
import math
from typing import Optional, Tuple

from ..constants import DEFLECTION_THRESHOLD
from .elements import ArcElement
from .geometry import (
    TWO_PI,
    angle_between_vectors,
    line_intersection,
    perpendicular_vector,
    unit_vector,
)
from .vector import Point

logger = logging.getLogger(__name__)


def calculate_arc_center(
    arc_start: Point,
    arc_end: Point,
    incoming: Point,
    outgoing: Point,
    radius: float,
    is_right_turn: bool
) -> Point:
    """Calculate the center of the arc tangent to both directions.

    Args:
        arc_start: Arc start point on the incoming tangent
        arc_end: Arc end point on the outgoing tangent
        incoming: Incoming unit vector
        outgoing: Outgoing unit vector
        radius: Arc radius
        is_right_turn: Turn sense

    Returns:
        Center point. Falls back to arc_start + radius * inward normal when
        the two normals are parallel.
    """
    incoming_perp = perpendicular_vector(incoming)
    outgoing_perp = perpendicular_vector(outgoing)

    # Pick the normal orientations so the rays meet on the inside of the turn
    if is_right_turn:
        adjusted_incoming = incoming_perp
        adjusted_outgoing = -outgoing_perp
    else:
        adjusted_incoming = -incoming_perp
        adjusted_outgoing = outgoing_perp

    center = line_intersection(
        arc_start, adjusted_incoming,
        arc_end, adjusted_outgoing
    )

    if center is None:
        logger.debug("Arc normals are parallel, using fallback center")
        return arc_start + adjusted_incoming * radius

    return center


def normalize_arc_angles(
    start_angle: float,
    end_angle: float,
    is_right_turn: bool
) -> Tuple[float, float]:
    """Make the sweep monotonic in the turn's rotational direction.

    Returns:
        (start_angle, end_angle) with end_angle >= start_angle for right
        turns and end_angle <= start_angle for left turns.
    """
    if is_right_turn:
        if end_angle < start_angle:
            end_angle += TWO_PI
    else:
        if end_angle > start_angle:
            end_angle -= TWO_PI
    return start_angle, end_angle


def calculate_arc_element(
    prev_ip: Point,
    curr_ip: Point,
    next_ip: Point,
    radius: float,
    ip_index: int = 0
) -> Optional[ArcElement]:
    """Calculate the arc at curr_ip from its neighbouring IPs.

    Args:
        prev_ip: Previous IP (defines incoming tangent)
        curr_ip: IP where the arc is placed
        next_ip: Next IP (defines outgoing tangent)
        radius: Arc radius (assumed positive)
        ip_index: Index of curr_ip in the point sequence

    Returns:
        ArcElement, or None when |deflection| is below DEFLECTION_THRESHOLD
        (nearly straight, or a coincident neighbour).

    Example:
        >>> arc = calculate_arc_element(
        ...     Point(0, 0), Point(100, 0), Point(100, 100), 20.0, ip_index=1)
        >>> arc.is_right_turn, round(arc.tangent_length, 6)
        (True, 20.0)
    """
    incoming = unit_vector(prev_ip, curr_ip)
    outgoing = unit_vector(curr_ip, next_ip)

    deflection = angle_between_vectors(incoming, outgoing)

    if abs(deflection) < DEFLECTION_THRESHOLD:
        logger.debug(
            "IP %d deflection %.4f rad below threshold, no arc",
            ip_index, deflection
        )
        return None

    is_right_turn = deflection > 0

    # T = R * tan(|Δ|/2)
    tangent_length = radius * math.tan(abs(deflection) / 2)

    arc_start = curr_ip - incoming * tangent_length
    arc_end = curr_ip + outgoing * tangent_length

    center = calculate_arc_center(
        arc_start, arc_end, incoming, outgoing, radius, is_right_turn
    )

    # Drawing runs from the end side back to the start side
    start_angle = math.atan2(arc_end.y - center.y, arc_end.x - center.x)
    end_angle = math.atan2(arc_start.y - center.y, arc_start.x - center.x)
    start_angle, end_angle = normalize_arc_angles(
        start_angle, end_angle, is_right_turn
    )

    return ArcElement(
        center_point=center,
        radius=radius,
        start_angle=start_angle,
        end_angle=end_angle,
        deflection_angle=deflection,
        is_right_turn=is_right_turn,
        start_point=arc_start,
        end_point=arc_end,
        ip_point=curr_ip.copy(),
        tangent_length=tangent_length,
        ip_index=ip_index,
    )


__all__ = [
    "calculate_arc_center",
    "normalize_arc_angles",
    "calculate_arc_element",
]
