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
Alignment Element Types
========================

Defines the radius specification and the two element kinds (tangents and
circular arcs) produced by the alignment engine.

Elements are value objects. They hold copies of coordinates and refer to
intersection points only by index, so recomputing an alignment after a
point is dragged never aliases old and new geometry. A logical element is
re-resolved after recomputation through its element_id.
"""

import math
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Tuple, Union

from ..constants import DEFAULT_RADIUS
from .vector import Point

ElementId = Tuple[str, int]

TANGENT = "tangent"
ARC = "arc"


def _validate_radius(radius: float) -> float:
    radius = float(radius)
    if not math.isfinite(radius) or radius <= 0:
        raise ValueError(f"Radius must be a positive number, got {radius}")
    return radius


@dataclass
class RadiusSpec:
    """Per-IP curve radii with a default fallback.

    Attributes:
        default: Radius used for any interior IP without an override
        overrides: Mapping of interior IP index to radius

    Example:
        >>> radii = RadiusSpec(default=50.0, overrides={2: 25.0})
        >>> radii.radius_for(1), radii.radius_for(2)
        (50.0, 25.0)
    """

    default: float = DEFAULT_RADIUS
    overrides: Dict[int, float] = field(default_factory=dict)

    def __post_init__(self):
        """Validate radii after initialization."""
        self.default = _validate_radius(self.default)
        self.overrides = {
            int(index): _validate_radius(radius)
            for index, radius in self.overrides.items()
        }

    def radius_for(self, ip_index: int) -> float:
        """Radius to use at an interior IP."""
        return self.overrides.get(ip_index, self.default)

    def set_radius(self, ip_index: int, radius: float) -> None:
        self.overrides[int(ip_index)] = _validate_radius(radius)

    def clear_radius(self, ip_index: int) -> bool:
        """Drop an override. Returns True if one existed."""
        return self.overrides.pop(ip_index, None) is not None

    def set_default(self, radius: float) -> None:
        self.default = _validate_radius(radius)

    def copy(self) -> "RadiusSpec":
        return RadiusSpec(default=self.default, overrides=dict(self.overrides))


@dataclass
class TangentElement:
    """Straight element between two effective points.

    start_point/end_point are pulled back to the adjoining arcs' end/start
    points where arcs exist; original_start/original_end always keep the raw
    IP coordinates.

    Attributes:
        start_point: Effective start (arc end point or raw IP)
        end_point: Effective end (arc start point or raw IP)
        bearing: Clockwise from north, radians in [0, 2π)
        length: Distance between effective points
        original_start: IP at index
        original_end: IP at index + 1
        index: Tangent position in point order
        offset: Offset distance, for elements built by the offset engine
        parent_element: Element this one was offset from (traceability only)
    """

    start_point: Point
    end_point: Point
    bearing: float
    length: float
    original_start: Point
    original_end: Point
    index: int = 0
    offset: Optional[float] = None
    parent_element: Optional["Element"] = field(
        default=None, repr=False, compare=False
    )

    element_type = TANGENT

    @property
    def element_id(self) -> ElementId:
        return (TANGENT, self.index)


@dataclass
class ArcElement:
    """Circular arc inserted at an interior IP.

    start_angle is the angle from the center to end_point and end_angle the
    angle to start_point, normalized so a renderer sweeping from start_angle
    to end_angle with anticlockwise=is_right_turn draws the minor arc.

    Attributes:
        center_point: Circle center
        radius: Circle radius (always > 0)
        start_angle: Drawing start angle (towards end_point)
        end_angle: Drawing end angle (towards start_point)
        deflection_angle: Signed deflection at the IP (positive = right)
        is_right_turn: Turn sense, True when deflection_angle > 0
        start_point: Where the arc leaves the incoming tangent
        end_point: Where the arc joins the outgoing tangent
        ip_point: Copy of the IP this arc belongs to
        tangent_length: Distance from the IP to start_point and end_point
        ip_index: Index of the IP in the point sequence
        offset: Offset distance, for elements built by the offset engine
        parent_element: Element this one was offset from (traceability only)
    """

    center_point: Point
    radius: float
    start_angle: float
    end_angle: float
    deflection_angle: float
    is_right_turn: bool
    start_point: Point
    end_point: Point
    ip_point: Point
    tangent_length: float
    ip_index: int = 0
    offset: Optional[float] = None
    parent_element: Optional["Element"] = field(
        default=None, repr=False, compare=False
    )

    element_type = ARC

    @property
    def element_id(self) -> ElementId:
        return (ARC, self.ip_index)

    @property
    def arc_length(self) -> float:
        """Length along the arc: R * |Δ|."""
        return self.radius * abs(self.deflection_angle)


Element = Union[TangentElement, ArcElement]


def tangents_of(elements: Iterable[Element]) -> List[TangentElement]:
    return [el for el in elements if isinstance(el, TangentElement)]


def arcs_of(elements: Iterable[Element]) -> List[ArcElement]:
    return [el for el in elements if isinstance(el, ArcElement)]


def find_element_by_id(
    elements: Iterable[Element],
    element_id: ElementId
) -> Optional[Element]:
    """Re-resolve a logical element by identifier.

    Args:
        elements: Element sequence (typically freshly recomputed)
        element_id: ("tangent", index) or ("arc", ip_index)

    Returns:
        The matching element, or None if it no longer exists (for example
        the IP was straightened and its arc disappeared).
    """
    for element in elements:
        if element.element_id == tuple(element_id):
            return element
    return None


__all__ = [
    "ElementId",
    "TANGENT",
    "ARC",
    "RadiusSpec",
    "TangentElement",
    "ArcElement",
    "Element",
    "tangents_of",
    "arcs_of",
    "find_element_by_id",
]
