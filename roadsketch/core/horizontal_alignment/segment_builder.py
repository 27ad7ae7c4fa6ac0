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
Alignment Segment Builder
==========================

Turns an IP sequence and a radius specification into the ordered element
sequence: every tangent in point order, then every arc in IP order.

The output is a pure function of (points, radii). Callers recompute it
wholesale after any edit; nothing here is patched incrementally.
"""

import logging
from typing import Dict, List, Optional, Sequence, Union

from .curve_geometry import calculate_arc_element
from .elements import ArcElement, Element, RadiusSpec, TangentElement
from .geometry import bearing, distance
from .vector import Point

logger = logging.getLogger(__name__)


def _as_points(points: Sequence) -> List[Point]:
    return [Point(p) for p in points]


def _as_radius_spec(radii: Union[RadiusSpec, float, int, None]) -> RadiusSpec:
    if radii is None:
        return RadiusSpec()
    if isinstance(radii, RadiusSpec):
        return radii
    return RadiusSpec(default=radii)


def compute_arcs(
    points: Sequence[Point],
    radii: RadiusSpec
) -> Dict[int, ArcElement]:
    """Compute arcs at interior IPs.

    Returns:
        Mapping of IP index to arc; straight IPs are absent.
    """
    arcs = {}
    for i in range(1, len(points) - 1):
        arc = calculate_arc_element(
            points[i - 1],
            points[i],
            points[i + 1],
            radii.radius_for(i),
            ip_index=i,
        )
        if arc is not None:
            arcs[i] = arc
    return arcs


def create_tangent_element(
    points: Sequence[Point],
    index: int,
    start_arc: Optional[ArcElement] = None,
    end_arc: Optional[ArcElement] = None
) -> TangentElement:
    """Build the tangent joining IP index and IP index + 1.

    Args:
        points: IP sequence
        index: Tangent index (its start IP)
        start_arc: Arc at IP index, if any
        end_arc: Arc at IP index + 1, if any

    Returns:
        TangentElement trimmed to the adjoining arcs
    """
    start_point = (start_arc.end_point if start_arc else points[index]).copy()
    end_point = (end_arc.start_point if end_arc else points[index + 1]).copy()

    return TangentElement(
        start_point=start_point,
        end_point=end_point,
        bearing=bearing(start_point, end_point),
        length=distance(start_point, end_point),
        original_start=points[index].copy(),
        original_end=points[index + 1].copy(),
        index=index,
    )


def compute_elements(
    points: Sequence,
    radii: Union[RadiusSpec, float, None] = None
) -> List[Element]:
    """Compute the tangent/arc element sequence for an alignment.

    Args:
        points: IP sequence as Points or (x, y) pairs
        radii: RadiusSpec, a single radius for every IP, or None for the
            default radius

    Returns:
        All tangents (point order) followed by all arcs (IP order). Empty
        when fewer than two points are given.

    Example:
        >>> elements = compute_elements([(0, 0), (100, 0), (100, 100)], 20.0)
        >>> [el.element_type for el in elements]
        ['tangent', 'tangent', 'arc']
    """
    if len(points) < 2:
        return []

    points = _as_points(points)
    radii = _as_radius_spec(radii)

    arcs = compute_arcs(points, radii)

    elements: List[Element] = []
    for i in range(len(points) - 1):
        elements.append(
            create_tangent_element(points, i, arcs.get(i), arcs.get(i + 1))
        )

    elements.extend(arcs[i] for i in sorted(arcs))

    logger.debug(
        "Computed %d tangents and %d arcs from %d IPs",
        len(points) - 1, len(arcs), len(points)
    )
    return elements


__all__ = [
    "compute_arcs",
    "create_tangent_element",
    "compute_elements",
]
