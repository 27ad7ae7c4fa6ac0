# ============================================================================
# Roadsketch - Road Alignment Sketching Tools
# Copyright (c) 2025 Michael Yoder / Desert Springs Civil Engineering PLLC
# Licensed under Apache License 2.0
# ============================================================================
"""
Alignment Model
================

An alignment is a named IP sequence plus its radius specification. Its
elements are always derived from (points, radii) by recomputing from
scratch; every editing operation replaces the whole element list.

Callers that want to follow edits pass an observer callable, which
receives an AlignmentEvent after each recompute. Human-readable dumps go
through logging via log_alignment_summary().

Usage:
    from roadsketch.core.alignment import Alignment

    alignment = Alignment("Main Road", [(0, 0), (100, 0), (100, 100)])
    alignment.set_radius(1, 40.0)
    picked = alignment.find_element_at((50, 2))
    left_edge = alignment.offset(35.0)
"""
import logging
import math
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Sequence, Union

from .constants import SELECTION_TOLERANCE
from .horizontal_alignment.elements import (
    ArcElement,
    Element,
    ElementId,
    RadiusSpec,
    TangentElement,
    arcs_of,
    find_element_by_id,
    tangents_of,
)
from .horizontal_alignment.geometry import format_bearing
from .horizontal_alignment.offset import compute_offset
from .horizontal_alignment.segment_builder import compute_elements
from .horizontal_alignment.selection import find_element_at, find_point_at
from .horizontal_alignment.vector import Point

logger = logging.getLogger(__name__)

EVENT_CREATED = "created"
EVENT_POINT_MOVED = "point_moved"
EVENT_RADIUS_CHANGED = "radius_changed"
EVENT_RECOMPUTED = "recomputed"


@dataclass(frozen=True)
class AlignmentEvent:
    """Notification sent to an alignment observer after a recompute.

    Attributes:
        kind: One of "created", "point_moved", "radius_changed", "recomputed"
        alignment_name: Name of the alignment
        tangent_count: Tangents in the new element list
        arc_count: Arcs in the new element list
        total_length: Tangent plus arc length
    """

    kind: str
    alignment_name: str
    tangent_count: int
    arc_count: int
    total_length: float


AlignmentObserver = Callable[[AlignmentEvent], None]


class Alignment:
    """Named IP sequence with derived tangent/arc elements.

    Args:
        name: Alignment name
        points: IP sequence as Points or (x, y) pairs (at least two)
        radii: RadiusSpec, a single default radius, or None
        observer: Optional callable notified after every recompute

    Raises:
        ValueError: If fewer than 2 points are given, or a radius override
            targets an endpoint
    """

    def __init__(
        self,
        name: str,
        points: Sequence,
        radii: Union[RadiusSpec, float, None] = None,
        observer: Optional[AlignmentObserver] = None
    ):
        if len(points) < 2:
            raise ValueError("Alignment requires at least 2 points")

        self.name = name
        self._points = [Point(p) for p in points]

        if radii is None:
            self.radii = RadiusSpec()
        elif isinstance(radii, RadiusSpec):
            self.radii = radii.copy()
        else:
            self.radii = RadiusSpec(default=radii)

        for index in self.radii.overrides:
            self._check_interior(index)

        self.observer = observer
        self.elements: List[Element] = []
        self.recompute(EVENT_CREATED)

    def __repr__(self):
        return (
            f"Alignment({self.name!r}, points={len(self._points)}, "
            f"tangents={self.tangent_count}, arcs={self.arc_count})"
        )

    # ------------------------------------------------------------------
    # Points and radii
    # ------------------------------------------------------------------

    @property
    def points(self) -> List[Point]:
        """Copies of the IPs; edit through move_point()."""
        return [p.copy() for p in self._points]

    @property
    def point_count(self) -> int:
        return len(self._points)

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._points):
            raise IndexError(
                f"IP index {index} out of range for {len(self._points)} points"
            )

    def _check_interior(self, index: int) -> None:
        self._check_index(index)
        if index == 0 or index == len(self._points) - 1:
            raise ValueError(f"IP {index} is an endpoint and cannot carry a curve")

    def move_point(self, index: int, point) -> List[Element]:
        """Move an IP and recompute.

        Raises:
            IndexError: If index is out of range
        """
        self._check_index(index)
        self._points[index] = Point(point)
        return self.recompute(EVENT_POINT_MOVED)

    def set_radius(self, index: int, radius: float) -> List[Element]:
        """Override the radius at an interior IP and recompute.

        Raises:
            IndexError: If index is out of range
            ValueError: If index is an endpoint or radius is not positive
        """
        self._check_interior(index)
        self.radii.set_radius(index, radius)
        return self.recompute(EVENT_RADIUS_CHANGED)

    def clear_radius(self, index: int) -> List[Element]:
        """Remove a radius override (falls back to the default)."""
        if self.radii.clear_radius(index):
            return self.recompute(EVENT_RADIUS_CHANGED)
        return self.elements

    def set_default_radius(self, radius: float) -> List[Element]:
        self.radii.set_default(radius)
        return self.recompute(EVENT_RADIUS_CHANGED)

    # ------------------------------------------------------------------
    # Elements
    # ------------------------------------------------------------------

    def recompute(self, kind: str = EVENT_RECOMPUTED) -> List[Element]:
        """Rebuild all elements from the current points and radii."""
        self.elements = compute_elements(self._points, self.radii)
        if self.observer is not None:
            self.observer(AlignmentEvent(
                kind=kind,
                alignment_name=self.name,
                tangent_count=self.tangent_count,
                arc_count=self.arc_count,
                total_length=self.total_length,
            ))
        return self.elements

    @property
    def tangents(self) -> List[TangentElement]:
        return tangents_of(self.elements)

    @property
    def arcs(self) -> List[ArcElement]:
        return arcs_of(self.elements)

    @property
    def tangent_count(self) -> int:
        return len(self.tangents)

    @property
    def arc_count(self) -> int:
        return len(self.arcs)

    @property
    def element_count(self) -> int:
        return len(self.elements)

    @property
    def total_length(self) -> float:
        """Length along the alignment: tangents plus arcs."""
        return (
            sum(t.length for t in self.tangents)
            + sum(a.arc_length for a in self.arcs)
        )

    @property
    def curve_points(self) -> List[Point]:
        """Start and end point of every arc, in arc order."""
        handles = []
        for arc in self.arcs:
            handles.append(arc.start_point.copy())
            handles.append(arc.end_point.copy())
        return handles

    def element_by_id(self, element_id: ElementId) -> Optional[Element]:
        return find_element_by_id(self.elements, element_id)

    def find_element_at(
        self,
        point,
        tolerance: float = SELECTION_TOLERANCE
    ) -> Optional[Element]:
        return find_element_at(point, self.elements, tolerance)

    def find_point_at(
        self,
        point,
        tolerance: float = SELECTION_TOLERANCE
    ) -> Optional[int]:
        return find_point_at(point, self._points, tolerance)

    def offset(self, distance: float) -> List[Element]:
        return compute_offset(self.elements, distance)


def alignment_from_pis(
    name: str,
    pis: List[Dict[str, Any]],
    default_radius: Optional[float] = None,
    observer: Optional[AlignmentObserver] = None
) -> Alignment:
    """Create an alignment from PI dictionaries.

    Args:
        name: Alignment name
        pis: List of dictionaries with keys:
            - x: X coordinate
            - y: Y coordinate
            - radius: (optional) curve radius, honoured on interior IPs
        default_radius: Radius for IPs without one (None for the default)
        observer: Optional recompute observer

    Returns:
        The new Alignment

    Raises:
        ValueError: If fewer than 2 PIs are provided, or an interior PI
            carries a radius that is not positive
    """
    if len(pis) < 2:
        raise ValueError("Alignment requires at least 2 PIs")

    radii = RadiusSpec() if default_radius is None else RadiusSpec(default=default_radius)
    points = []
    for i, pi in enumerate(pis):
        points.append(Point(pi.get('x', 0.0), pi.get('y', 0.0)))
        radius = pi.get('radius')
        if radius is not None and 0 < i < len(pis) - 1:
            radii.set_radius(i, radius)

    return Alignment(name, points, radii, observer=observer)


def summarize_alignment(alignment: Alignment) -> Dict[str, Any]:
    """Build a plain summary of an alignment.

    Returns:
        Dictionary with name, counts, total length, IPs, curve points and
        one human-readable line list per element.
    """
    lines = []
    for number, element in enumerate(alignment.elements, start=1):
        if isinstance(element, TangentElement):
            details = [
                f"Length: {element.length:.2f}",
                f"Bearing: {format_bearing(element.bearing)}",
            ]
        else:
            details = [
                f"Radius: {element.radius:.2f}",
                f"Deflection: {math.degrees(abs(element.deflection_angle)):.2f}°",
                f"Start Point: ({element.start_point.x:.2f}, {element.start_point.y:.2f})",
                f"End Point: ({element.end_point.x:.2f}, {element.end_point.y:.2f})",
                f"Direction: {'Right' if element.is_right_turn else 'Left'} turn",
            ]
        lines.append({
            'number': number,
            'type': element.element_type.upper(),
            'element_id': element.element_id,
            'details': details,
        })

    return {
        'name': alignment.name,
        'point_count': alignment.point_count,
        'element_count': alignment.element_count,
        'tangent_count': alignment.tangent_count,
        'arc_count': alignment.arc_count,
        'total_length': alignment.total_length,
        'points': [p.to_tuple() for p in alignment.points],
        'curve_points': [p.to_tuple() for p in alignment.curve_points],
        'elements': lines,
    }


def log_alignment_summary(
    alignment: Alignment,
    log: Optional[logging.Logger] = None
) -> Dict[str, Any]:
    """Log an alignment summary at INFO and return it."""
    log = log or logger
    summary = summarize_alignment(alignment)

    log.info("=== Alignment: %s ===", summary['name'])
    log.info(
        "Points: %d, Elements: %d (%d tangents, %d arcs), Length: %.2f",
        summary['point_count'], summary['element_count'],
        summary['tangent_count'], summary['arc_count'],
        summary['total_length'],
    )
    for line in summary['elements']:
        log.info("Element %d: %s", line['number'], line['type'])
        for detail in line['details']:
            log.info("  - %s", detail)

    return summary


__all__ = [
    'Alignment',
    'AlignmentEvent',
    'AlignmentObserver',
    'EVENT_CREATED',
    'EVENT_POINT_MOVED',
    'EVENT_RADIUS_CHANGED',
    'EVENT_RECOMPUTED',
    'alignment_from_pis',
    'summarize_alignment',
    'log_alignment_summary',
]
