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
Road Marking Offsets
=====================

Builds the parallel curves drawn for a road cross-section: pavement edges,
travel-lane edges and the centreline. Each marking is an independent
offset of the alignment's elements at a fixed distance; positive
distances are the left-hand side.

Widths are full widths in meters, converted to sketch units with
pixels_per_meter.
"""

import logging
from dataclasses import dataclass, field, replace
from typing import List, Sequence

from .constants import (
    DEFAULT_PAVEMENT_WIDTH,
    DEFAULT_TRAVEL_LANE_WIDTH,
    PIXELS_PER_METER,
)
from .horizontal_alignment.elements import Element
from .horizontal_alignment.offset import compute_offset

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RoadMarkingSettings:
    """Cross-section settings for road markings.

    Attributes:
        pavement_width: Full pavement width (m)
        travel_lane_width: Full travel-lane width (m)
        pixels_per_meter: Sketch units per meter
        show_pavement_edges: Draw pavement edges
        show_travel_lane_edges: Draw travel-lane edges
        show_centreline: Draw the centreline
    """

    pavement_width: float = DEFAULT_PAVEMENT_WIDTH
    travel_lane_width: float = DEFAULT_TRAVEL_LANE_WIDTH
    pixels_per_meter: float = PIXELS_PER_METER
    show_pavement_edges: bool = True
    show_travel_lane_edges: bool = True
    show_centreline: bool = True

    def __post_init__(self):
        if self.pavement_width < 0:
            raise ValueError(
                f"Pavement width must be non-negative, got {self.pavement_width}"
            )
        if self.travel_lane_width < 0:
            raise ValueError(
                f"Travel lane width must be non-negative, got {self.travel_lane_width}"
            )
        if self.pixels_per_meter <= 0:
            raise ValueError(
                f"Pixels per meter must be positive, got {self.pixels_per_meter}"
            )

    @property
    def pavement_offset(self) -> float:
        """Half pavement width in sketch units."""
        return self.pavement_width / 2 * self.pixels_per_meter

    @property
    def travel_lane_offset(self) -> float:
        """Half travel-lane width in sketch units."""
        return self.travel_lane_width / 2 * self.pixels_per_meter

    def updated(self, **changes) -> "RoadMarkingSettings":
        """Return a copy with the given fields replaced."""
        return replace(self, **changes)


@dataclass
class RoadMarkings:
    """Offset element sequences for one alignment."""

    left_pavement_edge: List[Element] = field(default_factory=list)
    right_pavement_edge: List[Element] = field(default_factory=list)
    left_travel_lane_edge: List[Element] = field(default_factory=list)
    right_travel_lane_edge: List[Element] = field(default_factory=list)
    centreline: List[Element] = field(default_factory=list)


def compute_road_markings(
    elements: Sequence[Element],
    settings: RoadMarkingSettings = RoadMarkingSettings()
) -> RoadMarkings:
    """Compute every visible road marking for an element sequence.

    Args:
        elements: Alignment elements
        settings: Cross-section settings

    Returns:
        RoadMarkings; hidden markings are empty lists
    """
    markings = RoadMarkings()
    if not elements:
        return markings

    if settings.show_pavement_edges:
        markings.left_pavement_edge = compute_offset(
            elements, settings.pavement_offset
        )
        markings.right_pavement_edge = compute_offset(
            elements, -settings.pavement_offset
        )

    if settings.show_travel_lane_edges:
        markings.left_travel_lane_edge = compute_offset(
            elements, settings.travel_lane_offset
        )
        markings.right_travel_lane_edge = compute_offset(
            elements, -settings.travel_lane_offset
        )

    if settings.show_centreline:
        markings.centreline = compute_offset(elements, 0.0)

    logger.debug(
        "Road markings: pavement offset %.2f, lane offset %.2f",
        settings.pavement_offset, settings.travel_lane_offset
    )
    return markings


__all__ = [
    "RoadMarkingSettings",
    "RoadMarkings",
    "compute_road_markings",
]
