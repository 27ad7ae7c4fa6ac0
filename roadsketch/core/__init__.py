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
Roadsketch Core Module

Pure Python alignment geometry and the alignment model built on it.
This module contains:
- horizontal_alignment: geometry primitives, arc derivation, offsets and
  selection
- alignment: the editable Alignment model
- road_markings: pavement and lane edge offsets
- logging_config: logging setup

The IFC exporter lives in roadsketch.core.ifc_export and is imported on
demand because it pulls in ifcopenshell.
"""

from .logging_config import get_logger, setup_logging

from . import constants
from . import horizontal_alignment
from .alignment import (
    Alignment,
    AlignmentEvent,
    alignment_from_pis,
    summarize_alignment,
    log_alignment_summary,
)
from .road_markings import RoadMarkingSettings, RoadMarkings, compute_road_markings

__all__ = [
    "get_logger",
    "setup_logging",
    "constants",
    "horizontal_alignment",
    "Alignment",
    "AlignmentEvent",
    "alignment_from_pis",
    "summarize_alignment",
    "log_alignment_summary",
    "RoadMarkingSettings",
    "RoadMarkings",
    "compute_road_markings",
]
