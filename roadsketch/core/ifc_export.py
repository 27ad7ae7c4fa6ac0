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
IFC Alignment Export
=====================

Writes an alignment's elements as an IFC 4.3 horizontal alignment.

Structure:
    IfcProject
      └─ IfcRelAggregates ─ IfcAlignment
           └─ IfcRelNests ─ IfcAlignmentHorizontal
                └─ IfcRelNests ─ IfcAlignmentSegment (LINE / CIRCULARARC) ...

Segments follow the direction of travel: tangent 0, the arc at IP 1,
tangent 1, and so on, closed by the zero-length segment IFC requires at
the end of every horizontal layout.

IFC measures directions counter-clockwise from +x and signs radii positive
for counter-clockwise rotation. Both are taken in the raw sketch
coordinates, so on a sketch plane whose second axis grows downward a
right turn (clockwise on screen) carries a positive radius.
"""

import logging
import math
from pathlib import Path
from typing import List, Sequence, Union

import ifcopenshell
import ifcopenshell.guid

from .alignment import Alignment
from .horizontal_alignment.elements import (
    ArcElement,
    Element,
    TangentElement,
    arcs_of,
    tangents_of,
)
from .horizontal_alignment.vector import Point

logger = logging.getLogger(__name__)

IFC_SCHEMA = "IFC4X3"


def travel_order(elements: Sequence[Element]) -> List[Element]:
    """Interleave tangents and arcs along the direction of travel."""
    arcs = {arc.ip_index: arc for arc in arcs_of(elements)}
    ordered: List[Element] = []
    for tangent in sorted(tangents_of(elements), key=lambda t: t.index):
        if tangent.index in arcs:
            ordered.append(arcs.pop(tangent.index))
        ordered.append(tangent)
    # Arcs at the final IP cannot exist; anything left over is appended
    ordered.extend(arcs[i] for i in sorted(arcs))
    return ordered


def _direction(start: Point, end: Point) -> float:
    return math.atan2(end.y - start.y, end.x - start.x)


def _arc_start_direction(arc: ArcElement) -> float:
    """Travel direction at the arc start.

    end_angle points from the center to start_point; travel runs a quarter
    turn ahead of it in the sense of rotation.
    """
    quarter = math.pi / 2 if arc.is_right_turn else -math.pi / 2
    angle = arc.end_angle + quarter
    return math.atan2(math.sin(angle), math.cos(angle))


def _create_point(ifc_file: ifcopenshell.file, point: Point):
    return ifc_file.create_entity(
        "IfcCartesianPoint",
        Coordinates=[float(point.x), float(point.y)]
    )


def create_line_segment(
    ifc_file: ifcopenshell.file,
    start: Point,
    direction: float,
    length: float,
    name: str
) -> ifcopenshell.entity_instance:
    """Create an IfcAlignmentSegment with LINE design parameters."""
    design_params = ifc_file.create_entity(
        "IfcAlignmentHorizontalSegment",
        StartPoint=_create_point(ifc_file, start),
        StartDirection=float(direction),
        StartRadiusOfCurvature=0.0,
        EndRadiusOfCurvature=0.0,
        SegmentLength=float(length),
        PredefinedType="LINE"
    )
    return ifc_file.create_entity(
        "IfcAlignmentSegment",
        GlobalId=ifcopenshell.guid.new(),
        Name=name,
        ObjectType="LINE",
        DesignParameters=design_params
    )


def create_tangent_segment(
    ifc_file: ifcopenshell.file,
    tangent: TangentElement
) -> ifcopenshell.entity_instance:
    return create_line_segment(
        ifc_file,
        tangent.start_point,
        _direction(tangent.start_point, tangent.end_point),
        tangent.length,
        f"Tangent_{tangent.index}",
    )


def create_arc_segment(
    ifc_file: ifcopenshell.file,
    arc: ArcElement
) -> ifcopenshell.entity_instance:
    """Create an IfcAlignmentSegment with CIRCULARARC design parameters."""
    signed_radius = arc.radius if arc.is_right_turn else -arc.radius

    design_params = ifc_file.create_entity(
        "IfcAlignmentHorizontalSegment",
        StartPoint=_create_point(ifc_file, arc.start_point),
        StartDirection=float(_arc_start_direction(arc)),
        StartRadiusOfCurvature=float(signed_radius),
        EndRadiusOfCurvature=float(signed_radius),
        SegmentLength=float(arc.arc_length),
        PredefinedType="CIRCULARARC"
    )
    return ifc_file.create_entity(
        "IfcAlignmentSegment",
        GlobalId=ifcopenshell.guid.new(),
        Name=f"Curve_{arc.ip_index}",
        ObjectType="CIRCULARARC",
        DesignParameters=design_params
    )


def export_alignment_to_ifc(
    source: Union[Alignment, Sequence[Element]],
    name: str = None,
    project_name: str = "Roadsketch Project"
) -> ifcopenshell.file:
    """Build an in-memory IFC 4.3 file for an alignment.

    Args:
        source: Alignment, or an element sequence from compute_elements
        name: Alignment name (defaults to the Alignment's own name)
        project_name: Name of the IfcProject

    Returns:
        The new ifcopenshell file

    Raises:
        ValueError: If there are no elements to export
    """
    if isinstance(source, Alignment):
        elements = source.elements
        name = name or source.name
    else:
        elements = list(source)
    name = name or "Alignment"

    ordered = travel_order(elements)
    if not ordered:
        raise ValueError("Cannot export an alignment without elements")

    ifc_file = ifcopenshell.file(schema=IFC_SCHEMA)

    project = ifc_file.create_entity(
        "IfcProject",
        GlobalId=ifcopenshell.guid.new(),
        Name=project_name
    )
    alignment = ifc_file.create_entity(
        "IfcAlignment",
        GlobalId=ifcopenshell.guid.new(),
        Name=name,
        PredefinedType="USERDEFINED"
    )
    ifc_file.create_entity(
        "IfcRelAggregates",
        GlobalId=ifcopenshell.guid.new(),
        RelatingObject=project,
        RelatedObjects=[alignment]
    )

    horizontal = ifc_file.create_entity(
        "IfcAlignmentHorizontal",
        GlobalId=ifcopenshell.guid.new()
    )
    ifc_file.create_entity(
        "IfcRelNests",
        GlobalId=ifcopenshell.guid.new(),
        Name="AlignmentToHorizontal",
        RelatingObject=alignment,
        RelatedObjects=[horizontal]
    )

    segments = []
    for element in ordered:
        if isinstance(element, TangentElement):
            segments.append(create_tangent_segment(ifc_file, element))
        else:
            segments.append(create_arc_segment(ifc_file, element))

    # Zero-length closing segment at the end of the last tangent
    last = ordered[-1]
    if isinstance(last, TangentElement):
        end_direction = _direction(last.start_point, last.end_point)
    else:
        quarter = math.pi / 2 if last.is_right_turn else -math.pi / 2
        angle = last.start_angle + quarter
        end_direction = math.atan2(math.sin(angle), math.cos(angle))
    segments.append(create_line_segment(
        ifc_file, last.end_point, end_direction, 0.0, "End"
    ))

    ifc_file.create_entity(
        "IfcRelNests",
        GlobalId=ifcopenshell.guid.new(),
        Name="HorizontalToSegments",
        RelatingObject=horizontal,
        RelatedObjects=segments
    )

    logger.debug(
        "Exported %s with %d horizontal segments", name, len(segments)
    )
    return ifc_file


def write_ifc(ifc_file: ifcopenshell.file, path: Union[str, Path]) -> Path:
    """Write an IFC file to disk and return its path."""
    path = Path(path)
    ifc_file.write(str(path))
    logger.info("Wrote IFC file: %s", path)
    return path


__all__ = [
    "IFC_SCHEMA",
    "travel_order",
    "create_line_segment",
    "create_tangent_segment",
    "create_arc_segment",
    "export_alignment_to_ifc",
    "write_ifc",
]
